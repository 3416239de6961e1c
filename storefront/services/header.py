"""Header state and the cart badge view"""

from typing import Callable, Optional

from ..models.auth import HeaderState
from . import auth
from .cart_store import CartStore


class CartBadge:
    """
    Cart count shown in the persistent header.

    Reads the count when mounted and again whenever the cart changes, in this
    context or another one of the same client.
    """

    def __init__(self, store: CartStore):
        self.store = store
        self.count = 0
        self.refreshes = 0
        self._stop: Optional[Callable[[], None]] = None

    @property
    def mounted(self) -> bool:
        return self._stop is not None

    def mount(self) -> "CartBadge":
        if self._stop is None:
            self.refresh()
            self._stop = self.store.subscribe_cart(self.refresh)
        return self

    def unmount(self) -> None:
        if self._stop is not None:
            self._stop()
            self._stop = None

    def refresh(self) -> None:
        self.count = self.store.cart_count()
        self.refreshes += 1


def header_state(store: CartStore) -> HeaderState:
    context = store.context
    logged_in = auth.is_logged_in(context)
    return HeaderState(
        cart_count=store.cart_count(),
        is_logged_in=logged_in,
        username=auth.current_username(context),
        show_cart=logged_in,
        show_admin_dashboard=logged_in and auth.is_admin(context),
    )
