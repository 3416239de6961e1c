"""
Cart and checkout store

Two independent collections live under two storage keys of one client
context: the cart (a JSON array of cart lines) and the checkout snapshot
(a JSON object with an ``items`` array). Reads never fail: absent, unparsable
or wrongly shaped values read as empty. Cart writes are followed by a
``cart:updated`` signal so views mounted in the same context re-read; views
in other contexts learn about the write from the storage event.
"""

import json
import logging
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional

from pydantic import BaseModel

from ..core.config import settings
from ..models.cart import CartItem, CheckoutItem
from ..models.product import Product
from ..storage.events import CART_UPDATED
from ..storage.local_storage import StorageContext, StorageEvent
from .normalize import (
    cart_to_checkout_items,
    normalize_cart_items,
    normalize_checkout_items,
    safe_parse_json,
)

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dump(item: Any) -> Any:
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json", by_alias=True, exclude_none=True)
    return item


class CartStore:
    """Cart and checkout snapshot persisted in one client context"""

    def __init__(
        self,
        context: StorageContext,
        cart_key: Optional[str] = None,
        checkout_key: Optional[str] = None,
    ):
        self.context = context
        self.cart_key = cart_key or settings.cart_storage_key
        self.checkout_key = checkout_key or settings.checkout_storage_key

    # Cart

    def read_cart(self) -> list:
        """Raw cart entries; empty when absent, unparsable or not an array"""
        parsed = safe_parse_json(self.context.get_item(self.cart_key))
        return parsed if isinstance(parsed, list) else []

    def cart_items(self) -> list[CartItem]:
        """Validated cart lines"""
        return normalize_cart_items(self.read_cart())

    def cart_count(self) -> int:
        """Number of entries under the cart key, as the header badge shows it"""
        return len(self.read_cart())

    def write_cart(self, items: Iterable[Any]) -> None:
        """Persist the cart array, then tell the views of this context"""
        payload = [_dump(item) for item in items]
        self.context.set_item(self.cart_key, json.dumps(payload, default=_json_default))
        self.notify_cart_changed()

    def add_item(
        self,
        product: Product,
        quantity: int = 1,
        max_quantity: Optional[int] = None,
    ) -> list[CartItem]:
        """
        Add a product to the cart.

        Merges into the existing line for the same product. The resulting
        line quantity is capped at max_quantity (available stock) when given.
        """
        items = self.cart_items()
        line = next((item for item in items if item.product_id == product.id), None)

        if line:
            line.quantity += quantity
        else:
            line = CartItem(
                product_id=product.id,
                name=product.name,
                image=product.primary_image,
                brand=product.brand_name,
                category=product.category_name,
                unit_price=product.selling_price,
                quantity=quantity,
            )
            items.append(line)

        if max_quantity is not None and line.quantity > max_quantity:
            line.quantity = max(1, max_quantity)

        self.write_cart(items)
        return items

    def get_line(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self.cart_items() if item.product_id == product_id), None)

    def update_quantity(self, product_id: str, quantity: int) -> Optional[list[CartItem]]:
        """Set a line's quantity; zero or less removes it. None if not in cart."""
        items = self.cart_items()
        if not any(item.product_id == product_id for item in items):
            return None

        if quantity <= 0:
            items = [item for item in items if item.product_id != product_id]
        else:
            for item in items:
                if item.product_id == product_id:
                    item.quantity = quantity

        self.write_cart(items)
        return items

    def remove_item(self, product_id: str) -> Optional[list[CartItem]]:
        """Remove a line from the cart"""
        return self.update_quantity(product_id, 0)

    def clear_cart(self) -> None:
        self.write_cart([])

    def notify_cart_changed(self) -> None:
        self.context.events.publish(CART_UPDATED)

    def subscribe_cart(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Observe the cart.

        The callback runs after cart writes in this context and after storage
        events from other contexts that touch the cart key (or clear the
        whole area).

        Returns:
            A function that stops the observation
        """
        def on_storage(event: StorageEvent) -> None:
            if event.key is None or event.key == self.cart_key:
                callback()

        unsubscribe = self.context.events.subscribe(CART_UPDATED, callback)
        remove_listener = self.context.add_storage_listener(on_storage)

        def stop() -> None:
            unsubscribe()
            remove_listener()

        return stop

    # Checkout snapshot

    def read_checkout(self) -> list[CheckoutItem]:
        """Normalized checkout snapshot; empty when absent or malformed"""
        parsed = safe_parse_json(self.context.get_item(self.checkout_key))
        if not isinstance(parsed, dict):
            return []
        return normalize_checkout_items(parsed.get("items"))

    def write_checkout(self, items: Iterable[Any]) -> None:
        """Persist the checkout snapshot, replacing any previous one"""
        payload = {"items": [_dump(item) for item in items]}
        self.context.set_item(self.checkout_key, json.dumps(payload, default=_json_default))

    def clear_checkout(self) -> None:
        self.context.remove_item(self.checkout_key)

    def select_for_checkout(self, product_ids: Optional[list[str]] = None) -> list[CheckoutItem]:
        """
        Write the checkout snapshot from the cart.

        Args:
            product_ids: Cart lines to carry over; None takes the whole cart

        Returns:
            The snapshot as written
        """
        items = cart_to_checkout_items(self.read_cart())
        if product_ids is not None:
            wanted = set(product_ids)
            items = [item for item in items if item.product in wanted]

        self.write_checkout(items)
        logger.debug(f"Checkout snapshot written with {len(items)} item(s)")
        return items

    def buy_now(self, product: Product, quantity: int = 1) -> list[CheckoutItem]:
        """Write a one-line checkout snapshot, leaving the cart alone"""
        items = [
            CheckoutItem(
                product=product.id,
                product_name=product.name,
                product_image=product.primary_image,
                brand_name=product.brand_name,
                category_name=product.category_name,
                selling_price=product.selling_price,
                quantity=quantity,
            )
        ]
        self.write_checkout(items)
        return items
