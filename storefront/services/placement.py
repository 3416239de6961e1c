"""Order placement for the current checkout snapshot"""

import logging
from typing import Optional

from ..core.config import settings
from ..database import reference
from ..database.orders import OrderDatabase, order_db
from ..models.checkout import OrderConfirmation, PaymentMethod
from .cart_store import CartStore
from .summary import format_amount, summarize

logger = logging.getLogger(__name__)


class OrderPlacementError(Exception):
    """A precondition for placing the order is not met"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def place_order(
    store: CartStore,
    address_id: Optional[str],
    courier_id: Optional[str],
    payment_method: PaymentMethod = PaymentMethod.COD,
    notes: Optional[str] = None,
    orders: OrderDatabase = order_db,
    client_id: Optional[str] = None,
) -> OrderConfirmation:
    """
    Place the order for the checkout snapshot.

    Preconditions are checked in order and the first failure raises
    OrderPlacementError without touching any state:
    items present, delivery address selected, courier selected.

    On success the order is recorded and the checkout snapshot is cleared.
    The cart is left as it is.
    """
    items = store.read_checkout()
    if not items:
        raise OrderPlacementError("No items selected for checkout.")

    address = reference.get_address(address_id)
    if address is None:
        raise OrderPlacementError("Please select a delivery address.")

    courier = reference.get_courier(courier_id)
    if courier is None:
        raise OrderPlacementError("Please select a courier.")

    summary = summarize(items, courier)

    order = orders.create_order(
        items=items,
        summary=summary,
        address=address,
        courier=courier,
        payment_method=payment_method,
        notes=notes,
        client_id=client_id,
    )

    store.clear_checkout()

    logger.info(
        f"Order {order.order_id} placed: {len(items)} item(s), "
        f"{payment_method.value}, total {summary.total}"
    )

    message = (
        "Order placed (demo only).\n\n"
        f"Items: {len(items)}\n"
        f"Payment: {payment_method.value.upper()}\n"
        f"Total: {format_amount(summary.total, settings.currency_symbol)}"
    )

    return OrderConfirmation(
        order_id=order.order_id,
        item_count=len(items),
        payment_method=payment_method,
        total=summary.total,
        message=message,
        redirect_to=settings.post_order_redirect,
    )
