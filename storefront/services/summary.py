"""Order summary calculation"""

from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from ..models.cart import CheckoutItem
from ..models.checkout import Courier, OrderSummary


def subtotal(items: Iterable[CheckoutItem]) -> Decimal:
    """Sum of price x quantity, in sequence order"""
    total = Decimal("0")
    for item in items:
        total += item.selling_price * item.quantity
    return total


def shipping_fee(courier: Optional[Courier]) -> Decimal:
    return courier.fee if courier else Decimal("0")


def summarize(items: Iterable[CheckoutItem], courier: Optional[Courier] = None) -> OrderSummary:
    """Recompute subtotal, shipping and total from the current selection"""
    items_subtotal = subtotal(items)
    shipping = shipping_fee(courier)
    return OrderSummary(
        subtotal=items_subtotal,
        shipping=shipping,
        total=items_subtotal + shipping,
    )


def format_amount(amount: Decimal, symbol: str = "₱") -> str:
    """Display an amount grouped, with up to three decimals and no trailing zeros"""
    precision = max(28, amount.adjusted() + 4)
    rounded = amount.quantize(
        Decimal("0.001"), rounding=ROUND_HALF_UP, context=Context(prec=precision)
    )
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{symbol}{text}"
