# Storefront services

from .cart_store import CartStore
from .normalize import (
    normalize_checkout_items,
    normalize_cart_items,
    cart_to_checkout_items,
    safe_parse_json,
)
from .summary import subtotal, shipping_fee, summarize
from .placement import place_order, OrderPlacementError
from .catalog import load_landing_lookups
from .header import CartBadge, header_state

__all__ = [
    "CartStore",
    "normalize_checkout_items",
    "normalize_cart_items",
    "cart_to_checkout_items",
    "safe_parse_json",
    "subtotal",
    "shipping_fee",
    "summarize",
    "place_order",
    "OrderPlacementError",
    "load_landing_lookups",
    "CartBadge",
    "header_state",
]
