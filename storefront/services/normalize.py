"""
Normalization of untrusted client-storage data.

Whatever sits under a storage key may have been written by an older client,
edited by hand or truncated. These functions turn such values into
well-formed cart and checkout lines. They are pure and total: malformed input
yields fewer lines (possibly none), never an exception, and the input is
never mutated.
"""

import json
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import BaseModel

from ..models.cart import CartItem, CheckoutItem

# Storage field names, in order: id, name, image, brand, category, price, quantity
CHECKOUT_FIELDS = (
    "product",
    "product_name",
    "product_image",
    "brand_name",
    "category_name",
    "selling_price",
    "quantity",
)
CART_FIELDS = (
    "productId",
    "name",
    "image",
    "brand",
    "category",
    "unitPrice",
    "quantity",
)


def safe_parse_json(raw: Optional[str]) -> Any:
    """Parse a stored string, None when absent or not valid JSON"""
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return None


def to_number(value: Any) -> Optional[Decimal]:
    """
    Coerce a stored value to a finite Decimal.

    Follows how a browser coerces stored JSON values: None and blank strings
    are 0, booleans are 1 and 0, numeric strings are parsed after trimming.
    NaN/Infinity, unparsable strings and containers give None.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, bool):
        return Decimal(int(value))

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        number = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return Decimal(0)
        if "_" in text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    return number if number.is_finite() else None


def _as_double(number: Optional[Decimal]) -> Optional[float]:
    """The stored JSON double for a number, None when it would overflow"""
    if number is None:
        return None
    double = float(number)
    return double if math.isfinite(double) else None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _as_mapping(raw: Any) -> Optional[Mapping]:
    if isinstance(raw, BaseModel):
        return raw.model_dump(by_alias=True)
    if isinstance(raw, Mapping):
        return raw
    return None


def _optional_text(value: Any) -> Optional[str]:
    return str(value) if value else None


def _normalize_line(raw: Any, fields: tuple[str, ...]) -> Optional[dict]:
    """Validate one stored line; None when it must be dropped"""
    entry = _as_mapping(raw)
    if entry is None:
        return None

    id_key, name_key, image_key, brand_key, category_key, price_key, qty_key = fields
    if not entry.get(id_key) or not entry.get(name_key):
        return None

    # An absent field is not a number; a null one coerces to 0
    if price_key not in entry or qty_key not in entry:
        return None

    price = _as_double(to_number(entry[price_key]))
    quantity = _as_double(to_number(entry[qty_key]))
    if price is None or price < 0:
        return None
    if quantity is None or quantity <= 0:
        return None

    return {
        "id": str(entry[id_key]),
        "name": str(entry[name_key]),
        "image": _optional_text(entry.get(image_key)),
        "brand": _optional_text(entry.get(brand_key)),
        "category": _optional_text(entry.get(category_key)),
        "price": Decimal(repr(price)),
        "quantity": max(1, math.floor(quantity)),
    }


def normalize_checkout_items(value: Any) -> list[CheckoutItem]:
    """Turn a stored checkout item list into validated CheckoutItems"""
    if not _is_sequence(value):
        return []

    items = []
    for raw in value:
        line = _normalize_line(raw, CHECKOUT_FIELDS)
        if line is None:
            continue
        items.append(
            CheckoutItem(
                product=line["id"],
                product_name=line["name"],
                product_image=line["image"],
                brand_name=line["brand"],
                category_name=line["category"],
                selling_price=line["price"],
                quantity=line["quantity"],
            )
        )
    return items


def normalize_cart_items(value: Any) -> list[CartItem]:
    """Same rules as normalize_checkout_items, over the cart shape"""
    if not _is_sequence(value):
        return []

    items = []
    for raw in value:
        line = _normalize_line(raw, CART_FIELDS)
        if line is None:
            continue
        items.append(
            CartItem(
                product_id=line["id"],
                name=line["name"],
                image=line["image"],
                brand=line["brand"],
                category=line["category"],
                unit_price=line["price"],
                quantity=line["quantity"],
            )
        )
    return items


def cart_to_checkout_items(value: Any) -> list[CheckoutItem]:
    """Map cart-shaped entries to the checkout shape, then normalize"""
    if not _is_sequence(value):
        return []

    mapped = []
    for raw in value:
        entry = _as_mapping(raw)
        if entry is None:
            continue
        mapped.append(
            {
                checkout_key: entry[cart_key]
                for cart_key, checkout_key in zip(CART_FIELDS, CHECKOUT_FIELDS)
                if cart_key in entry
            }
        )
    return normalize_checkout_items(mapped)
