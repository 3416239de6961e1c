"""Demo delivery addresses and couriers"""

from decimal import Decimal
from typing import Optional

from ..models.checkout import Address, Courier

DEMO_ADDRESSES: list[Address] = [
    Address(id="addr-1", label="Home", lines=["123 Demo Street", "Makati, NCR"]),
    Address(id="addr-2", label="Office", lines=["45 Example Ave", "Taguig, NCR"]),
]

DEMO_COURIERS: list[Courier] = [
    Courier(id="courier-1", name="Demo Express", eta="2-3 days", fee=Decimal("120")),
    Courier(id="courier-2", name="Demo Same-day", eta="Same day", fee=Decimal("220")),
]


def list_addresses() -> list[Address]:
    return list(DEMO_ADDRESSES)


def list_couriers() -> list[Courier]:
    return list(DEMO_COURIERS)


def get_address(address_id: Optional[str]) -> Optional[Address]:
    """Look up an address; None for an empty or unknown id"""
    if not address_id:
        return None
    return next((a for a in DEMO_ADDRESSES if a.id == address_id), None)


def get_courier(courier_id: Optional[str]) -> Optional[Courier]:
    """Look up a courier; None for an empty or unknown id"""
    if not courier_id:
        return None
    return next((c for c in DEMO_COURIERS if c.id == courier_id), None)


def default_address_id() -> Optional[str]:
    return DEMO_ADDRESSES[0].id if DEMO_ADDRESSES else None


def default_courier_id() -> Optional[str]:
    return DEMO_COURIERS[0].id if DEMO_COURIERS else None
