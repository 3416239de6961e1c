"""Checkout models for the storefront"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .cart import CheckoutItem, Money


class OrderStatus(str, Enum):
    PLACED = "placed"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    COD = "cod"
    GCASH = "gcash"
    CARD = "card"


class Address(BaseModel):
    """Delivery address (demo reference data)"""
    id: str
    label: str
    lines: list[str] = []


class Courier(BaseModel):
    """Shipping option with a flat fee"""
    id: str
    name: str
    eta: str
    fee: Money = Field(ge=0)


class OrderSummary(BaseModel):
    """Derived totals for a checkout, never persisted"""
    subtotal: Money = Decimal("0")
    shipping: Money = Decimal("0")
    total: Money = Decimal("0")


class CheckoutSelectionRequest(BaseModel):
    """Cart lines to carry into checkout; None means the whole cart"""
    product_ids: Optional[list[str]] = None


class BuyNowRequest(BaseModel):
    """Check out one product without touching the cart"""
    product_id: str
    quantity: int = Field(default=1, gt=0)


class PlaceOrderRequest(BaseModel):
    """Request to place the order for the current checkout snapshot"""
    address_id: Optional[str] = None
    courier_id: Optional[str] = None
    payment_method: PaymentMethod = PaymentMethod.COD
    notes: Optional[str] = None


class CheckoutView(BaseModel):
    """Everything the checkout page shows"""
    items: list[CheckoutItem]
    addresses: list[Address]
    couriers: list[Courier]
    payment_methods: list[PaymentMethod]
    selected_address_id: Optional[str] = None
    selected_courier_id: Optional[str] = None
    summary: OrderSummary


class OrderItem(BaseModel):
    """Item in an order"""
    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    total_price: Money


class Order(BaseModel):
    """Placed order"""
    order_id: str
    client_id: Optional[str] = None
    status: OrderStatus
    items: list[OrderItem]
    subtotal: Money
    shipping: Money
    total: Money
    currency: str = "PHP"
    address: Address
    courier: Courier
    payment_method: PaymentMethod
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class OrderConfirmation(BaseModel):
    """Notice shown once an order is placed"""
    order_id: str
    item_count: int
    payment_method: PaymentMethod
    total: Money
    message: str
    redirect_to: str
