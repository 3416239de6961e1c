"""Cart and checkout line models"""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal in memory, JSON number on the wire and in client storage
Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


class CartItem(BaseModel):
    """Line in the persisted cart (camelCase in storage)"""
    product_id: str
    name: str
    image: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None
    unit_price: Money = Field(ge=0)
    quantity: int = Field(ge=1)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CheckoutItem(BaseModel):
    """Line in the checkout snapshot"""
    product: str
    product_name: str
    product_image: Optional[str] = None
    brand_name: Optional[str] = None
    category_name: Optional[str] = None
    selling_price: Money = Field(ge=0)
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> Decimal:
        return self.selling_price * self.quantity


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity (0 removes the line)"""
    quantity: int = Field(ge=0)


class CartResponse(BaseModel):
    """Cart API response"""
    items: list[CartItem] = []
    count: int = 0
    subtotal: Money = Decimal("0")
    message: Optional[str] = None
