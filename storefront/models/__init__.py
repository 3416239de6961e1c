# Storefront Models

from .cart import (
    Money,
    CartItem,
    CheckoutItem,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from .checkout import (
    Address,
    Courier,
    PaymentMethod,
    OrderSummary,
    CheckoutSelectionRequest,
    BuyNowRequest,
    PlaceOrderRequest,
    CheckoutView,
    Order,
    OrderItem,
    OrderStatus,
    OrderConfirmation,
)
from .product import (
    Category,
    CarMake,
    CarModel,
    ProductYear,
    CompatibleCar,
    Product,
    ProductSearchResponse,
    CatalogLookups,
)
from .auth import LoginRequest, SessionInfo, HeaderState

__all__ = [
    "Money",
    "CartItem",
    "CheckoutItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "Address",
    "Courier",
    "PaymentMethod",
    "OrderSummary",
    "CheckoutSelectionRequest",
    "BuyNowRequest",
    "PlaceOrderRequest",
    "CheckoutView",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderConfirmation",
    "Category",
    "CarMake",
    "CarModel",
    "ProductYear",
    "CompatibleCar",
    "Product",
    "ProductSearchResponse",
    "CatalogLookups",
    "LoginRequest",
    "SessionInfo",
    "HeaderState",
]
