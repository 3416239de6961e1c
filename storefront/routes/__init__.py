# API Routes

from .products import router as products_router
from .cart import router as cart_router
from .checkout import router as checkout_router
from .auth import router as auth_router
from .account import router as account_router

__all__ = [
    "products_router",
    "cart_router",
    "checkout_router",
    "auth_router",
    "account_router",
]
