"""Cart API routes"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends

from ..models.cart import (
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from ..database.products import CatalogDatabase
from ..security.client_context import ClientSession, client_reader, client_session
from ..services.cart_store import CartStore
from ..services.normalize import cart_to_checkout_items
from ..services.summary import subtotal
from .products import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def cart_response(store: CartStore, message: Optional[str] = None) -> CartResponse:
    raw = store.read_cart()
    return CartResponse(
        items=store.cart_items(),
        count=len(raw),
        subtotal=subtotal(cart_to_checkout_items(raw)),
        message=message,
    )


@router.get("", response_model=CartResponse)
async def get_cart(session: ClientSession = Depends(client_reader)):
    """Get the cart of this client"""
    return cart_response(session.store)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: ClientSession = Depends(client_session),
    catalog: CatalogDatabase = Depends(get_catalog),
):
    """Add an item to the cart"""
    product = catalog.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    line = session.store.get_line(product.id)
    in_cart = line.quantity if line else 0
    if not product.in_stock or in_cart + request.quantity > product.stock_quantity:
        logger.info(
            f"Rejected add of {request.quantity}x {product.id}: "
            f"{in_cart} in cart, {product.stock_quantity} in stock"
        )
        raise HTTPException(
            status_code=400,
            detail=f"Insufficient stock. Available: {product.stock_quantity}",
        )

    session.store.add_item(product, request.quantity, max_quantity=product.stock_quantity)
    return cart_response(
        session.store,
        message=f"Added {request.quantity}x {product.name} to cart",
    )


@router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    session: ClientSession = Depends(client_session),
    catalog: CatalogDatabase = Depends(get_catalog),
):
    """Update item quantity in cart"""
    product = catalog.get_product(product_id)
    if product and request.quantity > product.stock_quantity:
        raise HTTPException(
            status_code=400,
            detail=f"Insufficient stock. Available: {product.stock_quantity}",
        )

    updated = session.store.update_quantity(product_id, request.quantity)
    if updated is None:
        raise HTTPException(status_code=404, detail="Item not in cart")

    return cart_response(session.store, message="Cart updated")


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    session: ClientSession = Depends(client_session),
):
    """Remove an item from the cart"""
    updated = session.store.remove_item(product_id)
    if updated is None:
        raise HTTPException(status_code=404, detail="Item not in cart")
    return cart_response(session.store, message="Item removed")


@router.delete("", response_model=CartResponse)
async def clear_cart(session: ClientSession = Depends(client_session)):
    """Clear all items from cart"""
    session.store.clear_cart()
    return cart_response(session.store, message="Cart cleared")
