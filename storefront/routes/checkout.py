"""Checkout API routes"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query

from ..models.checkout import (
    BuyNowRequest,
    CheckoutSelectionRequest,
    CheckoutView,
    OrderConfirmation,
    PaymentMethod,
    PlaceOrderRequest,
)
from ..database import reference
from ..database.orders import OrderDatabase, order_db
from ..database.products import CatalogDatabase
from ..security.client_context import ClientSession, client_reader, client_session
from ..services.cart_store import CartStore
from ..services.placement import OrderPlacementError, place_order
from ..services.summary import summarize
from .products import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


def get_order_db() -> OrderDatabase:
    """Order database in use (overridden in tests)"""
    return order_db


def checkout_view(
    store: CartStore,
    address_id: Optional[str] = None,
    courier_id: Optional[str] = None,
) -> CheckoutView:
    """
    Build the checkout page state.

    A None id falls back to the first demo entry, as the page preselects it;
    an empty id means nothing is selected.
    """
    if address_id is None:
        address_id = reference.default_address_id()
    if courier_id is None:
        courier_id = reference.default_courier_id()

    items = store.read_checkout()
    courier = reference.get_courier(courier_id)

    return CheckoutView(
        items=items,
        addresses=reference.list_addresses(),
        couriers=reference.list_couriers(),
        payment_methods=list(PaymentMethod),
        selected_address_id=address_id or None,
        selected_courier_id=courier.id if courier else None,
        summary=summarize(items, courier),
    )


@router.get("", response_model=CheckoutView)
async def get_checkout(
    address_id: Optional[str] = Query(None, description="Selected delivery address"),
    courier_id: Optional[str] = Query(None, description="Selected courier"),
    session: ClientSession = Depends(client_reader),
):
    """Checkout snapshot with its order summary"""
    return checkout_view(session.store, address_id, courier_id)


@router.post("/selection", response_model=CheckoutView)
async def select_items(
    request: CheckoutSelectionRequest,
    session: ClientSession = Depends(client_session),
):
    """Carry cart lines into checkout (all of them when no ids are given)"""
    session.store.select_for_checkout(request.product_ids)
    return checkout_view(session.store)


@router.post("/buy-now", response_model=CheckoutView)
async def buy_now(
    request: BuyNowRequest,
    session: ClientSession = Depends(client_session),
    catalog: CatalogDatabase = Depends(get_catalog),
):
    """Check out a single product without going through the cart"""
    product = catalog.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if request.quantity > product.stock_quantity:
        raise HTTPException(
            status_code=400,
            detail=f"Insufficient stock. Available: {product.stock_quantity}",
        )

    session.store.buy_now(product, request.quantity)
    return checkout_view(session.store)


@router.post("/place-order", response_model=OrderConfirmation)
async def place(
    request: PlaceOrderRequest,
    session: ClientSession = Depends(client_session),
    orders: OrderDatabase = Depends(get_order_db),
):
    """
    Place the order for the checkout snapshot.

    Missing items, address or courier are reported as a 400 with the notice
    to show; nothing is changed in that case.
    """
    try:
        return place_order(
            session.store,
            address_id=request.address_id,
            courier_id=request.courier_id,
            payment_method=request.payment_method,
            notes=request.notes,
            orders=orders,
            client_id=session.client_id,
        )
    except OrderPlacementError as e:
        logger.info(f"Order rejected for client {session.client_id}: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
