"""Account and header routes"""

from fastapi import APIRouter, Depends, Query

from ..models.auth import HeaderState
from ..models.checkout import Order
from ..database.orders import OrderDatabase
from ..security.client_context import ClientSession, client_reader, require_login
from ..services.header import header_state
from .checkout import get_order_db

router = APIRouter(tags=["Account"])


@router.get("/api/header", response_model=HeaderState)
async def get_header(session: ClientSession = Depends(client_reader)):
    """Cart badge and user menu state for the persistent header"""
    return header_state(session.store)


@router.get("/api/account/orders", response_model=list[Order])
async def list_orders(
    limit: int = Query(50, ge=1, le=100),
    session: ClientSession = Depends(require_login),
    orders: OrderDatabase = Depends(get_order_db),
):
    """Orders placed by this client, newest first"""
    return orders.list_orders(client_id=session.client_id, limit=limit)
