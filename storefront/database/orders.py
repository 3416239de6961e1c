"""Order storage for the storefront"""

import uuid
from datetime import datetime
from typing import Optional

from ..models.cart import CheckoutItem
from ..models.checkout import (
    Address,
    Courier,
    Order,
    OrderItem,
    OrderStatus,
    OrderSummary,
    PaymentMethod,
)


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self, currency: str = "PHP"):
        self.currency = currency
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        items: list[CheckoutItem],
        summary: OrderSummary,
        address: Address,
        courier: Courier,
        payment_method: PaymentMethod,
        notes: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> Order:
        """Create an order from a checkout snapshot"""
        now = datetime.utcnow()

        order_items = [
            OrderItem(
                product_id=item.product,
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=item.selling_price,
                total_price=item.line_total,
            )
            for item in items
        ]

        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            client_id=client_id,
            status=OrderStatus.PLACED,
            items=order_items,
            subtotal=summary.subtotal,
            shipping=summary.shipping,
            total=summary.total,
            currency=self.currency,
            address=address,
            courier=courier,
            payment_method=payment_method,
            notes=notes or None,
            created_at=now,
            updated_at=now,
        )

        self.orders[order.order_id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(self, client_id: Optional[str] = None, limit: int = 50) -> list[Order]:
        """List recent orders, optionally for one client"""
        orders = list(self.orders.values())
        if client_id is not None:
            orders = [o for o in orders if o.client_id == client_id]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]


# Singleton instance
order_db = OrderDatabase()
