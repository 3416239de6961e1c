from decimal import Decimal

import pytest

from storefront.models.checkout import OrderStatus, PaymentMethod
from storefront.services.placement import OrderPlacementError, place_order

from .conftest import CLIENT_ID, make_item


@pytest.fixture
def parts_order(store):
    store.write_checkout([make_item("1299.0", 2, product="p1"), make_item("299.0", 1, product="p2")])
    return store


def snapshot(store):
    return {key: store.context.get_item(key) for key in store.context.keys()}


def test_empty_checkout_is_rejected_without_changes(store, orders):
    store.context.set_item(store.cart_key, '[{"productId": "p1"}]')
    before = snapshot(store)

    for _ in range(2):
        with pytest.raises(OrderPlacementError) as exc_info:
            place_order(store, "addr-1", "courier-1", orders=orders)
        assert exc_info.value.message == "No items selected for checkout."

    assert snapshot(store) == before
    assert orders.list_orders() == []


def test_snapshot_with_only_invalid_items_counts_as_empty(store, orders):
    store.write_checkout([{"product": "p1", "product_name": "Pads", "selling_price": 10, "quantity": 0}])

    with pytest.raises(OrderPlacementError, match="No items selected"):
        place_order(store, "addr-1", "courier-1", orders=orders)


@pytest.mark.parametrize("address_id", [None, "", "addr-999"])
def test_address_is_required(parts_order, orders, address_id):
    before = snapshot(parts_order)

    with pytest.raises(OrderPlacementError) as exc_info:
        place_order(parts_order, address_id, "courier-1", orders=orders)

    assert exc_info.value.message == "Please select a delivery address."
    assert snapshot(parts_order) == before
    assert orders.list_orders() == []


@pytest.mark.parametrize("courier_id", [None, "", "courier-999"])
def test_courier_is_required(parts_order, orders, courier_id):
    with pytest.raises(OrderPlacementError) as exc_info:
        place_order(parts_order, "addr-1", courier_id, orders=orders)

    assert exc_info.value.message == "Please select a courier."
    assert len(parts_order.read_checkout()) == 2


def test_preconditions_are_checked_in_order(store, parts_order, orders):
    with pytest.raises(OrderPlacementError, match="delivery address"):
        place_order(parts_order, None, None, orders=orders)

    parts_order.clear_checkout()
    with pytest.raises(OrderPlacementError, match="No items"):
        place_order(parts_order, None, None, orders=orders)


def test_successful_order(parts_order, orders, catalog):
    parts_order.add_item(catalog.get_product("part-001"), 1)

    confirmation = place_order(
        parts_order,
        "addr-1",
        "courier-1",
        payment_method=PaymentMethod.COD,
        orders=orders,
        client_id=CLIENT_ID,
    )

    assert confirmation.item_count == 2
    assert confirmation.total == Decimal("3017.0")
    assert confirmation.payment_method == PaymentMethod.COD
    assert confirmation.redirect_to == "/user-dashboard"
    assert confirmation.message == (
        "Order placed (demo only).\n\nItems: 2\nPayment: COD\nTotal: ₱3,017"
    )

    # Snapshot is consumed, the cart is not
    assert parts_order.read_checkout() == []
    assert parts_order.context.get_item(parts_order.checkout_key) is None
    assert parts_order.cart_count() == 1

    order = orders.get_order(confirmation.order_id)
    assert order.status == OrderStatus.PLACED
    assert order.client_id == CLIENT_ID
    assert order.address.id == "addr-1"
    assert order.courier.id == "courier-1"
    assert [(i.product_id, i.quantity, i.total_price) for i in order.items] == [
        ("p1", 2, Decimal("2598.0")),
        ("p2", 1, Decimal("299.0")),
    ]
    assert (order.subtotal, order.shipping, order.total) == (
        Decimal("2897.0"),
        Decimal("120"),
        Decimal("3017.0"),
    )


def test_placing_twice_needs_a_new_snapshot(parts_order, orders):
    place_order(parts_order, "addr-2", "courier-2", PaymentMethod.GCASH, orders=orders)

    with pytest.raises(OrderPlacementError, match="No items"):
        place_order(parts_order, "addr-2", "courier-2", PaymentMethod.GCASH, orders=orders)

    assert len(orders.list_orders()) == 1


def test_payment_method_and_notes_are_recorded(parts_order, orders):
    confirmation = place_order(
        parts_order,
        "addr-2",
        "courier-2",
        payment_method=PaymentMethod.CARD,
        notes="Leave at the guard house",
        orders=orders,
    )

    order = orders.get_order(confirmation.order_id)
    assert order.payment_method == PaymentMethod.CARD
    assert order.notes == "Leave at the guard house"
    assert order.total == Decimal("3117.0")
    assert "Payment: CARD" in confirmation.message
    assert "Total: ₱3,117" in confirmation.message
