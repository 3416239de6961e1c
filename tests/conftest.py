from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.database.orders import OrderDatabase
from storefront.database.products import CatalogDatabase
from storefront.main import app
from storefront.models.cart import CheckoutItem
from storefront.routes.checkout import get_order_db
from storefront.routes.products import get_catalog
from storefront.security.client_context import get_storage_registry
from storefront.services.cart_store import CartStore
from storefront.storage.local_storage import StorageRegistry

CLIENT_ID = "client-1"


def make_item(price, quantity, product="p1", name="Brake Pads", **extra) -> CheckoutItem:
    return CheckoutItem(
        product=product,
        product_name=name,
        selling_price=Decimal(str(price)),
        quantity=quantity,
        **extra,
    )


@pytest.fixture
def registry():
    return StorageRegistry()


@pytest.fixture
def area(registry):
    return registry.get_or_create_area(CLIENT_ID)


@pytest.fixture
def context(area):
    return area.context("main")


@pytest.fixture
def other_context(area):
    return area.context("second-tab")


@pytest.fixture
def store(context):
    return CartStore(context)


@pytest.fixture
def catalog():
    return CatalogDatabase()


@pytest.fixture
def orders():
    return OrderDatabase()


@pytest.fixture
def client(registry, catalog, orders):
    app.dependency_overrides[get_storage_registry] = lambda: registry
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_order_db] = lambda: orders
    with TestClient(app, headers={"X-Client-Id": CLIENT_ID}) as test_client:
        yield test_client
    app.dependency_overrides.clear()
