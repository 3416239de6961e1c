import pytest

from storefront.core.config import settings
from storefront.database.products import CatalogDatabase
from storefront.services.catalog import load_landing_lookups


def ids(products):
    return [p.id for p in products]


def test_search_without_filters_returns_everything(catalog):
    products, total = catalog.search_products()

    assert total == 6
    assert ids(products)[0] == "part-001"


def test_search_by_text_matches_name_brand_and_description(catalog):
    assert ids(catalog.search_products(query="filter")[0]) == ["part-002", "part-003"]
    assert ids(catalog.search_products(query="BOSCH")[0]) == ["part-003", "part-006"]
    assert ids(catalog.search_products(query="ceramic")[0]) == ["part-001"]


def test_search_by_category(catalog):
    products, total = catalog.search_products(category_id=3)
    assert ids(products) == ["part-002", "part-003"]
    assert total == 2


@pytest.mark.parametrize(
    "filters, expected",
    [
        ({"make_id": 2}, ["part-003", "part-004"]),
        ({"model_id": 2}, ["part-005", "part-006"]),
        ({"make_id": 1, "year": 2022}, ["part-005", "part-006"]),
        ({"make_id": 1, "model_id": 1, "year": 2018}, ["part-001", "part-004", "part-006"]),
        ({"make_id": 3}, []),
    ],
)
def test_search_by_vehicle(catalog, filters, expected):
    assert ids(catalog.search_products(**filters)[0]) == expected


def test_in_stock_only(catalog):
    products, _ = catalog.search_products(category_id=3, in_stock_only=True)
    assert ids(products) == ["part-003"]


def test_pagination_reports_full_total(catalog):
    products, total = catalog.search_products(limit=2, offset=2)

    assert ids(products) == ["part-003", "part-004"]
    assert total == 6


def test_lookups_are_sorted(catalog):
    assert [c.name for c in catalog.list_categories()] == [
        "Brake Pads",
        "Engine Oil",
        "Filters",
        "Lighting",
        "Suspension",
    ]
    assert [m.model_name for m in catalog.list_car_models(make_id=1)] == ["Corolla", "Hilux"]
    assert [y.year for y in catalog.list_years()] == [2023, 2022, 2021, 2020]


def test_landing_lookups(catalog):
    lookups = load_landing_lookups(catalog)

    assert len(lookups.categories) == 5
    assert [m.make for m in lookups.car_makes] == ["Honda", "Nissan", "Toyota"]
    assert len(lookups.car_models) == 4
    assert len(lookups.years) == 4


class BrokenCatalog(CatalogDatabase):
    def list_car_makes(self):
        raise ConnectionError("catalog offline")


def test_failed_lookups_render_empty(caplog):
    lookups = load_landing_lookups(BrokenCatalog())

    assert lookups.categories == []
    assert lookups.car_makes == []
    assert lookups.car_models == []
    assert lookups.years == []
    assert "Landing lookup queries failed" in caplog.text


def test_disabled_lookups_render_empty(catalog, monkeypatch, caplog):
    monkeypatch.setattr(settings, "catalog_lookups_enabled", False)

    lookups = load_landing_lookups(catalog)

    assert lookups.categories == []
    assert "disabled" in caplog.text
