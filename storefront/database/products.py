"""Mock parts catalog"""

from decimal import Decimal
from typing import Optional

from ..models.product import (
    CarMake,
    CarModel,
    Category,
    CompatibleCar,
    Product,
    ProductYear,
)

CATEGORIES: list[Category] = [
    Category(id=1, name="Brake Pads"),
    Category(id=2, name="Engine Oil"),
    Category(id=3, name="Filters"),
    Category(id=4, name="Suspension"),
    Category(id=5, name="Lighting"),
]

CAR_MAKES: list[CarMake] = [
    CarMake(car_id=1, make="Toyota"),
    CarMake(car_id=2, make="Honda"),
    CarMake(car_id=3, make="Nissan"),
]

CAR_MODELS: list[CarModel] = [
    CarModel(model_id=1, car_id=1, model_name="Corolla"),
    CarModel(model_id=2, car_id=1, model_name="Hilux"),
    CarModel(model_id=3, car_id=2, model_name="Civic"),
    CarModel(model_id=4, car_id=3, model_name="Cruise"),
]

YEARS: list[ProductYear] = [
    ProductYear(year_id=1, year=2023),
    ProductYear(year_id=2, year=2022),
    ProductYear(year_id=3, year=2021),
    ProductYear(year_id=4, year=2020),
]

COROLLA_2016_2020 = CompatibleCar(
    make_id=1, make="Toyota", model_id=1, model_name="Corolla", year_start=2016, year_end=2020
)
HILUX_2018_2023 = CompatibleCar(
    make_id=1, make="Toyota", model_id=2, model_name="Hilux", year_start=2018, year_end=2023
)
CIVIC_2017_2022 = CompatibleCar(
    make_id=2, make="Honda", model_id=3, model_name="Civic", year_start=2017, year_end=2022
)

# Mock parts catalog
PRODUCTS: dict[str, Product] = {
    "part-001": Product(
        id="part-001",
        name="Brake Pads Premium",
        brand_name="Brembo",
        category_id=1,
        category_name="Brake Pads",
        description="Premium ceramic brake pads for improved stopping power and reduced noise.",
        selling_price=Decimal("1299.00"),
        stock_quantity=12,
        rating=4.6,
        reviews=34,
        condition_item="New",
        discount=10,
        images=[
            "/static/images/placeholder-product-1.jpg",
            "/static/images/placeholder-product-1b.jpg",
            "/static/images/placeholder-product-1c.jpg",
        ],
        compatible_cars=[COROLLA_2016_2020],
    ),
    "part-002": Product(
        id="part-002",
        name="Oil Filter Standard",
        brand_name="Mann Filter",
        category_id=3,
        category_name="Filters",
        description="Reliable oil filter for most standard engines.",
        selling_price=Decimal("299.00"),
        stock_quantity=0,
        rating=4.1,
        reviews=12,
        condition_item="New",
        images=["/static/images/placeholder-product-2.jpg"],
    ),
    "part-003": Product(
        id="part-003",
        name="Air Filter Deluxe",
        brand_name="Bosch",
        category_id=3,
        category_name="Filters",
        description="High-flow air filter for better engine performance.",
        selling_price=Decimal("499.00"),
        stock_quantity=5,
        rating=4.2,
        reviews=18,
        condition_item="New",
        discount=5,
        images=["/static/images/placeholder-product-3.jpg"],
        compatible_cars=[CIVIC_2017_2022],
    ),
    "part-004": Product(
        id="part-004",
        name="Fully Synthetic Engine Oil 5W-30 (4L)",
        brand_name="Mobil 1",
        category_id=2,
        category_name="Engine Oil",
        description="Advanced full synthetic motor oil for gasoline engines.",
        selling_price=Decimal("2450.00"),
        stock_quantity=20,
        rating=4.8,
        reviews=51,
        condition_item="New",
        images=["/static/images/placeholder-product-4.jpg"],
        compatible_cars=[COROLLA_2016_2020, CIVIC_2017_2022],
    ),
    "part-005": Product(
        id="part-005",
        name="Gas Shock Absorber (Front)",
        brand_name="KYB",
        category_id=4,
        category_name="Suspension",
        description="Twin-tube gas shock absorber restoring factory ride and handling.",
        selling_price=Decimal("3200.00"),
        stock_quantity=8,
        rating=4.4,
        reviews=9,
        condition_item="New",
        images=["/static/images/placeholder-product-5.jpg"],
        compatible_cars=[HILUX_2018_2023],
    ),
    "part-006": Product(
        id="part-006",
        name="H4 Halogen Headlight Bulb",
        brand_name="Bosch",
        category_id=5,
        category_name="Lighting",
        description="Bright white halogen bulb, sold individually.",
        selling_price=Decimal("350.00"),
        stock_quantity=40,
        rating=4.0,
        reviews=22,
        condition_item="New",
        images=["/static/images/placeholder-product-6.jpg"],
        compatible_cars=[COROLLA_2016_2020, HILUX_2018_2023],
    ),
}


class CatalogDatabase:
    """In-memory catalog of parts and vehicle lookups"""

    def __init__(self):
        self.products = PRODUCTS.copy()
        self.categories = list(CATEGORIES)
        self.car_makes = list(CAR_MAKES)
        self.car_models = list(CAR_MODELS)
        self.years = list(YEARS)

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())

    def search_products(
        self,
        query: Optional[str] = None,
        category_id: Optional[int] = None,
        make_id: Optional[int] = None,
        model_id: Optional[int] = None,
        year: Optional[int] = None,
        in_stock_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        """
        Search products with filters.

        Vehicle filters (make, model, year) keep products with at least one
        compatible car matching all of the given filters.

        Returns:
            Tuple of (matching products, total count)
        """
        results = list(self.products.values())

        # Filter by search query
        if query:
            query_lower = query.lower()
            results = [
                p for p in results
                if query_lower in p.name.lower()
                or query_lower in (p.description or "").lower()
                or query_lower in (p.brand_name or "").lower()
            ]

        # Filter by category
        if category_id is not None:
            results = [p for p in results if p.category_id == category_id]

        # Filter by vehicle
        if make_id is not None or model_id is not None or year is not None:
            results = [
                p for p in results
                if any(car.fits(make_id, model_id, year) for car in p.compatible_cars)
            ]

        # Filter by stock
        if in_stock_only:
            results = [p for p in results if p.in_stock]

        # Get total before pagination
        total = len(results)

        # Apply pagination
        results = results[offset : offset + limit]

        return results, total

    def list_categories(self) -> list[Category]:
        return sorted(self.categories, key=lambda c: c.name)

    def list_car_makes(self) -> list[CarMake]:
        return sorted(self.car_makes, key=lambda m: m.make)

    def list_car_models(self, make_id: Optional[int] = None) -> list[CarModel]:
        models = self.car_models
        if make_id is not None:
            models = [m for m in models if m.car_id == make_id]
        return sorted(models, key=lambda m: m.model_name)

    def list_years(self) -> list[ProductYear]:
        return sorted(self.years, key=lambda y: y.year, reverse=True)


# Singleton instance
catalog_db = CatalogDatabase()
