"""Catalog models for the storefront"""

from typing import Optional

from pydantic import BaseModel, Field

from .cart import Money


class Category(BaseModel):
    id: int
    name: str


class CarMake(BaseModel):
    car_id: int
    make: str


class CarModel(BaseModel):
    model_id: int
    car_id: int
    model_name: str

    class Config:
        protected_namespaces = ()


class ProductYear(BaseModel):
    year_id: int
    year: int


class CompatibleCar(BaseModel):
    """Vehicle range a part fits"""
    make_id: int
    make: str
    model_id: int
    model_name: str
    year_start: int
    year_end: int

    class Config:
        protected_namespaces = ()

    def fits(
        self,
        make_id: Optional[int] = None,
        model_id: Optional[int] = None,
        year: Optional[int] = None,
    ) -> bool:
        if make_id is not None and self.make_id != make_id:
            return False
        if model_id is not None and self.model_id != model_id:
            return False
        if year is not None and not (self.year_start <= year <= self.year_end):
            return False
        return True


class Product(BaseModel):
    """Part in the catalog"""
    id: str
    name: str
    brand_name: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    description: Optional[str] = None
    selling_price: Money = Field(ge=0)
    stock_quantity: int = Field(ge=0, default=0)
    rating: Optional[float] = None
    reviews: Optional[int] = None
    condition_item: Optional[str] = None
    discount: int = Field(ge=0, le=100, default=0)
    images: list[str] = []
    compatible_cars: list[CompatibleCar] = []

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None


class ProductSearchResponse(BaseModel):
    """Response from product search"""
    products: list[Product]
    total: int
    limit: int
    offset: int


class CatalogLookups(BaseModel):
    """Reference lists for the landing page vehicle finder"""
    categories: list[Category] = []
    car_makes: list[CarMake] = []
    car_models: list[CarModel] = []
    years: list[ProductYear] = []
