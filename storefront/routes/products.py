"""Catalog API routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..models.product import (
    CarModel,
    CatalogLookups,
    Product,
    ProductSearchResponse,
)
from ..database.products import CatalogDatabase, catalog_db
from ..services.catalog import load_landing_lookups

router = APIRouter(tags=["Catalog"])


def get_catalog() -> CatalogDatabase:
    """Catalog in use (overridden in tests)"""
    return catalog_db


@router.get("/api/products", response_model=ProductSearchResponse)
async def search_products(
    q: Optional[str] = Query(None, description="Search query"),
    category_id: Optional[int] = Query(None, description="Filter by category"),
    make_id: Optional[int] = Query(None, description="Filter by car make"),
    model_id: Optional[int] = Query(None, description="Filter by car model"),
    year: Optional[int] = Query(None, description="Filter by model year"),
    in_stock_only: bool = Query(False, description="Only show in-stock items"),
    limit: int = Query(20, ge=1, le=100, description="Max results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    catalog: CatalogDatabase = Depends(get_catalog),
):
    """Search parts by text, category and vehicle"""
    products, total = catalog.search_products(
        query=q,
        category_id=category_id,
        make_id=make_id,
        model_id=model_id,
        year=year,
        in_stock_only=in_stock_only,
        limit=limit,
        offset=offset,
    )

    return ProductSearchResponse(
        products=products,
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/api/products/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    catalog: CatalogDatabase = Depends(get_catalog),
):
    """Get a product by ID"""
    product = catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/api/catalog/lookups", response_model=CatalogLookups)
async def get_lookups(catalog: CatalogDatabase = Depends(get_catalog)):
    """Categories and vehicle lookups for the landing page"""
    return load_landing_lookups(catalog)


@router.get("/api/catalog/models", response_model=list[CarModel])
async def list_car_models(
    make_id: Optional[int] = Query(None, description="Only models of this make"),
    catalog: CatalogDatabase = Depends(get_catalog),
):
    """Car models, for the model select that depends on the chosen make"""
    return catalog.list_car_models(make_id=make_id)
