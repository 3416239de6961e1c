# Database modules

from .products import catalog_db, CatalogDatabase
from .orders import order_db, OrderDatabase
from . import reference

__all__ = [
    "catalog_db",
    "CatalogDatabase",
    "order_db",
    "OrderDatabase",
    "reference",
]
