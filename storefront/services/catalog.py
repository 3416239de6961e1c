"""Landing page lookups from the catalog"""

import logging

from ..core.config import settings
from ..database.products import CatalogDatabase
from ..models.product import CatalogLookups

logger = logging.getLogger(__name__)


def load_landing_lookups(catalog: CatalogDatabase) -> CatalogLookups:
    """
    Load categories and vehicle lookups for the landing page.

    Lookup failures are logged and the page gets empty lists instead of an
    error.
    """
    if not settings.catalog_lookups_enabled:
        logger.warning("Catalog lookups are disabled; rendering landing page without lookups.")
        return CatalogLookups()

    try:
        return CatalogLookups(
            categories=catalog.list_categories(),
            car_makes=catalog.list_car_makes(),
            car_models=catalog.list_car_models(),
            years=catalog.list_years(),
        )
    except Exception:
        logger.exception("Landing lookup queries failed")
        return CatalogLookups()
