"""
Toyozu Storefront Application

Cart, checkout and catalog API for the automotive-parts storefront.
Cart and checkout state lives in per-client storage that behaves like a
browser's local storage.
"""

import os
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

from .core.config import settings
from .routes import (
    products_router,
    cart_router,
    checkout_router,
    auth_router,
    account_router,
)
from .security.client_context import ClientContextMiddleware
from .storage.local_storage import storage_registry

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def cleanup_idle_storage():
    """Evict idle client storage periodically"""
    while True:
        await asyncio.sleep(settings.storage_cleanup_interval_seconds)
        removed = storage_registry.cleanup_old_areas(settings.storage_max_age_hours)
        if removed:
            logger.info(f"Evicted {removed} idle client storage area(s)")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Catalog lookups: {'enabled' if settings.catalog_lookups_enabled else 'disabled'}")
    cleanup_task = asyncio.create_task(cleanup_idle_storage())
    yield
    cleanup_task.cancel()
    try:
        await cleanup_task
    except asyncio.CancelledError:
        pass
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Cart, checkout and catalog API for the Toyozu parts storefront",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Client-Id"],
)

# Client/tab resolution
app.add_middleware(ClientContextMiddleware, default_tab_id=settings.default_tab_id)

# Include API routers
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(auth_router)
app.include_router(account_router)


@app.get("/")
async def home():
    """API index"""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "catalog": "/api/catalog/lookups",
            "cart": "/api/cart",
            "checkout": "/api/checkout",
            "auth": "/api/auth",
            "header": "/api/header",
            "orders": "/api/account/orders",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
