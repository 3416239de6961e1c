# Client storage modules

from .events import EventChannel, CART_UPDATED
from .local_storage import (
    StorageArea,
    StorageContext,
    StorageEvent,
    StorageRegistry,
    storage_registry,
)

__all__ = [
    "EventChannel",
    "CART_UPDATED",
    "StorageArea",
    "StorageContext",
    "StorageEvent",
    "StorageRegistry",
    "storage_registry",
]
