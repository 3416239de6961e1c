"""
Client-local key-value storage

Keeps what a browser keeps in localStorage, per client. Each client owns one
StorageArea; each open tab of that client is a StorageContext over the same
area. Values are strings. After a write commits, the other contexts of the
area receive a StorageEvent; the writing context does not.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .events import EventChannel

logger = logging.getLogger(__name__)


@dataclass
class StorageEvent:
    """Change notification delivered to the other contexts of an area"""
    key: Optional[str]
    old_value: Optional[str]
    new_value: Optional[str]
    source_context: str


StorageListener = Callable[[StorageEvent], None]


class StorageContext:
    """One tab's view of a client's storage area"""

    def __init__(self, area: "StorageArea", context_id: str):
        self.area = area
        self.context_id = context_id
        self.events = EventChannel()
        self._listeners: list[StorageListener] = []
        self.updated_at = datetime.utcnow()

    def get_item(self, key: str) -> Optional[str]:
        return self.area.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        old_value = self.area.data.get(key)
        self.area.data[key] = str(value)
        if old_value != self.area.data[key]:
            self.area.commit(self, key, old_value, self.area.data[key])

    def remove_item(self, key: str) -> None:
        if key not in self.area.data:
            return
        old_value = self.area.data.pop(key)
        self.area.commit(self, key, old_value, None)

    def clear(self) -> None:
        """Remove every key of the area"""
        if not self.area.data:
            return
        self.area.data.clear()
        self.area.commit(self, None, None, None)

    def keys(self) -> list[str]:
        return list(self.area.data.keys())

    def add_storage_listener(self, listener: StorageListener) -> Callable[[], None]:
        """
        Listen for writes made by the other contexts of this area.

        Returns:
            A function that removes the listener
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

        def remove() -> None:
            self.remove_storage_listener(listener)

        return remove

    def remove_storage_listener(self, listener: StorageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch_storage_event(self, event: StorageEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    f"Storage listener failed in context {self.context_id} (key={event.key})"
                )

    def close(self) -> None:
        """Tear down listeners and subscribers of this context"""
        self._listeners.clear()
        self.events.clear()


class StorageArea:
    """Key-value storage shared by every context of one client"""

    def __init__(self, client_id: str):
        self.client_id = client_id
        self.data: dict[str, str] = {}
        self.contexts: dict[str, StorageContext] = {}
        self.updated_at = datetime.utcnow()

    def context(self, context_id: str) -> StorageContext:
        """Get the context for a tab, creating it on first use"""
        ctx = self.contexts.get(context_id)
        if ctx is None:
            ctx = StorageContext(self, context_id)
            self.contexts[context_id] = ctx
        self.touch(ctx)
        return ctx

    def view(self, context_id: str) -> StorageContext:
        """
        Get a context for reading.

        Returns the open context for the tab, or a detached one that is not
        registered with the area and receives no storage events.
        """
        ctx = self.contexts.get(context_id)
        if ctx is None:
            return StorageContext(self, context_id)
        self.touch(ctx)
        return ctx

    def touch(self, ctx: Optional[StorageContext] = None) -> None:
        now = datetime.utcnow()
        self.updated_at = now
        if ctx is not None:
            ctx.updated_at = now

    def close_idle_contexts(self, max_age_hours: int = 24) -> int:
        """Close contexts not used within max_age_hours"""
        now = datetime.utcnow()
        idle = [
            cid for cid, ctx in self.contexts.items()
            if (now - ctx.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for cid in idle:
            self.close_context(cid)
        return len(idle)

    def close_context(self, context_id: str) -> bool:
        ctx = self.contexts.pop(context_id, None)
        if ctx is None:
            return False
        ctx.close()
        return True

    def commit(
        self,
        source: StorageContext,
        key: Optional[str],
        old_value: Optional[str],
        new_value: Optional[str],
    ) -> None:
        """Notify the other contexts that a write has committed"""
        self.touch(source)
        event = StorageEvent(
            key=key,
            old_value=old_value,
            new_value=new_value,
            source_context=source.context_id,
        )
        for ctx in list(self.contexts.values()):
            if ctx is not source:
                ctx.dispatch_storage_event(event)


class StorageRegistry:
    """Storage areas by client id"""

    def __init__(self):
        self.areas: dict[str, StorageArea] = {}

    def get_area(self, client_id: str) -> Optional[StorageArea]:
        return self.areas.get(client_id)

    def get_or_create_area(self, client_id: str) -> StorageArea:
        area = self.areas.get(client_id)
        if area is None:
            area = StorageArea(client_id)
            self.areas[client_id] = area
            logger.debug(f"Created storage area for client {client_id}")
        return area

    def delete_area(self, client_id: str) -> bool:
        area = self.areas.pop(client_id, None)
        if area is None:
            return False
        for context_id in list(area.contexts):
            area.close_context(context_id)
        return True

    def cleanup_old_areas(self, max_age_hours: int = 24) -> int:
        """
        Remove areas not used within max_age_hours.

        Idle contexts of the remaining areas are closed as well.

        Returns:
            Number of areas removed
        """
        now = datetime.utcnow()
        old_areas = [
            cid for cid, area in self.areas.items()
            if (now - area.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for cid in old_areas:
            self.delete_area(cid)
        for area in self.areas.values():
            area.close_idle_contexts(max_age_hours)
        return len(old_areas)


# Singleton instance
storage_registry = StorageRegistry()
