"""
Client Context Middleware

Every request belongs to a client (one storage area, like a browser profile)
and to a tab of that client (one storage context). The client is named by the
X-Client-Id header and the tab by X-Tab-Id. Requests without a client id get a
fresh one, echoed back in the response so the client can keep using it.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..core.config import settings
from ..services import auth
from ..services.cart_store import CartStore
from ..storage.local_storage import StorageArea, StorageContext, StorageRegistry, storage_registry

logger = logging.getLogger(__name__)

CLIENT_ID_HEADER = "X-Client-Id"
TAB_ID_HEADER = "X-Tab-Id"


class ClientContextMiddleware(BaseHTTPMiddleware):
    """Resolves client and tab ids for downstream dependencies"""

    def __init__(self, app, default_tab_id: str = "main"):
        super().__init__(app)
        self.default_tab_id = default_tab_id

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_id = request.headers.get(CLIENT_ID_HEADER)
        if not client_id:
            client_id = uuid.uuid4().hex
            logger.debug(f"Issued client id {client_id}")

        request.state.client_id = client_id
        request.state.tab_id = request.headers.get(TAB_ID_HEADER) or self.default_tab_id

        response = await call_next(request)
        response.headers[CLIENT_ID_HEADER] = client_id
        return response


@dataclass
class ClientSession:
    """Storage handles of the client and tab a request belongs to"""
    client_id: str
    tab_id: str
    context: StorageContext
    store: CartStore

    @property
    def is_logged_in(self) -> bool:
        return auth.is_logged_in(self.context)


def get_storage_registry() -> StorageRegistry:
    """Storage registry in use (overridden in tests)"""
    return storage_registry


class ClientDependency:
    """
    FastAPI dependency resolving the request's storage context.

    Use require_login for routes that need a signed-in client. Read-only
    routes use client_reader: an unknown client reads as empty storage and
    no area or context is created for it.
    """

    def __init__(self, require_login: bool = False, read_only: bool = False):
        self.require_login = require_login
        self.read_only = read_only

    async def __call__(
        self,
        request: Request,
        registry: StorageRegistry = Depends(get_storage_registry),
    ) -> ClientSession:
        client_id = getattr(request.state, "client_id", None) or request.headers.get(CLIENT_ID_HEADER)
        if not client_id:
            raise HTTPException(status_code=400, detail=f"Missing {CLIENT_ID_HEADER} header")

        tab_id = (
            getattr(request.state, "tab_id", None)
            or request.headers.get(TAB_ID_HEADER)
            or settings.default_tab_id
        )

        if self.read_only:
            area = registry.get_area(client_id) or StorageArea(client_id)
            context = area.view(tab_id)
        else:
            context = registry.get_or_create_area(client_id).context(tab_id)

        session = ClientSession(
            client_id=client_id,
            tab_id=tab_id,
            context=context,
            store=CartStore(context),
        )

        if self.require_login and not session.is_logged_in:
            raise HTTPException(status_code=401, detail="Sign in to continue")

        return session


# Dependency instances
require_login = ClientDependency(require_login=True, read_only=True)
client_session = ClientDependency()
client_reader = ClientDependency(read_only=True)
