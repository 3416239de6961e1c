# Request identity

from .client_context import (
    ClientContextMiddleware,
    ClientDependency,
    ClientSession,
    client_session,
    client_reader,
    require_login,
    get_storage_registry,
    CLIENT_ID_HEADER,
    TAB_ID_HEADER,
)

__all__ = [
    "ClientContextMiddleware",
    "ClientDependency",
    "ClientSession",
    "client_session",
    "client_reader",
    "require_login",
    "get_storage_registry",
    "CLIENT_ID_HEADER",
    "TAB_ID_HEADER",
]
