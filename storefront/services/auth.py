"""
Mock authentication

There is no identity backend yet: signing in always succeeds and stores
placeholder tokens in the client's storage, signing out wipes that storage.
"""

import logging
from typing import Optional

from ..storage.local_storage import StorageContext

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "access_token"
REFRESH_TOKEN_KEY = "refresh_token"
USERNAME_KEY = "username"
ROLE_ID_KEY = "role_id"

MOCK_ACCESS_TOKEN = "mock-access-token"
MOCK_REFRESH_TOKEN = "mock-refresh-token"

ADMIN_ROLE_IDS = {"1", "2", "3"}


def login(context: StorageContext, username: str) -> None:
    context.set_item(ACCESS_TOKEN_KEY, MOCK_ACCESS_TOKEN)
    context.set_item(REFRESH_TOKEN_KEY, MOCK_REFRESH_TOKEN)
    context.set_item(USERNAME_KEY, username)
    logger.info(f"Mock login for {username} in client {context.area.client_id}")


def logout(context: StorageContext) -> None:
    """Clear everything the client stored, cart and checkout included"""
    context.clear()
    logger.info(f"Logged out client {context.area.client_id}")


def is_logged_in(context: StorageContext) -> bool:
    return bool(context.get_item(ACCESS_TOKEN_KEY))


def current_username(context: StorageContext) -> Optional[str]:
    return context.get_item(USERNAME_KEY)


def role_id(context: StorageContext) -> Optional[str]:
    return context.get_item(ROLE_ID_KEY)


def is_admin(context: StorageContext) -> bool:
    return role_id(context) in ADMIN_ROLE_IDS
