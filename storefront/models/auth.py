"""Session models for the mock authentication surface"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SessionInfo(BaseModel):
    client_id: str
    is_logged_in: bool
    username: Optional[str] = None
    role_id: Optional[str] = None
    redirect_to: Optional[str] = None


class HeaderState(BaseModel):
    """What the persistent header shows"""
    cart_count: int = 0
    is_logged_in: bool = False
    username: Optional[str] = None
    show_cart: bool = False
    show_admin_dashboard: bool = False
