"""
User Domain Models

User documents live at users/{uid}, keyed by the Firebase Auth uid.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional

from pydantic import ConfigDict, EmailStr, Field

from app.domain.base import DocumentModel


UserRole = Literal["admin", "user", "viewer"]


class User(DocumentModel):
    """User profile read model"""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Firebase Auth uid")
    email: str = ""
    display_name: Optional[str] = None
    photo_url: Optional[str] = Field(None, alias="photoURL")
    phone: Optional[str] = None
    role: str = "user"
    is_active: bool = True
    is_admin: bool = False
    preferences: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def guest(cls, user_id: str) -> "User":
        """Placeholder profile returned when no document exists yet"""
        now = datetime.now(timezone.utc)
        return cls(
            id=user_id,
            email="",
            display_name="Guest User",
            photo_url=None,
            is_admin=False,
            preferences={},
            created_at=now,
            updated_at=now,
            last_login_at=now,
        )


class UserProfile(DocumentModel):
    """
    Storefront profile body (POST/PATCH /api/users/{id})

    Known fields are validated; anything else the client keeps on the
    profile is stored as sent.
    """

    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = Field(None, alias="photoURL")
    phone: Optional[str] = None
    preferences: Optional[Dict[str, Any]] = None
    last_login_at: Optional[datetime] = None


class UserCreate(DocumentModel):
    """Schema for creating a user from the admin console"""
    email: EmailStr
    display_name: Optional[str] = None
    role: UserRole
    is_active: bool


class UserUpdate(DocumentModel):
    """Schema for admin user updates"""
    email: Optional[EmailStr] = None
    display_name: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class UserRoleUpdate(DocumentModel):
    role: UserRole
