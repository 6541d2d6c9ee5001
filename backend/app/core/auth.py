"""
Authentication dependencies for BeerBro Backend
Validates Firebase ID tokens and provides user context
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from firebase_admin import auth as firebase_auth
from pydantic import BaseModel

from app.core.config import settings
from app.core.database import get_firebase_app


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)

# Role hierarchy: admin > user > viewer
ROLE_HIERARCHY = {
    "admin": 3,
    "user": 2,
    "viewer": 1
}


class TokenUser(BaseModel):
    """User data extracted from a Firebase ID token"""
    id: str
    email: str
    name: Optional[str] = None
    role: str = "user"


def decode_firebase_token(token: str) -> dict:
    """
    Verify a Firebase ID token and return its claims.

    Decoded token structure (custom claims are merged at top level):
    {
        "uid": "F6qic9mdF6fB9KPQB0QaUvekWRF2",
        "email": "someone@example.com",
        "name": "Someone",
        "role": "admin",
        "iat": 1234567890,
        "exp": 1234567890
    }
    """
    try:
        return firebase_auth.verify_id_token(token, app=get_firebase_app())
    except firebase_auth.ExpiredIdTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"}
        )
    except (firebase_auth.InvalidIdTokenError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"}
        )


def resolve_role(claims: dict) -> str:
    """Role from the custom claim, promoted to admin for configured emails"""
    email = (claims.get("email") or "").lower()
    if email and email in settings.get_admin_emails():
        return "admin"
    return claims.get("role") or "user"


def token_user_from_claims(claims: dict) -> Optional[TokenUser]:
    """Build a TokenUser, or None when uid/email are missing"""
    user_id = claims.get("uid") or claims.get("user_id") or claims.get("sub")
    email = claims.get("email")

    if not user_id or not email:
        return None

    return TokenUser(
        id=user_id,
        email=email,
        name=claims.get("name"),
        role=resolve_role(claims)
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenUser:
    """
    Dependency that extracts and validates the current user from the ID token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: TokenUser = Depends(get_current_user)):
            return {"message": f"Hello {user.email}"}
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"}
        )

    claims = decode_firebase_token(credentials.credentials)
    user = token_user_from_claims(claims)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload: missing user id or email",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return user


def require_role(required_role: str):
    """
    Dependency factory for role-based access control.

    Usage:
        router = APIRouter(dependencies=[Depends(require_role("admin"))])
    """
    async def role_checker(
        user: TokenUser = Depends(get_current_user)
    ) -> TokenUser:
        user_level = ROLE_HIERARCHY.get(user.role, 0)
        required_level = ROLE_HIERARCHY.get(required_role, 0)

        if user_level < required_level:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required role: {required_role}, your role: {user.role}"
            )

        return user

    return role_checker


# Guard for every admin router
require_admin = require_role("admin")
