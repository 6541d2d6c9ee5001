"""
Admin access management

Two ways to grant admin access:
- the "role": "admin" custom claim on the Firebase Auth user (checked by
  the API on every admin request)
- role = "admin" on the users/{uid} profile document (read by the admin
  console to show admin navigation)

Author: BeerBro
Date: 2025-09-14
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from firebase_admin import auth as firebase_auth

from app.core.database import get_firebase_app
from app.domain.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

ADMIN_CLAIMS = {"role": "admin"}
USER_CLAIMS = {"role": "user"}


@dataclass
class ClaimResult:
    """Outcome of a claims change; already_admin is the state before the run"""
    uid: str
    email: str
    already_admin: bool
    claims: dict


def set_admin_claim(email: str) -> ClaimResult:
    """
    Grant the admin custom claim to the auth user with this email

    Existing claims are replaced with {"role": "admin"}. The user must sign
    in again before the new claim shows up in their ID token.

    Raises:
        firebase_admin.auth.UserNotFoundError: if no auth user has this email
    """
    app = get_firebase_app()
    user = firebase_auth.get_user_by_email(email, app=app)
    current = dict(user.custom_claims or {})

    if current.get("role") == "admin":
        logger.info(f"{email} ({user.uid}) already has the admin claim")
        return ClaimResult(uid=user.uid, email=user.email, already_admin=True, claims=current)

    firebase_auth.set_custom_user_claims(user.uid, ADMIN_CLAIMS, app=app)
    logger.info(f"Admin claim set for {email} ({user.uid})")
    return ClaimResult(uid=user.uid, email=user.email, already_admin=False, claims=dict(ADMIN_CLAIMS))


def remove_admin_claim(email: str) -> ClaimResult:
    """
    Revoke the admin custom claim, leaving {"role": "user"}

    Users without the admin claim are left untouched. Like a grant, the
    change reaches the ID token only after the user signs in again.

    Raises:
        firebase_admin.auth.UserNotFoundError: if no auth user has this email
    """
    app = get_firebase_app()
    user = firebase_auth.get_user_by_email(email, app=app)
    current = dict(user.custom_claims or {})

    if current.get("role") != "admin":
        logger.info(f"{email} ({user.uid}) does not have the admin claim")
        return ClaimResult(uid=user.uid, email=user.email, already_admin=False, claims=current)

    firebase_auth.set_custom_user_claims(user.uid, USER_CLAIMS, app=app)
    logger.info(f"Admin claim removed for {email} ({user.uid})")
    return ClaimResult(uid=user.uid, email=user.email, already_admin=True, claims=dict(USER_CLAIMS))


def promote_user_document(uid: str, repository: Optional[UserRepository] = None) -> Optional[User]:
    """
    Set role = "admin" on users/{uid}

    Returns:
        The profile as it was before the change, or None if there is no
        document for this uid
    """
    repository = repository or UserRepository()
    user = repository.find_by_id(uid)
    if user is None:
        return None
    repository.update(uid, {"role": "admin"})
    logger.info(f"users/{uid} promoted to admin (was {user.role})")
    return user


def list_users(repository: Optional[UserRepository] = None) -> List[User]:
    """All user profiles, newest first"""
    repository = repository or UserRepository()
    return repository.list_recent()
