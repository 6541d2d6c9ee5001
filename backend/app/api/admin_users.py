"""
Admin API - Users
User profile management for the admin console

Author: BeerBro
Date: 2025-09-14
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from google.api_core.exceptions import NotFound

from app.core.auth import require_admin
from app.domain.user import UserCreate, UserRoleUpdate, UserUpdate
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("")
async def list_users(email: Optional[str] = Query(None, description="Exact email lookup")):
    """
    All users, newest first

    With ?email= the result holds at most the one matching user.
    """
    try:
        repo = UserRepository()
        if email:
            user = repo.find_by_email(email)
            return [user.to_dict()] if user else []
        return [user.to_dict() for user in repo.list_recent()]

    except Exception:
        logger.exception("Error fetching admin users")
        raise HTTPException(status_code=500, detail="Failed to fetch users")


@router.post("", status_code=201)
async def create_user(user: UserCreate):
    try:
        repo = UserRepository()
        user_id = repo.create(user.to_document())
        logger.info(f"User {user_id} created: {user.email} ({user.role})")
        return {"id": user_id}

    except Exception:
        logger.exception("Error creating user")
        raise HTTPException(status_code=500, detail="Failed to create user")


@router.get("/{user_id}")
async def get_user(user_id: str):
    try:
        repo = UserRepository()
        user = repo.find_by_id(user_id)

        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        return user.to_dict()

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error fetching user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch user")


@router.patch("/{user_id}")
async def update_user(user_id: str, update: UserUpdate):
    try:
        repo = UserRepository()
        repo.update(user_id, update.to_document(partial=True))
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="User not found")
    except Exception:
        logger.exception(f"Error updating user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to update user")


@router.patch("/{user_id}/role")
async def update_user_role(user_id: str, update: UserRoleUpdate):
    """Change the profile role (the auth custom claim is managed by scripts)"""
    try:
        repo = UserRepository()
        repo.update(user_id, {"role": update.role})
        logger.info(f"User {user_id} role -> {update.role}")
        return {"success": True}

    except NotFound:
        raise HTTPException(status_code=404, detail="User not found")
    except Exception:
        logger.exception(f"Error updating role for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to update user role")


@router.post("/{user_id}/toggle-status")
async def toggle_user_status(user_id: str):
    """Flip isActive"""
    try:
        repo = UserRepository()
        user = repo.find_by_id(user_id)

        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        is_active = not user.is_active
        repo.update(user_id, {"isActive": is_active})
        return {"success": True, "isActive": is_active}

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error toggling status for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to toggle user status")


@router.delete("/{user_id}")
async def delete_user(user_id: str):
    try:
        repo = UserRepository()
        if not repo.find_by_id(user_id):
            raise HTTPException(status_code=404, detail="User not found")

        repo.delete(user_id)
        logger.info(f"User {user_id} deleted")
        return {"success": True}

    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error deleting user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to delete user")
