"""
Cloud Firestore connection (Firebase Admin SDK)

This module centralizes access to the document store:
- Firebase app initialization (service account or application default credentials)
- Firestore client singleton
- Helpers for turning stored documents into plain dicts

Author: BeerBro
Updated: 2025-09-14
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

import firebase_admin
from firebase_admin import credentials, firestore

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# Firebase App
# ============================================================================

def get_firebase_app() -> firebase_admin.App:
    """
    Return the default Firebase app, initializing it on first use

    Credentials come from FIREBASE_CREDENTIALS_PATH (service-account JSON).
    When it is empty, Application Default Credentials are used
    (GOOGLE_APPLICATION_CREDENTIALS, gcloud login, or the hosting runtime).
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if settings.FIREBASE_CREDENTIALS_PATH:
        logger.info(f"Initializing Firebase with service account {settings.FIREBASE_CREDENTIALS_PATH}")
        cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
    else:
        logger.info("Initializing Firebase with application default credentials")
        cred = credentials.ApplicationDefault()

    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    return firebase_admin.initialize_app(cred, options)


# ============================================================================
# Firestore Client
# ============================================================================

_client = None


def get_firestore():
    """
    Get the shared Firestore client

    Usage:
        db = get_firestore()
        snapshot = db.collection("products").document(product_id).get()
    """
    global _client
    if _client is None:
        _client = firestore.client(app=get_firebase_app())
    return _client


def set_firestore(client) -> None:
    """Replace the shared client (operator scripts and tests)"""
    global _client
    _client = client


# ============================================================================
# Document helpers
# ============================================================================

def to_datetime(value: Any, default_now: bool = True) -> Optional[datetime]:
    """
    Coerce a stored timestamp into a datetime

    Firestore returns timestamps as datetime subclasses. Anything else
    (missing field, pending server timestamp, legacy string) becomes "now"
    or None depending on default_now.
    """
    if isinstance(value, datetime):
        return value
    return datetime.now(timezone.utc) if default_now else None


def snapshot_to_dict(
    snapshot,
    timestamp_fields: Iterable[str] = ("createdAt", "updatedAt"),
    optional_timestamp_fields: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Flatten a document snapshot into {id, ...fields}

    Fields in timestamp_fields default to now when missing; fields in
    optional_timestamp_fields default to None.
    """
    data = snapshot.to_dict() or {}
    for field in timestamp_fields:
        data[field] = to_datetime(data.get(field))
    for field in optional_timestamp_fields:
        data[field] = to_datetime(data.get(field), default_now=False)
    data["id"] = snapshot.id
    return data
