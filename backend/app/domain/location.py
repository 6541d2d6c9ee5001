"""
Service Location Domain Models

A service location is a delivery hub with a coverage radius.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from app.domain.base import DocumentModel


class Coordinates(DocumentModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class ServiceLocation(DocumentModel):
    """Service location read model"""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    address: str = ""
    coordinates: Optional[Coordinates] = None
    radius_km: float = 0
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class LocationCreate(DocumentModel):
    name: str = Field(..., min_length=1, max_length=100)
    address: str = Field(..., min_length=1, max_length=200)
    coordinates: Coordinates
    radius_km: float = Field(..., ge=0.1, le=100)
    is_active: bool


class LocationUpdate(DocumentModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = Field(None, min_length=1, max_length=200)
    coordinates: Optional[Coordinates] = None
    radius_km: Optional[float] = Field(None, ge=0.1, le=100)
    is_active: Optional[bool] = None
