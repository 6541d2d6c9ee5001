"""
Saved Address Domain Models

Each user may keep several delivery addresses; at most one is the default.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from app.domain.base import DocumentModel


class Address(DocumentModel):
    """Saved delivery address"""

    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""
    phone: str = ""
    is_default: bool = False
    label: Optional[str] = Field(None, description="Home, Work, Office...")
    created_at: datetime
    updated_at: datetime


class AddressCreate(DocumentModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    is_default: bool = False
    label: Optional[str] = None


class AddressUpdate(DocumentModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    state: Optional[str] = Field(None, min_length=1)
    zip_code: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    is_default: Optional[bool] = None
    label: Optional[str] = None
