from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum


class IntegrationType(str, Enum):
    INDEED = "indeed"
    LINKEDIN = "linkedin"


class Integration(BaseModel):
    """Row of the user_integrations table"""
    id: str
    user_id: str
    type: IntegrationType
    access_token: str
    refresh_token: Optional[str] = None
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    last_synced_at: Optional[datetime] = None
    is_active: bool = True

    model_config = {"extra": "ignore"}


class ExternalJobApplication(BaseModel):
    """Job application pulled from an external platform"""
    external_id: str
    platform: IntegrationType
    company: str
    position: str
    location: Optional[str] = None
    url: Optional[str] = None
    applied_date: datetime
    status: str


class SyncResult(BaseModel):
    success: bool
    imported: int
    message: str
