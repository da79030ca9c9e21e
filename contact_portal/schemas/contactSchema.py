from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from contact_portal.constants.constants import ContactStatus


class ContactRequest(BaseModel):
    """Request schema for contact form submission and updates."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


class ContactStatusRequest(BaseModel):
    """Schema for a status-only update."""
    status: Optional[ContactStatus] = None


class ContactCreatedResponse(BaseModel):
    """Response schema for contact form submission."""
    message: str
    id: str


class ContactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    message: str
    status: ContactStatus
    created_at: datetime
    updated_at: datetime


class ContactCountResponse(BaseModel):
    totalContacts: int
