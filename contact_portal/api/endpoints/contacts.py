"""Contact form router: submission, listing, status tracking and edits."""

import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_portal.constants.constants import ContactStatus
from contact_portal.core.database import aget_db
from contact_portal.core.errors import not_found, server_error
from contact_portal.models.base import parse_record_id
from contact_portal.models.contact import Contact
from contact_portal.schemas.contactSchema import (
    ContactCountResponse,
    ContactCreatedResponse,
    ContactRequest,
    ContactResponse,
    ContactStatusRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contacts"])


@router.post("/contact", response_model=ContactCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(payload: ContactRequest, db: AsyncSession = Depends(aget_db)):
    """Save a contact form submission. New contacts always start as Pending."""
    try:
        contact = Contact(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            message=payload.message,
            status=ContactStatus.pending,
        )
        db.add(contact)
        await db.commit()
        return {"message": "Contact saved successfully!", "id": contact.id}
    except Exception as e:
        await db.rollback()
        logger.error(f"Failed to save contact: {e}")
        return server_error("Failed to save contact", e)


@router.get("/contacts", response_model=List[ContactResponse])
async def list_contacts(db: AsyncSession = Depends(aget_db)):
    try:
        result = await db.execute(select(Contact))
        return result.scalars().all()
    except Exception as e:
        logger.error(f"Error fetching contacts: {e}")
        return server_error("Failed to fetch contacts", e)


@router.get("/contacts/count", response_model=ContactCountResponse)
async def count_contacts(db: AsyncSession = Depends(aget_db)):
    try:
        count = await db.scalar(select(func.count()).select_from(Contact))
        return {"totalContacts": count}
    except Exception as e:
        logger.error(f"Error fetching contact count: {e}")
        return server_error("Failed to fetch contact count", e)


async def _contacts_with_status(db: AsyncSession, contact_status: ContactStatus) -> List[Contact]:
    result = await db.execute(select(Contact).where(Contact.status == contact_status))
    return list(result.scalars().all())


@router.get("/contacts/completed", response_model=List[ContactResponse])
async def list_completed_contacts(db: AsyncSession = Depends(aget_db)):
    try:
        return await _contacts_with_status(db, ContactStatus.completed)
    except Exception as e:
        logger.error(f"Error fetching completed contacts: {e}")
        return server_error("Failed to fetch completed contacts", e)


@router.get("/contacts/pending", response_model=List[ContactResponse])
async def list_pending_contacts(db: AsyncSession = Depends(aget_db)):
    try:
        return await _contacts_with_status(db, ContactStatus.pending)
    except Exception as e:
        logger.error(f"Error fetching pending contacts: {e}")
        return server_error("Failed to fetch pending contacts", e)


@router.get("/contacts/{contact_id}", response_model=ContactResponse)
async def get_contact(contact_id: str, db: AsyncSession = Depends(aget_db)):
    try:
        contact = await db.get(Contact, parse_record_id(contact_id))
        if not contact:
            return not_found("Contact")
        return contact
    except Exception as e:
        logger.error(f"Error fetching contact {contact_id}: {e}")
        return server_error("Failed to fetch contact", e)


@router.put("/contacts/{contact_id}")
async def update_contact(
    contact_id: str,
    payload: ContactRequest,
    db: AsyncSession = Depends(aget_db)
):
    """
    Update name, email, phone and message. Fields left out of the body keep
    their stored values; an explicit null on a required field fails on write.
    """
    try:
        contact = await db.get(Contact, parse_record_id(contact_id))
        if not contact:
            return not_found("Contact")

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(contact, field, value)

        await db.commit()
        await db.refresh(contact)
        return {
            "message": "Contact updated successfully",
            "updatedContact": ContactResponse.model_validate(contact),
        }
    except Exception as e:
        await db.rollback()
        logger.error(f"Error updating contact {contact_id}: {e}")
        return server_error("Failed to update contact", e)


@router.put("/contacts/{contact_id}/status")
async def update_contact_status(
    contact_id: str,
    payload: ContactStatusRequest,
    db: AsyncSession = Depends(aget_db)
):
    """Set the status only. Any transition between Pending and Completed is allowed."""
    try:
        contact = await db.get(Contact, parse_record_id(contact_id))
        if not contact:
            return not_found("Contact")

        contact.status = payload.status

        await db.commit()
        await db.refresh(contact)
        return {
            "message": "Status updated successfully",
            "updatedContact": ContactResponse.model_validate(contact),
        }
    except Exception as e:
        await db.rollback()
        logger.error(f"Error updating status of contact {contact_id}: {e}")
        return server_error("Failed to update status", e)


@router.delete("/contacts/{contact_id}")
async def delete_contact(contact_id: str, db: AsyncSession = Depends(aget_db)):
    try:
        contact = await db.get(Contact, parse_record_id(contact_id))
        if not contact:
            return not_found("Contact")

        await db.delete(contact)
        await db.commit()
        return {"message": "Contact deleted successfully"}
    except Exception as e:
        await db.rollback()
        logger.error(f"Error deleting contact {contact_id}: {e}")
        return server_error("Failed to delete contact", e)
