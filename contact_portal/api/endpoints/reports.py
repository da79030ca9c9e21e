"""Report router: aggregate counts across users and contacts."""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_portal.constants.constants import ContactStatus
from contact_portal.core.database import aget_db
from contact_portal.core.errors import server_error
from contact_portal.models.contact import Contact
from contact_portal.models.user import User
from contact_portal.schemas.reportSchema import ReportResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reports",
    tags=["reports"]
)


@router.get("", response_model=ReportResponse)
async def get_report(db: AsyncSession = Depends(aget_db)):
    """
    Snapshot of total users, total contacts and contacts per status.
    The four counts are separate queries and are not taken atomically.
    """
    try:
        total_users = await db.scalar(select(func.count()).select_from(User))
        total_contacts = await db.scalar(select(func.count()).select_from(Contact))
        completed_contacts = await db.scalar(
            select(func.count()).select_from(Contact).where(Contact.status == ContactStatus.completed)
        )
        pending_contacts = await db.scalar(
            select(func.count()).select_from(Contact).where(Contact.status == ContactStatus.pending)
        )

        return {
            "totalUsers": total_users,
            "totalContacts": total_contacts,
            "completedContacts": completed_contacts,
            "pendingContacts": pending_contacts,
        }
    except Exception as e:
        logger.error(f"Error fetching report data: {e}")
        return server_error("Failed to fetch report data", e)
