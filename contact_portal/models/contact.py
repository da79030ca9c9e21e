import uuid
from sqlalchemy import Column, Enum, String, Text

from contact_portal.constants.constants import ContactStatus
from contact_portal.models.base import Base, TimestampMixin


class Contact(Base, TimestampMixin):
    """Model for contact form submissions."""

    __tablename__ = "contacts"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    status = Column(Enum(ContactStatus), nullable=False, default=ContactStatus.pending, index=True)
