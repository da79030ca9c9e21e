from pydantic import BaseModel


class ReportResponse(BaseModel):
    """Aggregate counts across users and contacts."""
    totalUsers: int
    totalContacts: int
    completedContacts: int
    pendingContacts: int
