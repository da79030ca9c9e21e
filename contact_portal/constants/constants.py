"""Constants for contact statuses and authentication."""

from datetime import timedelta
from enum import Enum


class ContactStatus(str, Enum):
    """Lifecycle status of a contact form submission."""

    pending = "Pending"
    completed = "Completed"


# Login tokens are valid for a fixed hour and are not configurable.
ACCESS_TOKEN_EXPIRE = timedelta(hours=1)

BCRYPT_ROUNDS = 10

# bcrypt only reads this many bytes of a password; longer ones are truncated.
BCRYPT_MAX_BYTES = 72
