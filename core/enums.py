"""
Shared Enumerations.
"""

from enum import Enum


class UpdateScope(str, Enum):
    """Which part of an issue an update event touched."""
    TITLE = "TITLE"
    DESCRIPTION = "DESCRIPTION"
    STATUS = "STATUS"
    COMMENT = "COMMENT"


# Update fields in the order their scopes are reported
FIELD_UPDATE_SCOPES = (
    ("title", UpdateScope.TITLE),
    ("description", UpdateScope.DESCRIPTION),
    ("status", UpdateScope.STATUS),
)
