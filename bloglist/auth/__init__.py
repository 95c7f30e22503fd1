"""Authorization module."""

from bloglist.auth.ownership import (
    ALLOW,
    STATUS_FOR_REASON,
    Decision,
    DenyReason,
    authorize_creation,
    authorize_mutation,
    same_user,
)

__all__ = [
    "ALLOW",
    "STATUS_FOR_REASON",
    "Decision",
    "DenyReason",
    "authorize_creation",
    "authorize_mutation",
    "same_user",
]
