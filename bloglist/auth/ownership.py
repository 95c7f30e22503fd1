"""
Ownership-based authorization for blog mutations.

Only the user who created a blog may update or delete it. The guard does not
raise: it returns a :class:`Decision` that the request-handling layer maps to
an HTTP response. Checks run in a fixed order so that a missing blog reports
"not found" before any ownership information is compared.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol
from uuid import UUID

from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
)


class DenyReason(StrEnum):
    """Why a mutation was refused."""

    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


STATUS_FOR_REASON: dict[DenyReason, int] = {
    DenyReason.UNAUTHENTICATED: HTTP_401_UNAUTHORIZED,
    DenyReason.NOT_FOUND: HTTP_404_NOT_FOUND,
    DenyReason.FORBIDDEN: HTTP_403_FORBIDDEN,
}


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of an authorization check."""

    allowed: bool
    reason: DenyReason | None = None

    @property
    def status_code(self) -> int | None:
        """HTTP status for a denial, None when allowed."""
        return STATUS_FOR_REASON[self.reason] if self.reason else None


ALLOW = Decision(allowed=True)


def deny(reason: DenyReason) -> Decision:
    return Decision(allowed=False, reason=reason)


class OwnedRecord(Protocol):
    """Anything carrying the id of the user that owns it."""

    @property
    def user_id(self) -> UUID | str: ...


type UserId = UUID | str


def same_user(left: UserId, right: UserId) -> bool:
    """Compare user ids that may arrive as UUIDs or strings."""
    return str(left) == str(right)


def authorize_creation(requesting_user_id: UserId | None) -> Decision:
    """
    Decide whether a caller may create a blog.

    Any authenticated user may create; there is no ownership to check.

    Args:
        requesting_user_id: Id resolved from the bearer token, or None

    Returns:
        Decision: ALLOW or DENY(unauthenticated)
    """
    if requesting_user_id is None:
        return deny(DenyReason.UNAUTHENTICATED)
    return ALLOW


def authorize_mutation(
    requesting_user_id: UserId | None,
    blog: OwnedRecord | None,
) -> Decision:
    """
    Decide whether a caller may update or delete a blog.

    Args:
        requesting_user_id: Id resolved from the bearer token, or None
        blog: The target blog, or None if it does not exist

    Returns:
        Decision: ALLOW, or DENY with unauthenticated, not_found or forbidden
            (checked in that order)
    """
    if requesting_user_id is None:
        return deny(DenyReason.UNAUTHENTICATED)
    if blog is None:
        return deny(DenyReason.NOT_FOUND)
    if not same_user(blog.user_id, requesting_user_id):
        return deny(DenyReason.FORBIDDEN)
    return ALLOW
