"""Tests for the ownership guard."""

from types import SimpleNamespace
from uuid import uuid4

import pytest

from bloglist.auth.ownership import (
    ALLOW,
    Decision,
    DenyReason,
    authorize_creation,
    authorize_mutation,
    same_user,
)


class TestAuthorizeMutation:
    """Checks run in order: authentication, existence, ownership."""

    def test_unauthenticated_is_denied(self) -> None:
        blog = SimpleNamespace(user_id=uuid4())
        decision = authorize_mutation(None, blog)
        assert decision == Decision(allowed=False, reason=DenyReason.UNAUTHENTICATED)
        assert decision.status_code == 401

    def test_unauthenticated_wins_over_missing_blog(self) -> None:
        assert authorize_mutation(None, None).reason == DenyReason.UNAUTHENTICATED

    def test_missing_blog_is_not_found(self) -> None:
        decision = authorize_mutation(uuid4(), None)
        assert decision.reason == DenyReason.NOT_FOUND
        assert decision.status_code == 404

    def test_non_owner_is_forbidden(self) -> None:
        blog = SimpleNamespace(user_id=uuid4())
        decision = authorize_mutation(uuid4(), blog)
        assert decision.reason == DenyReason.FORBIDDEN
        assert decision.status_code == 403

    def test_owner_is_allowed(self) -> None:
        owner_id = uuid4()
        decision = authorize_mutation(owner_id, SimpleNamespace(user_id=owner_id))
        assert decision is ALLOW
        assert decision.allowed
        assert decision.status_code is None

    @pytest.mark.parametrize(
        ("stored", "requesting"),
        [
            pytest.param("uuid", "str", id="uuid-owner-string-caller"),
            pytest.param("str", "uuid", id="string-owner-uuid-caller"),
        ],
    )
    def test_ids_compared_as_strings(self, stored: str, requesting: str) -> None:
        owner_id = uuid4()
        blog = SimpleNamespace(user_id=owner_id if stored == "uuid" else str(owner_id))
        caller = owner_id if requesting == "uuid" else str(owner_id)
        assert authorize_mutation(caller, blog).allowed


class TestAuthorizeCreation:
    def test_any_authenticated_user_may_create(self) -> None:
        assert authorize_creation(uuid4()) is ALLOW

    def test_unauthenticated_is_denied(self) -> None:
        assert authorize_creation(None).reason == DenyReason.UNAUTHENTICATED


def test_same_user_normalizes_types() -> None:
    user_id = uuid4()
    assert same_user(user_id, str(user_id))
    assert not same_user(user_id, uuid4())
