"""Tests for domain models."""

from dataclasses import FrozenInstanceError

import pytest

from accessguard.domain.models import AccessResult, RejectionReason, Request, Verdict


class TestRequest:
    """Tests for the Request value."""

    def test_defaults(self):
        """A bare request has no identity and no permission."""
        request = Request()
        assert request.identity is None
        assert request.permitted is False

    def test_is_immutable(self, admin_request):
        """Requests cannot be mutated after construction."""
        with pytest.raises(FrozenInstanceError):
            admin_request.permitted = False  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("identity", "expected"),
        [("admin", True), ("", False), (None, False), (" ", True)],
    )
    def test_has_identity(self, identity, expected):
        """Only None and the empty string count as missing."""
        assert Request(identity=identity).has_identity is expected

    def test_no_validation_at_construction(self):
        """Construction accepts values the chain will later reject."""
        request = Request(identity="", permitted=False)
        assert request.identity == ""


class TestAccessResult:
    """Tests for the typed chain outcome."""

    def test_grant(self, admin_request):
        result = AccessResult.grant(admin_request)
        assert result.verdict is Verdict.GRANTED
        assert result.granted is True
        assert result.rejected is False
        assert result.reason is None
        assert result.identity == "admin"

    def test_reject_defaults_feedback_to_reason(self, unprivileged_request):
        """Rejections without explicit feedback describe the reason."""
        result = AccessResult.reject(
            unprivileged_request, RejectionReason.INSUFFICIENT_PERMISSION
        )
        assert result.rejected is True
        assert result.reason is RejectionReason.INSUFFICIENT_PERMISSION
        assert result.feedback == "insufficient permission"

    def test_reject_keeps_custom_feedback(self, admin_request):
        result = AccessResult.reject(
            admin_request, RejectionReason.DENIED, "account locked"
        )
        assert result.feedback == "account locked"

    def test_visited_prepends_to_trail(self, admin_request):
        """Trails build up from the innermost link outwards."""
        result = AccessResult.grant(admin_request).visited("permission").visited("login")
        assert result.trail == ("login", "permission")

    def test_visited_returns_new_instance(self, admin_request):
        original = AccessResult.grant(admin_request)
        updated = original.visited("login")
        assert original.trail == ()
        assert updated is not original
        assert updated.verdict is original.verdict

    def test_rejection_without_reason_refused(self):
        """A rejection always says why."""
        with pytest.raises(ValueError, match="must carry a rejection reason"):
            AccessResult(verdict=Verdict.REJECTED, identity="x")

    def test_grant_with_reason_refused(self):
        """A grant never carries a reason."""
        with pytest.raises(ValueError, match="cannot carry a rejection reason"):
            AccessResult(
                verdict=Verdict.GRANTED,
                identity="x",
                reason=RejectionReason.DENIED,
            )

    def test_visited_preserves_rejection(self, unprivileged_request):
        rejected = AccessResult.reject(
            unprivileged_request, RejectionReason.INSUFFICIENT_PERMISSION
        ).visited("permission")
        assert rejected.reason is RejectionReason.INSUFFICIENT_PERMISSION
        assert rejected.trail == ("permission",)
