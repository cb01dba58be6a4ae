"""Unit tests for domain error to HTTP translation."""

from meet.domain.error import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    TransientError,
    ValidationError,
)
from meet.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    def test_status_codes(self):
        cases = [
            (ValidationError("bad"), 400),
            (AuthorizationError("invite", "1", "2", "accept"), 403),
            (NotFoundError("Invite", "1"), 404),
            (ConflictError("invite not pending", "Invite", "1", "declined"), 409),
            (TransientError("down"), 503),
        ]

        for error, expected in cases:
            assert to_http_exception(error).status_code == expected

    def test_conflict_detail_carries_current_state(self):
        error = ConflictError("invite not pending", "Invite", "abc", "accepted")

        exc = to_http_exception(error)

        assert exc.detail == {
            "error": "ConflictError",
            "message": "invite not pending",
            "resource": "Invite",
            "resource_id": "abc",
            "current_state": "accepted",
        }

    def test_transient_asks_to_retry(self):
        exc = to_http_exception(TransientError("Storage temporarily unavailable"))

        assert exc.headers == {"Retry-After": "1"}
        assert "current_state" not in exc.detail
