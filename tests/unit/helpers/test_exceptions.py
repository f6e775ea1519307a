"""Unit tests for navhub.helpers.exceptions module.

Tests error codes and the JSON envelopes each exception produces.
"""

import pytest

from navhub.helpers.dto.validation_dto import LAYOUT_PROFILE_NOT_FOUND, ValidationError
from navhub.helpers.exceptions import (
    ForbiddenError,
    InvalidIntervalError,
    NavhubError,
    NavigationValidationError,
    NotFoundError,
    PolicyNotFoundError,
    RegistrationRequestError,
    ReorderError,
    RouteRegistrationError,
    UnauthorizedError,
)


class TestNavhubError:
    @pytest.mark.unit
    def test_base_envelope(self) -> None:
        assert NavhubError("boom").to_dict() == {"error": "INTERNAL_ERROR", "message": "boom"}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error_type",
        [NavigationValidationError, RegistrationRequestError, RouteRegistrationError, NotFoundError, ReorderError],
    )
    def test_all_errors_share_base(self, error_type) -> None:
        assert issubclass(error_type, NavhubError)


class TestNavigationValidationError:
    @pytest.mark.unit
    def test_carries_validation_error_code(self) -> None:
        error = ValidationError(
            code=LAYOUT_PROFILE_NOT_FOUND,
            message="Layout profile 'x' not found",
            field="layout_profile",
            value="x",
            details={"available_profiles": ["a"]},
        )

        exc = NavigationValidationError(error)

        assert exc.code == LAYOUT_PROFILE_NOT_FOUND
        assert str(exc) == "Layout profile 'x' not found"
        assert exc.to_dict() == {
            "error": LAYOUT_PROFILE_NOT_FOUND,
            "message": "Layout profile 'x' not found",
            "field": "layout_profile",
            "value": "x",
            "details": {"available_profiles": ["a"]},
        }


class TestRegistrationErrors:
    @pytest.mark.unit
    def test_request_error_names_field(self) -> None:
        exc = RegistrationRequestError("routes must be a non-empty array", field="routes")

        assert exc.to_dict() == {
            "error": "VALIDATION_ERROR",
            "message": "routes must be a non-empty array",
            "field": "routes",
        }

    @pytest.mark.unit
    def test_route_error_lists_details(self) -> None:
        details = [{"index": 1, "route": "/x", "error": {"code": "VALIDATION_ERROR", "message": "bad"}}]

        body = RouteRegistrationError(details).to_dict()

        assert body["error"] == "VALIDATION_ERROR"
        assert body["message"] == "One or more route definitions are invalid"
        assert body["details"] == details


class TestOtherErrors:
    @pytest.mark.unit
    def test_policy_not_found_is_not_found(self) -> None:
        exc = PolicyNotFoundError()

        assert isinstance(exc, NotFoundError)
        assert exc.to_dict()["error"] == "NO_POLICY_FOUND"

    @pytest.mark.unit
    def test_invalid_interval_envelope(self) -> None:
        body = InvalidIntervalError("module_interval", 500).to_dict()

        assert body["error"] == "INVALID_INTERVAL_OR_RANGE"
        assert body["field"] == "module_interval"
        assert body["value"] == 500
        assert "between 1000 and 60000" in body["message"]

    @pytest.mark.unit
    def test_reorder_error_message_names_first_failure(self) -> None:
        exc = ReorderError({"a": "not found", "b": "timeout"})

        assert str(exc) == "Failed to reorder items: a: not found"
        assert exc.to_dict()["failures"] == {"a": "not found", "b": "timeout"}

    @pytest.mark.unit
    def test_auth_errors_expose_code_only(self) -> None:
        assert UnauthorizedError("no header").to_dict() == {"error": "UNAUTHORIZED"}
        assert ForbiddenError("no role").to_dict() == {"error": "FORBIDDEN"}
