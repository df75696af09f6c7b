"""
Unit tests for API request/response models.

Tests Pydantic model validation for send_code, register, and login endpoints.
"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    SendCodeRequest,
)


class TestSendCodeRequest:
    """Tests for SendCodeRequest model."""

    def test_identifier_accepted(self) -> None:
        request = SendCodeRequest(identifier="arian@gmail.com")
        assert request.identifier == "arian@gmail.com"

    def test_format_not_checked_here(self) -> None:
        """Identifier syntax is the domain Validator's job."""
        assert SendCodeRequest(identifier="arian").identifier == "arian"

    @pytest.mark.parametrize("alias", ["email_address", "phone_number"])
    def test_historical_field_names(self, alias: str) -> None:
        request = SendCodeRequest.model_validate({alias: "09123231976"})
        assert request.identifier == "09123231976"

    def test_missing_identifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SendCodeRequest.model_validate({})


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_valid_register_request(self) -> None:
        request = RegisterRequest.model_validate(
            {"identifier": "arian@gmail.com", "name": "arian", "password": "idkkkkl", "code": 123456}
        )
        assert request.identifier == "arian@gmail.com"
        assert request.name == "arian"
        assert request.password == "idkkkkl"
        assert request.code == 123456

    def test_historical_email_payload(self) -> None:
        request = RegisterRequest.model_validate(
            {
                "name": "arian",
                "password": "idkkkkl",
                "email_address": "arian@gmail.com",
                "email_code": 123456,
            }
        )
        assert request.identifier == "arian@gmail.com"
        assert request.code == 123456

    def test_numeric_string_code_coerced(self) -> None:
        request = RegisterRequest.model_validate(
            {"identifier": "a@b.com", "name": "a", "password": "p", "code": "000042"}
        )
        assert request.code == 42

    @pytest.mark.parametrize("code", [-1, 2**32, "abc", 1.5])
    def test_bad_code_rejected(self, code: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest.model_validate(
                {"identifier": "a@b.com", "name": "a", "password": "p", "code": code}
            )
        assert "code" in str(exc_info.value)

    @pytest.mark.parametrize("missing", ["identifier", "name", "password", "code"])
    def test_missing_field_rejected(self, missing: str) -> None:
        payload = {"identifier": "a@b.com", "name": "a", "password": "p", "code": 1}
        del payload[missing]
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate(payload)


class TestLoginRequest:
    """Tests for LoginRequest model."""

    def test_valid_login_request(self) -> None:
        request = LoginRequest(identifier="arian@gmail.com", password="some_hard_password")
        assert request.password == "some_hard_password"

    def test_missing_password_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoginRequest.model_validate({"identifier": "arian@gmail.com"})


class TestErrorResponse:
    def test_valid_error_response(self) -> None:
        assert ErrorResponse(detail="wrong code").detail == "wrong code"
