"""
Unit tests for API request and response models.
"""

from src.api.models import ErrorResponse, RegisterRequest, SuccessResponse


class TestRegisterRequest:
    """Tests for RegisterRequest."""

    def test_accepts_form_field_names(self) -> None:
        request = RegisterRequest.model_validate(
            {"name": "Ann", "coname": "Acme", "mail": "ann@acme.com", "pass": "pw", "pass2": "pw2"}
        )

        assert request.password == "pw"
        assert request.password_confirmation == "pw2"

    def test_all_fields_optional(self) -> None:
        request = RegisterRequest.model_validate({})

        assert request.to_submission() == {
            "name": None,
            "company_name": None,
            "email": None,
            "password": None,
            "password_confirmation": None,
        }

    def test_to_submission_maps_keys(self) -> None:
        request = RegisterRequest.model_validate(
            {"name": "Ann", "coname": "Acme", "mail": "ann@acme.com", "pass": "pw", "pass2": "pw"}
        )

        assert request.to_submission() == {
            "name": "Ann",
            "company_name": "Acme",
            "email": "ann@acme.com",
            "password": "pw",
            "password_confirmation": "pw",
        }

    def test_masked_hides_passwords(self) -> None:
        request = RegisterRequest.model_validate(
            {"name": "Ann", "mail": "ann@acme.com", "pass": "password1", "pass2": "password1"}
        )

        masked = request.masked()

        assert masked["pass"] == "***"
        assert masked["pass2"] == "***"
        assert masked["mail"] == "ann@acme.com"
        assert masked["coname"] is None

    def test_masked_keeps_missing_passwords_empty(self) -> None:
        masked = RegisterRequest.model_validate({"pass": ""}).masked()

        assert masked["pass"] == ""
        assert masked["pass2"] is None


class TestResponseEnvelopes:
    """Tests for response envelope models."""

    def test_success_envelope(self) -> None:
        assert SuccessResponse(data="ok").model_dump() == {"response": True, "data": "ok"}

    def test_error_envelope(self) -> None:
        assert ErrorResponse(error="bad").model_dump() == {"response": False, "error": "bad"}
