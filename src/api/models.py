"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    Uses the registration form's field names. Every field is optional:
    a missing value is validated as an empty string by the domain rules,
    so the client gets the domain's error message rather than a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    coname: str | None = Field(default=None, description="Company name")
    mail: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, alias="pass", description="Password (8-30 characters)")
    password_confirmation: str | None = Field(
        default=None, alias="pass2", description="Password confirmation"
    )

    def to_submission(self) -> dict[str, str | None]:
        """Map form fields to the domain's submission keys."""
        return {
            "name": self.name,
            "company_name": self.coname,
            "email": self.mail,
            "password": self.password,
            "password_confirmation": self.password_confirmation,
        }

    def masked(self) -> dict[str, str | None]:
        """Form fields as submitted, with password values hidden, for auditing."""
        data = self.model_dump(by_alias=True)
        for key in ("pass", "pass2"):
            if data.get(key):
                data[key] = "***"
        return data


# Domain submission key -> form field name, for error messages
FORM_FIELD_NAMES = {
    "name": "name",
    "company_name": "coname",
    "email": "mail",
    "password": "pass",
    "password_confirmation": "pass2",
}


class SuccessResponse(BaseModel):
    """Response envelope for a successful request."""

    response: bool = True
    data: str


class ErrorResponse(BaseModel):
    """Response envelope for a failed request."""

    response: bool = False
    error: str
