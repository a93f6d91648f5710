from uuid import UUID

from pydantic import EmailStr, Field, field_validator
from zxcvbn import zxcvbn

from src.portfolio.schemas.base import CamelModel

# Minimum zxcvbn score (0-4 scale): 3 = "safely unguessable"
MIN_PASSWORD_SCORE = 3


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AdminRead(CamelModel):
    """Public profile of the authenticated admin."""

    id: UUID
    email: str
    name: str


class LoginResponse(CamelModel):
    token: str
    admin: AdminRead


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=8, max_length=100)

    @field_validator("new_password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        """Validate password strength using zxcvbn entropy estimation."""
        result = zxcvbn(v)
        score = result["score"]  # 0-4 scale

        if score < MIN_PASSWORD_SCORE:
            feedback = result.get("feedback", {})
            warning = feedback.get("warning", "")
            suggestions = feedback.get("suggestions", [])

            if warning:
                raise ValueError(f"Weak password: {warning}")
            elif suggestions:
                raise ValueError(f"Weak password: {suggestions[0]}")
            else:
                raise ValueError(
                    "Password is too weak. Use a longer password with a mix of characters."
                )

        return v
