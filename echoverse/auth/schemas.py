# echoverse/auth/schemas.py
# Payload schemas for the account routes. Aliases keep the camelCase wire names.

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserCreate(_Payload):
    username: str = Field(min_length=3)
    email: EmailStr
    password: str = Field(min_length=6, max_length=20)
    confirm_password: str = Field(alias="confirmPassword", min_length=6, max_length=20)

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info):
        if "password" in info.data and v != info.data["password"]:
            raise ValueError("Passwords do not match")
        return v


class UserLogin(_Payload):
    email: EmailStr
    password: str = Field(min_length=6)


class UserUpdate(_Payload):
    username: Optional[str] = Field(default=None, min_length=3)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=20)
    confirm_password: Optional[str] = Field(default=None, alias="confirmPassword", min_length=6, max_length=20)

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: Optional[str], info):
        password = info.data.get("password")
        if v and password and v != password:
            raise ValueError("Passwords do not match")
        return v


class PasswordReset(_Payload):
    email: EmailStr
    new_password: str = Field(alias="newPassword", min_length=6, max_length=20)
    confirm_password: str = Field(alias="confirmPassword", min_length=6, max_length=20)

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info):
        if "new_password" in info.data and v != info.data["new_password"]:
            raise ValueError("Passwords do not match")
        return v


def error_list(exc: ValidationError) -> List[Dict[str, Any]]:
    """JSON-safe view of a ValidationError: one {loc, msg, type} per problem."""
    return [
        {"loc": [str(p) for p in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False)
    ]
