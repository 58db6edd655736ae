"""Local form checks for login and signup"""

import re
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

from ..utils.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6

# Exactly one "@" with something on both sides
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")

F = TypeVar("F", bound=BaseModel)


class LoginForm(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("email_empty", "O campo de email não pode estar vazio.")
        if not EMAIL_PATTERN.match(value):
            raise PydanticCustomError("email_format", "O email precisa conter o caractere '@'!")
        return value

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "password_short",
                "A senha deve ter no mínimo {min_length} caracteres",
                {"min_length": MIN_PASSWORD_LENGTH},
            )
        return value


class SignupForm(LoginForm):
    password_confirm: str

    @model_validator(mode="after")
    def _check_passwords_match(self) -> "SignupForm":
        if self.password != self.password_confirm:
            raise PydanticCustomError("password_mismatch", "As senhas não coincidem!")
        return self


def from_pydantic(error: PydanticValidationError) -> ValidationError:
    return ValidationError([item["msg"] for item in error.errors()])


def validate_form(form_type: Type[F], **values) -> F:
    """Build a form model, raising our ValidationError instead of pydantic's"""
    try:
        return form_type(**values)
    except PydanticValidationError as e:
        raise from_pydantic(e) from e
