"""User data models"""

from typing import Optional

from pydantic import AliasChoices, Field

from .base import ApiModel, Draft


class User(ApiModel):
    """User as returned by /users. The id is a UUID string."""
    id: str
    username: str
    # Opaque role identifier; the backend has not fixed role semantics yet
    role_id: Optional[int] = Field(default=None, validation_alias=AliasChoices("roleId", "role"))


class UserDraft(Draft):
    username: Optional[str] = None
    password: Optional[str] = None
    role_id: Optional[int] = None

    @classmethod
    def from_record(cls, record: User) -> "UserDraft":
        # Password starts empty: saving without typing one keeps the old password
        values = {"username": record.username, "password": ""}
        if record.role_id is not None:
            values["role_id"] = record.role_id
        return cls(**values)


class Role(ApiModel):
    """Entry of /roles; the description is free text such as "ADMIN" or "USER"."""
    id: int
    description: str
