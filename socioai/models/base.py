"""Shared pydantic configuration for backend payloads"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Record echoed by the backend. Wire names are camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Draft(ApiModel):
    """
    Editable copy of a record.

    Only fields that were explicitly set (in the constructor or by assignment)
    end up in the payload, so an unset field means "leave it unchanged".
    """

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
