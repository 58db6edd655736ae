"""Generic CRUD access to one backend resource collection"""

from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from ..api.client import ApiClient
from ..models.base import ApiModel, Draft
from ..utils.exceptions import BackendError
from ..utils.logger import get_logger

logger = get_logger(__name__)

R = TypeVar("R", bound=ApiModel)
D = TypeVar("D", bound=Draft)
M = TypeVar("M", bound=ApiModel)


def path_segment(value: str) -> str:
    """Percent-encode a username so it stays a single path segment"""
    return quote(value, safe="@")


def parse_record(model: Type[M], data: Any) -> M:
    """Validate one backend record; a malformed record is a BackendError"""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        logger.error("Backend returned a malformed record", model=model.__name__, error=str(e))
        raise BackendError(f"Invalid {model.__name__} in backend response")


def parse_records(model: Type[M], data: Any) -> List[M]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise BackendError(f"Expected a list of {model.__name__} in backend response")
    return [parse_record(model, item) for item in data]


class ResourceClient(Generic[R, D]):
    """
    CRUD for /api/<endpoint>.

    Subclasses set the endpoint and record type. Records are always parsed
    from the backend's echo; the draft that was sent is never trusted as the
    resulting state.
    """

    endpoint: str = ""
    record_type: Type[R]
    # Resources whose DTO carries the owner's username on create
    owner_field: Optional[str] = None

    def __init__(self, api: ApiClient):
        self.api = api

    @property
    def base_path(self) -> str:
        return f"{self.api.api_path}/{self.endpoint}"

    def _parse(self, data: Any) -> R:
        return parse_record(self.record_type, data)

    def _parse_list(self, data: Any) -> List[R]:
        return parse_records(self.record_type, data)

    def _create_payload(self, draft: D, identity: Optional[str]) -> dict:
        payload = draft.to_payload()
        if self.owner_field and identity:
            payload[self.owner_field] = identity
        return payload

    def list_all(self) -> List[R]:
        """Unscoped listing. Views use list_by_owner instead."""
        return self._parse_list(self.api.get(self.base_path))

    def list_by_owner(self, identity: str) -> List[R]:
        return self._parse_list(self.api.get(f"{self.base_path}/u/{path_segment(identity)}"))

    def get(self, record_id: Any) -> R:
        return self._parse(self.api.get(f"{self.base_path}/{record_id}"))

    def create(self, draft: D, identity: Optional[str] = None) -> R:
        record = self._parse(self.api.post(self.base_path, json=self._create_payload(draft, identity)))
        logger.info("Record created", resource=self.endpoint, record_id=getattr(record, "id", None))
        return record

    def update(self, record_id: Any, draft: D) -> R:
        """Send only the fields set on the draft"""
        record = self._parse(self.api.put(f"{self.base_path}/{record_id}", json=draft.to_payload()))
        logger.info("Record updated", resource=self.endpoint, record_id=record_id)
        return record

    def delete(self, record_id: Any) -> None:
        self.api.delete(f"{self.base_path}/{record_id}")
        logger.info("Record deleted", resource=self.endpoint, record_id=record_id)


class BatchMixin:
    """POST/DELETE /batch support, for the resources whose backend exposes it"""

    def create_batch(self, drafts: Iterable[D], identity: Optional[str] = None) -> List[R]:
        payload = [self._create_payload(draft, identity) for draft in drafts]
        records = self._parse_list(self.api.post(f"{self.base_path}/batch", json=payload))
        logger.info("Records created in batch", resource=self.endpoint, count=len(records))
        return records

    def delete_batch(self, record_ids: Iterable[Any]) -> None:
        ids = list(record_ids)
        self.api.delete(f"{self.base_path}/batch", json=ids)
        logger.info("Records deleted in batch", resource=self.endpoint, count=len(ids))
