"""User client"""

from typing import Any, Iterable, List

from ..api.client import ApiClient
from ..models.user import Role, User, UserDraft
from ..utils.logger import get_logger
from .resource_client import ResourceClient, parse_records, path_segment

logger = get_logger(__name__)


class UserClient(ResourceClient[User, UserDraft]):
    """
    Users are looked up and updated by username rather than id, and an empty
    password is dropped from the payload so the backend keeps the current one.
    """

    endpoint = "users"
    record_type = User

    def get_by_username(self, username: str) -> User:
        return self._parse(self.api.get(f"{self.base_path}/username/{path_segment(username)}"))

    def list_by_owner(self, identity: str) -> List[User]:
        """A user owns exactly one user record: its own"""
        return [self.get_by_username(identity)]

    def update(self, username: str, draft: UserDraft) -> User:
        payload = draft.to_payload()
        if not payload.get("password"):
            payload.pop("password", None)
        record = self._parse(self.api.put(f"{self.base_path}/{path_segment(username)}", json=payload))
        logger.info("User updated", username=username, password_changed="password" in payload)
        return record

    def delete_batch(self, record_ids: Iterable[Any]) -> None:
        ids = list(record_ids)
        self.api.delete(f"{self.base_path}/batch", json=ids)
        logger.info("Users deleted in batch", count=len(ids))


class RoleClient:
    """Read-only lookup of /roles, used to label users"""

    def __init__(self, api: ApiClient):
        self.api = api

    def list_all(self) -> List[Role]:
        return parse_records(Role, self.api.get(f"{self.api.api_path}/roles"))
