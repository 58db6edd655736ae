"""Login and registration against /auth"""

from ..utils.exceptions import BackendError
from ..utils.logger import get_logger
from .client import ApiClient

logger = get_logger(__name__)


class AuthClient:
    """Exchanges credentials for a bearer token and stores it in the session"""

    def __init__(self, api: ApiClient):
        self.api = api

    def _authenticate(self, endpoint: str, email: str, password: str) -> str:
        body = self.api.post(f"{self.api.auth_path}/{endpoint}", json={"email": email, "password": password})
        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise BackendError(f"No token in /{endpoint} response")
        self.api.session_store.set_token(token)
        logger.info("Authenticated", endpoint=endpoint, username=self.api.session_store.get_identity())
        return token

    def login(self, email: str, password: str) -> str:
        return self._authenticate("login", email, password)

    def register(self, email: str, password: str) -> str:
        """Create the account; the returned token logs the user in straight away"""
        return self._authenticate("register", email, password)

    def logout(self) -> None:
        self.api.session_store.clear()
