"""HTTP client for the SocioAI REST backend"""

from typing import Any, Dict, Optional

import requests

from ..auth.session_store import SessionStore
from ..utils.exceptions import BackendError, NetworkError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ApiClient:
    """
    Thin wrapper around a requests.Session.

    Attaches the stored bearer token to every request and turns transport
    failures into NetworkError and HTTP error statuses into BackendError.
    Nothing is retried and no timeout is applied unless one is configured.
    """

    def __init__(
        self,
        base_url: str,
        session_store: SessionStore,
        api_path: str = "/api",
        auth_path: str = "/auth",
        timeout: Optional[float] = None,
        http: Optional[Any] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self.api_path = "/" + api_path.strip("/")
        self.auth_path = "/" + auth_path.strip("/")
        self.timeout = timeout
        # Anything exposing requests.Session.request() works (tests pass a TestClient)
        self.http = http if http is not None else requests.Session()

    def _auth_headers(self) -> Dict[str, str]:
        token = self.session_store.get_token()
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """
        Make an HTTP request to the backend

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Absolute path on the backend, e.g. /api/categorias
            params: Query parameters
            json: JSON body

        Returns:
            Decoded JSON body, or None for an empty response

        Raises:
            NetworkError: If no HTTP response was received
            BackendError: If the backend answered with status >= 400
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        kwargs: Dict[str, Any] = {"headers": self._auth_headers()}
        if params:
            kwargs["params"] = params
        if json is not None:
            kwargs["json"] = json
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        logger.debug("Sending request to backend", method=method, path=path)
        try:
            response = self.http.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error("Request failed", method=method, path=path, error=str(e))
            raise NetworkError(f"Request failed: {str(e)}")

        logger.info(
            "Received response from backend",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error(
                "Backend returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise BackendError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise BackendError(
                f"Invalid JSON in response to {method} {path}",
                status_code=response.status_code,
            )

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("error", "message"):
                if body.get(key):
                    return str(body[key])
        return f"HTTP {response.status_code}"

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str, json: Any = None) -> Any:
        return self.request("DELETE", path, json=json)
