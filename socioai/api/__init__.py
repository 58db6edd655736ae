"""Backend HTTP access"""

from .client import ApiClient
from .auth_client import AuthClient

__all__ = ["ApiClient", "AuthClient"]
