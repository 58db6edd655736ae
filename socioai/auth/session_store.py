"""
Session store: owns the bearer token and derives identity and expiry from it.

The token lives in LocalStorage under a fixed key and is re-read on every
call. Decoding is lazy and never raises: an unreadable token is the same as
no token.
"""

from __future__ import annotations

import base64
import binascii
import json
import time
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from ..models.session import Claims
from ..utils.exceptions import AuthError
from ..utils.logger import get_logger
from .storage import LocalStorage

logger = get_logger(__name__)

TOKEN_KEY = "auth-token"
USERNAME_KEY = "username"


def decode_claims(token: str) -> Optional[Claims]:
    """Decode the payload segment of a JWT without verifying its signature"""
    segments = token.split(".")
    if len(segments) != 3:
        logger.warning("Token is not a three-part JWT", segments=len(segments))
        return None

    payload = segments[1]
    # JWTs strip base64 padding
    payload += "=" * (-len(payload) % 4)
    try:
        raw = base64.urlsafe_b64decode(payload.encode("ascii"))
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        logger.warning("Failed to decode JWT payload", error=str(e))
        return None

    if not isinstance(data, dict):
        logger.warning("JWT payload is not an object", payload_type=type(data).__name__)
        return None
    try:
        return Claims(**data)
    except PydanticValidationError as e:
        logger.warning("JWT payload has invalid claims", error=str(e))
        return None


class SessionStore:
    """Token persistence plus derived identity, expiry and authentication state"""

    def __init__(
        self,
        storage: LocalStorage,
        token_key: str = TOKEN_KEY,
        username_key: str = USERNAME_KEY,
        clock: Callable[[], float] = time.time,
    ):
        self.storage = storage
        self.token_key = token_key
        self.username_key = username_key
        self.clock = clock

    def set_token(self, token: str) -> None:
        """Persist the token, replacing any previous one. No validation."""
        self.storage.set_item(self.token_key, token)
        claims = decode_claims(token)
        if claims is not None and claims.sub:
            self.storage.set_item(self.username_key, claims.sub)
        else:
            self.storage.remove_item(self.username_key)

    def get_token(self) -> Optional[str]:
        return self.storage.get_item(self.token_key) or None

    def has_token(self) -> bool:
        return self.get_token() is not None

    def get_claims(self) -> Optional[Claims]:
        token = self.get_token()
        if token is None:
            return None
        return decode_claims(token)

    def is_expired(self) -> bool:
        """Fail-closed: no claims or no exp counts as expired"""
        claims = self.get_claims()
        if claims is None or claims.exp is None:
            return True
        return claims.exp <= self.clock()

    def is_authenticated(self) -> bool:
        if not self.has_token():
            return False
        return not self.is_expired()

    def get_identity(self) -> Optional[str]:
        claims = self.get_claims()
        if claims is None:
            return None
        return claims.sub or None

    def require_identity(self) -> str:
        identity = self.get_identity()
        if identity is None:
            raise AuthError("Usuário não autenticado")
        return identity

    def get_stored_username(self) -> Optional[str]:
        """Denormalized username key, for display only"""
        return self.storage.get_item(self.username_key)

    def clear(self) -> None:
        self.storage.remove_item(self.token_key)
        self.storage.remove_item(self.username_key)
        logger.info("Session cleared")
