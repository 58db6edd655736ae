"""Client-side session and route guarding"""

from .storage import LocalStorage
from .session_store import SessionStore, decode_claims
from .guard import RouteGuard

__all__ = ["LocalStorage", "SessionStore", "decode_claims", "RouteGuard"]
