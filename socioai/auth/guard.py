"""Route guard for views that need a session"""

from typing import Iterable, Optional, Protocol, Set

from ..utils.logger import get_logger
from .session_store import SessionStore

logger = get_logger(__name__)

LOGIN_VIEW = "login"

PROTECTED_VIEWS = frozenset({"home", "categoria", "lancamento", "meta", "user", "relatorio"})


class Navigator(Protocol):
    def navigate(self, view: str) -> None:
        ...


class RouteGuard:
    """
    Synchronous gate evaluated before entering a protected view.

    By default only token *presence* is checked; an expired token still passes
    and the backend rejects the following calls. Set check_expiry to require a
    valid, unexpired session instead.
    """

    def __init__(
        self,
        session: SessionStore,
        navigator: Navigator,
        protected: Optional[Iterable[str]] = None,
        check_expiry: bool = False,
    ):
        self.session = session
        self.navigator = navigator
        self.protected: Set[str] = set(PROTECTED_VIEWS if protected is None else protected)
        self.check_expiry = check_expiry

    def protect(self, view: str) -> None:
        self.protected.add(view)

    def can_activate(self) -> bool:
        if self.check_expiry:
            allowed = self.session.is_authenticated()
        else:
            allowed = self.session.has_token()
        if allowed:
            return True
        logger.info("Guard denied entry, redirecting to login")
        self.navigator.navigate(LOGIN_VIEW)
        return False

    def can_enter(self, view: str) -> bool:
        if view not in self.protected:
            return True
        return self.can_activate()
