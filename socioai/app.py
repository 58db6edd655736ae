"""Application wiring: settings, session, clients and page controllers"""

from typing import Any, Optional

from .api.auth_client import AuthClient
from .api.client import ApiClient
from .auth.guard import RouteGuard
from .auth.session_store import SessionStore
from .auth.storage import LocalStorage
from .services.categoria_service import CategoriaClient
from .services.lancamento_service import LancamentoClient
from .services.meta_service import MetaClient
from .services.report_service import ReportClient
from .services.user_service import RoleClient, UserClient
from .utils.config import Settings, config_manager
from .utils.logger import get_logger, setup_logger
from .views.auth_views import HomeController, LoginController, SignupController
from .views.base import Confirmer, Navigator, Notifier
from .views.categoria_view import CategoriaController
from .views.lancamento_view import LancamentoController
from .views.meta_view import MetaController
from .views.report_view import ReportController
from .views.user_view import UserController

logger = get_logger(__name__)


class SocioAIApp:
    """Builds one instance of every service and controller, sharing a single session store"""

    def __init__(self, settings: Optional[Settings] = None, http: Optional[Any] = None):
        self.settings = settings
        self.http = http
        self.session: Optional[SessionStore] = None
        self.api: Optional[ApiClient] = None
        self.guard: Optional[RouteGuard] = None
        self.controllers = {}

    def initialize(self, notifier: Notifier, navigator: Navigator, confirmer: Confirmer, configure_logging: bool = True):
        """Initialize the application"""
        if self.settings is None:
            self.settings = config_manager.load_settings()

        if configure_logging:
            setup_logger(
                log_level=self.settings.logging.level,
                log_format=self.settings.logging.format,
                file_path=self.settings.logging.file_path,
                max_bytes=self.settings.logging.max_bytes,
                backup_count=self.settings.logging.backup_count,
            )

        self.session = SessionStore(
            LocalStorage(self.settings.storage.path),
            token_key=self.settings.auth.token_key,
            username_key=self.settings.auth.username_key,
        )
        self.api = ApiClient(
            self.settings.api.base_url,
            self.session,
            api_path=self.settings.api.api_path,
            auth_path=self.settings.api.auth_path,
            timeout=self.settings.api.timeout,
            http=self.http,
        )
        self.guard = RouteGuard(
            self.session,
            navigator,
            check_expiry=self.settings.auth.guard_checks_expiry,
        )

        auth = AuthClient(self.api)
        categorias = CategoriaClient(self.api)
        metas = MetaClient(self.api)
        ports = {"navigator": navigator, "confirmer": confirmer}

        self.controllers = {
            "login": LoginController(auth, self.session, notifier, navigator),
            "signup": SignupController(auth, self.session, notifier, navigator),
            "home": HomeController(self.session, notifier, navigator=navigator),
            "categoria": CategoriaController(categorias, self.session, notifier, **ports),
            "lancamento": LancamentoController(LancamentoClient(self.api), metas, self.session, notifier, **ports),
            "meta": MetaController(metas, categorias, self.session, notifier, **ports),
            "user": UserController(UserClient(self.api), RoleClient(self.api), self.session, notifier, **ports),
            "relatorio": ReportController(ReportClient(self.api), self.session, notifier, **ports),
        }

        logger.info(
            "Application initialized",
            app_name=self.settings.app.name,
            version=self.settings.app.version,
            base_url=self.settings.api.base_url,
            authenticated=self.session.is_authenticated(),
        )
        return self

    def controller(self, view: str):
        return self.controllers[view]
