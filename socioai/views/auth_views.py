"""Login, signup and home pages"""

from typing import Optional

from ..api.auth_client import AuthClient
from ..auth.session_store import SessionStore
from ..utils.exceptions import SocioAIError, ValidationError
from ..utils.logger import get_logger
from .base import Navigator, Notifier, ViewController
from .forms import LoginForm, SignupForm, validate_form

logger = get_logger(__name__)

GENERIC_ERROR = "Erro inesperado! Tente novamente mais tarde"
DEFAULT_DISPLAY_NAME = "Usuário"


class LoginController(ViewController):
    success_message = "Login feito com sucesso!"

    def __init__(self, auth: AuthClient, session: SessionStore, notifier: Notifier, navigator: Navigator):
        super().__init__(session, notifier, navigator=navigator)
        self.auth = auth

    def _reject(self, error: ValidationError) -> bool:
        logger.info("Form rejected locally", view=type(self).__name__, errors=error.messages)
        for message in error.messages:
            self.notifier.error(message)
        return False

    def submit(self, email: str, password: str) -> bool:
        try:
            form = validate_form(LoginForm, email=email, password=password)
        except ValidationError as e:
            return self._reject(e)
        try:
            self.auth.login(form.email, form.password)
        except SocioAIError as e:
            # Bad credentials and transport failures look the same to the user
            logger.error("Login failed", error=str(e), error_type=type(e).__name__)
            self.notifier.error(GENERIC_ERROR)
            return False
        self.notifier.success(self.success_message)
        self.navigator.navigate("home")
        return True

    def go_to_signup(self) -> None:
        self.navigator.navigate("signup")


class SignupController(LoginController):
    success_message = "Cadastro feito com sucesso!"

    def submit(self, email: str, password: str, password_confirm: Optional[str] = None) -> bool:
        try:
            form = validate_form(
                SignupForm,
                email=email,
                password=password,
                password_confirm=password_confirm if password_confirm is not None else "",
            )
        except ValidationError as e:
            return self._reject(e)
        try:
            self.auth.register(form.email, form.password)
        except SocioAIError as e:
            logger.error("Signup failed", error=str(e), error_type=type(e).__name__)
            self.notifier.error(GENERIC_ERROR)
            return False
        self.notifier.success(self.success_message)
        self.navigator.navigate("home")
        return True

    def go_to_login(self) -> None:
        self.navigator.navigate("login")


class HomeController(ViewController):
    @property
    def username(self) -> str:
        return self.session.get_identity() or self.session.get_stored_username() or DEFAULT_DISPLAY_NAME

    def logout(self) -> None:
        self.session.clear()
        self.navigator.navigate("login")
