"""Headless page controllers"""

from .auth_views import HomeController, LoginController, SignupController
from .categoria_view import CategoriaController
from .lancamento_view import LancamentoController
from .meta_view import MetaController
from .user_view import UserController
from .report_view import ReportController

__all__ = [
    "HomeController",
    "LoginController",
    "SignupController",
    "CategoriaController",
    "LancamentoController",
    "MetaController",
    "UserController",
    "ReportController",
]
