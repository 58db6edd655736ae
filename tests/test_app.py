import json
import logging

import structlog
from fastapi.testclient import TestClient

from conftest import USER_EMAIL, USER_PASSWORD
from socioai.app import SocioAIApp
from socioai.utils.config import Settings
from socioai.utils.logger import get_logger, setup_logger


def _build_app(tmp_path, backend, notifier, navigator, confirmer, **auth):
    settings = Settings(
        api={"base_url": "http://testserver"},
        auth=auth,
        storage={"path": str(tmp_path / "storage.json")},
    )
    app = SocioAIApp(settings=settings, http=TestClient(backend.app))
    return app.initialize(notifier, navigator, confirmer, configure_logging=False)


def test_initialize_wires_every_page(tmp_path, backend, notifier, navigator, confirmer):
    app = _build_app(tmp_path, backend, notifier, navigator, confirmer)

    assert set(app.controllers) == {"login", "signup", "home", "categoria", "lancamento", "meta", "user", "relatorio"}
    assert app.guard.check_expiry is False
    # One session store shared by everything
    assert app.controller("categoria").session is app.session
    assert app.api.session_store is app.session


def test_login_then_protected_page(tmp_path, backend, notifier, navigator, confirmer):
    backend.add_user(USER_EMAIL, USER_PASSWORD)
    app = _build_app(tmp_path, backend, notifier, navigator, confirmer)

    assert not app.guard.can_enter("categoria")
    assert navigator.current == "login"

    app.controller("login").submit(USER_EMAIL, USER_PASSWORD)
    assert navigator.current == "home"
    assert app.guard.can_enter("categoria")

    categorias = app.controller("categoria")
    assert categorias.create("Mercado")
    assert [c.user for c in categorias.items] == [USER_EMAIL]

    app.controller("home").logout()
    assert not app.guard.can_enter("categoria")


def test_session_survives_restart(tmp_path, backend, notifier, navigator, confirmer):
    backend.add_user(USER_EMAIL, USER_PASSWORD)
    first = _build_app(tmp_path, backend, notifier, navigator, confirmer)
    first.controller("login").submit(USER_EMAIL, USER_PASSWORD)

    second = _build_app(tmp_path, backend, notifier, navigator, confirmer)

    assert second.session.get_identity() == USER_EMAIL
    assert second.controller("home").username == USER_EMAIL


def test_guard_expiry_setting(tmp_path, backend, notifier, navigator, confirmer):
    app = _build_app(tmp_path, backend, notifier, navigator, confirmer, guard_checks_expiry=True)
    assert app.guard.check_expiry is True


def test_setup_logger_writes_json_lines(tmp_path):
    log_file = tmp_path / "logs" / "socioai.log"
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logger(log_level="DEBUG", log_format="json", file_path=str(log_file))
        get_logger("socioai.test").info("Record created", resource="categorias", record_id=3)
        for handler in root.handlers:
            handler.flush()

        line = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert line["event"] == "Record created"
        assert line["resource"] == "categorias"
        assert line["level"] == "info"
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        structlog.reset_defaults()
