"""Shared fixtures: a fake backend behind TestClient plus recording UI ports"""

import sys
import time
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent))

from fake_backend import FakeBackend, make_token  # noqa: E402

from socioai.api.auth_client import AuthClient  # noqa: E402
from socioai.api.client import ApiClient  # noqa: E402
from socioai.auth.session_store import SessionStore  # noqa: E402
from socioai.auth.storage import LocalStorage  # noqa: E402

USER_EMAIL = "ana@socio.ai"
USER_PASSWORD = "segredo123"


class RecordingNotifier:
    def __init__(self):
        self.successes = []
        self.errors = []

    def success(self, message):
        self.successes.append(message)

    def error(self, message):
        self.errors.append(message)


class RecordingNavigator:
    def __init__(self):
        self.history = []

    def navigate(self, view):
        self.history.append(view)

    @property
    def current(self):
        return self.history[-1] if self.history else None


class FixedConfirmer:
    def __init__(self, answer=True):
        self.answer = answer
        self.questions = []

    def confirm(self, message):
        self.questions.append(message)
        return self.answer


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def session(storage):
    return SessionStore(storage)


@pytest.fixture
def api(backend, session):
    return ApiClient("http://testserver", session, http=TestClient(backend.app))


@pytest.fixture
def auth(api):
    return AuthClient(api)


@pytest.fixture
def logged_in(backend, auth):
    """Register the default user on the backend and log in"""
    backend.add_user(USER_EMAIL, USER_PASSWORD)
    auth.login(USER_EMAIL, USER_PASSWORD)
    backend.calls.clear()
    backend.payloads.clear()
    return USER_EMAIL


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def confirmer():
    return FixedConfirmer(answer=True)


@pytest.fixture
def valid_token():
    return make_token(USER_EMAIL, time.time() + 3600)
