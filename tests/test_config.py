import pytest

from socioai.utils.config import ConfigManager
from socioai.utils.exceptions import ConfigError


@pytest.fixture
def manager(monkeypatch, tmp_path):
    manager = ConfigManager()
    monkeypatch.setattr(manager, "settings_path", tmp_path / "settings.yaml")
    monkeypatch.setattr(manager, "_settings", None)
    monkeypatch.delenv("SOCIOAI_API_URL", raising=False)
    monkeypatch.delenv("SOCIOAI_STORAGE_PATH", raising=False)
    return manager


def test_singleton():
    assert ConfigManager() is ConfigManager()


def test_missing_file_uses_defaults(manager):
    settings = manager.load_settings()

    assert settings.api.base_url == "http://localhost:8080"
    assert settings.api.timeout is None
    assert settings.auth.token_key == "auth-token"
    assert settings.auth.guard_checks_expiry is False


def test_yaml_with_env_substitution(manager, monkeypatch):
    monkeypatch.setenv("BACKEND_URL", "http://api.socio.ai")
    manager.settings_path.write_text(
        "api:\n"
        "  base_url: ${BACKEND_URL}\n"
        "  timeout: ${BACKEND_TIMEOUT:15}\n"
        "auth:\n"
        "  guard_checks_expiry: true\n",
        encoding="utf-8",
    )

    settings = manager.load_settings()

    assert settings.api.base_url == "http://api.socio.ai"
    assert settings.api.timeout == 15.0
    assert settings.auth.guard_checks_expiry is True


def test_missing_env_var_is_config_error(manager, monkeypatch):
    monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
    manager.settings_path.write_text("api:\n  base_url: ${NOT_SET_ANYWHERE}\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        manager.load_settings()


def test_env_overrides(manager, monkeypatch, tmp_path):
    monkeypatch.setenv("SOCIOAI_API_URL", "http://override:9000")
    monkeypatch.setenv("SOCIOAI_STORAGE_PATH", str(tmp_path / "ls.json"))

    settings = manager.settings

    assert settings.api.base_url == "http://override:9000"
    assert settings.storage.path == str(tmp_path / "ls.json")


def test_invalid_values_are_config_error(manager):
    manager.settings_path.write_text("api:\n  timeout: soon\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        manager.load_settings()


def test_broken_yaml_is_config_error(manager):
    manager.settings_path.write_text("api: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        manager.load_settings()
