"""
Configuration management with schema validation.
Single source of truth for SocioAI client configuration.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .exceptions import ConfigError
from .logger import get_logger

logger = get_logger(__name__)

# Load environment variables
load_dotenv()

DATA_DIR = Path(os.getenv("SOCIOAI_DATA_DIR", "data"))
SETTINGS_FILE = DATA_DIR / "settings.yaml"


class AppSettings(BaseModel):
    name: str = "SocioAI"
    version: str = "1.0.0"
    environment: str = "production"


class ApiSettings(BaseModel):
    base_url: str = "http://localhost:8080"
    auth_path: str = "/auth"
    api_path: str = "/api"
    # None means requests waits indefinitely (no client-side timeout)
    timeout: Optional[float] = None


class AuthSettings(BaseModel):
    token_key: str = "auth-token"
    username_key: str = "username"
    # False keeps the guard on token presence only
    guard_checks_expiry: bool = False


class StorageSettings(BaseModel):
    path: str = "data/local_storage.json"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "json"
    file_path: Optional[str] = "logs/socioai.log"
    max_bytes: int = 10485760
    backup_count: int = 5


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class ConfigManager:
    """Singleton configuration manager"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.settings_path = SETTINGS_FILE
        self._settings: Optional[Settings] = None
        self._initialized = True

    def _substitute_env_vars(self, value: Any) -> Any:
        """Recursively substitute ${VAR} and ${VAR:default} references"""
        if isinstance(value, str):
            if value.startswith("${") and value.endswith("}"):
                var_expr = value[2:-1]
                if ":" in var_expr:
                    var_name, default = var_expr.split(":", 1)
                    return os.getenv(var_name.strip(), default.strip())
                env_value = os.getenv(var_expr)
                if env_value is None:
                    raise ConfigError(f"Environment variable {var_expr} not found")
                return env_value
        elif isinstance(value, dict):
            return {k: self._substitute_env_vars(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [self._substitute_env_vars(item) for item in value]
        return value

    def _apply_env_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        api_url = os.getenv("SOCIOAI_API_URL")
        if api_url:
            data.setdefault("api", {})["base_url"] = api_url
        storage_path = os.getenv("SOCIOAI_STORAGE_PATH")
        if storage_path:
            data.setdefault("storage", {})["path"] = storage_path
        return data

    def load_settings(self) -> Settings:
        """Load and validate settings.yaml; a missing file yields the defaults"""
        raw_data: Dict[str, Any] = {}
        if self.settings_path.exists():
            try:
                with open(self.settings_path, "r", encoding="utf-8") as f:
                    raw_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to read settings from {self.settings_path}: {e}")
        else:
            logger.info("Settings file not found, using defaults", path=str(self.settings_path))

        processed_data = self._apply_env_overrides(self._substitute_env_vars(raw_data))
        try:
            self._settings = Settings(**processed_data)
        except ValueError as e:
            raise ConfigError(f"Invalid settings in {self.settings_path}: {e}")
        return self._settings

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            return self.load_settings()
        return self._settings


# Global instance
config_manager = ConfigManager()
