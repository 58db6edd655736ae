"""
JSON-backed key-value store, the client's counterpart of browser localStorage.

Every read goes back to disk so a value written by another process (a second
dashboard, a test) is seen on the next call.
"""

from __future__ import annotations

import json
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from ..utils.logger import get_logger

logger = get_logger(__name__)


def _replace_file(path: Path, items: Dict[str, str]) -> None:
    """Dump items next to path, then move the dump over it; readers never see half a file"""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=str(path.parent), suffix=".tmp", delete=False) as handle:
        json.dump(items, handle, ensure_ascii=False, sort_keys=True)
        staged = Path(handle.name)
    try:
        shutil.move(str(staged), str(path))
    except OSError:
        staged.unlink(missing_ok=True)
        raise


class LocalStorage:
    """String key/value pairs persisted in a single JSON file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Local storage unreadable, treating as empty", path=str(self.path), error=str(e))
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        _replace_file(self.path, data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            _replace_file(self.path, data)
