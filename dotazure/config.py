from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import Error, ErrorKind
from .io import read_json

PROJECT_FILE_NAME = "azure.yaml"
ENVIRONMENT_DIR_NAME = ".azure"
CONFIG_FILE_NAME = "config.json"
ENVIRONMENT_FILE_NAME = ".env"

def path_exists(path: Path) -> bool:
    """Like ``Path.exists`` but raises IO for errors other than a missing path."""
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        raise Error.from_os_error(e, f"failed to access {path}") from e
    return True

def find_project_dir(start: Path) -> Optional[Path]:
    """Find the nearest directory at or above ``start`` containing azure.yaml."""
    cur = Path(start).absolute()
    for candidate in (cur, *cur.parents):
        if path_exists(candidate / PROJECT_FILE_NAME):
            return candidate
    return None

def stored_config_path(project_dir: Path) -> Path:
    return project_dir / ENVIRONMENT_DIR_NAME / CONFIG_FILE_NAME

@dataclass(frozen=True)
class StoredConfig:
    """Per-project settings written by azd under .azure/config.json."""
    default_environment: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], path: Path) -> "StoredConfig":
        name = data.get("defaultEnvironment")
        if name is not None and not isinstance(name, str):
            raise Error(ErrorKind.INVALID_DATA, f"'{path}' defines a non-string `defaultEnvironment`")
        return StoredConfig(default_environment=name)

    def require_default_environment(self, path: Path) -> str:
        if not self.default_environment:
            raise Error(ErrorKind.INVALID_DATA, f"'{path}' does not define `defaultEnvironment`")
        return self.default_environment

def read_stored_config(project_dir: Path) -> StoredConfig:
    """Read .azure/config.json; missing file is NOT_FOUND, bad content is INVALID_DATA."""
    path = stored_config_path(project_dir)
    try:
        data = read_json(path)
    except OSError as e:
        raise Error.from_os_error(e, f"failed to read {path}") from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise Error(ErrorKind.INVALID_DATA, f"failed to parse {path}", e) from e
    if not isinstance(data, dict):
        raise Error(ErrorKind.INVALID_DATA, f"'{path}' must contain a JSON object")
    return StoredConfig.from_dict(data, path)
