"""
Azure Developer CLI project discovery.

An ``AzdContext`` names the project root (the nearest directory containing
``azure.yaml``) and the active environment. Build one with ``AzdContext.builder()``:

    ctx = AzdContext.builder().current_dir("src/app").environment_name("dev").build()
    ctx.environment_file  # <project>/.azure/dev/.env
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import (
    ENVIRONMENT_DIR_NAME,
    ENVIRONMENT_FILE_NAME,
    PROJECT_FILE_NAME,
    find_project_dir,
    path_exists,
    read_stored_config,
    stored_config_path,
)
from .errors import Error, ErrorKind
from .logging import log

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class AzdContext:
    project_dir: Path
    environment_name: str

    def __post_init__(self) -> None:
        if not self.environment_name:
            raise Error(ErrorKind.INVALID_DATA, "environment name cannot be empty")

    @staticmethod
    def builder() -> "AzdContextBuilder":
        return AzdContextBuilder()

    @property
    def project_path(self) -> Path:
        return self.project_dir / PROJECT_FILE_NAME

    @property
    def environment_dir(self) -> Path:
        return self.project_dir / ENVIRONMENT_DIR_NAME

    @property
    def environment_root(self) -> Path:
        return self.environment_dir / self.environment_name

    @property
    def environment_file(self) -> Path:
        return self.environment_root / ENVIRONMENT_FILE_NAME


class AzdContextBuilder:
    """Collects optional discovery inputs; every setter returns a new builder."""

    __slots__ = ("_current_dir", "_environment_name")

    def __init__(self, current_dir: Optional[Path] = None, environment_name: Optional[str] = None):
        self._current_dir = current_dir
        self._environment_name = environment_name

    def __repr__(self) -> str:
        return f"AzdContextBuilder(current_dir={self._current_dir!r}, environment_name={self._environment_name!r})"

    def current_dir(self, path: PathLike) -> "AzdContextBuilder":
        """Start discovery from ``path`` instead of the working directory."""
        path = Path(path)
        if not path_exists(path):
            raise Error(ErrorKind.IO, f"'{path}' does not exist")
        return AzdContextBuilder(path, self._environment_name)

    def environment_name(self, name: str) -> "AzdContextBuilder":
        """Use ``name`` instead of the project's default environment."""
        if not name:
            raise Error(ErrorKind.INVALID_DATA, "environment name cannot be empty")
        return AzdContextBuilder(self._current_dir, name)

    def build(self) -> AzdContext:
        """Find the project root and resolve the environment name.

        Raises ``Error`` with kind NOT_FOUND when no azure.yaml exists at or above
        the start directory. Without an explicit environment name, .azure/config.json
        must exist and define ``defaultEnvironment``.
        """
        if self._current_dir is not None:
            current_dir = self._current_dir
        else:
            try:
                current_dir = Path.cwd()
            except OSError as e:
                raise Error.from_os_error(e, "failed to get current directory") from e

        project_dir = find_project_dir(current_dir)
        if project_dir is None:
            raise Error(
                ErrorKind.NOT_FOUND,
                "no project exists; to create a new project, run `azd init`",
            )
        log().debug(f"found project in {project_dir}")

        if self._environment_name is not None:
            environment_name = self._environment_name
        else:
            config = read_stored_config(project_dir)
            environment_name = config.require_default_environment(stored_config_path(project_dir))
            log().debug(f"using default environment {environment_name!r}")

        return AzdContext(project_dir=project_dir, environment_name=environment_name)
