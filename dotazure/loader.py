from __future__ import annotations
import errno
from pathlib import Path
from typing import Optional, Protocol

from dotenv import load_dotenv

from .context import AzdContext, AzdContextBuilder
from .errors import Error, ErrorKind
from .logging import log


class EnvFileApplier(Protocol):
    def apply(self, path: Path, replace: bool) -> None:
        """Set variables from ``path`` in ``os.environ``.

        Must raise ``FileNotFoundError`` if ``path`` does not exist and another
        ``OSError`` for any other failure.
        """
        ...


class DotenvApplier:
    """Applies a .env file with python-dotenv."""

    def apply(self, path: Path, replace: bool) -> None:
        # load_dotenv silently ignores a missing file
        if not path.exists():
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        if not path.is_file():
            raise IsADirectoryError(errno.EISDIR, "Not a regular file", str(path))
        load_dotenv(dotenv_path=path, override=replace, encoding="utf-8")


class Loader:
    """Customizes discovery and loading of environment variables.

    Setters return a new ``Loader``; call ``load()`` last:

        loader().context(ctx).replace(True).load()
    """

    __slots__ = ("_context", "_replace", "_applier")

    def __init__(
        self,
        context: Optional[AzdContext] = None,
        replace: bool = False,
        applier: Optional[EnvFileApplier] = None,
    ):
        self._context = context
        self._replace = replace
        self._applier = applier if applier is not None else DotenvApplier()

    def __repr__(self) -> str:
        return f"Loader(context={self._context!r}, replace={self._replace!r})"

    def context(self, context: AzdContext) -> "Loader":
        """Use an already resolved ``AzdContext`` instead of discovering one."""
        return Loader(context, self._replace, self._applier)

    def replace(self, replace: bool) -> "Loader":
        """Whether variables from the file overwrite ones already set."""
        return Loader(self._context, replace, self._applier)

    def applier(self, applier: EnvFileApplier) -> "Loader":
        return Loader(self._context, self._replace, applier)

    def load(self) -> bool:
        """Find and load the environment's .env file.

        Returns False when there is no project or the environment has no .env file;
        raises ``Error`` for anything else.
        """
        context = self._context
        if context is None:
            try:
                context = AzdContextBuilder().build()
            except Error as e:
                if e.kind is ErrorKind.NOT_FOUND:
                    log().debug(f"nothing to load: {e}")
                    return False
                raise

        path = context.environment_file
        try:
            self._applier.apply(path, self._replace)
        except FileNotFoundError:
            log().debug(f"nothing to load: {path} not found")
            return False
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeDecodeError from a .env that is not UTF-8
            raise Error(ErrorKind.IO, f"failed to load {path}", e) from e

        log().debug(f"loaded {path} (replace={self._replace})")
        return True


def loader() -> Loader:
    """Get a ``Loader`` to customize discovery and loading."""
    return Loader()


def load() -> bool:
    """Load environment variables for the current azd project's default environment.

    Variables that are already set are not replaced. Returns True if a .env file
    was loaded. Use ``loader()`` to customize the behavior.
    """
    return loader().load()
