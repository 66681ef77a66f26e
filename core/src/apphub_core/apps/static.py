from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from apphub_core.apps.discovery import INDEX_FILE


class AppStaticFiles(StaticFiles):
    """Static files for the listed apps only.

    The first path segment must be a directory that qualifies as an app.
    Dot-prefixed segments below it and the ``hidden`` files (the hub's own log
    and config) answer 404, as does anything directly in the apps root.
    """

    def __init__(self, *, directory: Path, hidden: Iterable[Path] = ()) -> None:
        super().__init__(directory=str(directory), html=True, check_dir=False)
        self._root = directory
        self._hidden = frozenset(p.resolve() for p in hidden)

    def is_published(self, path: str) -> bool:
        parts = Path(path).parts
        if not parts or parts[0] in (".", ".."):
            return False
        if any(part.startswith(".") for part in parts[1:]):
            return False
        try:
            if not (self._root / parts[0] / INDEX_FILE).is_file():
                return False
            return (self._root / path).resolve() not in self._hidden
        except OSError:
            return False

    async def get_response(self, path: str, scope: Scope) -> Response:
        if not self.is_published(path):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
