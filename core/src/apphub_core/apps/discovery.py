from __future__ import annotations

import base64
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final
from urllib.parse import quote

logger = logging.getLogger(__name__)

INDEX_FILE: Final[str] = "index.html"
FAVICON_FILE: Final[str] = "favicon.ico"

_DEFAULT_ICON_SVG: Final[str] = (
    '<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" '
    'stroke-width="1.5" stroke="currentColor" class="w-6 h-6">'
    '<path stroke-linecap="round" stroke-linejoin="round" '
    'd="M12 21a9.004 9.004 0 008.716-6.747M12 21a9.004 9.004 0 01-8.716-6.747'
    "M12 21c2.485 0 4.5-4.03 4.5-9S14.485 3 12 3m0 18c-2.485 0-4.5-4.03-4.5-9"
    "S9.515 3 12 3m0 0a8.997 8.997 0 017.843 4.582M12 3a8.997 8.997 0 00-7.843 4.582"
    "m15.686 0A11.953 11.953 0 0112 10.5c-2.998 0-5.74-1.1-7.843-2.918m15.686 0"
    "A8.959 8.959 0 0121 12c0 .778-.099 1.533-.284 2.253m0 0A17.919 17.919 0 0112 16.5"
    "c-3.162 0-6.133-.815-8.716-2.247m0 0A9.015 9.015 0 013 12c0-1.605.42-3.113 "
    '1.157-4.418" /></svg>'
)

DEFAULT_ICON: Final[str] = "data:image/svg+xml;base64," + base64.b64encode(
    _DEFAULT_ICON_SVG.encode("utf-8")
).decode("ascii")

# Same word boundaries as PHP's ucwords().
_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])([^ \t\r\n\f\v])")


class FilesystemError(OSError):
    """The apps root could not be enumerated."""

    def __init__(self, root: Path, cause: OSError) -> None:
        super().__init__(cause.errno, f"Cannot read apps root {root}: {cause.strerror or cause}")
        self.root = root
        self.cause = cause


@dataclass(frozen=True)
class AppTile:
    name: str
    title: str
    icon_source: str
    link_target: str

    @property
    def href(self) -> str:
        return quote(self.name) + "/"

    @property
    def icon_href(self) -> str:
        if self.icon_source == DEFAULT_ICON:
            return self.icon_source
        return quote(self.icon_source)


def title_from_name(name: str) -> str:
    spaced = name.replace("-", " ").replace("_", " ")
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)


def _tile_for_entry(entry: os.DirEntry[str]) -> AppTile | None:
    name = entry.name
    if name in (".", ".."):
        return None
    if not entry.is_dir():
        return None

    app_dir = Path(entry.path)
    if not (app_dir / INDEX_FILE).is_file():
        return None

    if (app_dir / FAVICON_FILE).is_file():
        icon_source = f"{name}/{FAVICON_FILE}"
    else:
        icon_source = DEFAULT_ICON

    return AppTile(
        name=name,
        title=title_from_name(name),
        icon_source=icon_source,
        link_target=f"{name}/",
    )


def scan_apps(root: Path) -> list[AppTile]:
    """List the apps directly under ``root``.

    An app is a subdirectory containing an ``index.html``. Tiles are sorted by
    name (case-insensitively) so the page is stable across platforms.

    Raises FilesystemError when ``root`` itself cannot be read.
    """

    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as exc:
        raise FilesystemError(root, exc) from exc

    out: list[AppTile] = []
    for entry in entries:
        try:
            tile = _tile_for_entry(entry)
        except OSError as exc:
            # One unreadable entry should not hide the rest of the grid.
            logger.warning("Skipping %s: %s", entry.path, exc)
            continue
        if tile is not None:
            out.append(tile)

    out.sort(key=lambda t: (t.name.casefold(), t.name))
    logger.debug("Found %d app(s) under %s", len(out), root)
    return out
