from apphub_core.apps.discovery import (
    DEFAULT_ICON,
    AppTile,
    FilesystemError,
    scan_apps,
    title_from_name,
)

__all__ = [
    "DEFAULT_ICON",
    "AppTile",
    "FilesystemError",
    "scan_apps",
    "title_from_name",
]
