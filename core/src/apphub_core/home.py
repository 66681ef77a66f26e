from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class HubPaths:
    root: Path
    config_path: Path | None = None

    def resolve_setting_path(self, raw: str) -> Path:
        # Relative to the config file, else the CWD; never the served apps root.
        candidate = Path(raw).expanduser()
        if not candidate.is_absolute():
            base = self.config_path.parent if self.config_path is not None else Path.cwd()
            candidate = base / candidate
        return candidate.resolve()


def resolve_apps_root(environ: dict[str, str] | None = None) -> Path:
    """Return the directory whose subdirectories are listed as apps.

    APPHUB_ROOT wins when set; otherwise the hub lists the directory it was
    started from, which is also the directory it serves.
    """

    env = os.environ if environ is None else environ

    raw = (env.get("APPHUB_ROOT") or "").strip()
    if raw:
        return Path(raw).expanduser().resolve()
    return Path.cwd().resolve()


def resolve_config_path(environ: dict[str, str] | None = None) -> Path | None:
    env = os.environ if environ is None else environ

    raw = (env.get("APPHUB_CONFIG") or "").strip()
    if not raw:
        return None
    return Path(raw).expanduser().resolve()


def resolve_hub_paths(
    *,
    root: Path | None = None,
    config_path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> HubPaths:
    # The root is not created or checked here; an unreadable root is reported per request.
    resolved_root = root.expanduser().resolve() if root is not None else resolve_apps_root(environ)
    if config_path is None:
        resolved_config = resolve_config_path(environ)
    else:
        resolved_config = config_path.expanduser().resolve()
    return HubPaths(root=resolved_root, config_path=resolved_config)
