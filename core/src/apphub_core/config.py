from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from apphub_core.home import HubPaths


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class PageConfig(BaseModel):
    """Text shown on the launcher page."""

    title: str = Field(default="Speed Test Hub")
    heading: str = Field(default="Select a Speed Test")
    empty_message: str = Field(default="No speed test applications found in the web root.")
    error_message: str = Field(default="The application directory could not be read.")


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    file: str | None = Field(
        default=None,
        description=(
            "Optional log file; if relative, resolved next to the config file (else the CWD)."
        ),
    )
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class HubConfig(BaseModel):
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    page: PageConfig = Field(default_factory=PageConfig)
    serve_apps: bool = Field(
        default=True,
        description="Serve the apps root as static files so tile links resolve on this host.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_hub_config(paths: HubPaths) -> HubConfig:
    """Load config from the JSON file named by APPHUB_CONFIG / --config.

    - If no file is configured, or it is missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    config_path = paths.config_path
    if config_path is None or not config_path.exists():
        return HubConfig()

    raw = _read_json(config_path)
    return HubConfig.model_validate(raw)


def resolve_log_file(paths: HubPaths, config: HubConfig) -> Path | None:
    raw = config.logging.file
    if raw is None or not str(raw).strip():
        return None
    return paths.resolve_setting_path(raw)
