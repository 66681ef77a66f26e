from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from apphub_core import __version__
from apphub_core.apps.discovery import FilesystemError
from apphub_core.apps.static import AppStaticFiles
from apphub_core.config import HubConfig, load_hub_config, resolve_log_file
from apphub_core.home import HubPaths, resolve_hub_paths
from apphub_core.ui.router import render_page
from apphub_core.ui.router import router as ui_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(paths: HubPaths, config: HubConfig) -> None:
    root = logging.getLogger()
    root.setLevel(config.logging.level)

    log_path = resolve_log_file(paths, config)
    if log_path is None:
        return

    # Avoid adding duplicate handlers if reloaded
    if any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=config.logging.max_size_mb * 1024 * 1024,
        backupCount=config.logging.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)


def create_app(
    *,
    root: Path | None = None,
    config_path: Path | None = None,
    config: HubConfig | None = None,
) -> FastAPI:
    paths = resolve_hub_paths(root=root, config_path=config_path)
    if config is None:
        config = load_hub_config(paths)
    configure_logging(paths, config)

    app = FastAPI(title="AppHub", version=__version__, docs_url=None, redoc_url=None)
    app.state.hub_paths = paths
    app.state.hub_config = config

    logger.info("AppHub listing apps under %s", paths.root)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(FilesystemError)
    async def _filesystem_error_handler(request: Request, exc: FilesystemError) -> HTMLResponse:
        logger.error("Cannot list apps: %s", exc, exc_info=exc)
        return HTMLResponse(
            render_page([], page=config.page, error=config.page.error_message),
            status_code=500,
        )

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(ui_router)

    # Tile links are relative (./<app>/), so the apps themselves are served from the same root.
    # Registered last: "/" and "/healthz" above take precedence over files of the same name.
    if config.serve_apps:
        hidden = [p for p in (resolve_log_file(paths, config), paths.config_path) if p is not None]
        app.mount(
            "/",
            AppStaticFiles(directory=paths.root, hidden=hidden),
            name="apps",
        )

    return app
