from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from apphub_core.apps.discovery import AppTile, scan_apps
from apphub_core.config import HubConfig, PageConfig
from apphub_core.home import HubPaths

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

# Jinja2Templates turns autoescaping on; every value reaching the page is escaped.
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["ui"])


def render_page(
    tiles: Sequence[AppTile],
    *,
    page: PageConfig | None = None,
    error: str | None = None,
) -> str:
    """Render the launcher document for ``tiles``.

    With ``error`` set, the grid is replaced by the error notice.
    """

    page = page or PageConfig()
    template = templates.get_template("launcher.html")
    return template.render(
        title=page.title,
        heading=page.heading,
        empty_message=page.empty_message,
        tiles=list(tiles),
        error=error,
    )


@router.get("/", response_class=HTMLResponse)
def launcher(request: Request) -> HTMLResponse:
    # Sync endpoint: the scan runs in the threadpool. FilesystemError is handled in create_app.
    paths: HubPaths = request.app.state.hub_paths
    config: HubConfig = request.app.state.hub_config
    tiles = scan_apps(paths.root)
    return HTMLResponse(render_page(tiles, page=config.page))
