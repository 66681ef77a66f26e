from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn

from apphub_core.app import LOG_FORMAT, create_app
from apphub_core.apps.discovery import FilesystemError, scan_apps
from apphub_core.config import HubConfig, load_hub_config, resolve_log_file
from apphub_core.home import HubPaths, resolve_hub_paths
from apphub_core.ui.router import render_page

logger = logging.getLogger("apphub_core")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="apphub",
        description="Serve a launcher page listing every web app under a directory.",
    )
    p.add_argument(
        "--root", type=Path, default=None, help="Apps root (default: $APPHUB_ROOT or CWD)"
    )
    p.add_argument(
        "--config", type=Path, default=None, help="JSON config file (default: $APPHUB_CONFIG)"
    )
    p.add_argument("--host", default=None, help="Bind host (default: $APPHUB_BIND or config)")
    p.add_argument("--port", type=int, default=None, help="Port (default: $APPHUB_PORT or config)")
    p.add_argument(
        "--render",
        action="store_true",
        help="Render the page once and exit instead of serving it",
    )
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="With --render: write the page here instead of stdout",
    )
    return p


def _setup_logging(paths: HubPaths, config: HubConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = resolve_log_file(paths, config)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=config.logging.max_size_mb * 1024 * 1024,
                backupCount=config.logging.backup_count,
                encoding="utf-8",
            )
        )
    logging.basicConfig(level=config.logging.level, format=LOG_FORMAT, handlers=handlers)


def _render_once(paths: HubPaths, config: HubConfig, output: Path | None) -> int:
    status = 0
    try:
        html = render_page(scan_apps(paths.root), page=config.page)
    except FilesystemError as exc:
        logger.error("Cannot list apps: %s", exc)
        html = render_page([], page=config.page, error=config.page.error_message)
        status = 1

    if output is None:
        sys.stdout.write(html)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        logger.info("Wrote %s", output)
    return status


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    paths = resolve_hub_paths(root=args.root, config_path=args.config)
    config = load_hub_config(paths)

    if args.render:
        # stdout may carry the page; keep log lines on stderr only.
        logging.basicConfig(level=config.logging.level, format=LOG_FORMAT)
        return _render_once(paths, config, args.output)

    _setup_logging(paths, config)

    host = args.host or os.environ.get("APPHUB_BIND") or config.network.bind_host

    env_port = os.environ.get("APPHUB_PORT")
    if args.port is not None:
        port = args.port
    elif env_port:
        port = int(env_port)
    else:
        port = config.network.port

    app = create_app(root=paths.root, config_path=paths.config_path, config=config)
    uvicorn.run(app, host=host, port=port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
