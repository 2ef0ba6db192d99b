"""Postboard - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from dotenv import load_dotenv

import flet as ft
from postboard.app.state import Store
from postboard.app.ui.layouts.shell import build_shell
from postboard.shared.core.configuration import get_config
from postboard.shared.core.event_bus import EventBus

# Load environment variables from .env in the working directory
load_dotenv(dotenv_path=Path.cwd() / ".env")

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger = logging.getLogger(__name__)

# FLET_WEB_RENDERER value -> ft.WebRenderer member
WEB_RENDERERS = {
    "auto": "AUTO",
    "canvaskit": "CANVAS_KIT",
    "skwasm": "SKWASM",
}


def configure_logging(logs_dir: Path | None = None) -> Path:
    """Configure root logging.

    File handler gets everything at LOG_LEVEL (default DEBUG) in
    ``data/logs/postboard.log``; the console only shows WARNING and above.

    Returns:
        Path of the log file
    """
    logs_dir = logs_dir or Path(os.getenv("POSTBOARD_LOG_DIR", Path.cwd() / "data" / "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "postboard.log"

    file_log_level = LOG_LEVELS.get(os.getenv("LOG_LEVEL", "DEBUG").upper(), logging.DEBUG)

    # FletX disables all logging on first use unless told otherwise
    os.environ.setdefault("FLETX_ENABLE_LOGGING", "1")
    logging.disable(logging.NOTSET)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8',
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    for name in ("httpx", "httpcore", "flet_controls", "flet_transport"):
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)

    return log_file_path


def resolve_web_renderer(name: str) -> ft.WebRenderer:
    """Map a configured renderer name to Flet's enum.

    Raises:
        ValueError: If the name is not one of ``WEB_RENDERERS``
    """
    member = WEB_RENDERERS.get(name.strip().lower())
    if member is None:
        raise ValueError(
            f"Unknown web renderer '{name}', expected one of {sorted(WEB_RENDERERS)}"
        )
    return getattr(ft.WebRenderer, member)

async def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info("Initializing Postboard...")

    config = get_config()
    page.title = config.api.app_name

    event_bus = EventBus()
    Store.reset()
    store = Store.initialize(event_bus, config)
    store.app.initialize()
    logger.info("AppState initialized")

    page.views.clear()
    page.views.append(build_shell(page, store))
    page.update()

    await store.app.push_log(f"Posts endpoint: {config.api.posts_url}")
    logger.info("Application initialized successfully")


def run() -> None:
    """Console entry point: desktop app, or web mode when FLET_WEB_MODE=true."""
    log_file_path = configure_logging()
    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")

    ui = get_config().ui
    if ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {ui.flet_port}")
        renderer = resolve_web_renderer(ui.flet_web_renderer)
        ft.run(
            main,
            view=ft.AppView.WEB_BROWSER,
            port=ui.flet_port,
            host="127.0.0.1",
            web_renderer=renderer,
        )
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
