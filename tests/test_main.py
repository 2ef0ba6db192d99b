"""Tests for entry-point helpers: renderer mapping and logging setup."""
import logging

import flet as ft
import pytest

from postboard.app.main import WEB_RENDERERS, configure_logging, resolve_web_renderer
from postboard.shared.core.configuration import UIConfig


@pytest.mark.parametrize("name,member", [
    ("auto", ft.WebRenderer.AUTO),
    ("canvaskit", ft.WebRenderer.CANVAS_KIT),
    (" CanvasKit ", ft.WebRenderer.CANVAS_KIT),
])
def test_resolve_web_renderer(name, member):
    assert resolve_web_renderer(name) is member


def test_every_configurable_renderer_resolves():
    for name in WEB_RENDERERS:
        assert isinstance(resolve_web_renderer(name), ft.WebRenderer)


def test_default_renderer_resolves():
    assert resolve_web_renderer(UIConfig().flet_web_renderer) is ft.WebRenderer.AUTO


def test_unknown_renderer_is_rejected():
    with pytest.raises(ValueError, match="Unknown web renderer 'html'"):
        resolve_web_renderer("html")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_reenables_disabled_logging(tmp_path, restore_root_logger):
    logging.disable(logging.CRITICAL)

    log_file = configure_logging(tmp_path)
    logging.getLogger("postboard.test").warning("still logging")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert logging.root.manager.disable == logging.NOTSET
    assert log_file == tmp_path / "postboard.log"
    assert "still logging" in log_file.read_text(encoding="utf-8")
