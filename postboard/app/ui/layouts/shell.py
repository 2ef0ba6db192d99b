from __future__ import annotations

import datetime
from typing import Dict, List

import flet as ft

from postboard.app.state import Store
from postboard.app.ui.screens.login_screen import LoginScreen
from postboard.app.ui.screens.posts_screen import PostsScreen
from postboard.shared.core import events
from postboard.app.ui.theme import (
    CYAN_PRIMARY,
    TEXT_BRIGHT, TEXT_MUTED, TEXT_LABEL,
    BG_NAV, BG_GRADIENT_START, BG_GRADIENT_MID, BG_GRADIENT_END,
    BG_CARD, BORDER_DIVIDER,
    get_log_color, LOG_PANEL_TITLE,
)


def apply_shell_theme(page: ft.Page, primary_color: str = CYAN_PRIMARY, theme_mode: str = "dark") -> None:
    """Apply the dark baseline theme."""
    page.theme = ft.Theme(color_scheme_seed=primary_color, use_material3=True)
    page.theme_mode = ft.ThemeMode.LIGHT if theme_mode == "light" else ft.ThemeMode.DARK
    page.bgcolor = "#000000"
    page.padding = 0


def _nav_destinations(items: List[Dict[str, str]]) -> List[ft.NavigationRailDestination]:
    destinations: List[ft.NavigationRailDestination] = []
    for item in items:
        icon = getattr(ft.Icons, str(item.get("icon", "article")).upper(), ft.Icons.ARTICLE)
        destinations.append(ft.NavigationRailDestination(icon=icon, label=item.get("label", "")))
    return destinations


def build_shell(page: ft.Page, store: Store) -> ft.View:
    apply_shell_theme(page, store.config.ui.primary_color, store.config.ui.theme_mode)

    screens = {
        "posts": PostsScreen(page, store.posts),
        "login": LoginScreen(page, store.login),
    }

    # label_type in the constructor, everything else set below
    nav_rail = ft.NavigationRail(label_type=ft.NavigationRailLabelType.ALL)
    nav_rail.bgcolor = BG_NAV
    nav_rail.indicator_color = CYAN_PRIMARY
    nav_rail.selected_label_text_style = ft.TextStyle(color=TEXT_BRIGHT)
    nav_rail.unselected_label_text_style = ft.TextStyle(color=TEXT_MUTED)
    nav_rail.min_width = 80
    nav_rail.destinations = _nav_destinations(store.app.nav_items.value)
    nav_rail.selected_index = 0

    status_text = ft.Text(store.app.status_text.value, color=TEXT_LABEL, size=12)
    content_container = ft.Container(expand=True, content=screens["posts"].build_view())
    log_list_column = ft.Column(spacing=4, scroll=ft.ScrollMode.AUTO)

    def _safe_update() -> None:
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    def _sync_nav() -> None:
        ids = [item.get("id") for item in store.app.nav_items.value]
        selected = store.app.nav_selected.value
        if selected in ids:
            nav_rail.selected_index = ids.index(selected)
            content_container.content = screens[selected].build_view()
        _safe_update()

    def _sync_status() -> None:
        status_text.value = store.app.status_text.value
        _safe_update()

    def _sync_logs() -> None:
        controls = []
        for entry in reversed(list(store.app.logs.value)):
            level = entry.get("level", "info")
            ts = entry.get("ts", 0)
            time_str = datetime.datetime.fromtimestamp(ts).strftime("%H:%M:%S") if ts else ""
            color = get_log_color(level)
            controls.append(
                ft.Row([
                    ft.Text(level.upper(), size=11, color=color, width=60),
                    ft.Text(time_str, size=11, color=LOG_PANEL_TITLE, width=70),
                    ft.Text(entry.get("message", ""), size=12, color=color, expand=True),
                ], spacing=8)
            )
        log_list_column.controls = controls
        _safe_update()

    async def _on_nav_change(e: ft.ControlEvent) -> None:
        idx = nav_rail.selected_index
        items = store.app.nav_items.value
        if idx is not None and 0 <= idx < len(items):
            await store.app.publish(events.TOPIC_NAV_SELECT, events.create_nav_select_event(items[idx]["id"]))

    nav_rail.on_change = _on_nav_change

    # --- Listener Bindings ---
    store.app.nav_selected.listen(_sync_nav)
    store.app.status_text.listen(_sync_status)
    store.app.logs.listen(_sync_logs)

    log_panel = ft.Container(
        width=340,
        bgcolor="rgba(20,20,20,0.98)",
        border=ft.Border.all(1, LOG_PANEL_TITLE),
        border_radius=8,
        padding=12,
        content=ft.Column([
            ft.Text("Log", size=16, weight=ft.FontWeight.W_700, color=LOG_PANEL_TITLE),
            ft.Divider(height=1, color=LOG_PANEL_TITLE),
            ft.Container(content=log_list_column, expand=True),
        ], spacing=8),
    )

    chrome = ft.Container(
        expand=True,
        gradient=ft.LinearGradient(
            begin=ft.Alignment(-1, -1),
            end=ft.Alignment(1, 1),
            colors=[BG_GRADIENT_START, BG_GRADIENT_MID, BG_GRADIENT_END],
        ),
        content=ft.Row(
            [
                nav_rail,
                ft.VerticalDivider(width=1, color=BORDER_DIVIDER),
                ft.Container(
                    expand=True,
                    content=ft.Column(
                        [
                            ft.Container(status_text, padding=8, height=36),
                            ft.Row(
                                [
                                    ft.Container(expand=True, content=content_container, bgcolor=BG_CARD),
                                    log_panel,
                                ],
                                expand=True,
                                spacing=0,
                            ),
                        ],
                        spacing=0,
                    ),
                ),
            ],
            expand=True,
        ),
    )

    _sync_status()
    _sync_logs()

    return ft.View(
        route="/",
        controls=[chrome],
        bgcolor=ft.Colors.BLACK,
        padding=0,
    )
