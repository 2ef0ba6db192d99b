"""Posts screen: a fetch button above one of four state views."""

from __future__ import annotations

import logging
from typing import List

import flet as ft

from postboard.app.state import PostsCubit, ViewState, ViewStatus
from postboard.shared.domain.models import Post
from postboard.app.ui.theme import (
    BG_CARD, BG_ERROR, CARD_BORDER, CYAN_PRIMARY,
    POST_BODY, POST_TITLE,
    TEXT_ERROR, TEXT_PLACEHOLDER, TEXT_TITLE,
)

logger = logging.getLogger(__name__)

INITIAL_HINT = "Press \"Fetch posts\" to load posts"
EMPTY_HINT = "No posts"


def post_card(post: Post) -> ft.Control:
    return ft.Container(
        bgcolor=BG_CARD,
        border=ft.Border.all(1, CARD_BORDER),
        border_radius=8,
        padding=12,
        content=ft.Column(
            [
                ft.Text(post.title, size=15, weight=ft.FontWeight.W_600, color=POST_TITLE),
                ft.Text(post.body, size=13, color=POST_BODY),
            ],
            spacing=6,
        ),
    )


def render_posts_state(state: ViewState[List[Post]]) -> ft.Control:
    """Build the control for one posts state."""
    if state.status is ViewStatus.LOADING:
        return ft.Container(
            expand=True,
            alignment=ft.Alignment(0, 0),
            content=ft.ProgressRing(color=CYAN_PRIMARY),
        )

    if state.status is ViewStatus.SUCCESS:
        posts = state.data or []
        if not posts:
            return ft.Text(EMPTY_HINT, color=TEXT_PLACEHOLDER, size=15, italic=True)
        return ft.ListView(
            controls=[post_card(post) for post in posts],
            spacing=8,
            expand=True,
        )

    if state.status is ViewStatus.FAILURE:
        return ft.Container(
            bgcolor=BG_ERROR,
            padding=12,
            border_radius=8,
            border=ft.Border.all(1, TEXT_ERROR),
            content=ft.Text(state.message or "Something went wrong", color=TEXT_ERROR, size=13),
        )

    return ft.Text(INITIAL_HINT, color=TEXT_PLACEHOLDER, size=15, italic=True)


class PostsScreen:
    """Subscribes to a PostsCubit and re-renders on every state."""

    def __init__(self, page: ft.Page, cubit: PostsCubit):
        self.page = page
        self.cubit = cubit
        self.body = ft.Container(expand=True, content=render_posts_state(cubit.state))
        self.fetch_button = ft.FilledButton(
            "Fetch posts",
            icon=ft.Icons.REFRESH,
            on_click=self._on_fetch,
        )
        self._cancel = cubit.listen(self._on_state)

    async def _on_fetch(self, e: ft.ControlEvent) -> None:
        await self.cubit.fetch_posts()

    def _on_state(self, state: ViewState[List[Post]]) -> None:
        self.body.content = render_posts_state(state)
        self.fetch_button.disabled = state.is_loading
        try:
            self.page.update()
        except RuntimeError:
            # Session destroyed
            logger.debug("Posts screen update skipped: page gone")

    def build_view(self) -> ft.Control:
        return ft.Container(
            expand=True,
            padding=ft.Padding.only(left=20, right=20, top=16, bottom=20),
            content=ft.Column(
                [
                    ft.Row(
                        [
                            ft.Text("Posts", size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                            self.fetch_button,
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    self.body,
                ],
                spacing=16,
                expand=True,
            ),
        )

    def dispose(self) -> None:
        self._cancel()
