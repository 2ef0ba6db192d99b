"""Login screen."""

from __future__ import annotations

import logging

import flet as ft

from postboard.app.state import LoginCubit, ViewState, ViewStatus
from postboard.shared.domain.models import User
from postboard.app.ui.theme import (
    BG_ERROR, CYAN_PRIMARY, TEXT_ERROR, TEXT_LABEL,
    TEXT_PLACEHOLDER, TEXT_TITLE, TEXT_VALUE,
)

logger = logging.getLogger(__name__)


def render_login_state(state: ViewState[User]) -> ft.Control:
    """Build the status area below the form for one login state."""
    if state.status is ViewStatus.LOADING:
        return ft.ProgressRing(width=24, height=24, stroke_width=2, color=CYAN_PRIMARY)

    if state.status is ViewStatus.SUCCESS and state.data is not None:
        return ft.Text(f"Signed in as {state.data.email}", color=TEXT_VALUE, size=14)

    if state.status is ViewStatus.FAILURE:
        return ft.Container(
            bgcolor=BG_ERROR,
            padding=12,
            border_radius=8,
            content=ft.Text(state.message or "Login failed", color=TEXT_ERROR, size=13),
        )

    return ft.Text("Not signed in", color=TEXT_PLACEHOLDER, size=14, italic=True)


class LoginScreen:
    """Email/password form bound to a LoginCubit."""

    def __init__(self, page: ft.Page, cubit: LoginCubit):
        self.page = page
        self.cubit = cubit

        self.email_field = ft.TextField(label="Email", color=TEXT_LABEL, width=320)
        self.password_field = ft.TextField(
            label="Password", password=True, can_reveal_password=True, width=320,
        )
        self.login_button = ft.FilledButton("Login", icon=ft.Icons.LOGIN, on_click=self._on_login)
        self.logout_button = ft.OutlinedButton(
            "Logout", icon=ft.Icons.LOGOUT, on_click=self._on_logout, visible=False,
        )
        self.status_area = ft.Container(content=render_login_state(cubit.state))
        self._cancel = cubit.listen(self._on_state)

    async def _on_login(self, e: ft.ControlEvent) -> None:
        await self.cubit.login(self.email_field.value or "", self.password_field.value or "")

    async def _on_logout(self, e: ft.ControlEvent) -> None:
        await self.cubit.logout()

    def _on_state(self, state: ViewState[User]) -> None:
        signed_in = state.status is ViewStatus.SUCCESS
        self.status_area.content = render_login_state(state)
        self.login_button.disabled = state.is_loading
        self.login_button.visible = not signed_in
        self.logout_button.visible = signed_in
        if signed_in:
            self.password_field.value = ""
        try:
            self.page.update()
        except RuntimeError:
            logger.debug("Login screen update skipped: page gone")

    def build_view(self) -> ft.Control:
        return ft.Container(
            expand=True,
            padding=ft.Padding.only(left=20, right=20, top=16, bottom=20),
            content=ft.Column(
                [
                    ft.Text("Login", size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                    self.email_field,
                    self.password_field,
                    ft.Row([self.login_button, self.logout_button], spacing=12),
                    self.status_area,
                ],
                spacing=16,
            ),
        )

    def dispose(self) -> None:
        self._cancel()
