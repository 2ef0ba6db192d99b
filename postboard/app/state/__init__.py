"""FletXr Reactive State Management.

Architecture:
- ViewState/ViewStatus: the four UI states
- Cubit: observable holder of one ViewState
- PostsCubit, LoginCubit: map repository results onto view states
- AppState: shell state (navigation, status line, logs)
- Store: service locator wiring repositories into cubits
"""

from .view_state import ViewState, ViewStatus
from .cubit import Cubit
from .posts_cubit import PostsCubit
from .login_cubit import LoginCubit
from .app_state import AppState
from .store import Store

__all__ = [
    "ViewState",
    "ViewStatus",
    "Cubit",
    "PostsCubit",
    "LoginCubit",
    "AppState",
    "Store",
]
