"""The four UI states every cubit moves through."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ViewStatus(str, Enum):
    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ViewState(Generic[T]):
    """Immutable snapshot of a cubit.

    ``data`` is only set for SUCCESS and ``message`` only for FAILURE.
    """

    status: ViewStatus
    data: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def initial(cls) -> "ViewState[T]":
        return cls(ViewStatus.INITIAL)

    @classmethod
    def loading(cls) -> "ViewState[T]":
        return cls(ViewStatus.LOADING)

    @classmethod
    def success(cls, data: T) -> "ViewState[T]":
        return cls(ViewStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, message: str) -> "ViewState[T]":
        return cls(ViewStatus.FAILURE, message=message)

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.LOADING
