from .shell import build_shell

__all__ = ["build_shell"]
