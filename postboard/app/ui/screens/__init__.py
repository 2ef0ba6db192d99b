from .login_screen import LoginScreen, render_login_state
from .posts_screen import PostsScreen, render_posts_state

__all__ = ["LoginScreen", "PostsScreen", "render_login_state", "render_posts_state"]
