"""
Postboard Theme - Centralized color palette.

Base accents are cyan (#48b0f7) for actions and teal (#4ECDC4) for
success; screens import the semantic tokens, never raw hex values.
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Main accent, icons, highlights
TEAL_PRIMARY = "#4ECDC4"       # Success
GOLD_PRIMARY = "#3D60C8"       # Titles, warnings
RED_PRIMARY = "#FF6B6B"        # Errors

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_BRIGHT = "#AFC5D6"
TEXT_MEDIUM = "#6E879B"
TEXT_MUTED = "#8A9BA8"
TEXT_MUTED_CYAN = "#8AB4C4"

# =============================================================================
# BACKGROUND & BORDER COLORS
# =============================================================================
BG_NAV = "#0a0d1f"
BG_GRADIENT_START = "#0d1528"
BG_GRADIENT_MID = "#0a0f1c"
BG_GRADIENT_END = "#060a12"
BG_CARD = "rgba(255,255,255,0.025)"
BG_ERROR = "rgba(255,59,48,0.1)"

BORDER_MEDIUM = "rgba(255,255,255,0.1)"
BORDER_DIVIDER = "rgba(255,255,255,0.12)"

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================
TEXT_TITLE = GOLD_PRIMARY
TEXT_LABEL = TEXT_MUTED_CYAN
TEXT_VALUE = TEAL_PRIMARY
TEXT_PLACEHOLDER = TEXT_MUTED
TEXT_ERROR = RED_PRIMARY

POST_TITLE = TEXT_BRIGHT
POST_BODY = TEXT_MEDIUM
CARD_BORDER = BORDER_MEDIUM

LOG_PANEL_TITLE = GOLD_PRIMARY

LOG_INFO = CYAN_PRIMARY
LOG_SUCCESS = TEAL_PRIMARY
LOG_WARNING = GOLD_PRIMARY
LOG_ERROR = RED_PRIMARY


def get_log_color(level: str) -> str:
    """Get the color for a log level."""
    colors = {
        "INFO": LOG_INFO,
        "SUCCESS": LOG_SUCCESS,
        "WARNING": LOG_WARNING,
        "ERROR": LOG_ERROR,
    }
    return colors.get(level.upper(), TEXT_MUTED)
