"""Standardized error logging helpers for Text Fusion.

The comparison core never raises; these helpers are for the UI plumbing
around it, where a failed widget lookup or theme switch should be logged
instead of taking the editor down.
"""

from .logger import log


def log_ui_error(component: str, action: str, exception: Exception) -> None:
    """Log UI component errors with consistent formatting.

    Args:
        component: Name of the UI component (e.g., "left pane", "status")
        action: The action being performed (e.g., "updating", "setting focus")
        exception: The exception that was raised
    """
    error_type = type(exception).__name__
    log.error(f"[UI] Failed {action} on {component}: {error_type}: {exception}")


def log_theme_error(theme_name: str, operation: str, exception: Exception) -> None:
    """Log theme-related errors with consistent formatting.

    Args:
        theme_name: Name of the theme
        operation: The operation being performed (e.g., "registering", "applying")
        exception: The exception that was raised
    """
    error_type = type(exception).__name__
    log.error(f"[THEME] Failed {operation} theme '{theme_name}': {error_type}: {exception}")

