"""Theme plugins for the app.

Drop Python files in this package that expose either:
- THEMES: list[textual.theme.Theme]
- get_themes() -> list[textual.theme.Theme] | textual.theme.Theme

They are discovered and registered when the app starts.
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import Any

from text_fusion.utils.error_handling import log_theme_error
from text_fusion.utils.logger import log

# Colour attributes a theme must carry to be registered
REQUIRED_THEME_ATTRS = ("primary", "secondary", "accent")


def validate_theme(theme_obj: Any) -> bool:
    """Check that a theme object has a name and non-empty core colours."""
    if theme_obj is None or not getattr(theme_obj, "name", None):
        return False

    for attr in REQUIRED_THEME_ATTRS:
        color_value = getattr(theme_obj, attr, None)
        if not color_value or (isinstance(color_value, str) and not color_value.strip()):
            log.debug(f"[THEME] {theme_obj.name} has empty {attr} color")
            return False
    return True


def _coerce_to_list(obj: Any) -> list[Any]:
    if obj is None:
        return []
    if isinstance(obj, list):
        return obj
    return [obj]


def discover_themes() -> list[Any]:
    """Collect themes exported by the modules of this package."""
    themes: list[Any] = []
    for modinfo in pkgutil.iter_modules(__path__, prefix=__name__ + "."):
        try:
            mod = importlib.import_module(modinfo.name)
        except ImportError as e:
            log.warning(f"[THEME] Failed to import theme module {modinfo.name}: {e}")
            continue
        try:
            if hasattr(mod, "THEMES"):
                themes.extend(list(mod.THEMES))
            elif hasattr(mod, "get_themes"):
                themes.extend(_coerce_to_list(mod.get_themes()))
        except (AttributeError, ValueError, TypeError) as e:
            log.warning(f"[THEME] Failed to extract themes from {modinfo.name}: {e}")
    return themes


def register_all_themes(app: Any) -> int:
    """Register every valid discovered theme on a Textual App.

    Returns the number of themes registered.
    """
    count = 0
    for theme in discover_themes():
        name = getattr(theme, "name", "unknown")
        if not validate_theme(theme):
            log.warning(f"[THEME] Skipping invalid theme: {name}")
            continue
        try:
            app.register_theme(theme)
            count += 1
            log.debug(f"[THEME] Registered theme: {name}")
        except (RuntimeError, ValueError, TypeError) as e:
            log_theme_error(name, "registering", e)
    return count
