import argparse

from textual.app import App

from text_fusion.screens.compare import CompareScreen
from text_fusion.themes import register_all_themes
from text_fusion.utils.config import config
from text_fusion.utils.error_handling import log_theme_error
from text_fusion.utils.logger import log

FALLBACK_THEME = "textual-dark"


class FusionApp(App):
    TITLE = "Text Fusion - Compare Tool"
    DEFAULT_CSS = """
    Screen {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, theme_name: str | None = None, left_text: str = "", right_text: str = ""):
        """Initialize the Text Fusion application.

        Args:
            theme_name: Theme to start with; defaults to the configured theme
            left_text: Initial text of the left pane
            right_text: Initial text of the right pane
        """
        super().__init__()
        self.left_text = left_text
        self.right_text = right_text
        self.registered_theme_count = self._register_themes_safely()
        self.apply_theme(theme_name or config.theme)

    def _register_themes_safely(self) -> int:
        try:
            return register_all_themes(self)
        except ImportError as e:
            log.error(f"[THEME] Failed to import theme modules: {e}")
        except (AttributeError, TypeError, ValueError) as e:
            log.error(f"[THEME] Invalid theme objects during registration: {e}")
        return 0

    def apply_theme(self, theme_name: str) -> str:
        """Switch to ``theme_name``, falling back to Textual's dark theme if unknown.

        Returns the name of the theme actually applied.
        """
        if theme_name not in self.available_themes:
            log.warning(f"[THEME] Theme '{theme_name}' is not available, using {FALLBACK_THEME}")
            theme_name = FALLBACK_THEME
        try:
            self.theme = theme_name
        except (ValueError, AttributeError) as e:
            log_theme_error(theme_name, "applying", e)
        return self.theme

    def on_mount(self):
        self.push_screen(CompareScreen(self.left_text, self.right_text))


def _create_argument_parser():
    parser = argparse.ArgumentParser(description="Text Fusion: line-by-line text comparison")
    parser.add_argument('--theme', type=str, default=None, help='Theme name (default: FUSION_THEME or fusion-dark)')
    return parser


def main(argv=None):
    """Main entry point for the Text Fusion application."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    log.debug(f"[APP] Starting with theme={args.theme or config.theme}")
    FusionApp(theme_name=args.theme).run()


if __name__ == "__main__":
    main()
