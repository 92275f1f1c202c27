"""Base screen providing the Header + main content + Footer composition."""

from textual.app import ComposeResult
from textual.screen import Screen

from text_fusion.utils.error_handling import log_ui_error
from text_fusion.widgets.footer import Footer
from text_fusion.widgets.header import Header


class BaseScreen(Screen):
    """Base class for Text Fusion screens.

    Subclasses implement compose_main_content() and get_footer_text().
    """

    def __init__(self, page_name: str):
        super().__init__()
        self.page_name = page_name
        self.title = f"Text Fusion — {page_name}"

    def compose(self) -> ComposeResult:
        yield Header(page_name=self.page_name, show_clock=True)
        yield from self.compose_main_content()
        yield Footer(text=self.get_footer_text())

    def compose_main_content(self) -> ComposeResult:
        raise NotImplementedError("Subclasses must implement compose_main_content()")

    def get_footer_text(self) -> str:
        raise NotImplementedError("Subclasses must implement get_footer_text()")

    def safe_set_focus(self, widget) -> None:
        """Set focus on widget, logging instead of failing."""
        try:
            self.set_focus(widget)
        except (AttributeError, RuntimeError) as e:
            log_ui_error(type(widget).__name__, "setting focus", e)

    async def on_mount(self):
        self.title = f"Text Fusion — {self.page_name}"
