"""Left-pane editor that marks lines differing from the right pane.

Textual's ``TextArea`` rebuilds a per-line highlight map (byte ranges plus a
style name) whenever the document changes. This widget hooks that rebuild
and fills the map from a ``LineHighlighter`` render pass, so the differing
lines show in red while the user types.
"""

from __future__ import annotations

from rich.style import Style
from textual.widgets import TextArea
from textual.widgets.text_area import TextAreaTheme

from text_fusion.utils.error_handling import log_theme_error
from text_fusion.utils.line_highlighter import DIFFERENT_MARKER, Highlight, LineHighlighter
from text_fusion.utils.logger import log
from text_fusion.utils.status import DIFFERENT_TINT, MATCH_TINT

_DIFFERENT_STYLE = Style(color="rgb(255,0,0)")
_TINTED_FOREGROUND = "rgb(20,20,20)"

# One editor theme per tint, all sharing the "different" style
EDITOR_THEMES = {
    None: TextAreaTheme(name="fusion", syntax_styles={DIFFERENT_MARKER: _DIFFERENT_STYLE}),
    MATCH_TINT: TextAreaTheme(
        name="fusion-match",
        base_style=Style(color=_TINTED_FOREGROUND, bgcolor="rgb(230,255,230)"),
        syntax_styles={DIFFERENT_MARKER: _DIFFERENT_STYLE},
    ),
    DIFFERENT_TINT: TextAreaTheme(
        name="fusion-differ",
        base_style=Style(color=_TINTED_FOREGROUND, bgcolor="rgb(255,242,242)"),
        syntax_styles={DIFFERENT_MARKER: _DIFFERENT_STYLE},
    ),
}


class DifferenceTextArea(TextArea):
    """A TextArea whose lines are classified against a reference text."""

    DEFAULT_CSS = f"""
    DifferenceTextArea.{MATCH_TINT} {{
        border: tall $success;
    }}
    DifferenceTextArea.{DIFFERENT_TINT} {{
        border: tall $error;
    }}
    """

    def __init__(self, text: str = "", *, reference_text: str = "", **kwargs) -> None:
        # Must exist before TextArea.__init__ triggers the first highlight rebuild
        self._highlighter = LineHighlighter(reference_text)
        self._difference_highlights: dict[int, list[Highlight]] = {}
        self._tint: str | None = None
        super().__init__(text, **kwargs)
        for theme in EDITOR_THEMES.values():
            self.register_theme(theme)

    def on_mount(self) -> None:
        self._apply_editor_theme()

    @property
    def highlighter(self) -> LineHighlighter:
        return self._highlighter

    @property
    def tint(self) -> str | None:
        return self._tint

    def set_reference(self, reference_text: str) -> None:
        """Push the right pane's text and re-run the highlight pass."""
        self._highlighter.on_reference_changed(reference_text)
        self.refresh_highlights()

    def set_tint(self, tint: str | None) -> None:
        """Tint the pane background (None, ``MATCH_TINT`` or ``DIFFERENT_TINT``)."""
        if tint == self._tint:
            return
        for css_class in (MATCH_TINT, DIFFERENT_TINT):
            self.set_class(css_class == tint, css_class)
        self._tint = tint
        self._apply_editor_theme()

    def line_highlights(self, line_index: int) -> list[Highlight]:
        """Highlights produced for ``line_index`` by the last render pass."""
        return list(self._difference_highlights.get(line_index, []))

    @property
    def highlighted_lines(self) -> list[int]:
        return sorted(self._difference_highlights)

    def refresh_highlights(self) -> None:
        self._build_highlight_map()

    def _build_highlight_map(self) -> None:
        # The parent clears the map and the line cache before adding syntax spans
        super()._build_highlight_map()
        self._run_highlight_pass()

    def _run_highlight_pass(self) -> None:
        # A redraw always enumerates lines from the top
        highlights: dict[int, list[Highlight]] = {}
        for line_index, line_highlights in self._highlighter.highlight_pass(self.document.lines, start=0):
            if line_highlights:
                highlights[line_index] = line_highlights
        self._difference_highlights = highlights

        for line_index, line_highlights in highlights.items():
            self._highlights[line_index].extend(h.to_span() for h in line_highlights)

        if self.is_mounted:
            self.refresh()

        log.debug(f"[COMPARE] Highlight pass marked {len(highlights)} line(s)")

    def _apply_editor_theme(self) -> None:
        theme_name = EDITOR_THEMES[self._tint].name
        try:
            self.theme = theme_name
        except (ValueError, KeyError, AttributeError) as e:
            log_theme_error(theme_name, "applying", e)
