"""Pilot tests for the compare screen and application entry point."""

import sys

import pytest
from textual.app import App

from text_fusion.entry_points import FALLBACK_THEME, FusionApp, main
from text_fusion.screens.compare import CompareScreen
from text_fusion.utils.line_highlighter import DIFFERENT_MARKER, Highlight
from text_fusion.utils.status import DIFFERENT_TINT, MATCH_TINT, ComparisonStatus


@pytest.mark.asyncio
async def test_initial_texts_are_compared():
    app = FusionApp(left_text="a\nb\nc", right_text="a\nX\nc")
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert isinstance(screen, CompareScreen)
        assert screen.differences_count == 1
        assert screen.status is ComparisonStatus.DIFFERENT
        assert screen.left_pane.highlighted_lines == [1]
        assert screen.left_pane.line_highlights(1) == [Highlight(0, 1, DIFFERENT_MARKER)]
        assert screen.left_pane.tint == DIFFERENT_TINT


@pytest.mark.asyncio
async def test_empty_panes_prompt_for_input():
    app = FusionApp()
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.differences_count == 0
        assert screen.status is ComparisonStatus.EMPTY
        assert screen.left_pane.tint is None


@pytest.mark.asyncio
async def test_typing_in_left_pane_updates_count():
    app = FusionApp(right_text="a\nX\nc")
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        await pilot.press("a", "enter", "b", "enter", "c")
        await pilot.pause()

        assert screen.left_pane.text == "a\nb\nc"
        assert screen.differences_count == 1
        assert screen.left_pane.highlighted_lines == [1]


@pytest.mark.asyncio
async def test_editing_right_pane_refreshes_left_highlights():
    app = FusionApp(left_text="a\nb", right_text="a\nb")
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.status is ComparisonStatus.MATCH
        assert screen.left_pane.tint == MATCH_TINT

        screen.right_pane.focus()
        await pilot.pause()
        await pilot.press("z")
        await pilot.pause()

        assert screen.right_pane.text == "za\nb"
        assert screen.left_pane.highlighter.reference_text == "za\nb"
        assert screen.differences_count == 1
        assert screen.left_pane.highlighted_lines == [0]


@pytest.mark.asyncio
async def test_swap_and_clear_panes():
    app = FusionApp(left_text="a\nb", right_text="")
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.differences_count == 2

        await pilot.press("ctrl+s")
        await pilot.pause()
        assert screen.left_pane.text == ""
        assert screen.right_pane.text == "a\nb"
        assert screen.differences_count == 0
        assert screen.status is ComparisonStatus.EMPTY

        screen.action_swap_panes()
        await pilot.pause()
        assert screen.differences_count == 2

        await pilot.press("ctrl+l")
        await pilot.pause()
        assert screen.left_pane.text == ""
        assert screen.right_pane.text == ""
        assert screen.left_pane.highlighted_lines == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "left, right, expected_lines",
    [
        ("a\rb", "a\nb", []),
        ("a\rX\rc", "a\nb\nc", [1]),
        ("a\nb", "a\rX", [1]),
    ],
)
async def test_count_agrees_with_highlights_for_carriage_returns(left, right, expected_lines):
    app = FusionApp(left_text=left, right_text=right)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.left_pane.highlighted_lines == expected_lines
        assert screen.differences_count == len(expected_lines)


@pytest.mark.asyncio
async def test_swap_keeps_count_and_highlights_in_step():
    app = FusionApp(left_text="a\nb", right_text="a\rX")
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("ctrl+s")
        await pilot.pause()
        assert screen.right_pane.text == "a\nb"
        assert screen.differences_count == len(screen.left_pane.highlighted_lines) == 1


@pytest.mark.asyncio
async def test_left_edit_runs_one_highlight_pass():
    app = FusionApp(right_text="a")
    async with app.run_test() as pilot:
        await pilot.pause()
        left = app.screen.left_pane
        passes = []
        original_pass = left._run_highlight_pass

        def counting_pass():
            passes.append(1)
            original_pass()

        left._run_highlight_pass = counting_pass
        await pilot.press("x")
        await pilot.pause()

        assert len(passes) == 1
        assert left.highlighted_lines == [0]


@pytest.mark.asyncio
async def test_differences_land_in_textarea_highlight_map():
    app = FusionApp(left_text="a\nb\nc", right_text="a\nX\nc")
    async with app.run_test() as pilot:
        await pilot.pause()
        left = app.screen.left_pane
        assert left._highlights[1] == [(0, 1, DIFFERENT_MARKER)]
        assert not left._highlights.get(0)


@pytest.mark.asyncio
async def test_tint_sets_styled_css_class():
    app = FusionApp(left_text="a", right_text="a")
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        left = screen.left_pane
        assert left.has_class(MATCH_TINT)
        assert not left.has_class(DIFFERENT_TINT)
        match_border = left.styles.border_top

        screen.right_pane.load_text("b")
        await pilot.pause()
        assert left.has_class(DIFFERENT_TINT)
        assert not left.has_class(MATCH_TINT)
        assert left.styles.border_top != match_border


def test_unknown_theme_falls_back():
    app = FusionApp(theme_name="no-such-theme")
    assert app.theme == FALLBACK_THEME


def test_bundled_theme_is_applied():
    app = FusionApp(theme_name="fusion-light")
    assert app.theme == "fusion-light"
    assert app.registered_theme_count >= 2


def test_main_builds_app_with_theme(monkeypatch):
    created = {}

    def fake_run(self):
        created["app"] = self

    monkeypatch.setattr(App, "run", fake_run, raising=True)
    monkeypatch.setattr(sys, "argv", ["text-fusion"])

    main(["--theme", "fusion-light"])

    app = created.get("app")
    assert isinstance(app, FusionApp)
    assert app.theme == "fusion-light"
