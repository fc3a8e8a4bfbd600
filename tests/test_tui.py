"""Tests for preform.tui module."""

import asyncio

from rich.console import Console

from preform.exceptions import StoreError
from preform.form import Focus, FormSession, KeyKind
from preform.form.buffer import TextBuffer
from preform.tui import PreformApp, render_buffer, render_form
from tests.conftest import press


def _run(session, *keys):
    """Run the app headless, press keys, and return the app."""

    async def scenario():
        app = PreformApp(session)
        async with app.run_test() as pilot:
            await pilot.press(*keys)
        return app

    return asyncio.run(scenario())


def _plain(renderable) -> str:
    console = Console(width=60, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestRenderBuffer:
    """Tests for render_buffer function."""

    def test_without_caret(self):
        """Test plain rendering."""
        assert render_buffer(TextBuffer.from_value("abc"), False).plain == "abc"

    def test_caret_at_end_adds_cell(self):
        """Test that the caret past the end is a blank cell."""
        assert render_buffer(TextBuffer.from_value("abc"), True).plain == "abc "

    def test_caret_on_multibyte(self):
        """Test that the caret covers a whole character."""
        buffer = TextBuffer.from_value("a🎉b")
        buffer.move_home()
        buffer.move_right()
        assert render_buffer(buffer, True).plain == "a🎉b"


class TestRenderForm:
    """Tests for render_form function."""

    def test_shows_fields_and_selection(self, session):
        """Test the main form layout."""
        press(session, KeyKind.TAB)
        text = _plain(render_form(session.state))

        assert "➡ feat" in text
        assert "Scope  ( + to add )" in text
        assert "Description" in text
        assert "Footer" in text

    def test_shows_overlay(self, session):
        """Test that the overlay panel is drawn."""
        press(session, "+", "perf")
        text = _plain(render_form(session.state))

        assert "New Type (Enter to save, Esc to cancel)" in text
        assert "perf" in text


class TestPreformApp:
    """Tests for the Textual application."""

    def test_enter_finishes_with_message(self, temp_dir):
        """Test a short run ending with Enter."""
        session = FormSession(temp_dir)
        app = _run(session, "down", "tab", "a", "p", "i", "tab", "x", "enter")

        assert app.return_value == "fix(api): x"
        assert app.failure is None

    def test_escape_also_finishes(self, temp_dir):
        """Test that Escape finishes instead of discarding."""
        session = FormSession(temp_dir)
        app = _run(session, "tab", "tab", "y", "escape")

        assert app.return_value == "feat: y"

    def test_tab_cycles_form_focus(self, temp_dir):
        """Test that Tab is routed to the form, not Textual focus."""
        session = FormSession(temp_dir)
        _run(session, "tab", "tab", "tab")

        assert session.state.focus == Focus.BODY
        assert session.finished is False

    def test_store_error_exits_with_failure(self, temp_dir, mocker):
        """Test that a persistence failure ends the app."""
        mocker.patch(
            "preform.form.session.persist_new_type",
            side_effect=StoreError("creating type file failed"),
        )
        session = FormSession(temp_dir)
        session.open_overlay()
        app = _run(session, "w", "enter")

        assert isinstance(app.failure, StoreError)
        assert app.return_code == 1
