"""Textual front-end for the commit form.

The form widget is the only focusable widget. It translates Textual key
events into engine key events, lets the FormSession route them, and draws
the session state as a column of Rich panels.
"""

import logging
from typing import Optional

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget

from preform.exceptions import StoreError
from preform.form import Focus, FormSession, FormState, KeyEvent, KeyKind, TextBuffer

logger = logging.getLogger(__name__)

TEXTUAL_KEYS = {
    "backspace": KeyKind.BACKSPACE,
    "delete": KeyKind.DELETE,
    "left": KeyKind.LEFT,
    "right": KeyKind.RIGHT,
    "home": KeyKind.HOME,
    "end": KeyKind.END,
    "up": KeyKind.UP,
    "down": KeyKind.DOWN,
    "tab": KeyKind.TAB,
    "enter": KeyKind.ENTER,
    "escape": KeyKind.ESCAPE,
}

FIELD_TITLES = {
    Focus.SCOPE: "Scope",
    Focus.DESCRIPTION: "Description",
    Focus.BODY: "Body",
    Focus.FOOTER: "Footer",
}

BOLD = Style(bold=True)
CARET = Style(reverse=True)


def translate_key(event: events.Key) -> Optional[KeyEvent]:
    """Map a Textual key event to a form key event.

    Returns:
        The key event, or None for keys the form does not handle.
    """
    kind = TEXTUAL_KEYS.get(event.key)
    if kind is not None:
        return KeyEvent(kind)
    if event.is_printable and event.character and len(event.character) == 1:
        return KeyEvent.character(event.character)
    return None


def render_buffer(buffer: TextBuffer, show_caret: bool) -> Text:
    """Render buffer content, highlighting the character under the caret."""
    value = buffer.value
    if not show_caret:
        return Text(value)

    column = buffer.column
    text = Text(value[:column])
    # Past the end the caret sits on a blank cell
    text.append(value[column:column + 1] or " ", style=CARET)
    text.append(value[column + 1:])
    return text


def _title(label: str, focused: bool) -> Text:
    return Text(label, style=BOLD if focused else "")


def render_form(state: FormState, add_key: str = "+") -> RenderableType:
    """Build the renderable for the whole form."""
    editing = state.overlay is None

    type_lines = Text()
    for i, name in enumerate(state.types):
        if i:
            type_lines.append("\n")
        if i == state.type_idx:
            type_lines.append(f"➡ {name}", style=BOLD)
        else:
            type_lines.append(f"  {name}")

    panels = [
        Panel(
            type_lines,
            title=_title(f"Type  ( {add_key} to add )", state.focus == Focus.TYPE),
            title_align="left",
        )
    ]

    for focus, label in FIELD_TITLES.items():
        if focus == Focus.SCOPE:
            label = f"{label}  ( {add_key} to add )"
        focused = state.focus == focus
        panels.append(
            Panel(
                render_buffer(state.fields[focus], focused and editing),
                title=_title(label, focused),
                title_align="left",
            )
        )

    if state.overlay is not None:
        panels.append(
            Panel(
                render_buffer(state.overlay.buffer, True),
                title=state.overlay.title,
                title_align="left",
                border_style="bold",
            )
        )

    return Group(*panels)


class CommitForm(Widget, can_focus=True):
    """Widget that owns keyboard input for a FormSession."""

    DEFAULT_CSS = """
    CommitForm {
        height: auto;
    }
    """

    def __init__(self, session: FormSession, **kwargs):
        super().__init__(**kwargs)
        self.session = session

    def render(self) -> RenderableType:
        return render_form(self.session.state, self.session.add_key)

    def on_key(self, event: events.Key) -> None:
        key = translate_key(event)
        if key is None:
            return

        # Keep Tab and Escape away from Textual's own bindings
        event.stop()
        event.prevent_default()

        try:
            finished = self.session.handle_key(key)
        except StoreError as e:
            logger.error("Persisting overlay value failed: %s", e)
            self.app.failure = e
            self.app.exit(return_code=1)
            return

        if finished:
            self.app.exit(self.session.message())
        else:
            self.refresh(layout=True)


class PreformApp(App[str]):
    """Full-screen commit message form.

    ``run()`` returns the assembled message when the user finishes the
    form. If persisting a new type or scope fails, the app exits with
    return code 1 and the error is kept in ``failure``.
    """

    TITLE = "pre-form"

    def __init__(self, session: FormSession, **kwargs):
        super().__init__(**kwargs)
        self.session = session
        self.failure: Optional[StoreError] = None

    def compose(self) -> ComposeResult:
        yield CommitForm(self.session)

    def on_mount(self) -> None:
        self.query_one(CommitForm).focus()
