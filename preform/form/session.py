"""Key routing for one run of the commit form.

A FormSession owns the FormState and applies key events to it one at a
time. While an overlay is open it receives every key; otherwise keys go to
the focus ring, the type selector, or the focused text buffer.
"""

import logging
from pathlib import Path
from typing import Optional

from preform.form.buffer import TextBuffer
from preform.form.keys import KeyEvent, KeyKind
from preform.form.message import assemble_message
from preform.form.models import Focus, FormState, Overlay, OverlayTarget
from preform.store import load_types, persist_new_scope, persist_new_type

logger = logging.getLogger(__name__)

DEFAULT_ADD_KEY = "+"

# Unicode White_Space characters; str.strip() also drops \x1c-\x1f
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Keys that edit or navigate inside a text buffer
_BUFFER_ACTIONS = {
    KeyKind.BACKSPACE: TextBuffer.backspace,
    KeyKind.DELETE: TextBuffer.delete,
    KeyKind.LEFT: TextBuffer.move_left,
    KeyKind.RIGHT: TextBuffer.move_right,
    KeyKind.HOME: TextBuffer.move_home,
    KeyKind.END: TextBuffer.move_end,
}


def apply_to_buffer(buffer: TextBuffer, event: KeyEvent) -> bool:
    """Apply an editing or cursor key to ``buffer``.

    Returns:
        True if the key was an editing key, False if it was ignored.
    """
    if event.kind == KeyKind.CHAR:
        buffer.insert(event.char)
        return True

    action = _BUFFER_ACTIONS.get(event.kind)
    if action is None:
        return False
    action(buffer)
    return True


class FormSession:
    """Interactive state machine behind the commit form.

    Args:
        base_dir: Directory holding .pre-form-git, where new types and
            scopes are persisted.
        types: Commit types to offer. Loaded from ``base_dir`` when None.
        add_key: Character that opens the new type/scope overlay.
    """

    def __init__(
        self,
        base_dir: Path,
        types: Optional[list[str]] = None,
        add_key: str = DEFAULT_ADD_KEY,
    ):
        self.base_dir = Path(base_dir)
        if types is None:
            types = load_types(self.base_dir)
        self.state = FormState(types=list(types))
        self.add_key = add_key
        self.finished = False

    def handle_key(self, event: KeyEvent) -> bool:
        """Route one key event.

        Args:
            event: The key press.

        Returns:
            True once the form is finished (Enter or Escape at top level).

        Raises:
            StoreError: If confirming an overlay fails to persist the value.
        """
        if self.finished:
            return True

        if self.state.overlay is not None:
            self._handle_overlay_key(self.state.overlay, event)
        else:
            self._handle_form_key(event)

        return self.finished

    def message(self) -> str:
        """Return the commit message for the current state."""
        return assemble_message(self.state)

    # ------------------------------------------------------------------
    # Top-level form
    # ------------------------------------------------------------------

    def _handle_form_key(self, event: KeyEvent) -> None:
        state = self.state

        if event.kind in (KeyKind.ENTER, KeyKind.ESCAPE):
            # Both finish the form; there is no discard path
            self.finished = True
            return

        if event.kind == KeyKind.TAB:
            state.focus = state.focus.next()
            return

        if event.kind == KeyKind.CHAR and event.char == self.add_key:
            self.open_overlay()
            return

        if state.focus == Focus.TYPE:
            if event.kind == KeyKind.UP:
                state.type_idx = max(state.type_idx - 1, 0)
            elif event.kind == KeyKind.DOWN:
                state.type_idx = min(state.type_idx + 1, len(state.types) - 1)
            return

        buffer = state.focused_buffer()
        if buffer is not None:
            apply_to_buffer(buffer, event)

    def open_overlay(self) -> Optional[Overlay]:
        """Open the overlay matching the current focus.

        Returns:
            The new overlay, or None when the focus is neither Type nor
            Scope.
        """
        if self.state.overlay is not None:
            return self.state.overlay

        if self.state.focus == Focus.TYPE:
            target = OverlayTarget.NEW_TYPE
        elif self.state.focus == Focus.SCOPE:
            target = OverlayTarget.NEW_SCOPE
        else:
            return None

        self.state.overlay = Overlay(target=target)
        return self.state.overlay

    # ------------------------------------------------------------------
    # Overlay
    # ------------------------------------------------------------------

    def _handle_overlay_key(self, overlay: Overlay, event: KeyEvent) -> None:
        if event.kind == KeyKind.ESCAPE:
            self.state.overlay = None
        elif event.kind == KeyKind.ENTER:
            self._commit_overlay(overlay)
        else:
            apply_to_buffer(overlay.buffer, event)

    def _commit_overlay(self, overlay: Overlay) -> None:
        state = self.state
        name = overlay.buffer.value.strip(WHITESPACE)

        if not name:
            state.overlay = None
            return

        if overlay.target == OverlayTarget.NEW_TYPE:
            persist_new_type(self.base_dir, name)
            if name in state.types:
                state.type_idx = state.types.index(name)
            else:
                state.types.append(name)
                state.type_idx = len(state.types) - 1
            logger.info("Added commit type %r", name)
        else:
            persist_new_scope(self.base_dir, name)
            state.fields[Focus.SCOPE] = TextBuffer.from_value(name)
            state.focus = Focus.DESCRIPTION
            logger.info("Added scope %r", name)

        state.overlay = None
