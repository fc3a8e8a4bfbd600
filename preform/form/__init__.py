"""Commit form engine.

This package provides the editing and routing logic of the form:
- buffer: UTF-8 text buffer with a byte cursor
- keys: Key events consumed by the engine
- models: Focus, Overlay and FormState
- message: Commit message assembly
- session: Key routing and overlay transitions
"""

from preform.form.buffer import TextBuffer, is_char_boundary
from preform.form.keys import KeyEvent, KeyKind, keys_from_text
from preform.form.message import assemble_message
from preform.form.models import (
    TEXT_FIELDS,
    Focus,
    FormState,
    Overlay,
    OverlayTarget,
)
from preform.form.session import DEFAULT_ADD_KEY, FormSession, apply_to_buffer

__all__ = [
    "TextBuffer",
    "is_char_boundary",
    "KeyEvent",
    "KeyKind",
    "keys_from_text",
    "assemble_message",
    "TEXT_FIELDS",
    "Focus",
    "FormState",
    "Overlay",
    "OverlayTarget",
    "DEFAULT_ADD_KEY",
    "FormSession",
    "apply_to_buffer",
]
