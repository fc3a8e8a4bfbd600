"""Data models for the commit form.

Contains:
- Focus: Which field receives keyboard input
- OverlayTarget: What an open overlay will define
- Overlay: The modal sub-form for new types and scopes
- FormState: All mutable state of one form run
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from preform.form.buffer import TextBuffer


class Focus(Enum):
    """Form fields, in Tab order."""

    TYPE = "type"
    SCOPE = "scope"
    DESCRIPTION = "description"
    BODY = "body"
    FOOTER = "footer"

    def next(self) -> "Focus":
        """Return the following field, wrapping from Footer back to Type."""
        members = list(Focus)
        return members[(members.index(self) + 1) % len(members)]


# Fields edited as free text (Type is a selection)
TEXT_FIELDS = (Focus.SCOPE, Focus.DESCRIPTION, Focus.BODY, Focus.FOOTER)


class OverlayTarget(Enum):
    """What a confirmed overlay value becomes."""

    NEW_TYPE = "new_type"
    NEW_SCOPE = "new_scope"


@dataclass
class Overlay:
    """An open modal sub-form capturing a new type or scope name."""

    target: OverlayTarget
    buffer: TextBuffer = field(default_factory=TextBuffer)

    @property
    def title(self) -> str:
        label = "New Type" if self.target == OverlayTarget.NEW_TYPE else "New Scope"
        return f"{label} (Enter to save, Esc to cancel)"


@dataclass
class FormState:
    """State of the commit form.

    Attributes:
        types: Ordered commit type names, never empty.
        type_idx: Index of the selected type.
        fields: One text buffer per free-text field.
        focus: The field receiving input.
        overlay: The open overlay, if any.
    """

    types: list[str]
    type_idx: int = 0
    fields: dict[Focus, TextBuffer] = field(
        default_factory=lambda: {f: TextBuffer() for f in TEXT_FIELDS})
    focus: Focus = Focus.TYPE
    overlay: Optional[Overlay] = None

    def __post_init__(self):
        if not self.types:
            raise ValueError("FormState needs at least one commit type")
        if not 0 <= self.type_idx < len(self.types):
            raise ValueError(f"type_idx {self.type_idx} out of range")

    @property
    def selected_type(self) -> str:
        return self.types[self.type_idx]

    @property
    def scope(self) -> TextBuffer:
        return self.fields[Focus.SCOPE]

    @property
    def description(self) -> TextBuffer:
        return self.fields[Focus.DESCRIPTION]

    @property
    def body(self) -> TextBuffer:
        return self.fields[Focus.BODY]

    @property
    def footer(self) -> TextBuffer:
        return self.fields[Focus.FOOTER]

    def focused_buffer(self) -> Optional[TextBuffer]:
        """Return the buffer of the focused text field, or None on Type."""
        return self.fields.get(self.focus)
