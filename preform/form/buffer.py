"""Single-line text buffer with a UTF-8 byte cursor.

The buffer keeps its content as UTF-8 bytes and a cursor expressed as a
byte offset into them. Every operation leaves the cursor on a scalar-value
boundary, so multi-byte characters (accents, CJK, emoji) are always edited
as a whole.
"""

from typing import Optional


def is_char_boundary(data: bytes, index: int) -> bool:
    """Return True if ``index`` falls between two complete UTF-8 sequences.

    Args:
        data: UTF-8 encoded bytes.
        index: Byte offset to test.

    Returns:
        True for 0, len(data), and any offset that does not point at a
        continuation byte.
    """
    if index < 0 or index > len(data):
        return False
    if index == 0 or index == len(data):
        return True
    # Continuation bytes look like 0b10xxxxxx
    return (data[index] & 0xC0) != 0x80


class TextBuffer:
    """Editable string with a byte-precise insertion cursor."""

    def __init__(self, value: Optional[str] = None):
        self._data = (value or "").encode("utf-8")
        self.cursor = len(self._data)

    @classmethod
    def from_value(cls, value: str) -> "TextBuffer":
        """Create a buffer seeded with ``value``, cursor at the end."""
        return cls(value)

    @property
    def value(self) -> str:
        return self._data.decode("utf-8")

    @property
    def column(self) -> int:
        """Number of characters before the cursor."""
        return len(self._data[: self.cursor].decode("utf-8"))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"TextBuffer(value={self.value!r}, cursor={self.cursor})"

    def _previous_boundary(self) -> int:
        idx = self.cursor - 1
        while not is_char_boundary(self._data, idx):
            idx -= 1
        return idx

    def _next_boundary(self) -> int:
        idx = self.cursor + 1
        while not is_char_boundary(self._data, idx):
            idx += 1
        return idx

    def insert(self, char: str) -> None:
        """Insert one character at the cursor and move past it.

        Raises:
            ValueError: If ``char`` is not exactly one character.
        """
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        encoded = char.encode("utf-8")
        self._data = self._data[: self.cursor] + encoded + self._data[self.cursor:]
        self.cursor += len(encoded)

    def backspace(self) -> None:
        """Remove the character ending at the cursor."""
        if self.cursor == 0:
            return
        start = self._previous_boundary()
        self._data = self._data[:start] + self._data[self.cursor:]
        self.cursor = start

    def delete(self) -> None:
        """Remove the character starting at the cursor."""
        if self.cursor >= len(self._data):
            return
        end = self._next_boundary()
        self._data = self._data[: self.cursor] + self._data[end:]

    def move_left(self) -> None:
        if self.cursor == 0:
            return
        self.cursor = self._previous_boundary()

    def move_right(self) -> None:
        if self.cursor >= len(self._data):
            return
        self.cursor = self._next_boundary()

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self._data)
