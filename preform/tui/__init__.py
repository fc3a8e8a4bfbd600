"""Terminal front-end for the commit form."""

from preform.tui.app import (
    CommitForm,
    PreformApp,
    render_buffer,
    render_form,
    translate_key,
)

__all__ = [
    "CommitForm",
    "PreformApp",
    "render_buffer",
    "render_form",
    "translate_key",
]
