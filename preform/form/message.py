"""Commit message assembly from form state.

Format:
    <type>(<scope>): <description>

    <body>

    <footer>

Field values are used verbatim; nothing is trimmed, wrapped or validated.
"""

from preform.form.models import FormState


def assemble_message(state: FormState) -> str:
    """Build the final commit message.

    Args:
        state: The form state.

    Returns:
        The header, followed by the body and footer when non-empty, each
        separated by a blank line.
    """
    commit_type = state.selected_type
    scope = state.scope.value
    description = state.description.value
    body = state.body.value
    footer = state.footer.value

    if scope:
        header = f"{commit_type}({scope}): {description}"
    else:
        header = f"{commit_type}: {description}"

    parts = [header]
    if body:
        parts.append(body)
    if footer:
        parts.append(footer)

    return "\n\n".join(parts)
