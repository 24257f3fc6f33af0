"""``--set FIELD=VALUE`` handling for the non-interactive commands."""

from __future__ import annotations

import typer

from sepgen.core.form import FormSession
from sepgen.core.utils.logger import log_debug


def parse_assignment(text: str) -> tuple[str, str]:
    """Split ``FIELD=VALUE``; the value may itself contain ``=``."""
    field_id, sep, value = text.partition("=")
    field_id = field_id.strip()
    if not sep or not field_id:
        raise typer.BadParameter(f"expected FIELD=VALUE, got {text!r}", param_hint="--set")
    return field_id, value.strip()


def apply_assignments(session: FormSession, assignments: list[str] | None) -> None:
    """
    Apply assignments in order, exactly as if typed in the editor.

    Order matters: a button's line-only fields can only be useful once its
    type has been set, so ``button2.lineType=Line`` should come first.

    Raises:
        typer.BadParameter: malformed assignment
        FieldError: unknown field or invalid option
    """
    for text in assignments or []:
        field_id, value = parse_assignment(text)
        session.assign(field_id, value)
        log_debug("CLI", f"Applied assignment to {field_id}")
