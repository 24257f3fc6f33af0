from __future__ import annotations

from typing import Any, Callable, Optional

import questionary
from rich import print as rich_print

from sepgen.core.form import Field, FieldKind, FormSession
from sepgen.core.form.session import SECRET_KEYS

SAVE_CHOICE_KEY = "__save__"
REVIEW_CHOICE_KEY = "__review__"
PREVIEW_CHOICE_KEY = "__preview__"
QUIT_CHOICE_KEY = "__quit__"


def default_formatter(value: Any, max_length: int = 40) -> str:
    if value is None or value == "":
        return "—"
    text = str(value)
    if len(text) > max_length:
        return f"{text[: max_length - 1]}…"
    return text


def field_title(field: Field) -> str:
    """Menu row for a field: label, current value, required marker."""
    shown = field.raw_value
    if field.xml_key in SECRET_KEYS and shown:
        shown = "•" * min(len(shown), 8)
    marker = " *" if field.kind is FieldKind.REQUIRED else ""
    return f"{field.label}{marker} [{default_formatter(shown)}]"


def build_menu_choices(session: FormSession) -> list[Any]:
    """
    Menu entries for every visible field, grouped under section separators,
    followed by the session actions.
    """
    choices: list[Any] = []
    for section in session.registry.sections:
        rows = [f for f in section.fields if not f.hidden]
        if not rows:
            continue
        choices.append(questionary.Separator(section.title))
        choices.extend(
            questionary.Choice(title=field_title(f), value=f.field_id) for f in rows
        )
    choices.append(questionary.Separator())
    choices.append(questionary.Choice(title="💾 Save", value=SAVE_CHOICE_KEY))
    choices.append(questionary.Choice(title="👀 Review values", value=REVIEW_CHOICE_KEY))
    choices.append(questionary.Choice(title="📄 Preview XML", value=PREVIEW_CHOICE_KEY))
    choices.append(questionary.Choice(title="🚪 Quit", value=QUIT_CHOICE_KEY))
    return choices


def _prompt_text(
    prompt: str, default: Optional[str] = None, hint: Optional[str] = None
) -> Optional[str]:
    if hint:
        rich_print(f"[dim]{hint}[/dim]")
    try:
        return questionary.text(prompt, default=default or "").ask()
    except KeyboardInterrupt:
        return None


def prompt_text_value(field: Field) -> Optional[str]:
    """Ask for a new free-text value; ``None`` means the edit was cancelled."""
    value = _prompt_text(f"{field.label}:", default=field.raw_value, hint=field.help)
    if value is None:
        return None
    return value.strip()


def prompt_option_index(field: Field) -> Optional[int]:
    """Ask the operator to pick an option; only valid indices can come back."""
    if field.help:
        rich_print(f"[dim]{field.help}[/dim]")
    choices = [
        questionary.Choice(title=option.label, value=idx)
        for idx, option in enumerate(field.options)
    ]
    try:
        selected = questionary.select(
            f"Select {field.label.lower()}",
            choices=choices,
            default=field.selected_index,
        ).ask()
    except KeyboardInterrupt:
        return None
    if selected is None or not 0 <= selected < len(field.options):
        return None
    return selected


def edit_field(
    session: FormSession,
    field_id: str,
    on_visibility_change: Optional[Callable[[list[Field]], None]] = None,
) -> bool:
    """
    Open the editor matching the field type and commit the result.

    Returns True when the value changed.
    """
    field = session.field(field_id)
    before = field.raw_value
    if field.is_dropdown:
        index = prompt_option_index(field)
        if index is None:
            return False
        flipped = session.select_option(field_id, index)
    else:
        text = prompt_text_value(field)
        if text is None:
            return False
        flipped = session.set_text(field_id, text)

    if flipped and on_visibility_change:
        on_visibility_change(flipped)
    return field.raw_value != before
