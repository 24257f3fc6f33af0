"""
Interactive form editor for sepgen.

The operator walks the visible fields of the form, edits them one at a time,
and saves the provisioning file when ready. Fields that only apply to a
particular mode appear and disappear as their trigger fields change.
"""

from typing import Optional

import questionary
from rich import print

from sepgen.core.form import Field, FormSession
from sepgen.core.form.registry import MAC_FIELD_ID
from sepgen.core.serializer import MAC_LENGTH
from sepgen.core.utils.config import SepGenConfig, get_config
from sepgen.core.utils.logger import log_info
from sepgen.utils.text_utils import emoji_text

from .display_utils import show_banner, show_document, show_form_values
from .save import save_form_interactive
from .settings.ui import (
    PREVIEW_CHOICE_KEY,
    QUIT_CHOICE_KEY,
    REVIEW_CHOICE_KEY,
    SAVE_CHOICE_KEY,
    build_menu_choices,
    edit_field,
)


def _report_visibility(flipped: list[Field]) -> None:
    for f in flipped:
        if f.hidden:
            print(f"[dim]  - {f.label} hidden[/dim]")
        else:
            print(f"[yellow]  + {f.label} now available[/yellow]")


def _confirm_discard() -> bool:
    try:
        answer = questionary.confirm(
            "Discard unsaved changes and quit?", default=False
        ).ask()
    except KeyboardInterrupt:
        return True
    return bool(answer)


def edit_form_interactive(
    session: Optional[FormSession] = None,
    config: Optional[SepGenConfig] = None,
) -> FormSession:
    """Run the editor loop until the operator quits; returns the session."""
    session = session or FormSession()
    config = config or get_config()

    show_banner(len(session.navigable_fields()))
    last: Optional[str] = None

    while True:
        suffix = " (unsaved changes)" if session.dirty else ""
        navigable = {f.field_id for f in session.navigable_fields()}
        kwargs = {"default": last} if last in navigable else {}
        choice = questionary.select(
            f"Select a field to edit{suffix}",
            choices=build_menu_choices(session),
            **kwargs,
        ).ask()

        if choice is None or choice == QUIT_CHOICE_KEY:
            if session.dirty and not _confirm_discard():
                continue
            log_info("CLI", "Form editor closed")
            break

        try:
            if choice == SAVE_CHOICE_KEY:
                save_form_interactive(session, config)
            elif choice == REVIEW_CHOICE_KEY:
                show_form_values(session)
            elif choice == PREVIEW_CHOICE_KEY:
                show_document(session.serialize(escape_values=config.output.escape_values))
            else:
                last = choice
                edit_field(session, choice, on_visibility_change=_report_visibility)
                if choice == MAC_FIELD_ID:
                    mac = session.field(MAC_FIELD_ID).raw_value
                    if len(mac) != MAC_LENGTH:
                        print(
                            emoji_text(
                                f"[yellow]⚠️ MAC address has {len(mac)} hex digits, "
                                f"{MAC_LENGTH} are needed to save.[/yellow]",
                                config.use_emojis,
                            )
                        )
        except Exception as exc:
            print(f"[red]❌ Form editor error: {exc}[/red]")

    return session
