"""Save action for the interactive editor."""

from pathlib import Path
from typing import Optional

from rich import print

from sepgen.core.errors import OutputWriteError, ValidationError
from sepgen.core.form import FormSession
from sepgen.core.utils.config import SepGenConfig
from sepgen.utils.text_utils import emoji_text


def save_form_interactive(session: FormSession, config: SepGenConfig) -> Optional[Path]:
    """
    Write the provisioning file for the current form.

    Failures are reported and leave the session as it was, so the operator
    can fix the form and try again.
    """
    print(emoji_text("\n[bold cyan]💾 Save Provisioning File[/bold cyan]", config.use_emojis))
    if not session.registry.value("processNodeName1"):
        print(
            emoji_text(
                "[yellow]⚠️ Primary PBX IP is empty; the phone will have no call manager.[/yellow]",
                config.use_emojis,
            )
        )
    try:
        path = session.save(
            config.output.output_dir, escape_values=config.output.escape_values
        )
    except ValidationError as e:
        print(emoji_text(f"[red]❌ ERR: {e}[/red]", config.use_emojis))
        return None
    except OutputWriteError as e:
        print(emoji_text(f"[red]❌ Failed to save: {e}[/red]", config.use_emojis))
        return None

    print(emoji_text(f"[green]✅ SUCCESS: {path} saved.[/green]", config.use_emojis))
    return path
