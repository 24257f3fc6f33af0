"""Rich rendering helpers for the form and the generated document."""

from __future__ import annotations

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from sepgen.core.form import FieldKind, FieldRegistry, FormSession
from sepgen.core.form.session import SECRET_KEYS

from .settings.ui import default_formatter


def show_banner(field_count: int) -> None:
    console = Console()
    console.print("==========================================", style="bold blue")
    console.print("  📞  sepgen - SIP Phone Config Generator", style="bold cyan")
    console.print(f"  Fields: {field_count}", style="cyan")
    console.print("==========================================", style="bold blue")


def show_form_values(session: FormSession) -> None:
    """Print every visible field with its current value, section by section."""
    console = Console()
    table = Table(title="Current Values", show_lines=False)
    table.add_column("Field", style="green")
    table.add_column("Value", style="cyan")
    table.add_column("XML", style="dim")

    for section in session.registry.sections:
        rows = [f for f in section.fields if not f.hidden]
        if not rows:
            continue
        table.add_row(f"[bold]{section.title}[/bold]", "", "")
        for f in rows:
            value = f.raw_value
            if f.xml_key in SECRET_KEYS and value:
                value = "****"
            label = f"[red]{f.label}[/red]" if f.kind is FieldKind.REQUIRED else f.label
            table.add_row(label, default_formatter(value), f.xml_key)
    console.print(table)


def show_field_catalog(registry: FieldRegistry, section_key: str | None = None) -> int:
    """Print the field catalog; returns the number of rows shown."""
    console = Console()
    table = Table(title="Form Fields")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Label", style="green")
    table.add_column("Kind")
    table.add_column("Default")
    table.add_column("Options", justify="right")

    count = 0
    for section in registry.sections:
        if section_key and section.key != section_key:
            continue
        for f in section.fields:
            table.add_row(
                f.field_id,
                f.label,
                f.kind.value,
                default_formatter(f.default_value),
                str(len(f.options)) if f.options else "",
            )
            count += 1
    console.print(table)
    return count


def show_document(document: bytes) -> None:
    console = Console()
    console.print(Syntax(document.decode("utf-8"), "xml", word_wrap=True))
