"""
Typer-based CLI for sepgen.

Run without a command for the interactive form editor, or drive the form from
the command line for scripted provisioning:

    sepgen                                  # interactive editor
    sepgen fields --section ethernet        # list field ids
    sepgen preview --set device=0007A1B2C3D4 --set processNodeName1=10.0.0.5
    sepgen generate -o /srv/tftp --set device=0007A1B2C3D4 --set processNodeName1=10.0.0.5

Global options (``--config``, ``--log-level``, ``--output-dir``) are applied
before any command runs.
"""

from pathlib import Path

import typer
from rich import print

from sepgen.core.errors import FieldError, OutputWriteError, ValidationError
from sepgen.core.form import FormSession, build_registry
from sepgen.core.utils.config import get_config, load_config
from sepgen.core.utils.logger import log_error, log_info, setup_logging
from sepgen.utils.error_handling import graceful_exit

from .assignments import apply_assignments
from .display_utils import show_field_catalog
from .exit_codes import CliExit

app = typer.Typer(
    name="sepgen",
    help="📞 sepgen - SIP phone provisioning file generator",
    add_completion=False,
    rich_markup_mode="rich",
)

SET_OPTION_HELP = (
    "Field assignment FIELD=VALUE (repeatable). Dropdowns accept an option "
    "label or its encoded value."
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory the SEP<MAC>.cnf.xml file is written to",
    ),
):
    """📞 sepgen - SIP phone provisioning file generator"""
    if config_file:
        try:
            load_config(str(config_file))
        except ValueError as e:
            log_error("CLI", f"Failed to load configuration from {config_file}", exception=e)
            raise CliExit.config_error(f"Failed to load configuration: {e}")

    config = get_config()
    if log_level:
        config.logging.level = log_level
        config.logging.validate()
    try:
        setup_logging(level=config.logging.level, log_file=config.logging.log_file)
    except OSError as e:
        raise CliExit.config_error(f"Cannot open log file {config.logging.log_file}: {e}")

    if output_dir:
        config.output.output_dir = str(output_dir)
        log_info("CLI", f"Output directory set to {output_dir}")

    if ctx.invoked_subcommand is None:
        _run_editor()


def _run_editor() -> None:
    from .form_editor import edit_form_interactive

    with graceful_exit():
        edit_form_interactive(config=get_config())


@app.command()
def edit():
    """Open the interactive form editor."""
    _run_editor()


@app.command()
def fields(
    section: str | None = typer.Option(
        None, "--section", "-s", help="Only list fields of this section (e.g. button2)"
    ),
):
    """List every form field with its id, kind and default value."""
    registry = build_registry()
    if section and registry.section(section) is None:
        keys = ", ".join(s.key for s in registry.sections)
        raise CliExit.config_error(f"Unknown section '{section}'. Sections: {keys}")
    show_field_catalog(registry, section)


def _session_from_assignments(assignments: list[str] | None) -> FormSession:
    session = FormSession()
    try:
        apply_assignments(session, assignments)
    except (FieldError, typer.BadParameter) as e:
        log_error("CLI", "Invalid field assignment", exception=e)
        raise CliExit.from_error(e, "Invalid assignment")
    return session


@app.command()
def preview(
    assignments: list[str] | None = typer.Option(
        None, "--set", help=SET_OPTION_HELP
    ),
):
    """Print the provisioning document without writing it."""
    session = _session_from_assignments(assignments)
    try:
        document = session.serialize(escape_values=get_config().output.escape_values)
    except ValidationError as e:
        raise CliExit.from_error(e, "Cannot render document")
    typer.echo(document.decode("utf-8"), nl=False)


@app.command()
def generate(
    assignments: list[str] | None = typer.Option(
        None, "--set", help=SET_OPTION_HELP
    ),
):
    """Write SEP<MAC>.cnf.xml for one device."""
    config = get_config()
    session = _session_from_assignments(assignments)
    try:
        path = session.save(config.output.output_dir, escape_values=config.output.escape_values)
    except (ValidationError, OutputWriteError) as e:
        raise CliExit.from_error(e, "Generation failed")
    print(f"[green]✅ Wrote {path}[/green]")


if __name__ == "__main__":
    app()
