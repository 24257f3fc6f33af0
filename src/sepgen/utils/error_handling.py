"""
Exit handling for the interactive shell.

The form editor holds only in-memory state, so an interrupt needs no cleanup
beyond telling the operator that unsaved values are discarded.
"""

import sys
from contextlib import contextmanager

import typer

from sepgen.core.utils.logger import log_info


@contextmanager
def graceful_exit():
    """
    Context manager for graceful exit handling.

    Ctrl+C ends the session with exit code 0. ``typer.Exit`` (and ``CliExit``)
    pass through untouched; any other exception is reported and re-raised.
    """
    try:
        yield
    except KeyboardInterrupt:
        print("\n🛑 Interrupted. Unsaved changes were discarded.")
        log_info("CLI", "Session interrupted by user")
        sys.exit(0)
    except Exception as e:
        if isinstance(e, typer.Exit):
            raise
        print(f"\n❌ Unexpected error: {e}")
        raise
