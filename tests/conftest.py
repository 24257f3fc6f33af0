"""
Shared pytest fixtures and configuration for sepgen tests.

Provides a fresh form session per test, the Typer test client, and mocks for
questionary so no test ever blocks on an interactive prompt.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

_REPO_ROOT = Path(__file__).resolve().parent.parent

# Put `src/` first so `import sepgen` uses workspace code.
if str(_REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT / "src"))

from sepgen.core.form import FormSession  # noqa: E402
from sepgen.core.utils import config as config_module  # noqa: E402
from sepgen.core.utils.config import main as config_main  # noqa: E402
from sepgen.core.utils.logger import reset_logging  # noqa: E402

VALID_MAC = "0007A1B2C3D4"


# ============================================================================
# Form Fixtures
# ============================================================================


@pytest.fixture
def session() -> FormSession:
    """A freshly built form with default values."""
    return FormSession()


@pytest.fixture
def minimal_session(session: FormSession) -> FormSession:
    """The smallest form that serializes: MAC and primary PBX."""
    session.set_text("device", VALID_MAC)
    session.set_text("processNodeName1", "192.168.1.10")
    return session


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def typer_test_client():
    """Typer test client for CLI testing."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def mock_questionary():
    """Mock questionary for all tests to prevent interactive prompts."""
    mock_confirm_instance = MagicMock()
    mock_confirm_instance.ask.return_value = True

    mock_text_instance = MagicMock()
    mock_text_instance.ask.return_value = ""

    mock_select_instance = MagicMock()
    mock_select_instance.ask.return_value = None

    with patch("questionary.confirm") as mock_confirm, patch(
        "questionary.text"
    ) as mock_text, patch("questionary.select") as mock_select:
        mock_confirm.return_value = mock_confirm_instance
        mock_text.return_value = mock_text_instance
        mock_select.return_value = mock_select_instance

        yield {
            "confirm": mock_confirm,
            "text": mock_text,
            "select": mock_select,
        }


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate each test from SEPGEN_* variables, .env files and global config."""
    for key in list(os.environ):
        if key.startswith("SEPGEN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config_main, "_env_loaded", True)
    config_module.set_config(None)
    yield
    config_module.set_config(None)
    reset_logging()
