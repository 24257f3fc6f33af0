"""
Tests for rich display helpers.
"""

from sepgen.cli.display_utils import (
    show_banner,
    show_document,
    show_field_catalog,
    show_form_values,
)
from sepgen.core.form import FormSession, build_registry


def test_banner_shows_field_count(capsys):
    show_banner(42)
    assert "Fields: 42" in capsys.readouterr().out


def test_field_catalog_counts_rows(capsys):
    registry = build_registry()
    shown = show_field_catalog(registry)
    assert shown == len(registry.editable_fields())


def test_field_catalog_section_filter(capsys):
    registry = build_registry()
    assert show_field_catalog(registry, "button3") == 9
    assert "button3.lineType" in capsys.readouterr().out


def test_form_values_mask_secrets(capsys):
    session = FormSession()
    session.set_text("sshPassword", "hunter2")
    show_form_values(session)
    out = capsys.readouterr().out
    assert "hunter2" not in out
    assert "****" in out


def test_document_rendered(capsys):
    show_document(b'<?xml version="1.0" encoding="UTF-8"?>\n<device>\n</device>\n')
    assert "<device>" in capsys.readouterr().out
