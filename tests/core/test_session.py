"""
Tests for FormSession mutations.
"""

import logging

import pytest

from sepgen.core.errors import FieldError, SepGenError, ValidationError
from sepgen.core.form import FormSession
from sepgen.core.utils.logger import setup_logging


class TestSetText:
    def test_set_text_marks_dirty(self, session: FormSession) -> None:
        assert not session.dirty
        assert session.set_text("deviceLabel", "Reception") == []
        assert session.field("deviceLabel").raw_value == "Reception"
        assert session.dirty

    def test_unchanged_text_is_a_no_op(self, session: FormSession) -> None:
        session.set_text("deviceLabel", "")
        assert not session.dirty

    def test_mac_is_sanitized_on_commit(self, session: FormSession) -> None:
        session.set_text("device", "00:07:a1-B2.c3d4")
        assert session.field("device").raw_value == "0007A1B2C3D4"

    def test_mac_sanitization_is_idempotent(self, session: FormSession) -> None:
        session.set_text("device", "0007A1B2C3D4")
        session.dirty = False
        session.set_text("device", "0007a1b2c3d4")
        assert session.field("device").raw_value == "0007A1B2C3D4"
        assert not session.dirty

    def test_text_on_dropdown_rejected(self, session: FormSession) -> None:
        with pytest.raises(FieldError):
            session.set_text("natEnabled", "Yes")
        assert session.field("natEnabled").raw_value == "No"

    def test_text_on_header_rejected(self, session: FormSession) -> None:
        with pytest.raises(FieldError):
            session.set_text("section.identity", "x")

    def test_unknown_field(self, session: FormSession) -> None:
        with pytest.raises(FieldError) as exc_info:
            session.set_text("nope", "x")
        assert exc_info.value.field_id == "nope"
        assert isinstance(exc_info.value, SepGenError)


class TestSelectOption:
    def test_nat_yes_shows_address(self, session: FormSession) -> None:
        flipped = session.select_option("natEnabled", 1)
        assert [f.field_id for f in flipped] == ["natAddress"]
        assert not session.field("natAddress").hidden

    def test_out_of_range_index(self, session: FormSession) -> None:
        with pytest.raises(FieldError):
            session.select_option("natEnabled", 7)
        assert session.field("natEnabled").selected_index == 0
        assert not session.dirty

    def test_select_on_text_field_rejected(self, session: FormSession) -> None:
        with pytest.raises(FieldError):
            session.select_option("mtu", 0)

    def test_disabling_button_hides_sub_fields(self, session: FormSession) -> None:
        flipped = session.select_option("button1.lineType", 0)
        assert len(flipped) == 8
        assert all(f.hidden for f in session.button(1).sub_fields())

    def test_enabling_line_shows_sub_fields(self, session: FormSession) -> None:
        session.select_label("button4.lineType", "Line")
        assert not any(f.hidden for f in session.button(4).sub_fields())

    def test_select_label_accepts_encoded_value(self, session: FormSession) -> None:
        session.select_label("transportLayerProtocol", "3")
        assert session.field("transportLayerProtocol").raw_value == "TLS"

    def test_select_label_unknown_option(self, session: FormSession) -> None:
        with pytest.raises(FieldError, match="choices"):
            session.select_label("natEnabled", "perhaps")

    def test_unknown_button(self, session: FormSession) -> None:
        with pytest.raises(FieldError):
            session.button(5)


class TestAssign:
    def test_assign_dispatches_on_field_type(self, session: FormSession) -> None:
        session.assign("snmpEnabled", "enabled")
        session.assign("snmpCommunity", "public")
        assert session.field("snmpEnabled").encoded_value == "1"
        assert session.field("snmpCommunity").raw_value == "public"

    def test_navigable_fields_follow_visibility(self, session: FormSession) -> None:
        before = {f.field_id for f in session.navigable_fields()}
        session.assign("natEnabled", "Yes")
        after = {f.field_id for f in session.navigable_fields()}
        assert after - before == {"natAddress"}


class TestLogging:
    def test_secret_values_are_masked(self, session: FormSession, caplog) -> None:
        setup_logging(level="INFO")
        with caplog.at_level(logging.INFO, logger="sepgen"):
            session.set_text("adminPassword", "hunter2")
        assert "hunter2" not in caplog.text
        assert "adminPassword" in caplog.text


class TestSave:
    def test_save_clears_dirty(self, minimal_session: FormSession, tmp_path) -> None:
        assert minimal_session.dirty
        path = minimal_session.save(tmp_path)
        assert path == tmp_path / "SEP0007A1B2C3D4.cnf.xml"
        assert not minimal_session.dirty
        assert minimal_session.last_saved == path

    def test_invalid_mac_keeps_session_dirty(self, session: FormSession, tmp_path) -> None:
        session.set_text("device", "0007A1")
        with pytest.raises(ValidationError):
            session.save(tmp_path)
        assert session.dirty
        assert list(tmp_path.iterdir()) == []
