"""
Tests for --set FIELD=VALUE parsing.
"""

import pytest
import typer

from sepgen.cli.assignments import apply_assignments, parse_assignment
from sepgen.core.errors import FieldError
from sepgen.core.form import FormSession


class TestParseAssignment:
    def test_splits_on_first_equals(self) -> None:
        assert parse_assignment("idleURL=http://x/y?a=b") == ("idleURL", "http://x/y?a=b")

    def test_strips_whitespace(self) -> None:
        assert parse_assignment(" mtu = 1400 ") == ("mtu", "1400")

    def test_empty_value_allowed(self) -> None:
        assert parse_assignment("deviceLabel=") == ("deviceLabel", "")

    @pytest.mark.parametrize("text", ["mtu", "=1400", ""])
    def test_malformed(self, text) -> None:
        with pytest.raises(typer.BadParameter):
            parse_assignment(text)


class TestApplyAssignments:
    def test_applies_in_order(self, session: FormSession) -> None:
        apply_assignments(
            session,
            ["device=00:07:a1:b2:c3:d4", "button2.lineType=line", "button2.name=1002"],
        )
        assert session.field("device").raw_value == "0007A1B2C3D4"
        assert session.button(2).is_line
        assert session.button(2).extension.raw_value == "1002"

    def test_none_is_a_no_op(self, session: FormSession) -> None:
        apply_assignments(session, None)
        assert not session.dirty

    def test_unknown_field(self, session: FormSession) -> None:
        with pytest.raises(FieldError):
            apply_assignments(session, ["colour=blue"])

    def test_unknown_option(self, session: FormSession) -> None:
        with pytest.raises(FieldError):
            apply_assignments(session, ["transportLayerProtocol=SCTP"])
