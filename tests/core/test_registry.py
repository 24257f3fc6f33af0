"""
Tests for the field registry and its builder.
"""

import pytest

from sepgen.core.form import (
    BUTTON_COUNT,
    FieldKind,
    FieldRegistry,
    FormBuilder,
    build_registry,
)
from sepgen.core.form import catalogs


@pytest.fixture
def registry() -> FieldRegistry:
    return build_registry()


class TestBuildRegistry:
    def test_field_ids_are_unique(self, registry: FieldRegistry) -> None:
        ids = [f.field_id for f in registry]
        assert len(ids) == len(set(ids))

    def test_sections_in_form_order(self, registry: FieldRegistry) -> None:
        keys = [s.key for s in registry.sections]
        assert keys == [
            "identity",
            "ethernet",
            "security",
            "hardware",
            "audio_video",
            "features",
            "monitoring",
            "region",
            "urls",
            "button1",
            "button2",
            "button3",
            "button4",
        ]

    def test_every_field_belongs_to_its_section(self, registry: FieldRegistry) -> None:
        for section in registry.sections:
            assert section.header.is_header
            assert section.header.field_id == f"section.{section.key}"
            for f in section.fields:
                assert f.section == section.key
                assert not f.is_header

    def test_required_fields(self, registry: FieldRegistry) -> None:
        required = [f.field_id for f in registry if f.kind is FieldKind.REQUIRED]
        assert required == ["device", "processNodeName1"]

    def test_dropdown_defaults(self, registry: FieldRegistry) -> None:
        assert registry.get("gratuitousARP").raw_value == "Enabled"
        assert registry.get("bluetoothProfile").encoded_value == "Handsfree,Headset"
        assert registry.get("videoBitRate").encoded_value == "1500"
        assert registry.get("dndCallAlert").encoded_value == "5"
        tz = registry.get("timeZone")
        assert tz.selected_index == catalogs.DEFAULT_TIMEZONE_INDEX
        assert tz.encoded_value == "Pacific Standard/Daylight Time"
        assert len(tz.options) == 58

    def test_dropdown_raw_value_is_selected_label(self, registry: FieldRegistry) -> None:
        for f in registry:
            if f.is_dropdown:
                assert f.raw_value == f.options[f.selected_index].label
                assert f.default_value == f.raw_value

    def test_buttons(self, registry: FieldRegistry) -> None:
        assert len(registry.buttons) == BUTTON_COUNT
        assert [b.number for b in registry.buttons] == [1, 2, 3, 4]
        assert registry.buttons[0].line_type == "Line"
        assert registry.buttons[0].is_line
        for button in registry.buttons[1:]:
            assert button.line_type == "Disabled"
            assert button.is_disabled

    def test_button_field_ids_are_prefixed(self, registry: FieldRegistry) -> None:
        button = registry.buttons[1]
        assert button.key_function.field_id == "button2.lineType"
        assert button.extension.field_id == "button2.name"
        assert button.voicemail.field_id == "button2.voiceMailPilot"
        assert len(button.sub_fields()) == 8

    def test_find_returns_first_match(self, registry: FieldRegistry) -> None:
        assert registry.find("name") is registry.buttons[0].extension
        assert registry.find("") is None
        assert registry.find("noSuchKey") is None

    def test_navigable_fields_skip_headers_and_hidden(self, registry: FieldRegistry) -> None:
        navigable = registry.navigable_fields()
        assert all(not f.is_header and not f.hidden for f in navigable)
        ids = {f.field_id for f in navigable}
        assert "natAddress" not in ids
        assert "button2.name" not in ids
        assert "button1.authName" in ids
        assert len(registry.visible_fields()) > len(navigable)

    def test_editable_fields_exclude_headers(self, registry: FieldRegistry) -> None:
        editable = registry.editable_fields()
        assert len(editable) == len(registry) - len(registry.sections)


class TestFormBuilder:
    def test_builder_records_sections_and_prefixes(self) -> None:
        b = FormBuilder()
        b.section("one", "ONE", "first")
        b.add_field("Alpha", "alpha", FieldKind.OPTIONAL, "a")
        b.add_dropdown("Beta", "beta", "b", catalogs.DISABLED_ENABLED, 1)
        group = b.add_button(1, 0)
        b.section("two", "TWO", "second")
        b.add_field("Gamma", "gamma", FieldKind.REQUIRED, "g")
        registry = b.build()

        assert [s.key for s in registry.sections] == ["one", "button1", "two"]
        assert registry.get("beta").raw_value == "Enabled"
        assert group.key_function is registry.get("button1.lineType")
        # the prefix does not leak past the button section
        assert "gamma" in registry

    def test_add_field_before_section_fails(self) -> None:
        with pytest.raises(AssertionError):
            FormBuilder().add_field("Alpha", "alpha", FieldKind.OPTIONAL, "a")

    def test_invalid_default_index_fails(self) -> None:
        b = FormBuilder()
        b.section("one", "ONE", "first")
        with pytest.raises(AssertionError):
            b.add_dropdown("Beta", "beta", "b", catalogs.NO_YES, 5)

    def test_duplicate_ids_rejected(self) -> None:
        b = FormBuilder()
        b.section("one", "ONE", "first")
        b.add_field("Alpha", "alpha", FieldKind.OPTIONAL, "a")
        b.add_field("Alpha again", "alpha", FieldKind.OPTIONAL, "a")
        with pytest.raises(AssertionError):
            b.build()
