"""
Tests for the name-indexed lookup layer.
"""

from sepgen.core.form import build_registry, encoded_value, value


def test_lookup_miss_is_empty_string() -> None:
    registry = build_registry()
    assert value(registry, "doesNotExist") == ""
    assert encoded_value(registry, "doesNotExist") == ""
    assert value(registry, "") == ""


def test_value_returns_raw_text() -> None:
    registry = build_registry()
    registry.get("deviceLabel").raw_value = "Reception"
    assert value(registry, "deviceLabel") == "Reception"
    assert registry.value("deviceLabel") == "Reception"


def test_dropdown_value_and_encoded_value() -> None:
    registry = build_registry()
    assert value(registry, "transportLayerProtocol") == "UDP"
    assert encoded_value(registry, "transportLayerProtocol") == "1"


def test_encoded_value_of_text_field_is_empty() -> None:
    registry = build_registry()
    registry.get("mtu").raw_value = "1400"
    assert encoded_value(registry, "mtu") == ""


def test_shared_key_resolves_to_first_button() -> None:
    registry = build_registry()
    registry.buttons[0].extension.raw_value = "1001"
    registry.buttons[1].extension.raw_value = "1002"
    assert value(registry, "name") == "1001"
    assert encoded_value(registry, "lineType") == "1"
