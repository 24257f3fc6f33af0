"""
Name-indexed value accessors shared by the visibility engine and serializer.

Both accessors are total: an unknown key is not an error and resolves to an
empty string, since nearly every field is optional. When several fields share
an XML key (the four button groups) the first one in registry order wins;
per-button data must be read through ``FieldRegistry.buttons``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .registry import FieldRegistry


def value(registry: "FieldRegistry", xml_key: str) -> str:
    """Raw value of the first field bound to ``xml_key``, or ""."""
    f = registry.find(xml_key)
    return f.raw_value if f else ""


def encoded_value(registry: "FieldRegistry", xml_key: str) -> str:
    """Encoded value of the selected option, or "" for text or missing fields."""
    f = registry.find(xml_key)
    return f.encoded_value if f else ""
