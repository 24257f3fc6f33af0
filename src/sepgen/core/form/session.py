"""
Form session: the single owner of a field registry.

Every mutation goes through the session so that the visibility of the
affected dependents is recomputed immediately afterwards. The terminal shell
and the non-interactive commands both drive the form through this API.
"""

from __future__ import annotations

from pathlib import Path

from sepgen.core.errors import FieldError
from sepgen.core.utils.logger import log_configuration_change

from .fields import Field
from .registry import MAC_FIELD_ID, ButtonGroup, FieldRegistry, build_registry
from .visibility import DependencyTable, apply_dependencies, recompute_visibility

SECRET_KEYS = frozenset({"sshPassword", "adminPassword", "authPassword", "snmpCommunity"})


def _loggable(f: Field, text: str) -> str:
    if f.xml_key in SECRET_KEYS and text:
        return "****"
    return text


class FormSession:
    """Holds the form state for one editing session."""

    def __init__(self, registry: FieldRegistry | None = None):
        self.registry = registry or build_registry()
        self.dependencies = DependencyTable.for_registry(self.registry)
        recompute_visibility(self.registry, self.dependencies)
        self.dirty = False
        self.last_saved: Path | None = None

    def field(self, field_id: str) -> Field:
        f = self.registry.get(field_id)
        if f is None:
            raise FieldError(field_id, "unknown field")
        return f

    def button(self, number: int) -> ButtonGroup:
        for group in self.registry.buttons:
            if group.number == number:
                return group
        raise FieldError(f"button{number}", "unknown button")

    def visible_fields(self) -> list[Field]:
        return self.registry.visible_fields()

    def navigable_fields(self) -> list[Field]:
        return self.registry.navigable_fields()

    def _after_change(self, f: Field, old: str) -> list[Field]:
        self.dirty = True
        log_configuration_change(f.field_id, _loggable(f, old), _loggable(f, f.raw_value))
        return apply_dependencies(self.registry, f.field_id, self.dependencies)

    def set_text(self, field_id: str, text: str) -> list[Field]:
        """
        Commit free text to a field.

        The MAC address is sanitized on commit. Returns the fields whose
        visibility flipped as a result.
        """
        from sepgen.core.serializer import sanitize_mac

        f = self.field(field_id)
        if f.is_header:
            raise FieldError(field_id, "section headers hold no value")
        if f.is_dropdown:
            raise FieldError(field_id, "dropdown fields take an option, not text")
        if field_id == MAC_FIELD_ID:
            text = sanitize_mac(text)
        if text == f.raw_value:
            return []
        old = f.raw_value
        f.raw_value = text
        return self._after_change(f, old)

    def select_option(self, field_id: str, index: int) -> list[Field]:
        """Select a dropdown option by index; returns fields whose visibility flipped."""
        f = self.field(field_id)
        if not f.is_dropdown:
            raise FieldError(field_id, "not a dropdown field")
        if index == f.selected_index:
            return []
        old = f.raw_value
        try:
            f.select(index)
        except IndexError as e:
            raise FieldError(field_id, str(e)) from e
        return self._after_change(f, old)

    def select_label(self, field_id: str, text: str) -> list[Field]:
        """Select a dropdown option by its label or encoded value."""
        f = self.field(field_id)
        if not f.is_dropdown:
            raise FieldError(field_id, "not a dropdown field")
        index = f.option_index(text)
        if index is None:
            choices = ", ".join(option.label for option in f.options)
            raise FieldError(field_id, f"no option {text!r} (choices: {choices})")
        return self.select_option(field_id, index)

    def assign(self, field_id: str, text: str) -> list[Field]:
        """Set a field from text, whatever its type."""
        f = self.field(field_id)
        if f.is_dropdown:
            return self.select_label(field_id, text)
        return self.set_text(field_id, text)

    def serialize(self, escape_values: bool = True) -> bytes:
        from sepgen.core.serializer import serialize

        return serialize(self.registry, escape_values=escape_values)

    def save(self, output_dir: str | Path = ".", escape_values: bool = True) -> Path:
        """Write ``SEP<MAC>.cnf.xml``; the session stays usable on failure."""
        from sepgen.core.serializer import write_config

        path = write_config(self.registry, output_dir, escape_values=escape_values)
        self.dirty = False
        self.last_saved = path
        return path
