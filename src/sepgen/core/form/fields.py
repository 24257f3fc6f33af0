"""Field and option types for the provisioning form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FieldKind(Enum):
    """Rendering emphasis for a field."""

    HEADER = "header"
    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class Option:
    """One dropdown choice: what the operator sees and what the phone receives."""

    label: str
    value: str


@dataclass(eq=False)
class Field:
    """
    A single configuration item of the form.

    Attributes:
        field_id: Stable unique identifier (xml key, ``button<N>.<key>`` or
            ``section.<key>`` for headers)
        label: Display name
        xml_key: XML element the value is written to (empty for headers)
        kind: Header, required or optional
        help: Operator help text
        section: Key of the owning section
        options: Dropdown choices; empty for free-text fields
        selected_index: Index into ``options`` for dropdowns
        raw_value: Free text, or the selected option's label for dropdowns
        hidden: Current visibility, maintained by the visibility engine
    """

    field_id: str
    label: str
    xml_key: str
    kind: FieldKind
    help: str = ""
    section: str = ""
    options: tuple[Option, ...] = ()
    selected_index: int = 0
    raw_value: str = ""
    hidden: bool = False
    default_value: str = field(default="", repr=False)

    @property
    def is_dropdown(self) -> bool:
        return bool(self.options)

    @property
    def is_header(self) -> bool:
        return self.kind is FieldKind.HEADER

    @property
    def selected_option(self) -> Option | None:
        if not self.options:
            return None
        return self.options[self.selected_index]

    @property
    def encoded_value(self) -> str:
        """Encoded value of the selected option, or "" for free-text fields."""
        option = self.selected_option
        return option.value if option else ""

    @property
    def effective_value(self) -> str:
        """Value the serializer writes: encoded for dropdowns, raw otherwise."""
        return self.encoded_value if self.is_dropdown else self.raw_value

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.options):
            raise IndexError(
                f"Option index {index} out of range for {self.field_id} "
                f"({len(self.options)} options)"
            )
        self.selected_index = index
        self.raw_value = self.options[index].label

    def option_index(self, text: str) -> int | None:
        """Find an option by label or encoded value (case-insensitive)."""
        needle = text.strip().lower()
        for idx, option in enumerate(self.options):
            if option.label.lower() == needle:
                return idx
        for idx, option in enumerate(self.options):
            if option.value.lower() == needle:
                return idx
        return None
