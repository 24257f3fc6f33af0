"""Dynamic form model: field registry, lookups, visibility rules and session."""

from .fields import Field, FieldKind, Option
from .lookup import encoded_value, value
from .registry import (
    BUTTON_COUNT,
    MAC_FIELD_ID,
    ButtonGroup,
    FieldRegistry,
    FormBuilder,
    Section,
    build_registry,
)
from .session import FormSession
from .visibility import (
    Dependency,
    DependencyTable,
    apply_dependencies,
    build_dependencies,
    recompute_visibility,
)

__all__ = [
    # fields
    "Field",
    "FieldKind",
    "Option",
    # registry
    "BUTTON_COUNT",
    "MAC_FIELD_ID",
    "ButtonGroup",
    "FieldRegistry",
    "FormBuilder",
    "Section",
    "build_registry",
    # lookup
    "encoded_value",
    "value",
    # visibility
    "Dependency",
    "DependencyTable",
    "apply_dependencies",
    "build_dependencies",
    "recompute_visibility",
    # session
    "FormSession",
]
