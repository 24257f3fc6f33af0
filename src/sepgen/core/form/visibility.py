"""
Visibility rules for the provisioning form.

Each rule is a ``Dependency``: when the trigger field changes, the predicate is
evaluated against it and every dependent is shown or hidden accordingly.
Visibility only decides what is offered for editing; it never clears values
and the serializer ignores it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from sepgen.core.utils.logger import log_debug

from . import catalogs
from .fields import Field
from .registry import FieldRegistry


@dataclass(frozen=True)
class Dependency:
    """Show ``dependent_ids`` only while ``shown_when(trigger)`` holds."""

    trigger_id: str
    dependent_ids: tuple[str, ...]
    shown_when: Callable[[Field], bool]
    description: str = ""


def _selected(index: int) -> Callable[[Field], bool]:
    return lambda trigger: trigger.selected_index == index


def _button_dependencies(registry: FieldRegistry) -> list[Dependency]:
    deps = []
    for button in registry.buttons:
        trigger = button.key_function.field_id
        deps.append(
            Dependency(
                trigger,
                (button.extension.field_id, button.label.field_id),
                lambda f: f.encoded_value != "0",
                f"button {button.number}: extension and label unless Disabled",
            )
        )
        deps.append(
            Dependency(
                trigger,
                tuple(f.field_id for f in button.line_only_fields()),
                lambda f: f.encoded_value == "1",
                f"button {button.number}: account settings only for Line",
            )
        )
    return deps


def build_dependencies(registry: FieldRegistry) -> list[Dependency]:
    """Every visibility rule of the form, in evaluation order."""
    deps = [
        Dependency(
            "pcVoiceVlanAccess",
            ("pcPortVlanId",),
            _selected(catalogs.PC_VLAN_SPECIFIC_INDEX),
            "PC VLAN ID only for Tag with Specific VLAN",
        ),
        Dependency(
            "natEnabled",
            ("natAddress",),
            _selected(1),
            "NAT address only when NAT is enabled",
        ),
        Dependency(
            "snmpEnabled",
            ("snmpCommunity",),
            _selected(1),
            "community string only when SNMP is enabled",
        ),
    ]
    deps.extend(_button_dependencies(registry))
    for dep in deps:
        assert dep.trigger_id in registry, f"unknown trigger {dep.trigger_id}"
        for dependent in dep.dependent_ids:
            assert dependent in registry, f"unknown dependent {dependent}"
    return deps


class DependencyTable:
    """Dependencies indexed by trigger field id."""

    def __init__(self, dependencies: Iterable[Dependency]):
        self._by_trigger: dict[str, list[Dependency]] = {}
        for dep in dependencies:
            self._by_trigger.setdefault(dep.trigger_id, []).append(dep)

    @classmethod
    def for_registry(cls, registry: FieldRegistry) -> "DependencyTable":
        return cls(build_dependencies(registry))

    def __iter__(self):
        for deps in self._by_trigger.values():
            yield from deps

    @property
    def triggers(self) -> list[str]:
        return list(self._by_trigger)

    def dependents_of(self, trigger_id: str) -> list[Dependency]:
        return self._by_trigger.get(trigger_id, [])

    def is_trigger(self, trigger_id: str) -> bool:
        return trigger_id in self._by_trigger


def _apply(registry: FieldRegistry, dep: Dependency) -> list[Field]:
    trigger = registry.get(dep.trigger_id)
    if trigger is None:
        return []
    hidden = not dep.shown_when(trigger)
    changed = []
    for dependent_id in dep.dependent_ids:
        dependent = registry.get(dependent_id)
        if dependent is not None and dependent.hidden != hidden:
            dependent.hidden = hidden
            changed.append(dependent)
            state = "hidden" if hidden else "shown"
            log_debug(
                "FORM", f"{dependent_id} {state}", context=dep.description or dep.trigger_id
            )
    return changed


def apply_dependencies(
    registry: FieldRegistry,
    trigger_id: str,
    table: DependencyTable | None = None,
) -> list[Field]:
    """Recompute only the dependents of ``trigger_id``; return fields that flipped."""
    table = table or DependencyTable.for_registry(registry)
    changed: list[Field] = []
    for dep in table.dependents_of(trigger_id):
        changed.extend(_apply(registry, dep))
    return changed


def recompute_visibility(
    registry: FieldRegistry, table: DependencyTable | None = None
) -> list[Field]:
    """Evaluate every rule once. Idempotent for unchanged values."""
    table = table or DependencyTable.for_registry(registry)
    changed: list[Field] = []
    for dep in table:
        changed.extend(_apply(registry, dep))
    return changed
