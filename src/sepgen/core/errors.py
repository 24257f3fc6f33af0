"""
Exception types raised by the sepgen core.

Lookups never raise: a missing XML key resolves to an empty string. Everything
that can fail during a session is local to a single mutation or save attempt
and leaves the in-memory form untouched.
"""


class SepGenError(Exception):
    """Base class for all sepgen errors."""


class ValidationError(SepGenError):
    """The form cannot be serialized (e.g. the MAC address is malformed)."""

    def __init__(self, message: str, field_id: str | None = None):
        self.field_id = field_id
        super().__init__(message)


class FieldError(SepGenError):
    """A mutation targeted an unknown field or supplied an unusable value."""

    def __init__(self, field_id: str, message: str):
        self.field_id = field_id
        super().__init__(f"{field_id}: {message}")


class OutputWriteError(SepGenError):
    """Writing the provisioning file failed (permissions, disk full, ...)."""

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Failed to write {path}: {error}")
