"""Resource schema definitions and the per-resource state handle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from gl_share.errors import ValidationError

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class SchemaType(Enum):
    STRING = "string"
    INT = "int"


@dataclass(frozen=True)
class SchemaField:
    """A single configuration attribute of a resource."""

    type: SchemaType
    required: bool = False
    force_new: bool = False
    validate: Callable[[str, Any], None] | None = None

    def check(self, key: str, value: Any) -> None:
        if self.type == SchemaType.INT:
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{key}: expected an integer, got {value!r}")
        elif self.type == SchemaType.STRING:
            if not isinstance(value, str):
                raise ValidationError(f"{key}: expected a string, got {value!r}")
            if self.required and not value:
                raise ValidationError(f"{key}: must not be empty")
        if self.validate is not None:
            self.validate(key, value)


def validate_value_func(values: Iterable[str]) -> Callable[[str, Any], None]:
    """Build a validator accepting only the given values."""
    accepted = tuple(values)

    def validator(key: str, value: Any) -> None:
        if value not in accepted:
            raise ValidationError(f"{key}: {value!r} is not valid, expected one of: {', '.join(accepted)}")

    return validator


def validate_config(schema: dict[str, SchemaField], config: dict[str, Any]) -> None:
    """Check a configuration against a schema, raising ValidationError on the first problem."""
    unknown = sorted(set(config) - set(schema))
    if unknown:
        raise ValidationError(f"unsupported argument(s): {', '.join(unknown)}")
    for key, field in schema.items():
        if config.get(key) is None:
            if field.required:
                raise ValidationError(f"{key}: required argument is missing")
            continue
        field.check(key, config[key])


# ---------------------------------------------------------------------------
# Resource Data
# ---------------------------------------------------------------------------


class ResourceData:
    """
    Mutable handle on one resource instance during a lifecycle call.

    ``state`` is what was last persisted (including ``id``), ``config`` is the
    desired configuration. Reads prefer the configuration; writes go to the
    new state, which is what gets persisted afterwards.
    """

    def __init__(self, state: dict[str, Any] | None = None, config: dict[str, Any] | None = None):
        self._old_state = dict(state or {})
        self._state = dict(self._old_state)
        self.config = dict(config or {})

    @property
    def id(self) -> str:
        return self._state.get("id") or ""

    def set_id(self, value: str) -> None:
        self._state["id"] = value

    def get(self, key: str) -> Any:
        if key in self.config:
            return self.config[key]
        return self._state.get(key)

    def set(self, key: str, value: Any) -> None:
        self._state[key] = value
        # Once refreshed from the server, the state is authoritative
        self.config.pop(key, None)

    def has_change(self, key: str) -> bool:
        """True if the configuration differs from the persisted state for ``key``."""
        if key not in self.config or key not in self._old_state:
            return False
        return self.config[key] != self._old_state[key]

    def is_gone(self) -> bool:
        return not self.id

    def state(self) -> dict[str, Any]:
        """Snapshot of the state to persist. Empty once the resource is gone."""
        if self.is_gone():
            return {}
        snapshot = dict(self._state)
        snapshot.update(self.config)
        return snapshot
