"""
Field projection: turn caller arguments into an allow-listed backend payload.

A field is *present* when its key is in the arguments and its value is not
None. ``False``, ``0`` and ``""`` are present values and are always forwarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from dokploy_cli.exceptions import ValidationError


def is_present(args: Mapping[str, Any], key: str) -> bool:
    return args.get(key) is not None


@dataclass(frozen=True)
class FieldSpec:
    """Declared fields for one backend operation.

    Attributes:
        required: Caller-facing names that must be present.
        optional: Caller-facing names forwarded only when present.
        renames: Caller-facing name -> backend name.
        defaults: Value sent for an absent field (the field is then always
            part of the payload).
    """

    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    renames: Mapping[str, str] = field(default_factory=dict)
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "renames", MappingProxyType(dict(self.renames)))
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    @property
    def fields(self) -> tuple[str, ...]:
        """Every caller-facing name this field set accepts, in payload order."""
        seen = dict.fromkeys(self.required)
        seen.update(dict.fromkeys(self.optional))
        seen.update(dict.fromkeys(self.defaults))
        return tuple(seen)

    def with_renames(self, renames: Mapping[str, str]) -> FieldSpec:
        merged = dict(self.renames)
        merged.update(renames)
        return replace(self, renames=merged)

    def with_fields(self, required=(), optional=()) -> FieldSpec:
        return replace(
            self,
            required=self.required + tuple(required),
            optional=self.optional + tuple(optional),
        )


def missing_fields(args: Mapping[str, Any], spec: FieldSpec) -> list[str]:
    return [name for name in spec.required if not is_present(args, name)]


def project(args: Mapping[str, Any], spec: FieldSpec) -> dict[str, Any]:
    """Build the backend payload for *args* under *spec*.

    Raises ValidationError naming every missing required field.
    Unknown keys in *args* are dropped.
    """
    missing = missing_fields(args, spec)
    if missing:
        raise ValidationError(f"[ERROR] Missing required field(s): {', '.join(missing)}")
    payload: dict[str, Any] = {}
    for name in spec.fields:
        if is_present(args, name):
            value = args[name]
        elif name in spec.defaults:
            value = spec.defaults[name]
        else:
            continue
        payload[spec.renames.get(name, name)] = value
    return payload
