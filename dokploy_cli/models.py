"""
Typed models for command requests and raw JSON payloads.
"""

from dataclasses import dataclass, field

from dokploy_cli.exceptions import CliError, ValidationError


@dataclass(frozen=True)
class ObjectPayload:
    """Typed wrapper for raw JSON object payloads."""

    data: dict

    @classmethod
    def from_value(cls, value, context):
        if isinstance(value, dict):
            return cls(data=value)
        raise CliError(
            f"[ERROR] Invalid JSON in {context}: expected object, got {type(value).__name__}."
        )


@dataclass(frozen=True)
class CommandRequest:
    """One inbound command: ``{family, action, args}``. Lives for a single dispatch."""

    family: str
    action: str
    args: dict = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, value):
        """Build a request from ``{"family", "action", "args"?}``."""
        if not isinstance(value, dict):
            raise ValidationError("[ERROR] Command must be a JSON object.")
        family = value.get("family")
        action = value.get("action")
        if not isinstance(family, str) or not isinstance(action, str):
            raise ValidationError("[ERROR] Command needs string 'family' and 'action' fields.")
        args = value.get("args")
        if args is None:
            args = {}
        return cls(family, action, ObjectPayload.from_value(args, "args").data)
