"""
Endpoint resolvers used by the family tables.

Three strategies pick the backend endpoint for an action:

- ``Route``: one fixed endpoint.
- ``Branch``: a discriminator argument selects one of several routes.
- ``FirstOf``: the first route whose required fields are all present wins.

A family with ``variant_arg`` set also substitutes the validated database
variant into ``{variant}`` endpoint templates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Union

from dokploy_cli.exceptions import ValidationError
from dokploy_cli.fields import FieldSpec, is_present, missing_fields

GET = "GET"
POST = "POST"


@dataclass(frozen=True)
class Route:
    """A single backend operation.

    ``spec=None`` means the call carries no query string / body at all.
    """

    method: str
    endpoint: str
    spec: FieldSpec | None = field(default_factory=FieldSpec)
    variant_create: bool = False

    def select(self, args: Mapping[str, Any]) -> Route:
        return self


@dataclass(frozen=True)
class Branch:
    """Select a route by the value of ``arg`` (or by its presence)."""

    arg: str
    routes: Mapping[Any, Route]
    default: Any = None
    presence: bool = False

    def __post_init__(self):
        object.__setattr__(self, "routes", MappingProxyType(dict(self.routes)))

    def select(self, args: Mapping[str, Any]) -> Route:
        if self.presence:
            return self.routes[is_present(args, self.arg)]
        value = args.get(self.arg)
        if value is None:
            value = self.default
        if value is None:
            raise ValidationError(f"[ERROR] Missing required field(s): {self.arg}")
        for key, route in self.routes.items():
            # bool is an int subclass; True must not select a key of 1.
            if key == value and type(key) is type(value):
                return route
        valid = ", ".join(str(k).lower() if isinstance(k, bool) else str(k) for k in self.routes)
        raise ValidationError(f"[ERROR] Invalid {self.arg} {value!r}. Valid: {valid}")


@dataclass(frozen=True)
class FirstOf:
    """Composite read: exactly one of several mutually exclusive lookups."""

    candidates: tuple[Route, ...]
    message: str

    def select(self, args: Mapping[str, Any]) -> Route:
        for route in self.candidates:
            if route.spec is not None and not missing_fields(args, route.spec):
                return route
        raise ValidationError(f"[ERROR] {self.message}")


Resolver = Union[Route, Branch, FirstOf]


@dataclass(frozen=True)
class Family:
    """Declarative descriptor for one resource family."""

    name: str
    actions: Mapping[str, Resolver]
    variant_arg: str | None = None
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))

    @property
    def action_names(self) -> tuple[str, ...]:
        return tuple(self.actions)

    def iter_routes(self) -> Iterator[tuple[str, Any, Route]]:
        """Yield (action, branch key or None, route) for every reachable route."""
        for action, resolver in self.actions.items():
            if isinstance(resolver, Branch):
                for key, route in resolver.routes.items():
                    yield action, key, route
            elif isinstance(resolver, FirstOf):
                for route in resolver.candidates:
                    yield action, route.endpoint, route
            else:
                yield action, None, resolver


def get(endpoint, required=(), optional=(), *, renames=None, defaults=None):
    return Route(GET, endpoint, FieldSpec(tuple(required), tuple(optional), renames or {}, defaults or {}))


def post(endpoint, required=(), optional=(), *, renames=None, defaults=None, variant_create=False):
    return Route(
        POST,
        endpoint,
        FieldSpec(tuple(required), tuple(optional), renames or {}, defaults or {}),
        variant_create=variant_create,
    )
