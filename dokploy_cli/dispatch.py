"""
Command dispatcher: validate → resolve → project → execute.

The dispatcher is stateless. It holds only the BackendClient it was given,
adds no retries and never reshapes the decoded backend payload.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping

from dokploy_cli.exceptions import ValidationError
from dokploy_cli.families import get_family
from dokploy_cli.fields import project
from dokploy_cli.models import CommandRequest
from dokploy_cli.registry import DatabaseVariant, get_variant
from dokploy_cli.routes import GET, Route

# Caller-facing identifier replaced by the variant's backend id field.
VARIANT_ID_ARG = "databaseId"


def _bind_variant(route: Route, variant: DatabaseVariant) -> Route:
    """Fill ``{variant}`` and swap in the variant identifier field."""
    spec = route.spec.with_renames({VARIANT_ID_ARG: variant.id_field})
    if route.variant_create:
        spec = spec.with_fields(
            required=variant.create_required,
            optional=("databaseRootPassword",) if variant.supports_root_password else (),
        )
    return replace(route, endpoint=route.endpoint.format(variant=variant.name), spec=spec)


class Dispatcher:
    """Translate named commands into Dokploy API calls.

    Args:
        client: Anything with ``get(path, params)`` / ``post(path, body)``,
            normally a ``dokploy_cli.api.BackendClient``.
    """

    def __init__(self, client):
        self.client = client

    def resolve(self, family: str, action: str, args: Mapping[str, Any] | None = None) -> Route:
        """Return the concrete route for a command without calling the API."""
        args = args or {}
        fam = get_family(family)
        resolver = fam.actions.get(action)
        if resolver is None:
            raise ValidationError(
                f"[ERROR] Unknown action {action!r} for {fam.name}. "
                f"Valid: {', '.join(fam.action_names)}"
            )
        variant = None
        if fam.variant_arg:
            if args.get(fam.variant_arg) is None:
                raise ValidationError(f"[ERROR] Missing required field(s): {fam.variant_arg}")
            variant = get_variant(args[fam.variant_arg])
        route = resolver.select(args)
        if variant is not None:
            route = _bind_variant(route, variant)
        return route

    def dispatch(self, family: str, action: str, args: Mapping[str, Any] | None = None) -> Any:
        """Run one command and return the decoded backend payload (None when empty)."""
        args = dict(args or {})
        route = self.resolve(family, action, args)
        payload = project(args, route.spec) if route.spec is not None else None
        if route.method == GET:
            return self.client.get(route.endpoint, payload)
        return self.client.post(route.endpoint, payload)

    def dispatch_request(self, request: CommandRequest) -> Any:
        return self.dispatch(request.family, request.action, request.args)
