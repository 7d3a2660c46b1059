"""
Command implementations for dokploy-cli.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Routing and payload shaping live in dispatch.py (Dispatcher). These thin
wrappers handle argparse → CommandRequest, format selection, and formatter
dispatch.
"""

import sys

from dokploy_cli import config
from dokploy_cli.api import BackendClient, _safe_json_parse
from dokploy_cli.dispatch import Dispatcher
from dokploy_cli.families import FAMILIES, get_family
from dokploy_cli.formatters import formatter_for, mutation_response, output
from dokploy_cli.models import CommandRequest, ObjectPayload
from dokploy_cli.routes import GET

_dispatcher = None


def _get_dispatcher():
    """Return the process-wide Dispatcher, building its client on first use."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher(BackendClient.from_config())
    return _dispatcher


def _parse_args_json(raw):
    if not raw:
        return {}
    return ObjectPayload.from_value(_safe_json_parse(raw, "command args"), "command args").data


# ---------------------------------------------------------------------------
# Structured commands
# ---------------------------------------------------------------------------


def cmd_run(ns):
    """Run ``<family> <action>`` with a JSON object of arguments."""
    _execute(CommandRequest(ns.family, ns.action, _parse_args_json(ns.json_args)), ns.format)


def cmd_exec(ns):
    """Run one ``{"family", "action", "args"}`` JSON command."""
    request = CommandRequest.from_mapping(_safe_json_parse(ns.json_command, "command"))
    _execute(request, ns.format)


def _execute(request, fmt):
    dispatcher = _get_dispatcher()
    route = dispatcher.resolve(request.family, request.action, request.args)
    if config.RUNTIME_VERBOSE:
        print(f"[INFO] {route.method} /{route.endpoint}", file=sys.stderr)
    result = dispatcher.dispatch_request(request)
    if route.method == GET:
        output(
            result,
            formatter_for(request.family, request.action),
            fmt,
            args=request.args,
        )
    else:
        mutation_response(request.family, request.action, result, fmt)


def cmd_families(ns):
    """List command families and their actions."""
    if ns.format == "table":
        for fam in FAMILIES.values():
            print(f"{fam.name:<12} {', '.join(fam.action_names)}")
        return
    output({name: list(fam.action_names) for name, fam in FAMILIES.items()})


def cmd_actions(ns):
    """Show one family's actions with the endpoint each resolves to."""
    fam = get_family(ns.family)
    rows = {}
    for action, key, route in fam.iter_routes():
        label = action if key is None else f"{action}[{key}]"
        rows[label] = {
            "method": route.method,
            "endpoint": route.endpoint,
            "required": list(route.spec.required) if route.spec is not None else [],
        }
    if ns.format == "table":
        if fam.description:
            print(fam.description)
            print()
        for label, info in rows.items():
            required = ", ".join(info["required"]) or "-"
            print(f"{label:<28} {info['method']:<5} {info['endpoint']:<40} {required}")
        return
    output({"family": fam.name, "actions": rows})


# ---------------------------------------------------------------------------
# Raw passthrough
# ---------------------------------------------------------------------------


def _warn_unvalidated(method, path):
    if config.RUNTIME_VERBOSE:
        print(f"[WARN] Raw {method} /{path}: not validated against the command table", file=sys.stderr)


def cmd_get(ns):
    """Raw GET against an arbitrary operation path (no allow-list, no validation)."""
    params = _parse_args_json(ns.json_args)
    _warn_unvalidated("GET", ns.path.lstrip("/"))
    output(_get_dispatcher().client.get(ns.path.lstrip("/"), params or None), fmt="json")


def cmd_post(ns):
    """Raw POST against an arbitrary operation path (no allow-list, no validation)."""
    body = _parse_args_json(ns.json_args)
    _warn_unvalidated("POST", ns.path.lstrip("/"))
    output(_get_dispatcher().client.post(ns.path.lstrip("/"), body), fmt="json")


def cmd_serve(ns):
    """Start the MCP server on the configured (or given) transport."""
    from dokploy_cli.mcp_server import main as serve_main

    if ns.transport:
        config.TRANSPORT_TYPE = ns.transport
    serve_main()
