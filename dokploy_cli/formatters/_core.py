"""Core output dispatchers and the (family, action) table lookup."""

import json

from dokploy_cli import config
from dokploy_cli.formatters._entities import (
    format_application,
    format_backup,
    format_compose,
    format_database,
    format_environments_table,
    format_projects_table,
)
from dokploy_cli.formatters._infra import (
    format_certificates_table,
    format_containers_table,
    format_deployments_table,
    format_domains_table,
    format_servers_table,
    format_ssh_keys_table,
)


def pretty_print(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _many(render):
    def _fmt(data, args=None):
        return render(data if isinstance(data, list) else [data])

    return _fmt


def _single(render):
    def _fmt(data, args=None):
        return render(data)

    return _fmt


def _database(data, args=None):
    return format_database(data, (args or {}).get("dbType"))


TABLE_FORMATTERS = {
    ("project", "list"): _many(format_projects_table),
    ("environment", "list"): _many(format_environments_table),
    ("application", "get"): _single(format_application),
    ("compose", "get"): _single(format_compose),
    ("deployment", "list"): _many(format_deployments_table),
    ("docker", "getContainers"): _many(format_containers_table),
    ("docker", "findContainers"): _many(format_containers_table),
    ("domain", "list"): _many(format_domains_table),
    ("server", "list"): _many(format_servers_table),
    ("database", "get"): _database,
    ("backup", "get"): _single(format_backup),
    ("sshKey", "list"): _many(format_ssh_keys_table),
    ("certificate", "list"): _many(format_certificates_table),
}


def formatter_for(family, action):
    """Table renderer for a command, or None when only JSON makes sense."""
    return TABLE_FORMATTERS.get((family, action))


def output(data, formatter=None, fmt="json", args=None):
    """Output data in requested format."""
    if fmt == "table" and formatter and isinstance(data, (dict, list)):
        print(formatter(data, args))
    else:
        pretty_print(data)


def mutation_response(family, action, data=None, fmt="json"):
    """Print a mutation confirmation.

    An empty backend reply (None) still counts as success.
    """
    summary = f"{family}.{action}"
    if fmt == "json":
        payload = {"ok": True, "command": summary}
        if data is not None:
            payload["data"] = data
        print(json.dumps(payload, ensure_ascii=False))
        return
    if not config.RUNTIME_QUIET:
        print(f"OK: {summary}")
    if data not in (None, {}, []):
        pretty_print(data)
