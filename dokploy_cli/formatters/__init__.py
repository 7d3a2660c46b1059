"""Output formatting package for dokploy-cli.

Re-exports all public names so consumers can do:
    from dokploy_cli.formatters import format_projects_table
"""

from dokploy_cli.formatters._core import (
    TABLE_FORMATTERS,
    formatter_for,
    mutation_response,
    output,
    pretty_print,
)
from dokploy_cli.formatters._entities import (
    format_application,
    format_backup,
    format_compose,
    format_database,
    format_environment,
    format_environments_table,
    format_project,
    format_projects_table,
)
from dokploy_cli.formatters._infra import (
    format_certificate,
    format_certificates_table,
    format_containers_table,
    format_deployments_table,
    format_domain,
    format_domains_table,
    format_server,
    format_servers_table,
    format_ssh_key,
    format_ssh_keys_table,
)
from dokploy_cli.formatters._table import _clean, _table, _trunc

__all__ = [
    "TABLE_FORMATTERS",
    "_clean",
    "_table",
    "_trunc",
    "format_application",
    "format_backup",
    "format_certificate",
    "format_certificates_table",
    "format_compose",
    "format_containers_table",
    "format_database",
    "format_deployments_table",
    "format_domain",
    "format_domains_table",
    "format_environment",
    "format_environments_table",
    "format_project",
    "format_projects_table",
    "format_server",
    "format_servers_table",
    "format_ssh_key",
    "format_ssh_keys_table",
    "formatter_for",
    "mutation_response",
    "output",
    "pretty_print",
]
