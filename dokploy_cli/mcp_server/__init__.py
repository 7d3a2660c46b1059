"""MCP server exposing the Dokploy command families as tools.

Package structure:
  __init__.py       FastMCP init, register() calls, re-exports, main()
  _core.py          Dispatcher caching, _call dispatcher, response contract
  _tools_apps.py    application, compose, deployment, docker tools
  _tools_data.py    database and backup tools
  _tools_infra.py   project, environment, domain, server, settings,
                    ssh key, port, security, certificate tools

Run: dokploy-mcp   (TRANSPORT_TYPE=stdio|http|httpStream, HOST, PORT)
Requires: pip install .[mcp]
"""

from __future__ import annotations

import sys

from mcp.server.fastmcp import FastMCP

from dokploy_cli import config
from dokploy_cli.mcp_server import _tools_apps, _tools_data, _tools_infra

mcp = FastMCP(
    "dokploy",
    instructions=(
        "Dokploy deployment platform tools. Each tool covers one resource family; "
        "pick the operation with `action` and pass only the fields it needs. "
        "Databases are addressed by db_type plus database_id. "
        "Failures come back as {ok: false, type, error, error_detail}; "
        "type is one of validation, setup, backend, transport, decode, error."
    ),
)

for _mod in [_tools_infra, _tools_apps, _tools_data]:
    _mod.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from dokploy_cli.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _ensure_contract_dict,
    _finalize_tool_result,
    _get_dispatcher,
)
from dokploy_cli.mcp_server._tools_apps import (  # noqa: E402, F401
    dokploy_application,
    dokploy_compose,
    dokploy_deployment,
    dokploy_docker,
)
from dokploy_cli.mcp_server._tools_data import (  # noqa: E402, F401
    dokploy_backup,
    dokploy_database,
)
from dokploy_cli.mcp_server._tools_infra import (  # noqa: E402, F401
    dokploy_certificate,
    dokploy_domain,
    dokploy_environment,
    dokploy_port,
    dokploy_project,
    dokploy_security,
    dokploy_server,
    dokploy_settings,
    dokploy_ssh_key,
)


def main():
    """Run the MCP server on the configured transport."""
    if config.TRANSPORT_TYPE in ("http", "httpStream"):
        mcp.settings.host = config.HOST
        mcp.settings.port = config.PORT
        print(
            f"[INFO] Dokploy MCP server listening on http://{config.HOST}:{config.PORT}/mcp",
            file=sys.stderr,
        )
        mcp.run(transport="streamable-http")
        return
    mcp.run()
