"""Run the Dokploy MCP server in streamable-http mode."""

from dokploy_cli import config
from dokploy_cli.mcp_server import main

if __name__ == "__main__":
    config.TRANSPORT_TYPE = "http"
    main()
