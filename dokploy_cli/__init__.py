"""dokploy-cli: CLI tool and MCP server for managing a Dokploy deployment platform."""

from dokploy_cli.api import BackendClient
from dokploy_cli.config import VERSION
from dokploy_cli.dispatch import Dispatcher
from dokploy_cli.exceptions import (
    BackendError,
    CliError,
    DecodeError,
    SetupError,
    TransportError,
    ValidationError,
)
from dokploy_cli.families import FAMILIES, family_names
from dokploy_cli.models import CommandRequest
from dokploy_cli.registry import DB_TYPES

__all__ = [
    "VERSION",
    "BackendClient",
    "BackendError",
    "CliError",
    "CommandRequest",
    "DB_TYPES",
    "DecodeError",
    "Dispatcher",
    "FAMILIES",
    "SetupError",
    "TransportError",
    "ValidationError",
    "family_names",
]
