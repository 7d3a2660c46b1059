"""
dokploy-cli shared configuration, constants, and module-level state.
Standalone module, no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip().strip('"').strip("'")
    return env


def _env_get(key, default=""):
    """Process environment wins over the .env file."""
    value = os.environ.get(key)
    if value is not None:
        return value
    return env.get(key, default)


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = _env_get(key, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = _env_get(key, None)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = _env_get(key, None)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"
CONTRACT_SCHEMA_VERSION = "1.0"

VALID_FORMATS = {"json", "table"}
VALID_RESPONSE_MODES = {"legacy", "envelope"}
VALID_TRANSPORTS = {"stdio", "http", "httpStream"}

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env, overridden by the process environment)
# ---------------------------------------------------------------------------

env = load_env()

DOKPLOY_URL = _env_get("DOKPLOY_URL")
DOKPLOY_API_KEY = _env_get("DOKPLOY_API_KEY")
HTTP_TIMEOUT_SECONDS = _env_int("DOKPLOY_HTTP_TIMEOUT_SECONDS", 30)
HTTP_MAX_RESPONSE_BYTES = _env_int("DOKPLOY_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("DOKPLOY_HTTP_LOG", False)
HTTP_LOG_SAMPLE_RATE = min(1.0, max(0.0, _env_float("DOKPLOY_HTTP_LOG_SAMPLE_RATE", 1.0)))

MCP_RESPONSE_MODE = _env_get("DOKPLOY_MCP_RESPONSE_MODE", "legacy")
if MCP_RESPONSE_MODE not in VALID_RESPONSE_MODES:
    MCP_RESPONSE_MODE = "legacy"

TRANSPORT_TYPE = _env_get("TRANSPORT_TYPE", "stdio")
if TRANSPORT_TYPE not in VALID_TRANSPORTS:
    TRANSPORT_TYPE = "stdio"
HOST = _env_get("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3000)

# ---------------------------------------------------------------------------
# Runtime flags (set by the CLI entry point)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
RUNTIME_VERBOSE = False
