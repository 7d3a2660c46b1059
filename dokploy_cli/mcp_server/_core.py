"""Core helpers: dispatcher caching, _call dispatcher, response contract."""

from __future__ import annotations

from dokploy_cli import config
from dokploy_cli._utils import snake_to_camel
from dokploy_cli.api import BackendClient, _sanitize_error
from dokploy_cli.config import CONTRACT_SCHEMA_VERSION
from dokploy_cli.dispatch import Dispatcher
from dokploy_cli.exceptions import BackendError, CliError
from dokploy_cli.families import FAMILIES

_dispatcher: Dispatcher | None = None


def _get_dispatcher() -> Dispatcher:
    """Return a cached Dispatcher, creating its client on first use."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher(BackendClient.from_config())
    return _dispatcher


def _contract_error(message: str, error_type: str = "error", **extra) -> dict:
    """Return a stable MCP error envelope with legacy compatibility fields."""
    detail = {"type": error_type, "message": message, **extra}
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "type": error_type,  # legacy
        "error": message,  # legacy
        "error_detail": detail,
    }


def _ensure_contract_dict(payload: dict) -> dict:
    """Add stable contract metadata to dict responses."""
    out = dict(payload)
    out.setdefault("schema_version", CONTRACT_SCHEMA_VERSION)
    if out.get("ok") is False:
        error_type = str(out.get("type", "error"))
        error_message = out.get("error", "Unknown error")
        if not isinstance(error_message, str):
            error_message = str(error_message)
            out["error"] = error_message
        out.setdefault(
            "error_detail",
            {
                "type": error_type,
                "message": error_message,
            },
        )
        return out
    out.setdefault("ok", True)
    return out


def _finalize_tool_result(result) -> dict:
    """Finalize tool response based on configured MCP response mode.

    Modes:
        - legacy (default): backend objects keep their top-level shape and gain
          contract metadata (ok/schema_version); lists, scalars and empty
          replies are wrapped under ``data``.
        - envelope: always return {"ok", "schema_version", "data"} for success.
    """
    if isinstance(result, dict):
        normalized = _ensure_contract_dict(result)
        if normalized.get("ok") is False:
            return normalized
        if config.MCP_RESPONSE_MODE == "envelope":
            data = dict(normalized)
            data.pop("ok", None)
            data.pop("schema_version", None)
            return {
                "ok": True,
                "schema_version": CONTRACT_SCHEMA_VERSION,
                "data": data,
            }
        return normalized
    return {
        "ok": True,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "data": result,
    }


def _error_from_exception(exc: CliError) -> dict:
    if isinstance(exc, BackendError):
        return _contract_error(
            str(exc),
            "backend",
            status=exc.status,
            method=exc.method,
            path=exc.path,
            body=_sanitize_error(exc.body),
        )
    return _contract_error(str(exc), exc.error_type)


def _call(family: str, action: str, **kwargs):
    """Dispatch one command, converting exceptions to error dicts.

    Keyword names are snake_case tool parameters; they are forwarded as the
    camelCase argument names the Dokploy API uses. ``None`` means "not given".
    """
    if family not in FAMILIES:
        return _contract_error(f"Unknown family: {family}", "validation")
    args = {snake_to_camel(k): v for k, v in kwargs.items() if v is not None}
    try:
        return _get_dispatcher().dispatch(family, action, args)
    except CliError as e:
        return _error_from_exception(e)
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
