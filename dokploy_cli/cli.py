"""
dokploy-cli: CLI tool for managing a Dokploy deployment platform
"""

import argparse
import json
import sys

from dokploy_cli import config
from dokploy_cli.commands import (
    cmd_actions,
    cmd_exec,
    cmd_families,
    cmd_get,
    cmd_post,
    cmd_run,
    cmd_serve,
)
from dokploy_cli.exceptions import CliError

HELP_TEXT = """\
Usage: dokploy-cli <command> [args...]

Global flags:
  --format table          Output as readable text instead of JSON (default: json)
  --quiet, -q             Suppress confirmations
  --verbose, -v           Enable HTTP request logging
  --version               Show version number

Commands:
  run <family> <action> [json]
                          - Run one structured command, e.g.
                            run application deploy '{"applicationId": "a1", "redeploy": true}'
                            run database get '{"dbType": "mongo", "databaseId": "d1"}'
  exec <json>             - Run one {"family", "action", "args"} command object
  families                - List command families and their actions
  actions <family>        - Show a family's actions and the endpoints they call
  get <path> [json]       - Raw GET /api/<path> with query params
  post <path> [json]      - Raw POST /api/<path> with a JSON body
                            get/post skip the command table: the path is not
                            checked and no fields are validated or renamed
  serve                   - Start the MCP server
    --transport <t>         stdio, http or httpStream (default: TRANSPORT_TYPE)
  version                 - Show version number

Configuration (.env or environment):
  DOKPLOY_URL             Base URL of the Dokploy instance
  DOKPLOY_API_KEY         API key sent as x-api-key
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --format works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, quiet, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "json"
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"dokploy-cli {config.VERSION}")
            sys.exit(0)
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in config.VALID_FORMATS:
                raise CliError(f"[ERROR] Invalid format '{fmt}'. Use: json, table")
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def build_parser():
    parser = _SubcommandParser(
        prog="dokploy-cli",
        description="CLI tool for managing a Dokploy deployment platform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    p = sub.add_parser("run")
    p.add_argument("family")
    p.add_argument("action")
    p.add_argument("json_args", nargs="?", default=None)
    p.set_defaults(func=cmd_run)

    p = sub.add_parser("exec")
    p.add_argument("json_command")
    p.set_defaults(func=cmd_exec)

    sub.add_parser("families").set_defaults(func=cmd_families)

    p = sub.add_parser("actions")
    p.add_argument("family")
    p.set_defaults(func=cmd_actions)

    for name, handler in (("get", cmd_get), ("post", cmd_post)):
        p = sub.add_parser(name)
        p.add_argument("path")
        p.add_argument("json_args", nargs="?", default=None)
        p.set_defaults(func=handler)

    p = sub.add_parser("serve")
    p.add_argument("--transport", choices=sorted(config.VALID_TRANSPORTS))
    p.set_defaults(func=cmd_serve)

    sub.add_parser("version").set_defaults(func=None)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": getattr(err, "error_type", "error"),
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        status = getattr(err, "status", None)
        if status is not None:
            payload["error"]["status"] = status
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    fmt = "json"
    try:
        # Extract global flags from anywhere in argv
        fmt, quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose
        if verbose:
            config.HTTP_LOG_ENABLED = True

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt  # inject global format flag

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"dokploy-cli {config.VERSION}")
            sys.exit(0)

        ns.func(ns)

    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
