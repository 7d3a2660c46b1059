"""
dokploy-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1: validation, not-found, network, parse errors."""

    exit_code = 1
    error_type = "error"


class SetupError(CliError):
    """Exit code 2: missing URL/API key, client not initialized."""

    exit_code = 2
    error_type = "setup"


class ValidationError(CliError):
    """Rejected command input. Raised before any network call."""

    error_type = "validation"


class TransportError(CliError):
    """The Dokploy API could not be reached."""

    error_type = "transport"


class DecodeError(CliError):
    """The Dokploy API answered 2xx with a body that is not valid JSON."""

    error_type = "decode"


class BackendError(CliError):
    """The Dokploy API answered with a non-2xx status."""

    error_type = "backend"

    def __init__(self, status, reason, method, path, body):
        self.status = status
        self.reason = reason
        self.method = method
        self.path = path
        self.body = body
        super().__init__(
            f"Dokploy API error ({status} {reason}) on {method} /{path}: {body}"
        )


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors that callers want to handle."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
