"""
HTTP request layer, security helpers, and the authenticated Dokploy client.
"""

import hashlib
import http.client
import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
import uuid

from dokploy_cli import config
from dokploy_cli.exceptions import (
    BackendError,
    CliError,
    DecodeError,
    HTTPError,
    SetupError,
    TransportError,
)

_UNREADABLE_BODY = "Unknown error"
_SECRET_QUERY_KEYS = frozenset({"token", "apikey", "api_key"})


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _safe_json_parse(text, context="input"):
    """Parse JSON with friendly error message on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CliError(f"[ERROR] Invalid JSON in {context}: {e.msg} at position {e.pos}") from None


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _sanitize_url_for_log(url):
    """Mask sensitive query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = []
    for key, value in pairs:
        if key.lower() in _SECRET_QUERY_KEYS:
            masked.append((key, "***"))
        else:
            masked.append((key, value))
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _is_sampled_request(request_id):
    """Decide if a request should be logged based on sample rate."""
    rate = config.HTTP_LOG_SAMPLE_RATE
    if rate <= 0:
        return False
    if rate >= 1:
        return True
    if not request_id:
        return False
    digest = hashlib.sha256(request_id.encode("utf-8")).digest()
    bucket = int.from_bytes(digest[:4], "big") / 4294967295.0
    return bucket < rate


def _query_value(value):
    """Serialize a scalar query value the way the Dokploy API parses it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode_query(params):
    """Build a query string, omitting keys whose value is None."""
    if not params:
        return ""
    pairs = [(k, _query_value(v)) for k, v in params.items() if v is not None]
    return urllib.parse.urlencode(pairs)


def _read_error_body(err):
    """Best-effort read of an HTTPError body; never raises."""
    try:
        return err.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
    except (OSError, ValueError, http.client.HTTPException):
        return _UNREADABLE_BODY


def _http_request(url, data=None, headers=None, method="POST", timeout=None):
    """Make exactly one HTTP request.

    Returns parsed JSON on success, or None when the body is empty.
    Raises HTTPError for non-2xx responses (caller adds method/path context),
    TransportError when the server cannot be reached and DecodeError when a
    2xx body is not JSON.
    """
    body = json.dumps(data).encode("utf-8") if data is not None else None
    request_id = (headers or {}).get("X-Request-Id")
    safe_url = _sanitize_url_for_log(url)
    sampled = _is_sampled_request(request_id)
    timeout = max(1, timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS)

    start = time.perf_counter()
    req = urllib.request.Request(url, data=body, headers=headers or {}, method=method)
    if sampled:
        _log_http_event(
            phase="request",
            method=method,
            url=safe_url,
            request_id=request_id,
            timeout_seconds=timeout,
        )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            content_type = resp.headers.get("Content-Type", "")
            raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
            if sampled:
                _log_http_event(
                    phase="response",
                    method=method,
                    url=safe_url,
                    status=getattr(resp, "status", 200),
                    content_type=content_type,
                    bytes=len(raw),
                    latency_ms=round((time.perf_counter() - start) * 1000, 2),
                    request_id=request_id,
                )
    except urllib.error.HTTPError as e:
        error_body = _read_error_body(e)
        if sampled:
            _log_http_event(
                phase="response",
                method=method,
                url=safe_url,
                status=e.code,
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
                request_id=request_id,
            )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except (
        urllib.error.URLError,
        TimeoutError,
        ConnectionError,
        http.client.HTTPException,
    ) as e:
        reason = getattr(e, "reason", None) or e
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error=str(reason),
                request_id=request_id,
            )
        raise TransportError(f"[ERROR] Connection failed: {reason}") from e

    if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
        raise DecodeError(
            "[ERROR] Response too large from Dokploy API "
            f"(>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
        )
    if not raw:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        if content_type and "json" not in content_type.lower():
            raise DecodeError(
                f"[ERROR] Unexpected Content-Type from server ({content_type}). "
                "This may be a proxy or network issue."
            ) from None
        raise DecodeError("[ERROR] Unexpected response from Dokploy API (not valid JSON).") from None


# ---------------------------------------------------------------------------
# Authenticated client
# ---------------------------------------------------------------------------


class BackendClient:
    """Authenticated request/response plumbing for the Dokploy API.

    ``path`` arguments are logical operation names such as
    ``application.one``; the client composes them under ``<base_url>/api/``.
    One network attempt per call, no retries and no caching.
    """

    def __init__(self, base_url, api_key, *, timeout=None):
        if not base_url or not api_key:
            raise SetupError(
                "[SETUP_NEEDED] Dokploy client not initialized. Ensure DOKPLOY_URL "
                "and DOKPLOY_API_KEY environment variables are set."
            )
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_config(cls):
        """Build a client from DOKPLOY_URL / DOKPLOY_API_KEY."""
        return cls(
            config.DOKPLOY_URL,
            config.DOKPLOY_API_KEY,
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )

    def __repr__(self):
        return f"BackendClient({self.base_url!r}, api_key={_mask_token(self._api_key)!r})"

    def url_for(self, path, params=None):
        url = f"{self.base_url}/api/{path}"
        query = _encode_query(params)
        return f"{url}?{query}" if query else url

    def get(self, path, params=None):
        return self._request("GET", path, params=params)

    def post(self, path, body=None):
        return self._request("POST", path, body=body)

    def _request(self, method, path, params=None, body=None):
        headers = {
            "x-api-key": self._api_key,
            "Accept": "application/json",
            "X-Request-Id": str(uuid.uuid4()),
        }
        if body is not None:
            headers["Content-Type"] = "application/json"
        try:
            return _http_request(
                self.url_for(path, params),
                body,
                headers,
                method,
                timeout=self.timeout,
            )
        except HTTPError as e:
            raise BackendError(e.code, e.reason, method, path, e.body) from e
