"""Utility for logging API requests when BART_COMMUTE_LOG_REQUESTS is enabled."""

import logging

logger = logging.getLogger(__name__)

SENSITIVE_PARAMS = {"key"}


def _build_url_with_params(url: str, params: dict[str, str] | None) -> str:
    """Build full URL with query parameters, keeping their order and leaving values unencoded."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in params.items())
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _redact_sensitive_params(params: dict[str, str]) -> dict[str, str]:
    """Redact access keys from logging."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_PARAMS else v for k, v in params.items()}


def log_api_request(
    method: str, url: str, params: dict[str, str] | None = None, *, enabled: bool = False
) -> None:
    """Log API request details if request logging is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL without query string.
        params: Query parameters (optional, the access key is redacted).
        enabled: Value of the ``log_requests`` setting.
    """
    if not enabled:
        return

    safe_params = _redact_sensitive_params(params) if params else None
    logger.info(f"API Request:\n{method} {_build_url_with_params(url, safe_params)}")
