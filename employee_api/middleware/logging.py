"""ASGI logging middleware.

Emits log entries for every incoming request and optionally publishes
CloudWatch metrics through boto3 when CLOUDWATCH_METRICS is enabled.
"""
from __future__ import annotations

import json
import logging
import time
from typing import MutableMapping, Optional, cast

import boto3
from starlette.types import ASGIApp, Receive, Scope, Send

from employee_api import config

logger = logging.getLogger("employee_api.middleware.logging")

# Sensitive field patterns to redact from logs
SENSITIVE_FIELDS = {
    "api_key", "apikey", "api-key",
    "password", "passwd", "pwd",
    "token", "access_token", "refresh_token", "bearer",
    "secret", "aws_secret_access_key", "aws_access_key_id",
    "authorization", "auth",
    "credit_card", "creditcard", "card_number",
}

UNREADABLE = "<unreadable>"
UNMATCHED_ROUTE = "<unmatched>"


def sanitize_json_string(text: str) -> str:
    """Sanitize JSON strings by redacting sensitive field values."""
    if not text or text == UNREADABLE:
        return text

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        # Plain text bodies are logged as-is
        return text
    return json.dumps(_sanitize(data))


def _sanitize(obj):
    """Recursively redact values whose key looks sensitive."""
    if isinstance(obj, dict):
        sanitized = {}
        for key, value in obj.items():
            key_lower = str(key).lower().replace("-", "_")
            if any(sensitive in key_lower for sensitive in SENSITIVE_FIELDS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = _sanitize(value)
        return sanitized
    if isinstance(obj, list):
        return [_sanitize(item) for item in obj]
    return obj


def _decode(chunks: list[bytes]) -> str:
    try:
        return sanitize_json_string(b"".join(chunks).decode("utf-8", errors="replace"))
    except Exception:
        return UNREADABLE


def _route_template(scope: Scope) -> str:
    """Path template of the matched route, so metrics stay one per endpoint."""
    route = scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class LoggingMiddleware:
    """Request/response logger for ASGI apps."""

    def __init__(self, app: ASGIApp, *, cloudwatch_enabled: Optional[bool] = None) -> None:
        self.app = app
        if config.LOG_LEVEL >= 2 and logger.getEffectiveLevel() > logging.DEBUG:
            logger.setLevel(logging.DEBUG)
        self.cloudwatch = None
        if cloudwatch_enabled is None:
            cloudwatch_enabled = config.CLOUDWATCH_METRICS
        if cloudwatch_enabled:
            try:
                self.cloudwatch = boto3.client("cloudwatch")
            except Exception:
                logger.debug("CloudWatch client initialization failed", exc_info=True)
                self.cloudwatch = None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "")
        path = scope.get("path", "")
        client = None
        if scope.get("client"):
            client = scope["client"][0]
        start = time.perf_counter()
        status_holder: dict[str, Optional[int]] = {"status": None}

        if config.LOG_LEVEL >= 1:
            logger.info(f"[ARRIVED] {method} {path}")

        body_store: list[bytes] = []
        response_body_store: list[bytes] = []

        async def receive_wrapper():
            """Capture the request body as it streams in."""
            message = await receive()
            if message.get("type") == "http.request":
                chunk = message.get("body", b"")
                if chunk:
                    body_store.append(chunk)
                if not message.get("more_body", False) and body_store and config.LOG_LEVEL >= 1:
                    logger.info(f"[ARRIVED BODY] {_decode(body_store)}")
            return message

        async def send_wrapper(message: MutableMapping[str, object]) -> None:
            """Capture the response status and body."""
            msg_type = message.get("type")
            if msg_type == "http.response.start":
                status_holder["status"] = cast(Optional[int], message.get("status"))
            elif msg_type == "http.response.body":
                chunk = cast(bytes, message.get("body", b""))
                if chunk:
                    response_body_store.append(chunk)
                if not message.get("more_body", False) and config.LOG_LEVEL >= 2:
                    logger.debug(f"[RESPONSE BODY] {_decode(response_body_store)}")
            await send(message)

        try:
            await self.app(scope, receive_wrapper, send_wrapper)
        except Exception as exc:
            self._log_error(method, path, exc, client)
            self._send_metrics(method, _route_template(scope), 500, success=False)
            raise

        status = status_holder["status"] or 0
        self._log_success(method, path, status, time.perf_counter() - start, client)
        self._send_metrics(method, _route_template(scope), status, success=True)

    def _log_success(self, method: str, path: str, status: int, duration: float, client: str | None = None) -> None:
        duration_ms = duration * 1000
        if config.LOG_LEVEL >= 1:
            logger.info(f"Request: {method} {path} | Status: {status} | Duration: {duration_ms:.2f} ms")
        if config.LOG_LEVEL >= 2:
            logger.debug(json.dumps({
                "type": "request",
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": duration_ms,
                "client": client,
            }))

    def _log_error(self, method: str, path: str, exc: Exception, client: str | None = None) -> None:
        if config.LOG_LEVEL >= 1:
            logger.info(f"Error: {method} {path} -> {exc}")
        if config.LOG_LEVEL >= 2:
            logger.debug(json.dumps({
                "type": "error",
                "method": method,
                "path": path,
                "error": str(exc),
                "client": client,
            }))

    def _send_metrics(self, method: str, route: str, status: int, *, success: bool) -> None:
        """Send a request count metric to CloudWatch if a client is configured."""
        if not self.cloudwatch:
            return
        try:
            self.cloudwatch.put_metric_data(
                Namespace=config.CLOUDWATCH_NAMESPACE,
                MetricData=[
                    {
                        "MetricName": "http_request",
                        "Dimensions": [
                            {"Name": "method", "Value": method},
                            {"Name": "route", "Value": route},
                            {"Name": "status_code", "Value": str(status)},
                            {"Name": "outcome", "Value": "success" if success else "error"},
                        ],
                        "Value": 1,
                        "Unit": "Count",
                    }
                ],
            )
        except Exception:
            # Stop publishing after the first failure
            logger.debug("CloudWatch put_metric_data failed", exc_info=True)
            self.cloudwatch = None


def setup_logging(app: ASGIApp) -> ASGIApp:
    """Wrap the ASGI app with logging middleware."""
    return LoggingMiddleware(app)
