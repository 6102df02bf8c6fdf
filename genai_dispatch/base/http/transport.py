"""JSON-over-HTTP transport used by every adapter.

Purpose:
    Send one request to an absolute URL with the merged headers and return the
    decoded JSON body, or open a streaming response and yield its lines.

Failure semantics:
    Every lower-layer problem (connection error, timeout, non-2xx status,
    undecodable body) is raised as :class:`TransportFailure` with a
    normalized :class:`ErrorCode`. Nothing is retried here. A payload that cannot be
    encoded as JSON is raised as :class:`InvalidRequest` before sending.
"""
from __future__ import annotations

import json
import logging
import time
from contextlib import suppress
from typing import Any, Dict, Iterator, Mapping, Optional

import httpx

from ..adapter_kind import AdapterKind
from ..constants import SSE_DATA_PREFIX
from ..errors import ErrorCode, InvalidRequest, TransportFailure, classify_exception, status_to_code
from ..logging import LogContext, get_logger, normalized_log_event
from .client import get_httpx_client

_logger = get_logger("genai.http")

# Cap on provider error text carried into TransportFailure.detail
_MAX_ERROR_BODY_CHARS = 500


def _error_detail(response: httpx.Response) -> str:
    with suppress(Exception):
        body = response.json()
        if isinstance(body, dict):
            err = body.get("error", body.get("message", body))
            if isinstance(err, dict):
                err = err.get("message", err)
            return str(err)[:_MAX_ERROR_BODY_CHARS]
    return (response.text or response.reason_phrase or "")[:_MAX_ERROR_BODY_CHARS]


def _failure_from_status(response: httpx.Response, adapter: Optional[AdapterKind]) -> TransportFailure:
    return TransportFailure(
        code=status_to_code(response.status_code),
        detail=_error_detail(response),
        adapter=adapter,
        status=response.status_code,
    )


def _failure_from_exception(exc: Exception, adapter: Optional[AdapterKind]) -> TransportFailure:
    return TransportFailure(code=classify_exception(exc), detail=str(exc) or type(exc).__name__, adapter=adapter, raw=exc)


def _build_request(client: httpx.Client, url: str, headers: Mapping[str, str], payload: Dict[str, Any]) -> httpx.Request:
    """Encode the JSON request; an unencodable payload is the caller's error."""
    try:
        return client.build_request("POST", url, json=payload, headers=dict(headers))
    except httpx.InvalidURL as exc:
        raise InvalidRequest(field="endpoint", reason=str(exc)) from exc
    except (TypeError, ValueError) as exc:
        raise InvalidRequest(field="request", reason=f"payload is not JSON-serializable: {exc}") from exc


def _log_error(ctx: LogContext, failure: TransportFailure, url: str) -> None:
    normalized_log_event(
        _logger,
        "http.error",
        ctx,
        phase="transport",
        error_code=failure.code.value,
        level=logging.WARNING,
        status=failure.status,
        url=url,
    )


def post_json(
    url: str,
    *,
    headers: Mapping[str, str],
    payload: Dict[str, Any],
    purpose: str,
    adapter: Optional[AdapterKind] = None,
) -> Any:
    """POST ``payload`` as JSON to ``url`` and return the decoded response body.

    Raises:
        TransportFailure: On connection problems, non-2xx statuses, or a body
            that is not valid JSON.
    """
    ctx = LogContext(adapter=adapter.value if adapter else None, extra={"purpose": purpose})
    normalized_log_event(_logger, "http.request", ctx, phase="transport", level=logging.DEBUG, url=url)
    client = get_httpx_client(None, purpose)
    request = _build_request(client, url, headers, payload)
    t0 = time.perf_counter()
    try:
        response = client.send(request)
    except httpx.HTTPError as exc:
        failure = _failure_from_exception(exc, adapter)
        _log_error(ctx, failure, url)
        raise failure from exc
    if response.is_error:
        failure = _failure_from_status(response, adapter)
        _log_error(ctx, failure, url)
        raise failure
    try:
        body = response.json()
    except ValueError as exc:
        raise TransportFailure(
            code=ErrorCode.MALFORMED_RESPONSE,
            detail="response body is not valid JSON",
            adapter=adapter,
            status=response.status_code,
            raw=exc,
        ) from exc
    normalized_log_event(
        _logger,
        "http.response",
        ctx,
        phase="transport",
        level=logging.DEBUG,
        status=response.status_code,
        latency_ms=round((time.perf_counter() - t0) * 1000.0, 2),
    )
    return body


def open_stream(
    url: str,
    *,
    headers: Mapping[str, str],
    payload: Dict[str, Any],
    purpose: str,
    adapter: Optional[AdapterKind] = None,
) -> httpx.Response:
    """Open a streaming POST and return the live response once headers arrive.

    The caller owns the returned response and must close it. Error statuses
    are read, closed, and raised as :class:`TransportFailure` here so a failed
    stream never reaches the caller as an open response.
    """
    ctx = LogContext(adapter=adapter.value if adapter else None, extra={"purpose": purpose})
    client = get_httpx_client(None, purpose)
    request = _build_request(client, url, headers, payload)
    try:
        response = client.send(request, stream=True)
    except httpx.HTTPError as exc:
        failure = _failure_from_exception(exc, adapter)
        _log_error(ctx, failure, url)
        raise failure from exc
    if response.is_error:
        with suppress(httpx.HTTPError):
            response.read()
        response.close()
        failure = _failure_from_status(response, adapter)
        _log_error(ctx, failure, url)
        raise failure
    return response


def iter_sse_data(response: httpx.Response, adapter: Optional[AdapterKind] = None) -> Iterator[str]:
    """Yield the ``data:`` payloads of a server-sent event stream.

    Blank lines, comments and non-data fields are skipped. The response is
    closed when iteration ends or is abandoned.
    """
    try:
        for line in response.iter_lines():
            if not line.startswith(SSE_DATA_PREFIX):
                continue
            yield line[len(SSE_DATA_PREFIX):].strip()
    except httpx.HTTPError as exc:
        raise _failure_from_exception(exc, adapter) from exc
    finally:
        response.close()


def parse_json_data(data: str, adapter: Optional[AdapterKind] = None) -> Any:
    """Decode one SSE data payload, raising :class:`TransportFailure` when malformed."""
    try:
        return json.loads(data)
    except ValueError as exc:
        raise TransportFailure(
            code=ErrorCode.MALFORMED_RESPONSE,
            detail=f"malformed stream event: {data[:80]!r}",
            adapter=adapter,
            raw=exc,
        ) from exc


__all__ = ["post_json", "open_stream", "iter_sse_data", "parse_json_data"]
