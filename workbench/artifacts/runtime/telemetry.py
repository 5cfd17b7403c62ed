"""Structured logging for requests, pages and long-running operations.

This module provides telemetry hooks for the runtime, emitting structured
logs with an ``extra`` payload so handlers can forward fields as-is.
"""

from __future__ import annotations

import logging

from ..core.enums import OperationState

logger = logging.getLogger(__name__)


def log_request_completed(
    *,
    method: str,
    url: str,
    status: int,
    latency_ms: float | None = None,
) -> None:
    """Log a completed HTTP exchange.

    Args:
        method: HTTP method
        url: Request URL (relative or absolute)
        status: Response status code
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "request_completed",
        extra={
            "method": method,
            "url": url,
            "status": status,
            "latency_ms": latency_ms,
        },
    )


def log_request_failed(
    *,
    endpoint_id: str,
    status: int | None,
    error_type: str,
    error_message: str,
) -> None:
    """Log a request whose status was not accepted, or that never completed.

    Args:
        endpoint_id: Route identifier
        status: Response status code, None for network failures
        error_type: Exception class name
        error_message: Exception message
    """
    logger.warning(
        "request_failed",
        extra={
            "endpoint_id": endpoint_id,
            "status": status,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_page_fetched(*, page_index: int, items: int, has_next: bool) -> None:
    """Log one page fetched by a pager."""
    logger.debug(
        "page_fetched",
        extra={"page_index": page_index, "items": items, "has_next": has_next},
    )


def log_poll_state(
    *,
    operation: str,
    state: OperationState,
    polls: int,
    delay: float | None = None,
) -> None:
    """Log the state of a long-running operation after a poll.

    Terminal states are logged at info level, intermediate states at debug.

    Args:
        operation: Initial request descriptor, e.g. "PUT /notebooks/nb1"
        state: State after the poll
        polls: Number of polls issued so far
        delay: Seconds until the next poll, if one is scheduled
    """
    level = logging.INFO if state.is_terminal else logging.DEBUG
    logger.log(
        level,
        "operation_state",
        extra={
            "operation": operation,
            "state": state.value,
            "polls": polls,
            "delay": delay,
        },
    )
