"""Structured audit logging for tool invocations."""

import logging
import sys
import time
from contextlib import asynccontextmanager
from enum import Enum
from typing import AsyncGenerator
from uuid import uuid4

import structlog

# Configure structured logger
logger = structlog.get_logger("audit")


class AuditStatus(str, Enum):
    """Final status of a tool invocation."""
    
    success = "success"
    error = "error"
    rate_limited = "rate_limited"


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output to stderr.
    
    stdout carries the MCP stdio stream, so nothing may be logged there.
    
    Args:
        level: Minimum log level name (e.g. "INFO", "DEBUG").
    """
    min_level = logging.getLevelName(level.upper())
    if not isinstance(min_level, int):
        min_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


class AuditContext:
    """Tracks timing and status for one tool invocation.
    
    Attributes:
        request_id: Correlation ID for tracing.
        tool_name: Which tool is being invoked.
        start_time: When the invocation started.
        status: Final status of the invocation.
        error_code: Error code if failed.
    """
    
    def __init__(self, request_id: str, tool_name: str) -> None:
        self.request_id = request_id
        self.tool_name = tool_name
        self.start_time = time.perf_counter()
        self.status = AuditStatus.success
        self.error_code: str | None = None
    
    def mark_error(self, error_code: str) -> None:
        """Mark the invocation as failed with an error code.
        
        Args:
            error_code: The error code to record.
        """
        self.status = AuditStatus.error
        self.error_code = error_code
    
    def mark_rate_limited(self) -> None:
        """Mark the invocation as rate limited."""
        self.status = AuditStatus.rate_limited
        self.error_code = "RATE_LIMITED"
    
    @property
    def duration_ms(self) -> int:
        """Calculate duration in milliseconds."""
        elapsed = time.perf_counter() - self.start_time
        return int(elapsed * 1000)


def log_tool_invocation(context: AuditContext) -> None:
    """Emit the audit record for a finished invocation."""
    logger.info(
        "tool_invocation",
        request_id=context.request_id,
        tool_name=context.tool_name,
        status=context.status.value,
        duration_ms=context.duration_ms,
        error_code=context.error_code,
    )


@asynccontextmanager
async def audit_tool_invocation(
    tool_name: str,
    request_id: str | None = None,
) -> AsyncGenerator[AuditContext, None]:
    """Context manager for auditing tool invocations.
    
    Automatically tracks timing and logs when the context exits.
    
    Args:
        tool_name: Which tool is being invoked.
        request_id: Optional correlation ID (generated if not provided).
        
    Yields:
        AuditContext for marking status/errors.
        
    Example:
        async with audit_tool_invocation("list_people") as ctx:
            try:
                result = await do_work()
            except RateLimitedError:
                ctx.mark_rate_limited()
                raise
    """
    context = AuditContext(request_id or str(uuid4()), tool_name)
    try:
        yield context
    finally:
        log_tool_invocation(context)
