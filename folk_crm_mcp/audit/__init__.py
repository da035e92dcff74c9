"""Audit module - structured logging of tool invocations."""

from .logger import (
    AuditContext,
    AuditStatus,
    audit_tool_invocation,
    configure_logging,
    log_tool_invocation,
)

__all__ = [
    "AuditContext",
    "AuditStatus",
    "audit_tool_invocation",
    "configure_logging",
    "log_tool_invocation",
]
