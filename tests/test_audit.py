"""Tests for the audit logging module."""

import pytest
from unittest.mock import patch

from folk_crm_mcp.audit import AuditContext, AuditStatus, audit_tool_invocation, log_tool_invocation
from folk_crm_mcp.mcp_transport.service import handle_tools_call


class TestAuditStatus:
    """Tests for AuditStatus enum."""
    
    def test_status_values(self):
        """All expected status values exist."""
        assert AuditStatus.success == "success"
        assert AuditStatus.error == "error"
        assert AuditStatus.rate_limited == "rate_limited"


class TestAuditContext:
    """Tests for per-invocation audit state."""
    
    def test_defaults_to_success(self):
        context = AuditContext("req-1", "list_people")
        
        assert context.status == AuditStatus.success
        assert context.error_code is None
        assert context.duration_ms >= 0
    
    def test_mark_error(self):
        context = AuditContext("req-1", "list_people")
        context.mark_error("UPSTREAM_ERROR")
        
        assert context.status == AuditStatus.error
        assert context.error_code == "UPSTREAM_ERROR"
    
    def test_mark_rate_limited(self):
        context = AuditContext("req-1", "list_people")
        context.mark_rate_limited()
        
        assert context.status == AuditStatus.rate_limited
        assert context.error_code == "RATE_LIMITED"


class TestAuditLogging:
    """Tests for the emitted tool_invocation records."""
    
    def test_log_tool_invocation(self):
        context = AuditContext("req-42", "get_person")
        context.mark_error("UNAUTHENTICATED")
        
        with patch("folk_crm_mcp.audit.logger.logger") as mock_logger:
            log_tool_invocation(context)
        
        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args == ("tool_invocation",)
        assert kwargs["request_id"] == "req-42"
        assert kwargs["tool_name"] == "get_person"
        assert kwargs["status"] == "error"
        assert kwargs["error_code"] == "UNAUTHENTICATED"
    
    @pytest.mark.asyncio
    async def test_context_manager_logs_on_exit(self):
        with patch("folk_crm_mcp.audit.logger.logger") as mock_logger:
            async with audit_tool_invocation("list_groups") as context:
                assert context.tool_name == "list_groups"
                assert context.request_id
        
        assert mock_logger.info.call_args.kwargs["status"] == "success"
    
    @pytest.mark.asyncio
    async def test_context_manager_logs_when_raising(self):
        with patch("folk_crm_mcp.audit.logger.logger") as mock_logger:
            with pytest.raises(RuntimeError):
                async with audit_tool_invocation("list_groups", request_id="req-7"):
                    raise RuntimeError("boom")
        
        assert mock_logger.info.call_args.kwargs["request_id"] == "req-7"
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,name,args,expected_status,expected_code",
        [
            (200, "list_people", {}, "success", None),
            (200, "list_people", {"limit": 0}, "error", "VALIDATION_ERROR"),
            (200, "create_note", {"content": "hi"}, "error", "REJECTED"),
            (429, "list_people", {}, "rate_limited", "RATE_LIMITED"),
            (401, "list_people", {}, "error", "UNAUTHENTICATED"),
            (503, "list_people", {}, "error", "UPSTREAM_ERROR"),
        ],
    )
    async def test_dispatch_outcomes_are_audited(
        self, registry, folk_client, folk_api, status_code, name, args, expected_status, expected_code
    ):
        folk_api.respond(status_code, {"data": []})
        
        with patch("folk_crm_mcp.audit.logger.logger") as mock_logger:
            await handle_tools_call(registry, folk_client, name, args)
        
        kwargs = mock_logger.info.call_args.kwargs
        assert kwargs["tool_name"] == name
        assert kwargs["status"] == expected_status
        assert kwargs["error_code"] == expected_code
