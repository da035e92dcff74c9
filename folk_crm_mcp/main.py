"""Process entry point for the Folk CRM MCP server."""

import asyncio
import sys

from folk_crm_mcp.audit import configure_logging
from folk_crm_mcp.audit.logger import logger
from folk_crm_mcp.config import get_settings
from folk_crm_mcp.exceptions import ConfigurationError
from folk_crm_mcp.mcp_transport.stdio import serve


def main() -> None:
    """Validate configuration and serve over stdio.

    Exits with status 1 if the API key is missing or the transport fails.
    """
    settings = get_settings()
    try:
        settings.require_api_key()
    except ConfigurationError as exc:
        print(exc.message, file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.MCP_LOG_LEVEL)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("server_error", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
