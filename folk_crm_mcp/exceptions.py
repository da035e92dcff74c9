"""Base exceptions for the Folk CRM MCP server."""


class FolkMCPError(Exception):
    """Base exception for all Folk CRM MCP errors."""
    
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ConfigurationError(FolkMCPError):
    """Raised when required process configuration is missing."""
    
    def __init__(self, message: str):
        super().__init__(message=message, code="CONFIGURATION_ERROR")
