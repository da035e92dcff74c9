from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from folk_crm_mcp.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.folk.app/v1"

MISSING_API_KEY_MESSAGE = (
    "Error: FOLK_API_KEY environment variable is required.\n"
    "Get your API key from your Folk workspace settings.\n"
    "Set it with: export FOLK_API_KEY=your_key_here"
)


class Settings(BaseSettings):
    # Folk API
    FOLK_API_KEY: str = ""
    FOLK_BASE_URL: str = DEFAULT_BASE_URL

    # Comma-separated tool names that are never registered
    FOLK_CRM_MCP_FILTERED_TOOLS: str = ""

    # MCP
    MCP_LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def filtered_tools(self) -> frozenset[str]:
        """Tool names excluded from registration, parsed from the comma-separated setting."""
        names = (entry.strip() for entry in self.FOLK_CRM_MCP_FILTERED_TOOLS.split(","))
        return frozenset(name for name in names if name)

    def require_api_key(self) -> str:
        """Return the API key, or raise ConfigurationError if it is unset."""
        if not self.FOLK_API_KEY:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        return self.FOLK_API_KEY


@lru_cache()
def get_settings() -> Settings:
    return Settings()
