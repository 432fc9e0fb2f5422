"""
npm Plus Configuration

Upstream endpoints, transport timeout and logging setup.
"""

import logging
import os
import sys

import structlog
from pydantic import BaseModel, Field, field_validator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

# Server logger; stdout belongs to the stdio transport so everything goes to stderr
mcp_logger = structlog.get_logger("npm_plus")


class NPMPlusConfig(BaseModel):
    """Configuration for the npm Plus tools."""

    registry_url: str = Field(default="https://registry.npmjs.org", description="npm registry base URL")
    downloads_api_url: str = Field(default="https://api.npmjs.org", description="npm download-counts API base URL")
    bundlephobia_url: str = Field(default="https://bundlephobia.com/api/size", description="Bundlephobia size endpoint")
    advisory_url: str = Field(default="https://github.com/advisories", description="Advisory search page")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    log_level: str = Field(default="INFO", description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL")
    server_name: str = Field(default="npm-plus", description="Name advertised by the MCP server")

    model_config = {"frozen": True}

    @field_validator("registry_url", "downloads_api_url", "bundlephobia_url", "advisory_url")
    @classmethod
    def validate_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {_LOG_LEVELS}")
        return level

    @classmethod
    def from_env(cls) -> "NPMPlusConfig":
        """Build a configuration from NPM_PLUS_* environment variables."""
        defaults = cls()
        return cls(
            registry_url=os.getenv("NPM_PLUS_REGISTRY_URL", defaults.registry_url),
            downloads_api_url=os.getenv("NPM_PLUS_DOWNLOADS_API_URL", defaults.downloads_api_url),
            bundlephobia_url=os.getenv("NPM_PLUS_BUNDLEPHOBIA_URL", defaults.bundlephobia_url),
            advisory_url=os.getenv("NPM_PLUS_ADVISORY_URL", defaults.advisory_url),
            timeout=float(os.getenv("NPM_PLUS_TIMEOUT", str(defaults.timeout))),
            log_level=os.getenv("NPM_PLUS_LOG_LEVEL", defaults.log_level),
            server_name=os.getenv("NPM_PLUS_SERVER_NAME", defaults.server_name),
        )


def configure_logging(level: str = "INFO"):
    """Route stdlib logging and structlog to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Global configuration instance
_config: NPMPlusConfig | None = None


def get_config() -> NPMPlusConfig:
    """Get the global configuration, reading the environment on first use."""
    global _config
    if _config is None:
        _config = NPMPlusConfig.from_env()
    return _config
