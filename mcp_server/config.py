"""
Configuration for the MCP server, like the LM Studio URL.
"""
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

MCP_ENDPOINT = "/mcp"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Normalize a LOG_LEVEL value; unknown names fail startup"""
    level = value.strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown LOG_LEVEL: {value}")
    return level


class LMStudioConfig(BaseModel):
    api_url: str = "http://localhost:11434/v1/chat/completions"
    model_name: str = "llama-3.2-1b-instruct"
    timeout: float = 120.0


class HTTPServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3001
    mcp_endpoint: str = MCP_ENDPOINT


class ServerConfig(BaseModel):
    """Process-wide settings, read once at startup and passed to components"""
    lm_studio: LMStudioConfig = Field(default_factory=LMStudioConfig)
    server: HTTPServerConfig = Field(default_factory=HTTPServerConfig)
    log_level: str = "INFO"
    log_dir: str = "logs"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """
        Build the configuration from environment variables

        Args:
            environ: Mapping to read instead of os.environ. When omitted, a
                `.env` file in the working directory is loaded first.

        Raises:
            ValueError: If a numeric variable or LOG_LEVEL cannot be parsed
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        lm_defaults = LMStudioConfig()
        server_defaults = HTTPServerConfig()

        return cls(
            lm_studio=LMStudioConfig(
                api_url=environ.get("LM_STUDIO_API_URL") or lm_defaults.api_url,
                model_name=environ.get("LM_STUDIO_MODEL_NAME") or lm_defaults.model_name,
                timeout=float(environ.get("LLM_TIMEOUT") or lm_defaults.timeout),
            ),
            server=HTTPServerConfig(
                host=environ.get("MCP_SERVER_HOST") or server_defaults.host,
                port=int(environ.get("MCP_SERVER_PORT") or server_defaults.port),
            ),
            log_level=parse_log_level(environ.get("LOG_LEVEL") or "INFO"),
            log_dir=environ.get("LOG_DIR") or "logs",
        )
