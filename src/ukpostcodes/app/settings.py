from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

from ukpostcodes.infra.http import API_URL, DEFAULT_USER_AGENT

load_dotenv()


@dataclass
class Settings:
    # Upstream
    api_url: str

    # HTTP
    http_timeout_seconds: float
    http_user_agent: str

    # Logging
    log_level: str

    # MCP server
    mcp_host: str
    mcp_port: int
    mcp_path: str


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _str(name: str, default: str) -> str:
    return _clean(os.getenv(name)) or default


def _int(name: str, default: int) -> int:
    v = _clean(os.getenv(name, str(default)))
    return int(v)


def _float(name: str, default: float) -> float:
    v = _clean(os.getenv(name, str(default)))
    return float(v)


def get_settings() -> Settings:
    """
    Read configuration from the environment (.env is loaded on import).
    Only the application layer reads these; the library takes explicit arguments.
    """
    return Settings(
        api_url=_str("POSTCODES_API_URL", API_URL),
        http_timeout_seconds=_float("HTTP_TIMEOUT_SECONDS", 10.0),
        http_user_agent=_str("HTTP_USER_AGENT", DEFAULT_USER_AGENT),
        log_level=_str("LOG_LEVEL", "INFO").upper(),
        mcp_host=_str("MCP_HOST", "127.0.0.1"),
        mcp_port=_int("MCP_PORT", 3334),
        mcp_path=_str("MCP_PATH", "/mcp"),
    )
