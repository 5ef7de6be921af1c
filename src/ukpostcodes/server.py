from __future__ import annotations

import logging

from fastmcp import FastMCP

from ukpostcodes.app.container import build_container
from ukpostcodes.app.logger import configure_logging
from ukpostcodes.tools.postcode_tools import register_postcode_tools

_container = build_container()

configure_logging(_container.settings.log_level)
log = logging.getLogger(__name__)

mcp = FastMCP("ukpostcodes")

try:
    register_postcode_tools(mcp, _container)
    log.info("Postcode tools registered against %s", _container.settings.api_url)
except Exception as e:
    log.error("Failed to register postcode tools: %s", e, exc_info=True)
    raise


if __name__ == "__main__":
    settings = _container.settings
    mcp.run(
        transport="http",
        host=settings.mcp_host,
        port=settings.mcp_port,
        path=settings.mcp_path,
    )
