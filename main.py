"""
Color Tools MCP Server - FastAPI implementation
Provides endpoints for color conversion, manipulation, schemes and contrast
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi_mcp import FastApiMCP

from bigcolor import __version__
from bigcolor.config import get_settings
from routers import colorTools_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Tools MCP Server",
    description="A FastAPI server for color tools operations",
    version=__version__,
)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


# Mount routers (paths unchanged)
app.include_router(colorTools_router)


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    logger.info("Serving color tools on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
