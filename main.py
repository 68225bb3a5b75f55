"""
OKLCH Converter MCP Server - FastAPI implementation
Provides endpoints for parsing OKLCH colors and converting them to rgb, hex, hsl and hwb
"""

import logging
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from config import Settings
from routers import oklchTools_router

settings = Settings.load()


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app = FastAPI(
    title="OKLCH Converter MCP Server",
    description="A FastAPI server for OKLCH color parsing and conversion",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(oklchTools_router)

if __name__ == "__main__":
    setup_logging(settings.log_level)
    if settings.mount_mcp:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
        logging.info("MCP tools mounted over HTTP")
    logging.info("Starting OKLCH converter on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
