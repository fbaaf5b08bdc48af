#!/usr/bin/env python3
"""
Startup script for the Taskboard backend
This script starts the FastAPI server with settings from the environment
"""

import logging

import uvicorn

from taskboard.config import Settings

logger = logging.getLogger(__name__)


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    logger.info("Starting Taskboard Server...")
    logger.info(f"Host: {settings.host}")
    logger.info(f"Port: {settings.port}")
    logger.info(f"Reload: {settings.reload}")

    # Start the server
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
