#!/usr/bin/env python3
"""
Main entry point for the short-link service.

Short links live in a process-local mapping and are lost on restart. The
server runs a single process, so every request sees the same mapping.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links when the request has no host
    PATH_PREFIX - Path prefix for short links (default /urls)
    SHORT_CODE_LENGTH - Length of generated hex codes (default 8)
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortlink.store.memory import InMemoryShortLinkStore
from shortlink.service import ShortLinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


def build_service(config, logger):
    """Create the store and the service that wraps it."""
    store = InMemoryShortLinkStore(logger=logger)
    generator = ShortCodeGenerator(default_length=config.short_code_length)
    service = ShortLinkService(
        store=store,
        short_code_generator=generator,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
    )
    return store, service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting short-link service...")

    store, service = build_service(config, logger)
    app.state.store = store
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down short-link service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Short Link Service")
    logger.info(f"Configuration: {config.model_dump()}")

    # Store and service are created in lifespan
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
    )

    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
