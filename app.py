#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: The server handles many connections simultaneously via async I/O
(FastAPI + uvicorn). Short URLs live in a single in-memory store guarded by a
lock, so the service runs as one process; records do not survive a restart.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    SHORT_CODE_LENGTH - Length of generated short codes
    DEFAULT_VALIDITY_MINUTES - Validity when a request gives none
    MAX_COLLISION_RETRIES - Retries on generated-code collision (default 0)
    LOG_LEVEL - Logging level
    LOG_ENDPOINT - Remote log endpoint (optional)
    AUTH_TOKEN - Bearer token for the remote log endpoint
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortlinks.service import URLShortenerService
from shortlinks.shortcode import ShortCodeGenerator
from shortlinks.common.logging_config import setup_logging
from shortlinks.common.log_shipper import start_remote_logging, stop_remote_logging
from web_app import create_app


def build_service(config, logger) -> URLShortenerService:
    """Build the service and its in-memory store from configuration."""
    generator = ShortCodeGenerator(default_length=config.short_code_length)
    return URLShortenerService(
        short_code_generator=generator,
        logger=logger,
        enable_custom_codes=config.enable_custom_codes,
        max_collision_retries=config.max_collision_retries,
        default_validity_minutes=config.default_validity_minutes,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger
    
    logger.info("Starting URL shortener service...")
    
    listener = None
    if config.log_endpoint:
        listener = start_remote_logging(
            logger,
            endpoint=config.log_endpoint,
            auth_token=config.auth_token,
            stack=config.log_stack,
            level=logger.level,
        )
    
    app.state.service = build_service(config, logger)
    logger.info("Using in-memory store for URL storage", extra={"package": "db"})
    logger.info("Service started successfully")
    
    # Yield control to the application
    yield
    
    # Shutdown
    logger.info("Shutting down URL shortener service...")
    
    if listener:
        stop_remote_logging(listener, logger)
    
    logger.info("Service stopped")


def main():
    """Main entry point."""
    # Load configuration
    config = load_config()
    
    # Setup logging
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    
    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'auth_token'})}")
    
    # Service is built in lifespan
    app = create_app(service_instance=None, config=config)
    
    # Store logger in app state
    app.state.logger = logger
    
    # Override lifespan
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
    
    # Run server
    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
