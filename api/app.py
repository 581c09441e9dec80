"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly (honours SIGNER_PORT / PORT, default 5000)
    python -m api.app
"""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.routes import health, keys, signing
from api.errors import APIError, api_error_handler, generic_error_handler
from core.config import ServiceConfig, get_default_config


logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging for the service and the CLI (stderr + optional file)."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or get_default_config()

    app = FastAPI(
        title="Signer Service API",
        description="""
Stateless Ed25519 signing service.

## Endpoints

- **GET /generate-keypair** - New key pair (base58 public key, hex secret key)
- **POST /sign-message** - Detached signature over a UTF-8 message
- **POST /verify-message** - Check a signature against a message and public key
- **GET /health** - Health check

Keys are never stored server-side.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(health.router)
    app.include_router(keys.router)
    app.include_router(signing.router)

    return app


def run(config: ServiceConfig | None = None, reload: bool = False) -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    config = config or get_default_config()
    setup_logging(config.log_level, config.log_file)

    logger.info(f"Backend running on http://localhost:{config.port}")
    if reload:
        uvicorn.run(
            "api.app:app",
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            reload=True,
        )
    else:
        uvicorn.run(
            create_app(config),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )


# Create the application instance
app = create_app()


if __name__ == "__main__":
    run()
