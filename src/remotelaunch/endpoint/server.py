"""FastAPI HTTP server exposing the configured commands.

Endpoints (GET only, every response carries an open CORS header):

    GET /run?name=<name>  -> "Command <name> started successfully."
    GET /list             -> ["name", ...] sorted ascending
    GET /heartbeat        -> "Server Time: 2025-01-01 12:00:00"

Any other method is answered with 405 and ``Allow: GET``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse

from remotelaunch.errors import CommandNotFoundError, SpawnError
from remotelaunch.launcher.base import Launcher
from remotelaunch.launcher.process import ProcessLauncher
from remotelaunch.registry.registry import CommandRegistry

logger = logging.getLogger(__name__)

ALLOWED_METHOD = "GET"
HEARTBEAT_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_app(
    registry: CommandRegistry,
    launcher: Launcher | None = None,
    gzip_minimum_size: int = 500,
) -> FastAPI:
    """Create the launcher API application.

    Args:
        registry: Loaded command registry, shared read-only by all requests.
        launcher: Optional pre-configured launcher (for testing). Defaults
            to a ProcessLauncher.
        gzip_minimum_size: Responses smaller than this are not compressed.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Serving %d command(s)", len(app.state.registry))
        yield
        await app.state.launcher.detach()
        logger.info("Server stopped")

    app = FastAPI(
        title="remotelaunch",
        description="Start preconfigured commands on this host over HTTP",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.registry = registry
    app.state.launcher = launcher if launcher is not None else ProcessLauncher()

    app.add_middleware(GZipMiddleware, minimum_size=gzip_minimum_size)

    @app.middleware("http")
    async def get_only_with_cors(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        # Simple requests only, no OPTIONS preflight handling.
        if request.method != ALLOWED_METHOD:
            response: Response = PlainTextResponse(
                "Method Not Allowed",
                status_code=405,
                headers={"Allow": ALLOWED_METHOD},
            )
        else:
            response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.exception_handler(CommandNotFoundError)
    async def command_not_found(request: Request, exc: CommandNotFoundError) -> PlainTextResponse:
        logger.info("Rejected unknown command %r", exc.name)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(SpawnError)
    async def spawn_failed(request: Request, exc: SpawnError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=500)

    @app.get("/run", response_class=PlainTextResponse)
    async def run_command(name: str = "") -> PlainTextResponse:
        if not name:
            return PlainTextResponse(
                "Query parameter [name] is required and cannot be empty.",
                status_code=400,
            )

        r: CommandRegistry = app.state.registry
        definition = r.resolve(name)
        if definition is None:
            raise CommandNotFoundError(name)

        launcher: Launcher = app.state.launcher
        ack = await launcher.launch(definition)
        return PlainTextResponse(ack.message)

    @app.get("/list")
    async def list_commands() -> list[str]:
        r: CommandRegistry = app.state.registry
        return r.list_names()

    @app.get("/heartbeat", response_class=PlainTextResponse)
    async def heartbeat() -> str:
        return f"Server Time: {datetime.now().strftime(HEARTBEAT_FORMAT)}"

    return app


def main(
    registry: CommandRegistry,
    host: str = "localhost",
    port: int = 5000,
    gzip_minimum_size: int = 500,
) -> None:
    """Run the launcher server until interrupted."""
    app = create_app(registry, gzip_minimum_size=gzip_minimum_size)
    logger.info("Remote server listening at http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
