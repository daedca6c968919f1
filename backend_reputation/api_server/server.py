"""
FastAPI server — reputation profiles and role scoring.

create_app() wires routers, CORS, error handlers and a lifespan that owns the
shared provider clients. Errors are rendered as {"error": message} with the
status carried by the exception class.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend_reputation import __version__
from backend_reputation.api_server.profile import router as profile_router
from backend_reputation.api_server.scoring import router as scoring_router
from backend_reputation.api_server.services import AppServices, build_services
from backend_reputation.config import Settings, get_settings
from backend_reputation.core.exceptions import InvalidAddress, ReputationError
from backend_reputation.reputation_logging import get_logger

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    services: AppServices | None = None,
) -> FastAPI:
    """
    Build the ASGI app.

    When services is given (tests), the app uses it as-is and never closes
    it; otherwise the lifespan builds the provider clients from settings on
    startup and closes them on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.services is None
        if owned:
            app.state.services = build_services(settings)
            logger.info(
                "provider_clients_started",
                tokens=[t.symbol for t in settings.token_contracts],
                aggregation_timeout_sec=settings.aggregation_timeout_sec,
            )
        yield
        if owned:
            await app.state.services.aclose()
            app.state.services = None
            logger.info("provider_clients_closed")

    app = FastAPI(
        title="Backend Reputation API",
        description="On-chain reputation profiles for Ethereum wallets.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(profile_router, prefix="/api")
    app.include_router(scoring_router, prefix="/api")

    @app.exception_handler(ReputationError)
    async def reputation_error_handler(request: Request, exc: ReputationError) -> JSONResponse:
        """Consistent {"error": ...} body; internal detail stays in the logs."""
        if isinstance(exc, InvalidAddress):
            logger.info("request_rejected", path=request.url.path, error=exc.public_message)
        else:
            logger.error(
                "request_failed",
                path=request.url.path,
                source=exc.source,
                error=str(exc),
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe: API is up."""
        return {"status": "ok"}

    return app


__all__ = ["create_app"]
