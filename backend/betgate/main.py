"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from betgate.api import api_router
from betgate.core.config import Settings, get_settings
from betgate.models.user import Role
from betgate.services.gateway import Gateway

logger = logging.getLogger(__name__)


def bootstrap_admin(gateway: Gateway, settings: Settings) -> None:
    """Register the configured admin account, if any."""
    if not (settings.admin_username and settings.admin_password):
        return
    outcome = gateway.register(settings.admin_username, settings.admin_password, Role.ADMIN)
    if outcome.ok:
        logger.info("Bootstrapped admin account %s", settings.admin_username)
    else:
        logger.warning(
            "Could not bootstrap admin %s: %s", settings.admin_username, outcome.error.value
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        bootstrap_admin(app.state.gateway, settings)
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    # One gateway per application instance; all state is process-lifetime only.
    app.state.settings = settings
    app.state.gateway = Gateway()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


app = create_app()
