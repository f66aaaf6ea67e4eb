"""Router factory for fastapi-shiptrack."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from fastapi_shiptrack.clock import MonotonicClock
from fastapi_shiptrack.config import ShiptrackConfig
from fastapi_shiptrack.exceptions import register_exception_handlers
from fastapi_shiptrack.protocols import Clock, StateStore
from fastapi_shiptrack.routes.returns import router as returns_router
from fastapi_shiptrack.routes.shipments import router as shipments_router
from fastapi_shiptrack.routes.stats import router as stats_router
from fastapi_shiptrack.routes.users import router as users_router
from fastapi_shiptrack.state import PlatformState

logger = logging.getLogger(__name__)


def create_shipping_router(
    *,
    config: ShiptrackConfig | None = None,
    state: PlatformState | None = None,
    clock: Clock | None = None,
    store: StateStore | None = None,
) -> APIRouter:
    """Create a configured API router.

    With a ``store``, state is loaded from it on startup (replacing
    ``state``) and written back on shutdown.
    """
    actual_config = config or ShiptrackConfig()
    actual_clock = clock or MonotonicClock()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        if store is not None:
            actual_state = await store.load()
            logger.info(
                "Loaded %d shipments and %d users from store",
                len(actual_state.shipments),
                len(actual_state.users),
            )
        else:
            actual_state = (
                state
                if state is not None
                else PlatformState.from_config(actual_config)
            )
        app.state.shiptrack_config = actual_config
        app.state.shiptrack_state = actual_state
        app.state.shiptrack_clock = actual_clock
        register_exception_handlers(app)
        yield
        if store is not None:
            await store.save(actual_state)
            logger.info("Saved platform state to store")

    router = APIRouter(lifespan=lifespan)
    router.include_router(users_router)
    router.include_router(shipments_router)
    router.include_router(returns_router)
    router.include_router(stats_router)
    return router
