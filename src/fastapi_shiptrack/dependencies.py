"""Dependency providers for request handlers."""

from __future__ import annotations

from fastapi import HTTPException, Request

from fastapi_shiptrack.config import ShiptrackConfig
from fastapi_shiptrack.directory import DirectoryStore
from fastapi_shiptrack.lifecycle import ShipmentLifecycle
from fastapi_shiptrack.models import ActorId
from fastapi_shiptrack.protocols import Clock
from fastapi_shiptrack.returns import ReturnWorkflow
from fastapi_shiptrack.state import PlatformState


def get_config(request: Request) -> ShiptrackConfig:
    """Read config from FastAPI app state."""
    return request.app.state.shiptrack_config


def get_state(request: Request) -> PlatformState:
    """Read platform state from FastAPI app state."""
    return request.app.state.shiptrack_state


def get_clock(request: Request) -> Clock:
    """Read timestamp source from FastAPI app state."""
    return request.app.state.shiptrack_clock


def get_caller(request: Request) -> ActorId:
    """Caller identity, already verified upstream, taken from a header."""
    header = get_config(request).identity_header
    identity = request.headers.get(header)
    if not identity:
        raise HTTPException(
            status_code=401,
            detail=f"Missing caller identity header {header!r}",
        )
    return ActorId(identity)


def get_directory(request: Request) -> DirectoryStore:
    """Create DirectoryStore for the current request."""
    return DirectoryStore(state=get_state(request), clock=get_clock(request))


def get_lifecycle(request: Request) -> ShipmentLifecycle:
    """Create ShipmentLifecycle for the current request."""
    return ShipmentLifecycle(
        state=get_state(request),
        directory=get_directory(request),
        clock=get_clock(request),
    )


def get_returns(request: Request) -> ReturnWorkflow:
    """Create ReturnWorkflow for the current request."""
    return ReturnWorkflow(
        state=get_state(request),
        lifecycle=get_lifecycle(request),
        clock=get_clock(request),
    )
