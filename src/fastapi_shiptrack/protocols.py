"""Collaborator protocols."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fastapi_shiptrack.state import PlatformState


@runtime_checkable
class Clock(Protocol):
    """Source of non-decreasing integer timestamps (nanoseconds)."""

    def now(self) -> int: ...


@runtime_checkable
class StateStore(Protocol):
    """Durable storage for the platform state between process runs."""

    async def load(self) -> PlatformState: ...

    async def save(self, state: PlatformState) -> None: ...
