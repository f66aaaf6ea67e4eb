"""Shipment lifecycle service public API."""

from typing import TYPE_CHECKING

__version__ = "0.1.0"

__all__ = [
    "DirectoryStore",
    "PlatformState",
    "ReturnWorkflow",
    "ShipmentLifecycle",
    "ShipmentNotFoundError",
    "ShiptrackConfig",
    "ShiptrackError",
    "__version__",
    "create_shipping_router",
    "get_platform_stats",
    "register_exception_handlers",
]

if TYPE_CHECKING:
    from fastapi_shiptrack.analytics import get_platform_stats
    from fastapi_shiptrack.config import ShiptrackConfig
    from fastapi_shiptrack.directory import DirectoryStore
    from fastapi_shiptrack.exceptions import (
        ShipmentNotFoundError,
        ShiptrackError,
        register_exception_handlers,
    )
    from fastapi_shiptrack.lifecycle import ShipmentLifecycle
    from fastapi_shiptrack.returns import ReturnWorkflow
    from fastapi_shiptrack.router import create_shipping_router
    from fastapi_shiptrack.state import PlatformState


def __getattr__(name: str):
    # Lazy imports to avoid loading all submodules on package import.
    if name == "ShiptrackConfig":
        from fastapi_shiptrack.config import ShiptrackConfig

        return ShiptrackConfig
    if name == "create_shipping_router":
        from fastapi_shiptrack.router import create_shipping_router

        return create_shipping_router
    if name == "PlatformState":
        from fastapi_shiptrack.state import PlatformState

        return PlatformState
    if name == "DirectoryStore":
        from fastapi_shiptrack.directory import DirectoryStore

        return DirectoryStore
    if name == "ShipmentLifecycle":
        from fastapi_shiptrack.lifecycle import ShipmentLifecycle

        return ShipmentLifecycle
    if name == "ReturnWorkflow":
        from fastapi_shiptrack.returns import ReturnWorkflow

        return ReturnWorkflow
    if name == "get_platform_stats":
        from fastapi_shiptrack.analytics import get_platform_stats

        return get_platform_stats
    if name in (
        "ShipmentNotFoundError",
        "ShiptrackError",
        "register_exception_handlers",
    ):
        from fastapi_shiptrack import exceptions

        return getattr(exceptions, name)
    raise AttributeError(
        f"module 'fastapi_shiptrack' has no attribute {name!r}"
    )
