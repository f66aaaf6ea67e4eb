"""Process-wide platform state container."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from fastapi_shiptrack.config import ShiptrackConfig
from fastapi_shiptrack.ids import IdentifierGenerator
from fastapi_shiptrack.models import (
    ActorId,
    Driver,
    ReturnRequest,
    Shipment,
    User,
)


@dataclass
class PlatformState:
    """Owns every record mapping and both ID counters.

    Components hold ``lock`` for the whole of each operation, which keeps
    read-modify-write sequences atomic when handlers run on a thread pool.
    """

    users: dict[ActorId, User] = field(default_factory=dict)
    drivers: dict[ActorId, Driver] = field(default_factory=dict)
    shipments: dict[str, Shipment] = field(default_factory=dict)
    return_requests: dict[str, ReturnRequest] = field(default_factory=dict)
    shipment_ids: IdentifierGenerator = field(
        default_factory=lambda: IdentifierGenerator("SH")
    )
    return_ids: IdentifierGenerator = field(
        default_factory=lambda: IdentifierGenerator("RT")
    )
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    @classmethod
    def from_config(
        cls,
        config: ShiptrackConfig,
        *,
        shipment_counter: int = 0,
        return_counter: int = 0,
    ) -> PlatformState:
        """Create empty state with ID generators shaped by ``config``."""
        return cls(
            shipment_ids=IdentifierGenerator(
                config.shipment_id_prefix,
                config.id_width,
                start=shipment_counter,
            ),
            return_ids=IdentifierGenerator(
                config.return_id_prefix,
                config.id_width,
                start=return_counter,
            ),
        )
