"""Domain records held by the platform state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import NewType, overload

from fastapi_shiptrack.enums import (
    PaymentStatus,
    ReturnStatus,
    Role,
    ShipmentStatus,
)

ActorId = NewType("ActorId", str)
"""Opaque, externally verified caller identity. Compared by equality only."""


@dataclass
class Coordinates:
    latitude: float
    longitude: float


@dataclass
class Address:
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    coordinates: Coordinates | None = None


@dataclass
class Dimensions:
    length: float
    width: float
    height: float


@dataclass
class PackageDetails:
    description: str
    weight: float
    dimensions: Dimensions
    value: float
    fragile: bool = False
    special_instructions: str | None = None


@dataclass
class VehicleInfo:
    vehicle_type: str
    license_plate: str
    capacity: float


@dataclass
class User:
    identity: ActorId
    name: str
    email: str
    phone: str
    role: Role
    created_at: int
    is_active: bool = True


@dataclass
class Driver:
    identity: ActorId
    name: str
    phone: str
    vehicle_info: VehicleInfo
    joined_at: int
    current_location: Coordinates | None = None
    is_available: bool = True
    rating: float = 5.0
    total_deliveries: int = 0


@dataclass(frozen=True)
class TrackingEvent:
    timestamp: int
    status: ShipmentStatus
    description: str
    updated_by: ActorId
    location: str | None = None


class TrackingHistory(Sequence[TrackingEvent]):
    """Append-only, ordered sequence of tracking events."""

    def __init__(self, events: Iterable[TrackingEvent] = ()) -> None:
        self._events: list[TrackingEvent] = list(events)

    def append(self, event: TrackingEvent) -> None:
        self._events.append(event)

    @property
    def last(self) -> TrackingEvent:
        return self._events[-1]

    @overload
    def __getitem__(self, index: int) -> TrackingEvent: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TrackingEvent, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._events[index])
        return self._events[index]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[TrackingEvent]:
        return iter(self._events)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TrackingHistory):
            return self._events == other._events
        return NotImplemented

    def __repr__(self) -> str:
        return f"TrackingHistory({self._events!r})"


@dataclass
class Shipment:
    id: str
    sender_id: ActorId
    recipient_name: str
    recipient_phone: str
    pickup_address: Address
    delivery_address: Address
    package_details: PackageDetails
    status: ShipmentStatus
    created_at: int
    updated_at: int
    cost: float
    tracking_history: TrackingHistory
    payment_status: PaymentStatus = PaymentStatus.PENDING
    driver_id: ActorId | None = None
    estimated_delivery: int | None = None
    actual_delivery: int | None = None

    def record(self, event: TrackingEvent) -> None:
        """Append ``event`` and move the shipment to its status.

        This is the only way status changes, so the last history entry
        always matches ``status``.
        """
        self.tracking_history.append(event)
        self.status = event.status
        self.updated_at = event.timestamp
        if event.status == ShipmentStatus.DELIVERED:
            self.actual_delivery = event.timestamp


@dataclass
class ReturnRequest:
    id: str
    shipment_id: str
    requester_id: ActorId
    reason: str
    created_at: int
    status: ReturnStatus = ReturnStatus.REQUESTED
    processed_at: int | None = None


@dataclass(frozen=True)
class PlatformStats:
    total_users: int
    total_shipments: int
    total_drivers: int
    delivered_shipments: int
    pending_shipments: int

