"""Shipment lifecycle: creation, status tracking and driver assignment."""

from __future__ import annotations

import copy
import logging

from fastapi_shiptrack.directory import DirectoryStore
from fastapi_shiptrack.enums import PaymentStatus, Role, ShipmentStatus
from fastapi_shiptrack.exceptions import (
    NotRegisteredError,
    ShipmentNotFoundError,
    UnauthorizedError,
)
from fastapi_shiptrack.models import (
    ActorId,
    Address,
    PackageDetails,
    Shipment,
    TrackingEvent,
    TrackingHistory,
)
from fastapi_shiptrack.pricing import estimate_cost
from fastapi_shiptrack.protocols import Clock
from fastapi_shiptrack.state import PlatformState

logger = logging.getLogger(__name__)

SHIPPER_ROLES = frozenset({Role.CUSTOMER, Role.STORE_OWNER})


class ShipmentLifecycle:
    """Sole mutator of shipment records.

    Status changes are gated by who the caller is, never by the current
    status: an authorized caller may move a shipment to any status,
    including out of ``delivered``.
    """

    def __init__(
        self,
        state: PlatformState,
        directory: DirectoryStore,
        clock: Clock,
    ) -> None:
        self.state = state
        self.directory = directory
        self.clock = clock

    def create_shipment(
        self,
        caller: ActorId,
        *,
        recipient_name: str,
        recipient_phone: str,
        pickup_address: Address,
        delivery_address: Address,
        package_details: PackageDetails,
    ) -> Shipment:
        """Create a shipment on behalf of a customer or store owner."""
        with self.state.lock:
            role = self.directory.get_role(caller)
            if role is None:
                raise NotRegisteredError("User not registered")
            if role not in SHIPPER_ROLES:
                logger.warning(
                    "Rejected shipment creation by %s with role %s",
                    caller,
                    role,
                )
                raise UnauthorizedError("Unauthorized to create shipments")

            now = self.clock.now()
            shipment = Shipment(
                id=self.state.shipment_ids.next(),
                sender_id=caller,
                recipient_name=recipient_name,
                recipient_phone=recipient_phone,
                pickup_address=copy.deepcopy(pickup_address),
                delivery_address=copy.deepcopy(delivery_address),
                package_details=copy.deepcopy(package_details),
                status=ShipmentStatus.CREATED,
                created_at=now,
                updated_at=now,
                cost=estimate_cost(package_details),
                tracking_history=TrackingHistory(
                    [
                        TrackingEvent(
                            timestamp=now,
                            status=ShipmentStatus.CREATED,
                            description="Shipment created",
                            updated_by=caller,
                        )
                    ]
                ),
                payment_status=PaymentStatus.PENDING,
            )
            self.state.shipments[shipment.id] = shipment
            logger.info(
                "Shipment %s created by %s, cost %.2f",
                shipment.id,
                caller,
                shipment.cost,
            )
            return copy.deepcopy(shipment)

    def get_shipment(self, shipment_id: str) -> Shipment | None:
        with self.state.lock:
            return copy.deepcopy(self.state.shipments.get(shipment_id))

    def get_user_shipments(self, caller: ActorId) -> list[Shipment]:
        with self.state.lock:
            return [
                copy.deepcopy(shipment)
                for shipment in self.state.shipments.values()
                if shipment.sender_id == caller
            ]

    def update_shipment_status(
        self,
        caller: ActorId,
        shipment_id: str,
        new_status: ShipmentStatus,
        *,
        description: str,
        location: str | None = None,
    ) -> Shipment:
        """Set any status and append the matching tracking event.

        Allowed for the sender, the assigned driver and admins.
        """
        with self.state.lock:
            shipment = self.state.shipments.get(shipment_id)
            if shipment is None:
                raise ShipmentNotFoundError(shipment_id)

            if caller != shipment.sender_id and caller != shipment.driver_id:
                role = self.directory.get_role(caller)
                if role is None:
                    raise NotRegisteredError("User not registered")
                if role != Role.ADMIN:
                    logger.warning(
                        "Rejected status update of %s by %s",
                        shipment_id,
                        caller,
                    )
                    raise UnauthorizedError("Unauthorized to update shipment")

            shipment.record(
                TrackingEvent(
                    timestamp=self.clock.now(),
                    status=new_status,
                    description=description,
                    updated_by=caller,
                    location=location,
                )
            )
            logger.info(
                "Shipment %s moved to %s by %s",
                shipment_id,
                new_status,
                caller,
            )
            return copy.deepcopy(shipment)

    def assign_driver_to_shipment(
        self,
        caller: ActorId,
        shipment_id: str,
        driver_id: ActorId,
    ) -> Shipment:
        """Assign ``driver_id`` and reschedule pickup.

        Allowed for admins and for a registered user assigning
        themselves. The driver identity is not checked against the
        driver directory, and the status is reset to ``pickup_scheduled``
        whatever it was.
        """
        with self.state.lock:
            role = self.directory.get_role(caller)
            allowed = role is not None and (
                role == Role.ADMIN or caller == driver_id
            )
            if not allowed:
                logger.warning(
                    "Rejected assignment of %s to %s by %s",
                    driver_id,
                    shipment_id,
                    caller,
                )
                raise UnauthorizedError("Unauthorized to assign driver")

            shipment = self.state.shipments.get(shipment_id)
            if shipment is None:
                raise ShipmentNotFoundError(shipment_id)

            shipment.driver_id = driver_id
            shipment.record(
                TrackingEvent(
                    timestamp=self.clock.now(),
                    status=ShipmentStatus.PICKUP_SCHEDULED,
                    description="Driver assigned and pickup scheduled",
                    updated_by=caller,
                )
            )
            logger.info(
                "Driver %s assigned to shipment %s by %s",
                driver_id,
                shipment_id,
                caller,
            )
            return copy.deepcopy(shipment)
