"""Return requests against delivered shipments."""

from __future__ import annotations

import copy
import logging

from fastapi_shiptrack.enums import ReturnStatus, ShipmentStatus
from fastapi_shiptrack.exceptions import (
    InvalidStateError,
    ReturnRequestNotFoundError,
    ShipmentNotFoundError,
    UnauthorizedError,
)
from fastapi_shiptrack.lifecycle import ShipmentLifecycle
from fastapi_shiptrack.models import ActorId, ReturnRequest
from fastapi_shiptrack.protocols import Clock
from fastapi_shiptrack.state import PlatformState

logger = logging.getLogger(__name__)


class ReturnWorkflow:
    """Opens and lists return requests.

    Opening a return never touches the shipment itself. Only the
    ``requested`` status is produced here.
    """

    def __init__(
        self,
        state: PlatformState,
        lifecycle: ShipmentLifecycle,
        clock: Clock,
    ) -> None:
        self.state = state
        self.lifecycle = lifecycle
        self.clock = clock

    def create_return_request(
        self,
        caller: ActorId,
        shipment_id: str,
        reason: str,
    ) -> ReturnRequest:
        with self.state.lock:
            shipment = self.lifecycle.get_shipment(shipment_id)
            if shipment is None:
                raise ShipmentNotFoundError(shipment_id)
            if shipment.sender_id != caller:
                logger.warning(
                    "Rejected return of %s requested by %s",
                    shipment_id,
                    caller,
                )
                raise UnauthorizedError("Unauthorized to request return")
            if shipment.status != ShipmentStatus.DELIVERED:
                raise InvalidStateError("Can only return delivered shipments")

            request = ReturnRequest(
                id=self.state.return_ids.next(),
                shipment_id=shipment_id,
                requester_id=caller,
                reason=reason,
                created_at=self.clock.now(),
                status=ReturnStatus.REQUESTED,
            )
            self.state.return_requests[request.id] = request
            logger.info(
                "Return %s requested for shipment %s by %s",
                request.id,
                shipment_id,
                caller,
            )
            return copy.deepcopy(request)

    def get_return_request(self, return_id: str) -> ReturnRequest:
        with self.state.lock:
            request = self.state.return_requests.get(return_id)
            if request is None:
                raise ReturnRequestNotFoundError(return_id)
            return copy.deepcopy(request)

    def get_return_requests(self, caller: ActorId) -> list[ReturnRequest]:
        with self.state.lock:
            return [
                copy.deepcopy(request)
                for request in self.state.return_requests.values()
                if request.requester_id == caller
            ]
