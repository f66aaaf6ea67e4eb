"""Shipment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fastapi_shiptrack.dependencies import get_caller, get_lifecycle
from fastapi_shiptrack.exceptions import ShipmentNotFoundError
from fastapi_shiptrack.models import ActorId
from fastapi_shiptrack.schemas import (
    AssignDriverRequest,
    CreateShipmentRequest,
    ShipmentResponse,
    UpdateStatusRequest,
)

router = APIRouter()


@router.get("/shipments/health")
async def shipments_health() -> dict[str, str]:
    """Healthcheck endpoint for shipment routes."""
    return {"status": "ok"}


@router.post("/shipments", response_model=ShipmentResponse)
async def create_shipment(
    body: CreateShipmentRequest,
    caller: ActorId = Depends(get_caller),
    lifecycle=Depends(get_lifecycle),
) -> ShipmentResponse:
    shipment = lifecycle.create_shipment(
        caller,
        recipient_name=body.recipient_name,
        recipient_phone=body.recipient_phone,
        pickup_address=body.pickup_address.to_address(),
        delivery_address=body.delivery_address.to_address(),
        package_details=body.package_details.to_package_details(),
    )
    return ShipmentResponse.from_shipment(shipment)


@router.get("/shipments", response_model=list[ShipmentResponse])
async def get_user_shipments(
    caller: ActorId = Depends(get_caller),
    lifecycle=Depends(get_lifecycle),
) -> list[ShipmentResponse]:
    """List shipments sent by the caller."""
    return [
        ShipmentResponse.from_shipment(shipment)
        for shipment in lifecycle.get_user_shipments(caller)
    ]


@router.get("/shipments/{shipment_id}", response_model=ShipmentResponse)
async def get_shipment(
    shipment_id: str,
    lifecycle=Depends(get_lifecycle),
) -> ShipmentResponse:
    shipment = lifecycle.get_shipment(shipment_id)
    if shipment is None:
        raise ShipmentNotFoundError(shipment_id)
    return ShipmentResponse.from_shipment(shipment)


@router.post(
    "/shipments/{shipment_id}/status", response_model=ShipmentResponse
)
async def update_shipment_status(
    shipment_id: str,
    body: UpdateStatusRequest,
    caller: ActorId = Depends(get_caller),
    lifecycle=Depends(get_lifecycle),
) -> ShipmentResponse:
    shipment = lifecycle.update_shipment_status(
        caller,
        shipment_id,
        body.status,
        description=body.description,
        location=body.location,
    )
    return ShipmentResponse.from_shipment(shipment)


@router.post(
    "/shipments/{shipment_id}/driver", response_model=ShipmentResponse
)
async def assign_driver(
    shipment_id: str,
    body: AssignDriverRequest,
    caller: ActorId = Depends(get_caller),
    lifecycle=Depends(get_lifecycle),
) -> ShipmentResponse:
    shipment = lifecycle.assign_driver_to_shipment(
        caller,
        shipment_id,
        ActorId(body.driver_id),
    )
    return ShipmentResponse.from_shipment(shipment)
