"""Return request endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fastapi_shiptrack.dependencies import get_caller, get_returns
from fastapi_shiptrack.models import ActorId
from fastapi_shiptrack.schemas import (
    CreateReturnRequest,
    ReturnRequestResponse,
)

router = APIRouter()


@router.post("/returns", response_model=ReturnRequestResponse)
async def create_return_request(
    body: CreateReturnRequest,
    caller: ActorId = Depends(get_caller),
    returns=Depends(get_returns),
) -> ReturnRequestResponse:
    request = returns.create_return_request(
        caller, body.shipment_id, body.reason
    )
    return ReturnRequestResponse.from_return_request(request)


@router.get("/returns", response_model=list[ReturnRequestResponse])
async def get_return_requests(
    caller: ActorId = Depends(get_caller),
    returns=Depends(get_returns),
) -> list[ReturnRequestResponse]:
    """List return requests opened by the caller."""
    return [
        ReturnRequestResponse.from_return_request(request)
        for request in returns.get_return_requests(caller)
    ]


@router.get("/returns/{return_id}", response_model=ReturnRequestResponse)
async def get_return_request(
    return_id: str,
    returns=Depends(get_returns),
) -> ReturnRequestResponse:
    return ReturnRequestResponse.from_return_request(
        returns.get_return_request(return_id)
    )
