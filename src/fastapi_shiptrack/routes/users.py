"""User and driver directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fastapi_shiptrack.dependencies import get_caller, get_directory
from fastapi_shiptrack.exceptions import UserNotFoundError
from fastapi_shiptrack.models import ActorId
from fastapi_shiptrack.schemas import (
    DriverResponse,
    RegisterDriverRequest,
    RegisterUserRequest,
    UserResponse,
)

router = APIRouter()


@router.post("/users", response_model=UserResponse)
async def register_user(
    body: RegisterUserRequest,
    caller: ActorId = Depends(get_caller),
    directory=Depends(get_directory),
) -> UserResponse:
    """Register the caller as a user."""
    user = directory.register_user(
        caller,
        name=body.name,
        email=body.email,
        phone=body.phone,
        role=body.role,
    )
    return UserResponse.from_user(user)


@router.get("/users/me", response_model=UserResponse)
async def get_current_user(
    caller: ActorId = Depends(get_caller),
    directory=Depends(get_directory),
) -> UserResponse:
    user = directory.get_current_user(caller)
    if user is None:
        raise UserNotFoundError(caller)
    return UserResponse.from_user(user)


@router.get("/users/{identity}", response_model=UserResponse)
async def get_user(
    identity: str,
    directory=Depends(get_directory),
) -> UserResponse:
    user = directory.get_user(ActorId(identity))
    if user is None:
        raise UserNotFoundError(identity)
    return UserResponse.from_user(user)


@router.post("/drivers", response_model=DriverResponse)
async def register_driver(
    body: RegisterDriverRequest,
    caller: ActorId = Depends(get_caller),
    directory=Depends(get_directory),
) -> DriverResponse:
    """Register the caller as a driver."""
    driver = directory.register_driver(
        caller,
        name=body.name,
        phone=body.phone,
        vehicle_info=body.vehicle_info.to_vehicle_info(),
    )
    return DriverResponse.from_driver(driver)


@router.get("/drivers/available", response_model=list[DriverResponse])
async def get_available_drivers(
    directory=Depends(get_directory),
) -> list[DriverResponse]:
    return [
        DriverResponse.from_driver(driver)
        for driver in directory.get_available_drivers()
    ]
