"""Shared fixtures for fastapi-shiptrack tests."""

from __future__ import annotations

import pytest

from fastapi_shiptrack.directory import DirectoryStore
from fastapi_shiptrack.enums import Role
from fastapi_shiptrack.lifecycle import ShipmentLifecycle
from fastapi_shiptrack.models import (
    ActorId,
    Address,
    Dimensions,
    PackageDetails,
    VehicleInfo,
)
from fastapi_shiptrack.returns import ReturnWorkflow
from fastapi_shiptrack.state import PlatformState

CUSTOMER = ActorId("customer-1")
STORE_OWNER = ActorId("store-1")
ADMIN = ActorId("admin-1")
DRIVER = ActorId("driver-1")
STRANGER = ActorId("stranger-1")


class StepClock:
    """Deterministic clock advancing by ``step`` on every call."""

    def __init__(self, start: int = 1_000, step: int = 1) -> None:
        self.value = start
        self.step = step

    def now(self) -> int:
        self.value += self.step
        return self.value


def make_address(city: str = "Warsaw") -> Address:
    return Address(
        street="1 Main St",
        city=city,
        state="Mazowieckie",
        postal_code="00-001",
        country="PL",
    )


def make_package(
    weight: float = 1.0,
    value: float = 100.0,
    fragile: bool = False,
) -> PackageDetails:
    return PackageDetails(
        description="Books",
        weight=weight,
        dimensions=Dimensions(length=30.0, width=20.0, height=10.0),
        value=value,
        fragile=fragile,
    )


def make_vehicle() -> VehicleInfo:
    return VehicleInfo(
        vehicle_type="van",
        license_plate="WA 12345",
        capacity=800.0,
    )


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def state() -> PlatformState:
    return PlatformState()


@pytest.fixture()
def directory(state, clock) -> DirectoryStore:
    return DirectoryStore(state=state, clock=clock)


@pytest.fixture()
def lifecycle(state, directory, clock) -> ShipmentLifecycle:
    return ShipmentLifecycle(state=state, directory=directory, clock=clock)


@pytest.fixture()
def returns(state, lifecycle, clock) -> ReturnWorkflow:
    return ReturnWorkflow(state=state, lifecycle=lifecycle, clock=clock)


@pytest.fixture()
def actors(directory) -> DirectoryStore:
    """Directory with a customer, a store owner, an admin and a driver."""
    for identity, role in (
        (CUSTOMER, Role.CUSTOMER),
        (STORE_OWNER, Role.STORE_OWNER),
        (ADMIN, Role.ADMIN),
        (DRIVER, Role.DRIVER),
    ):
        directory.register_user(
            identity,
            name=f"{role} user",
            email=f"{identity}@example.com",
            phone="+48 600 000 000",
            role=role,
        )
    directory.register_driver(
        DRIVER,
        name="Driver One",
        phone="+48 600 000 001",
        vehicle_info=make_vehicle(),
    )
    return directory


@pytest.fixture()
def create_shipment(lifecycle, actors):
    """Factory creating a shipment sent by ``CUSTOMER`` by default."""

    def _create(sender: ActorId = CUSTOMER, **package_kwargs):
        return lifecycle.create_shipment(
            sender,
            recipient_name="Jan Kowalski",
            recipient_phone="+48 600 111 222",
            pickup_address=make_address("Warsaw"),
            delivery_address=make_address("Krakow"),
            package_details=make_package(**package_kwargs),
        )

    return _create
