"""SQLAlchemy-backed platform state store."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fastapi_shiptrack.config import ShiptrackConfig
from fastapi_shiptrack.contrib.sqlalchemy.models import (
    CounterModel,
    DriverModel,
    ReturnRequestModel,
    ShipmentModel,
    UserModel,
)
from fastapi_shiptrack.enums import (
    PaymentStatus,
    ReturnStatus,
    Role,
    ShipmentStatus,
)
from fastapi_shiptrack.models import (
    ActorId,
    Address,
    Coordinates,
    Driver,
    PackageDetails,
    ReturnRequest,
    Shipment,
    TrackingEvent,
    TrackingHistory,
    User,
    VehicleInfo,
)
from fastapi_shiptrack.state import PlatformState

logger = logging.getLogger(__name__)

SHIPMENT_COUNTER = "shipments"
RETURN_COUNTER = "returns"

_address = TypeAdapter(Address)
_package = TypeAdapter(PackageDetails)
_vehicle = TypeAdapter(VehicleInfo)
_coordinates = TypeAdapter(Coordinates | None)
_events = TypeAdapter(list[TrackingEvent])


class SQLAlchemyStateStore:
    """Persist the whole platform state in SQLAlchemy tables.

    ``save`` upserts every record and both counters; records are never
    deleted, matching the core which never removes anything.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        config: ShiptrackConfig | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.config = config or ShiptrackConfig()

    async def load(self) -> PlatformState:
        async with self.session_factory() as session:
            counters = {
                row.name: row.value
                for row in (await session.execute(select(CounterModel)))
                .scalars()
                .all()
            }
            state = PlatformState.from_config(
                self.config,
                shipment_counter=counters.get(SHIPMENT_COUNTER, 0),
                return_counter=counters.get(RETURN_COUNTER, 0),
            )

            users = await session.execute(
                select(UserModel).order_by(UserModel.created_at)
            )
            for row in users.scalars():
                state.users[ActorId(row.identity)] = _user_from_row(row)

            drivers = await session.execute(
                select(DriverModel).order_by(DriverModel.joined_at)
            )
            for row in drivers.scalars():
                state.drivers[ActorId(row.identity)] = _driver_from_row(row)

            shipments = await session.execute(
                select(ShipmentModel).order_by(ShipmentModel.id)
            )
            for row in shipments.scalars():
                state.shipments[row.id] = _shipment_from_row(row)

            returns = await session.execute(
                select(ReturnRequestModel).order_by(ReturnRequestModel.id)
            )
            for row in returns.scalars():
                state.return_requests[row.id] = _return_from_row(row)

        logger.info(
            "Loaded state: %d users, %d drivers, %d shipments, %d returns",
            len(state.users),
            len(state.drivers),
            len(state.shipments),
            len(state.return_requests),
        )
        return state

    async def save(self, state: PlatformState) -> None:
        with state.lock:
            rows: list = [
                CounterModel(
                    name=SHIPMENT_COUNTER, value=state.shipment_ids.current
                ),
                CounterModel(
                    name=RETURN_COUNTER, value=state.return_ids.current
                ),
            ]
            rows.extend(_user_to_row(u) for u in state.users.values())
            rows.extend(_driver_to_row(d) for d in state.drivers.values())
            rows.extend(_shipment_to_row(s) for s in state.shipments.values())
            rows.extend(
                _return_to_row(r) for r in state.return_requests.values()
            )

        async with self.session_factory() as session:
            for row in rows:
                await session.merge(row)
            await session.commit()
        logger.info("Saved %d rows of platform state", len(rows))


def _user_to_row(user: User) -> UserModel:
    return UserModel(
        identity=user.identity,
        name=user.name,
        email=user.email,
        phone=user.phone,
        role=str(user.role),
        created_at=user.created_at,
        is_active=user.is_active,
    )


def _user_from_row(row: UserModel) -> User:
    return User(
        identity=ActorId(row.identity),
        name=row.name,
        email=row.email,
        phone=row.phone,
        role=Role(row.role),
        created_at=row.created_at,
        is_active=row.is_active,
    )


def _driver_to_row(driver: Driver) -> DriverModel:
    return DriverModel(
        identity=driver.identity,
        name=driver.name,
        phone=driver.phone,
        vehicle_info=_vehicle.dump_python(driver.vehicle_info, mode="json"),
        current_location=_coordinates.dump_python(
            driver.current_location, mode="json"
        ),
        is_available=driver.is_available,
        rating=driver.rating,
        total_deliveries=driver.total_deliveries,
        joined_at=driver.joined_at,
    )


def _driver_from_row(row: DriverModel) -> Driver:
    return Driver(
        identity=ActorId(row.identity),
        name=row.name,
        phone=row.phone,
        vehicle_info=_vehicle.validate_python(row.vehicle_info),
        joined_at=row.joined_at,
        current_location=_coordinates.validate_python(row.current_location),
        is_available=row.is_available,
        rating=row.rating,
        total_deliveries=row.total_deliveries,
    )


def _shipment_to_row(shipment: Shipment) -> ShipmentModel:
    return ShipmentModel(
        id=shipment.id,
        sender_id=shipment.sender_id,
        recipient_name=shipment.recipient_name,
        recipient_phone=shipment.recipient_phone,
        pickup_address=_address.dump_python(
            shipment.pickup_address, mode="json"
        ),
        delivery_address=_address.dump_python(
            shipment.delivery_address, mode="json"
        ),
        package_details=_package.dump_python(
            shipment.package_details, mode="json"
        ),
        status=str(shipment.status),
        driver_id=shipment.driver_id,
        created_at=shipment.created_at,
        updated_at=shipment.updated_at,
        estimated_delivery=shipment.estimated_delivery,
        actual_delivery=shipment.actual_delivery,
        tracking_history=_events.dump_python(
            list(shipment.tracking_history), mode="json"
        ),
        payment_status=str(shipment.payment_status),
        cost=shipment.cost,
    )


def _shipment_from_row(row: ShipmentModel) -> Shipment:
    return Shipment(
        id=row.id,
        sender_id=ActorId(row.sender_id),
        recipient_name=row.recipient_name,
        recipient_phone=row.recipient_phone,
        pickup_address=_address.validate_python(row.pickup_address),
        delivery_address=_address.validate_python(row.delivery_address),
        package_details=_package.validate_python(row.package_details),
        status=ShipmentStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
        cost=row.cost,
        tracking_history=TrackingHistory(
            _events.validate_python(row.tracking_history)
        ),
        payment_status=PaymentStatus(row.payment_status),
        driver_id=(
            ActorId(row.driver_id) if row.driver_id is not None else None
        ),
        estimated_delivery=row.estimated_delivery,
        actual_delivery=row.actual_delivery,
    )


def _return_to_row(request: ReturnRequest) -> ReturnRequestModel:
    return ReturnRequestModel(
        id=request.id,
        shipment_id=request.shipment_id,
        requester_id=request.requester_id,
        reason=request.reason,
        status=str(request.status),
        created_at=request.created_at,
        processed_at=request.processed_at,
    )


def _return_from_row(row: ReturnRequestModel) -> ReturnRequest:
    return ReturnRequest(
        id=row.id,
        shipment_id=row.shipment_id,
        requester_id=ActorId(row.requester_id),
        reason=row.reason,
        created_at=row.created_at,
        status=ReturnStatus(row.status),
        processed_at=row.processed_at,
    )
