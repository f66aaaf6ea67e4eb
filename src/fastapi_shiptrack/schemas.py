"""Pydantic request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fastapi_shiptrack.enums import (
    PaymentStatus,
    ReturnStatus,
    Role,
    ShipmentStatus,
)
from fastapi_shiptrack.models import (
    Address,
    Coordinates,
    Dimensions,
    Driver,
    PackageDetails,
    PlatformStats,
    ReturnRequest,
    Shipment,
    User,
    VehicleInfo,
)


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class CoordinatesSchema(_Record):
    latitude: float
    longitude: float

    def to_coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


class AddressSchema(_Record):
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    coordinates: CoordinatesSchema | None = None

    def to_address(self) -> Address:
        return Address(
            street=self.street,
            city=self.city,
            state=self.state,
            postal_code=self.postal_code,
            country=self.country,
            coordinates=(
                self.coordinates.to_coordinates()
                if self.coordinates is not None
                else None
            ),
        )


class DimensionsSchema(_Record):
    length: float = Field(ge=0)
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class PackageDetailsSchema(_Record):
    description: str
    weight: float = Field(ge=0)
    dimensions: DimensionsSchema
    value: float = Field(ge=0)
    fragile: bool = False
    special_instructions: str | None = None

    def to_package_details(self) -> PackageDetails:
        return PackageDetails(
            description=self.description,
            weight=self.weight,
            dimensions=Dimensions(**self.dimensions.model_dump()),
            value=self.value,
            fragile=self.fragile,
            special_instructions=self.special_instructions,
        )


class VehicleInfoSchema(_Record):
    vehicle_type: str
    license_plate: str
    capacity: float = Field(ge=0)

    def to_vehicle_info(self) -> VehicleInfo:
        return VehicleInfo(**self.model_dump())


class RegisterUserRequest(BaseModel):
    name: str
    email: str
    phone: str
    role: Role


class RegisterDriverRequest(BaseModel):
    name: str
    phone: str
    vehicle_info: VehicleInfoSchema


class CreateShipmentRequest(BaseModel):
    recipient_name: str
    recipient_phone: str
    pickup_address: AddressSchema
    delivery_address: AddressSchema
    package_details: PackageDetailsSchema


class UpdateStatusRequest(BaseModel):
    status: ShipmentStatus
    description: str
    location: str | None = None


class AssignDriverRequest(BaseModel):
    driver_id: str


class CreateReturnRequest(BaseModel):
    shipment_id: str
    reason: str


class UserResponse(_Record):
    identity: str
    name: str
    email: str
    phone: str
    role: Role
    created_at: int
    is_active: bool

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls.model_validate(user)


class DriverResponse(_Record):
    identity: str
    name: str
    phone: str
    vehicle_info: VehicleInfoSchema
    current_location: CoordinatesSchema | None
    is_available: bool
    rating: float
    total_deliveries: int
    joined_at: int

    @classmethod
    def from_driver(cls, driver: Driver) -> DriverResponse:
        return cls.model_validate(driver)


class TrackingEventResponse(_Record):
    timestamp: int
    status: ShipmentStatus
    location: str | None
    description: str
    updated_by: str


class ShipmentResponse(_Record):
    id: str
    sender_id: str
    recipient_name: str
    recipient_phone: str
    pickup_address: AddressSchema
    delivery_address: AddressSchema
    package_details: PackageDetailsSchema
    status: ShipmentStatus
    driver_id: str | None
    created_at: int
    updated_at: int
    estimated_delivery: int | None
    actual_delivery: int | None
    tracking_history: list[TrackingEventResponse]
    payment_status: PaymentStatus
    cost: float

    @classmethod
    def from_shipment(cls, shipment: Shipment) -> ShipmentResponse:
        return cls(
            id=shipment.id,
            sender_id=shipment.sender_id,
            recipient_name=shipment.recipient_name,
            recipient_phone=shipment.recipient_phone,
            pickup_address=AddressSchema.model_validate(
                shipment.pickup_address
            ),
            delivery_address=AddressSchema.model_validate(
                shipment.delivery_address
            ),
            package_details=PackageDetailsSchema.model_validate(
                shipment.package_details
            ),
            status=shipment.status,
            driver_id=shipment.driver_id,
            created_at=shipment.created_at,
            updated_at=shipment.updated_at,
            estimated_delivery=shipment.estimated_delivery,
            actual_delivery=shipment.actual_delivery,
            tracking_history=[
                TrackingEventResponse.model_validate(event)
                for event in shipment.tracking_history
            ],
            payment_status=shipment.payment_status,
            cost=shipment.cost,
        )


class ReturnRequestResponse(_Record):
    id: str
    shipment_id: str
    requester_id: str
    reason: str
    status: ReturnStatus
    created_at: int
    processed_at: int | None

    @classmethod
    def from_return_request(
        cls, request: ReturnRequest
    ) -> ReturnRequestResponse:
        return cls.model_validate(request)


class PlatformStatsResponse(_Record):
    total_users: int
    total_shipments: int
    total_drivers: int
    delivered_shipments: int
    pending_shipments: int

    @classmethod
    def from_stats(cls, stats: PlatformStats) -> PlatformStatsResponse:
        return cls.model_validate(stats)
