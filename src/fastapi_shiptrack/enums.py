"""Status and role enumerations."""

from enum import StrEnum


class Role(StrEnum):
    CUSTOMER = "customer"
    DRIVER = "driver"
    STORE_OWNER = "store_owner"
    ADMIN = "admin"


class ShipmentStatus(StrEnum):
    """Shipment lifecycle states.

    Any status may be set from any other by an authorized caller; there is
    no transition table.
    """

    CREATED = "created"
    PICKUP_SCHEDULED = "pickup_scheduled"
    PICKED_UP = "picked_up"
    IN_TRANSIT = "in_transit"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    FAILED = "failed"
    RETURNED = "returned"
    CANCELLED = "cancelled"


class PaymentStatus(StrEnum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class ReturnStatus(StrEnum):
    REQUESTED = "requested"
    APPROVED = "approved"
    REJECTED = "rejected"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
