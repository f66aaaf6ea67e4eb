"""Platform-wide summary counts."""

from fastapi_shiptrack.enums import ShipmentStatus
from fastapi_shiptrack.models import PlatformStats
from fastapi_shiptrack.state import PlatformState

SETTLED_STATUSES = frozenset(
    {ShipmentStatus.DELIVERED, ShipmentStatus.CANCELLED}
)


def get_platform_stats(state: PlatformState) -> PlatformStats:
    """Count users, drivers and shipments in one pass over current state.

    Every shipment not delivered or cancelled counts as pending, failed
    and returned ones included.
    """
    with state.lock:
        delivered = 0
        pending = 0
        for shipment in state.shipments.values():
            if shipment.status == ShipmentStatus.DELIVERED:
                delivered += 1
            if shipment.status not in SETTLED_STATUSES:
                pending += 1
        return PlatformStats(
            total_users=len(state.users),
            total_shipments=len(state.shipments),
            total_drivers=len(state.drivers),
            delivered_shipments=delivered,
            pending_shipments=pending,
        )
