"""Shipment lifecycle tests."""

from __future__ import annotations

import pytest

from conftest import (
    ADMIN,
    CUSTOMER,
    DRIVER,
    STORE_OWNER,
    STRANGER,
    make_address,
    make_package,
)
from fastapi_shiptrack.enums import PaymentStatus, ShipmentStatus
from fastapi_shiptrack.exceptions import (
    NotRegisteredError,
    ShipmentNotFoundError,
    UnauthorizedError,
)
from fastapi_shiptrack.models import ActorId

ALL_STATUSES = list(ShipmentStatus)


def _assert_history_consistent(shipment) -> None:
    assert len(shipment.tracking_history) > 0
    assert shipment.tracking_history.last.status == shipment.status


class TestCreateShipment:
    def test_initial_fields(self, create_shipment, clock) -> None:
        shipment = create_shipment()

        assert shipment.id == "SH000001"
        assert shipment.sender_id == CUSTOMER
        assert shipment.status == ShipmentStatus.CREATED
        assert shipment.payment_status == PaymentStatus.PENDING
        assert shipment.driver_id is None
        assert shipment.actual_delivery is None
        assert shipment.estimated_delivery is None
        assert shipment.created_at == shipment.updated_at

        (event,) = shipment.tracking_history
        assert event.status == ShipmentStatus.CREATED
        assert event.description == "Shipment created"
        assert event.location is None
        assert event.updated_by == CUSTOMER

    def test_cost_is_estimated(self, create_shipment) -> None:
        shipment = create_shipment(weight=5.0, value=1000.0, fragile=True)
        assert shipment.cost == 35.0

    def test_store_owner_may_create(self, create_shipment) -> None:
        shipment = create_shipment(sender=STORE_OWNER)
        assert shipment.sender_id == STORE_OWNER

    @pytest.mark.parametrize("sender", [ADMIN, DRIVER])
    def test_other_roles_unauthorized(self, create_shipment, sender) -> None:
        with pytest.raises(UnauthorizedError, match="create shipments"):
            create_shipment(sender=sender)

    def test_unregistered_caller(self, create_shipment, state) -> None:
        with pytest.raises(NotRegisteredError):
            create_shipment(sender=STRANGER)
        assert state.shipments == {}
        assert state.shipment_ids.current == 0

    def test_sequential_ids(self, create_shipment) -> None:
        ids = [create_shipment().id for _ in range(5)]
        assert ids == [f"SH{n:06}" for n in range(1, 6)]

    def test_inputs_are_not_aliased(self, lifecycle, actors, state) -> None:
        package = make_package()
        shipment = lifecycle.create_shipment(
            CUSTOMER,
            recipient_name="R",
            recipient_phone="P",
            pickup_address=make_address(),
            delivery_address=make_address(),
            package_details=package,
        )
        package.weight = 99.0
        assert state.shipments[shipment.id].package_details.weight == 1.0


class TestReads:
    def test_get_shipment(self, lifecycle, create_shipment) -> None:
        created = create_shipment()
        assert lifecycle.get_shipment(created.id) == created
        assert lifecycle.get_shipment("SH999999") is None

    def test_get_user_shipments_filters_by_sender(
        self, lifecycle, create_shipment
    ) -> None:
        first = create_shipment()
        create_shipment(sender=STORE_OWNER)
        third = create_shipment()

        mine = lifecycle.get_user_shipments(CUSTOMER)
        assert [s.id for s in mine] == [first.id, third.id]
        assert lifecycle.get_user_shipments(STRANGER) == []


class TestUpdateShipmentStatus:
    def test_sender_updates(self, lifecycle, create_shipment) -> None:
        shipment = create_shipment()
        updated = lifecycle.update_shipment_status(
            CUSTOMER,
            shipment.id,
            ShipmentStatus.IN_TRANSIT,
            description="on the way",
            location="Lodz",
        )

        assert updated.status == ShipmentStatus.IN_TRANSIT
        assert updated.updated_at > shipment.updated_at
        event = updated.tracking_history.last
        assert event.location == "Lodz"
        assert event.description == "on the way"
        assert event.updated_by == CUSTOMER
        assert len(updated.tracking_history) == 2

    def test_admin_updates(self, lifecycle, create_shipment) -> None:
        shipment = create_shipment()
        updated = lifecycle.update_shipment_status(
            ADMIN, shipment.id, ShipmentStatus.CANCELLED, description="x"
        )
        assert updated.status == ShipmentStatus.CANCELLED

    def test_assigned_driver_updates(self, lifecycle, create_shipment) -> None:
        shipment = create_shipment()
        lifecycle.assign_driver_to_shipment(DRIVER, shipment.id, DRIVER)
        updated = lifecycle.update_shipment_status(
            DRIVER, shipment.id, ShipmentStatus.PICKED_UP, description="x"
        )
        assert updated.status == ShipmentStatus.PICKED_UP

    def test_unregistered_driver_assignee_may_update(
        self, lifecycle, create_shipment
    ) -> None:
        outsider = ActorId("courier-without-account")
        shipment = create_shipment()
        lifecycle.assign_driver_to_shipment(ADMIN, shipment.id, outsider)
        updated = lifecycle.update_shipment_status(
            outsider, shipment.id, ShipmentStatus.IN_TRANSIT, description="x"
        )
        assert updated.status == ShipmentStatus.IN_TRANSIT

    def test_other_registered_user_unauthorized(
        self, lifecycle, create_shipment, state
    ) -> None:
        shipment = create_shipment()
        with pytest.raises(UnauthorizedError, match="update shipment"):
            lifecycle.update_shipment_status(
                STORE_OWNER,
                shipment.id,
                ShipmentStatus.DELIVERED,
                description="x",
            )
        assert state.shipments[shipment.id] == shipment

    def test_unregistered_stranger(
        self, lifecycle, create_shipment, state
    ) -> None:
        shipment = create_shipment()
        with pytest.raises(NotRegisteredError):
            lifecycle.update_shipment_status(
                STRANGER,
                shipment.id,
                ShipmentStatus.DELIVERED,
                description="x",
            )
        assert state.shipments[shipment.id] == shipment

    def test_missing_shipment(self, lifecycle, actors) -> None:
        with pytest.raises(ShipmentNotFoundError) as exc_info:
            lifecycle.update_shipment_status(
                ADMIN, "SH000404", ShipmentStatus.DELIVERED, description="x"
            )
        assert exc_info.value.shipment_id == "SH000404"

    def test_delivered_sets_actual_delivery_each_time(
        self, lifecycle, create_shipment, clock
    ) -> None:
        shipment = create_shipment()
        first = lifecycle.update_shipment_status(
            CUSTOMER, shipment.id, ShipmentStatus.DELIVERED, description="a"
        )
        assert first.actual_delivery == clock.value

        again = lifecycle.update_shipment_status(
            CUSTOMER, shipment.id, ShipmentStatus.DELIVERED, description="b"
        )
        assert again.actual_delivery == clock.value
        assert again.actual_delivery > first.actual_delivery

    def test_any_transition_allowed_even_out_of_delivered(
        self, lifecycle, create_shipment
    ) -> None:
        shipment = create_shipment()
        lifecycle.update_shipment_status(
            CUSTOMER, shipment.id, ShipmentStatus.DELIVERED, description="a"
        )
        reopened = lifecycle.update_shipment_status(
            CUSTOMER, shipment.id, ShipmentStatus.CREATED, description="b"
        )
        assert reopened.status == ShipmentStatus.CREATED
        assert reopened.actual_delivery is not None

    def test_history_matches_status_over_every_status(
        self, lifecycle, create_shipment
    ) -> None:
        shipment = create_shipment()
        for status in ALL_STATUSES + ALL_STATUSES[::-1]:
            shipment = lifecycle.update_shipment_status(
                ADMIN, shipment.id, status, description=str(status)
            )
            _assert_history_consistent(shipment)
        assert len(shipment.tracking_history) == 1 + 2 * len(ALL_STATUSES)

    def test_history_is_append_only(self, lifecycle, create_shipment) -> None:
        shipment = create_shipment()
        before = list(shipment.tracking_history)
        updated = lifecycle.update_shipment_status(
            CUSTOMER, shipment.id, ShipmentStatus.PICKED_UP, description="x"
        )
        assert list(updated.tracking_history[: len(before)]) == before


class TestAssignDriver:
    def test_self_assignment(self, lifecycle, create_shipment) -> None:
        shipment = create_shipment()
        updated = lifecycle.assign_driver_to_shipment(
            DRIVER, shipment.id, DRIVER
        )
        assert updated.driver_id == DRIVER
        assert updated.status == ShipmentStatus.PICKUP_SCHEDULED
        event = updated.tracking_history.last
        assert event.description == "Driver assigned and pickup scheduled"
        assert event.updated_by == DRIVER
        _assert_history_consistent(updated)

    def test_forces_pickup_scheduled_from_later_status(
        self, lifecycle, create_shipment
    ) -> None:
        shipment = create_shipment()
        lifecycle.update_shipment_status(
            CUSTOMER, shipment.id, ShipmentStatus.IN_TRANSIT, description="x"
        )
        updated = lifecycle.assign_driver_to_shipment(
            DRIVER, shipment.id, DRIVER
        )
        assert updated.status == ShipmentStatus.PICKUP_SCHEDULED

    def test_admin_assigns_unregistered_driver(
        self, lifecycle, create_shipment
    ) -> None:
        shipment = create_shipment()
        updated = lifecycle.assign_driver_to_shipment(
            ADMIN, shipment.id, ActorId("nobody")
        )
        assert updated.driver_id == "nobody"

    @pytest.mark.parametrize("caller", [CUSTOMER, STORE_OWNER, STRANGER])
    def test_others_unauthorized(
        self, lifecycle, create_shipment, state, caller
    ) -> None:
        shipment = create_shipment()
        with pytest.raises(UnauthorizedError, match="assign driver"):
            lifecycle.assign_driver_to_shipment(caller, shipment.id, DRIVER)
        assert state.shipments[shipment.id] == shipment

    def test_unregistered_self_assignment_unauthorized(
        self, lifecycle, create_shipment, state
    ) -> None:
        shipment = create_shipment()
        unregistered = ActorId("driver-without-account")
        with pytest.raises(UnauthorizedError, match="assign driver"):
            lifecycle.assign_driver_to_shipment(
                unregistered, shipment.id, unregistered
            )
        assert state.shipments[shipment.id].driver_id is None

    def test_authorization_checked_before_existence(
        self, lifecycle, actors
    ) -> None:
        with pytest.raises(UnauthorizedError):
            lifecycle.assign_driver_to_shipment(CUSTOMER, "SH000404", DRIVER)

    def test_missing_shipment(self, lifecycle, actors) -> None:
        with pytest.raises(ShipmentNotFoundError):
            lifecycle.assign_driver_to_shipment(ADMIN, "SH000404", DRIVER)
