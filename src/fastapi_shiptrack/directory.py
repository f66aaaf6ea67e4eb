"""User and driver directory."""

from __future__ import annotations

import copy
import logging

from fastapi_shiptrack.enums import Role
from fastapi_shiptrack.exceptions import AlreadyRegisteredError
from fastapi_shiptrack.models import ActorId, Driver, User, VehicleInfo
from fastapi_shiptrack.protocols import Clock
from fastapi_shiptrack.state import PlatformState

logger = logging.getLogger(__name__)


class DirectoryStore:
    """Registers and looks up users and drivers by actor identity.

    Users and drivers live in separate namespaces: one identity may hold
    both records. Records are never updated or removed.
    """

    def __init__(self, state: PlatformState, clock: Clock) -> None:
        self.state = state
        self.clock = clock

    def register_user(
        self,
        identity: ActorId,
        *,
        name: str,
        email: str,
        phone: str,
        role: Role,
    ) -> User:
        with self.state.lock:
            if identity in self.state.users:
                raise AlreadyRegisteredError("User already registered")
            user = User(
                identity=identity,
                name=name,
                email=email,
                phone=phone,
                role=role,
                created_at=self.clock.now(),
                is_active=True,
            )
            self.state.users[identity] = user
            logger.info("Registered user %s with role %s", identity, role)
            return copy.deepcopy(user)

    def register_driver(
        self,
        identity: ActorId,
        *,
        name: str,
        phone: str,
        vehicle_info: VehicleInfo,
    ) -> Driver:
        with self.state.lock:
            if identity in self.state.drivers:
                raise AlreadyRegisteredError("Driver already registered")
            driver = Driver(
                identity=identity,
                name=name,
                phone=phone,
                vehicle_info=copy.deepcopy(vehicle_info),
                joined_at=self.clock.now(),
            )
            self.state.drivers[identity] = driver
            logger.info("Registered driver %s", identity)
            return copy.deepcopy(driver)

    def get_user(self, identity: ActorId) -> User | None:
        with self.state.lock:
            return copy.deepcopy(self.state.users.get(identity))

    def get_current_user(self, caller: ActorId) -> User | None:
        return self.get_user(caller)

    def get_role(self, identity: ActorId) -> Role | None:
        """Role of the user registered under ``identity``, if any."""
        with self.state.lock:
            user = self.state.users.get(identity)
            return user.role if user is not None else None

    def get_driver(self, identity: ActorId) -> Driver | None:
        with self.state.lock:
            return copy.deepcopy(self.state.drivers.get(identity))

    def get_available_drivers(self) -> list[Driver]:
        with self.state.lock:
            return [
                copy.deepcopy(driver)
                for driver in self.state.drivers.values()
                if driver.is_available
            ]
