"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the ride records exchanged with storage and the
interface (port) that the domain requires from it. Adapters implement
these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class NewRide:
    """Candidate ride fields before persistence."""

    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str


@dataclass(frozen=True)
class Ride:
    """
    Persisted ride.

    ``ride_id`` and ``created`` are assigned by storage on insert and
    never change afterwards.
    """

    ride_id: int
    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str
    created: datetime


class RideRepository(Protocol):
    """Port interface for ride persistence."""

    def list_rides(self) -> list[Ride]:
        """
        Fetch every ride in insertion order.

        Returns:
            All stored rides, oldest first (empty list if none)
        """
        ...

    def add_ride(self, ride: NewRide) -> Ride:
        """
        Insert a ride and return it as stored.

        Args:
            ride: Validated ride fields

        Returns:
            The stored ride, including its assigned id and timestamp
        """
        ...

    def get_ride(self, ride_id: int) -> Ride | None:
        """
        Fetch one ride by id.

        Returns:
            The ride, or None if no ride has this id
        """
        ...
