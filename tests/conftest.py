"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Sample ride records
- Ride request payloads
"""

from datetime import datetime, timezone

import pytest

from src.domain.ports import NewRide, Ride

CREATED_AT = datetime(2026, 1, 15, 8, 30, tzinfo=timezone.utc)


def make_ride(ride_id: int, **overrides) -> Ride:
    """Build a stored Ride with sensible defaults."""
    fields = {
        "ride_id": ride_id,
        "start_lat": 0.0,
        "start_long": 0.0,
        "end_lat": 45.0,
        "end_long": 45.0,
        "rider_name": f"rider-{ride_id}",
        "driver_name": f"driver-{ride_id}",
        "driver_vehicle": "Car",
        "created": CREATED_AT,
    }
    fields.update(overrides)
    return Ride(**fields)


@pytest.fixture
def new_ride() -> NewRide:
    """A valid candidate ride."""
    return NewRide(
        start_lat=0.0,
        start_long=0.0,
        end_lat=45.0,
        end_long=45.0,
        rider_name="Adhiyatma",
        driver_name="Budi",
        driver_vehicle="Car",
    )


@pytest.fixture
def ride_payload() -> dict:
    """A valid JSON body for POST /v1/rides."""
    return {
        "start_lat": 0,
        "start_long": 0,
        "end_lat": 45,
        "end_long": 45,
        "rider_name": "Adhiyatma",
        "driver_name": "Budi",
        "driver_vehicle": "Car",
    }


@pytest.fixture
def ride_factory():
    """Factory for stored Ride records: ``ride_factory(ride_id, **overrides)``."""
    return make_ride
