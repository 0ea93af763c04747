"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from datetime import datetime

from pydantic import BaseModel, Field, StrictStr

from src.domain.ports import NewRide, Ride


class RideRequest(BaseModel):
    """
    Request model for recording a ride.

    Names and vehicle must be JSON strings and coordinates finite numbers;
    range and emptiness rules are checked by the domain validator so that
    every violation is reported together.
    """

    start_lat: float = Field(..., allow_inf_nan=False, description="Pickup latitude in degrees")
    start_long: float = Field(..., allow_inf_nan=False, description="Pickup longitude in degrees")
    end_lat: float = Field(..., allow_inf_nan=False, description="Dropoff latitude in degrees")
    end_long: float = Field(..., allow_inf_nan=False, description="Dropoff longitude in degrees")
    rider_name: StrictStr
    driver_name: StrictStr
    driver_vehicle: StrictStr

    def to_new_ride(self) -> NewRide:
        return NewRide(**self.model_dump())


class RideResponse(BaseModel):
    """Response model for a stored ride."""

    ride_id: int
    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str
    created: datetime

    @classmethod
    def from_ride(cls, ride: Ride) -> "RideResponse":
        return cls(
            ride_id=ride.ride_id,
            start_lat=ride.start_lat,
            start_long=ride.start_long,
            end_lat=ride.end_lat,
            end_long=ride.end_long,
            rider_name=ride.rider_name,
            driver_name=ride.driver_name,
            driver_vehicle=ride.driver_vehicle,
            created=ride.created,
        )


class ErrorResponse(BaseModel):
    """Error envelope with a single message."""

    error_code: int
    type: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Error envelope listing every validation message in order."""

    error_code: int = 400
    type: str = "VALIDATION_ERROR"
    messages: list[str]
