"""
API v1 routes.

Defines REST endpoints for the Rides API.
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_ride_service
from src.api.models import ErrorResponse, RideRequest, RideResponse, ValidationErrorResponse
from src.domain.exceptions import RideNotFound, RidesNotFound, RideValidationError
from src.domain.rides import RideService

router = APIRouter(tags=["v1"])

RIDES_NOT_FOUND = "RIDES_NOT_FOUND_ERROR"


def _not_found(message: str) -> JSONResponse:
    body = ErrorResponse(error_code=404, type=RIDES_NOT_FOUND, message=message)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())


@router.post(
    "/rides",
    response_model=RideResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Record a ride",
    description="Validate pickup/dropoff coordinates and names, then store the ride. "
    "All validation failures are reported together.",
)
async def create_ride(
    request_data: RideRequest,
    service: RideService = Depends(get_ride_service),
) -> RideResponse | JSONResponse:
    """
    Record a new ride.

    - **start_lat**, **end_lat**: latitude in [-90, 90]
    - **start_long**, **end_long**: longitude in [-180, 180]
    - **rider_name**, **driver_name**, **driver_vehicle**: non-empty strings

    Returns the stored ride with its assigned id.
    """
    try:
        ride = service.create_ride(request_data.to_new_ride())
    except RideValidationError as e:
        body = ValidationErrorResponse(messages=e.messages)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())
    return RideResponse.from_ride(ride)


@router.get(
    "/rides",
    response_model=list[RideResponse],
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid page or limit"},
        404: {"model": ErrorResponse, "description": "No rides recorded"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="List rides",
    description="List rides in insertion order. Without page or limit every ride "
    "is returned; with only limit, page defaults to 1; with only page, "
    "limit defaults to the total count.",
)
async def list_rides(
    page: int | None = Query(None, ge=1, description="1-based page number"),
    limit: int | None = Query(None, ge=1, description="Maximum rides per page"),
    service: RideService = Depends(get_ride_service),
) -> list[RideResponse] | JSONResponse:
    """List recorded rides, optionally paginated."""
    try:
        rides = service.list_rides(page=page, limit=limit)
    except RidesNotFound:
        return _not_found("Could not find any rides")
    return [RideResponse.from_ride(ride) for ride in rides]


@router.get(
    "/rides/{ride_id}",
    response_model=RideResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Ride not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Get a ride by id",
)
async def get_ride(
    ride_id: int,
    service: RideService = Depends(get_ride_service),
) -> RideResponse | JSONResponse:
    """Fetch a single ride."""
    try:
        ride = service.get_ride(ride_id)
    except RideNotFound as e:
        return _not_found(str(e))
    return RideResponse.from_ride(ride)
