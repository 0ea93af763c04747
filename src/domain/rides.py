"""
Ride domain service - write and read paths for ride records.

Write path: validate the candidate ride, then persist and re-fetch it
through the repository. Read path: fetch all rides and slice out the
requested page.

Pagination defaults
===================
- neither page nor limit given: every ride
- limit only: page 1
- page only: limit equals the total count, so page 1 is everything
"""

import logging
from dataclasses import dataclass

from .exceptions import RideNotFound, RidesNotFound, RideValidationError
from .pagination import paginate
from .ports import NewRide, Ride, RideRepository
from .validation import validate

logger = logging.getLogger(__name__)


@dataclass
class RideService:
    """
    Domain service for ride records.

    The repository is injected; validation and pagination are pure
    functions with no storage dependency.
    """

    repository: RideRepository

    def create_ride(self, ride: NewRide) -> Ride:
        """
        Validate and persist a new ride.

        Returns:
            The stored ride with its assigned id

        Raises:
            RideValidationError: If any field violates domain rules
        """
        errors = validate(
            ride.start_lat,
            ride.end_lat,
            ride.start_long,
            ride.end_long,
            ride.rider_name,
            ride.driver_name,
            ride.driver_vehicle,
        )
        if errors:
            logger.info("Rejected ride with %d validation error(s)", len(errors))
            raise RideValidationError(errors)

        stored = self.repository.add_ride(ride)
        logger.info("Created ride %s", stored.ride_id)
        return stored

    def list_rides(self, page: int | None = None, limit: int | None = None) -> list[Ride]:
        """
        List rides in insertion order, optionally paginated.

        Raises:
            RidesNotFound: If no rides have been recorded
            ValueError: If page or limit is given and below 1
        """
        rides = self.repository.list_rides()
        if not rides:
            raise RidesNotFound()

        if page is None and limit is None:
            return rides

        page = page if page is not None else 1
        limit = limit if limit is not None else len(rides)
        if page < 1 or limit < 1:
            raise ValueError(
                f"page and limit must be positive integers, got page={page} limit={limit}"
            )

        return paginate(page, limit, rides)

    def get_ride(self, ride_id: int) -> Ride:
        """
        Fetch a single ride.

        Raises:
            RideNotFound: If no ride has this id
        """
        ride = self.repository.get_ride(ride_id)
        if ride is None:
            raise RideNotFound(ride_id)
        return ride
