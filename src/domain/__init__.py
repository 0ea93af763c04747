"""
Domain layer - Pure business logic with zero framework imports.

This package contains ride validation, pagination and the ride service.
It defines its own port interface for storage abstraction, so the core
never depends on a database driver or web framework.
"""

from .exceptions import RideError, RideNotFound, RidesNotFound, RideValidationError
from .pagination import paginate
from .ports import NewRide, Ride, RideRepository
from .rides import RideService
from .validation import validate

__all__ = [
    "NewRide",
    "Ride",
    "RideError",
    "RideNotFound",
    "RideRepository",
    "RideService",
    "RideValidationError",
    "RidesNotFound",
    "paginate",
    "validate",
]
