"""
Domain exceptions - Semantic error types for rides.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RideError(Exception):
    """Base class for ride domain errors."""

    pass


class RideValidationError(RideError):
    """One or more ride fields violate domain rules."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = list(messages)


class RidesNotFound(RideError):
    """No rides have been recorded yet."""

    pass


class RideNotFound(RideError):
    """No ride exists with the requested id."""

    def __init__(self, ride_id: int) -> None:
        super().__init__(f"Could not find ride with id {ride_id}")
        self.ride_id = ride_id
