"""
Ride validation - coordinate ranges and required text fields.

Validation is exhaustive, not fail-fast: every check runs and every
violation is reported, so one client round-trip reveals all problems.
Messages are appended in a fixed order.
"""

START_RANGE_MESSAGE = (
    "Start latitude and longitude must be between -90 - 90 "
    "and -180 to 180 degrees respectively"
)
END_RANGE_MESSAGE = (
    "End latitude and longitude must be between -90 - 90 "
    "and -180 to 180 degrees respectively"
)
RIDER_NAME_MESSAGE = "Rider name must be a non empty string"
DRIVER_NAME_MESSAGE = "Driver name must be a non empty string"
DRIVER_VEHICLE_MESSAGE = "Driver vehicle must be a non empty string"


def _out_of_range(lat: float, long: float) -> bool:
    # NaN compares false everywhere, so it fails the inclusive range test
    return not -90 <= lat <= 90 or not -180 <= long <= 180


def _is_blank(value: str) -> bool:
    return not isinstance(value, str) or len(value) < 1


def validate(
    start_lat: float,
    end_lat: float,
    start_long: float,
    end_long: float,
    rider_name: str,
    driver_name: str,
    driver_vehicle: str,
) -> list[str]:
    """
    Check a candidate ride against domain rules.

    Args:
        start_lat: Pickup latitude in degrees
        end_lat: Dropoff latitude in degrees
        start_long: Pickup longitude in degrees
        end_long: Dropoff longitude in degrees
        rider_name: Rider display name
        driver_name: Driver display name
        driver_vehicle: Vehicle description

    Returns:
        Ordered list of error messages; empty when the ride is valid
    """
    errors: list[str] = []

    if _out_of_range(start_lat, start_long):
        errors.append(START_RANGE_MESSAGE)

    if _out_of_range(end_lat, end_long):
        errors.append(END_RANGE_MESSAGE)

    if _is_blank(rider_name):
        errors.append(RIDER_NAME_MESSAGE)

    if _is_blank(driver_name):
        errors.append(DRIVER_NAME_MESSAGE)

    if _is_blank(driver_vehicle):
        errors.append(DRIVER_VEHICLE_MESSAGE)

    return errors
