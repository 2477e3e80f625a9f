"""NMEA field parsing utilities.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). The optional helpers return None for empty or unparseable
fields; the coordinate helpers raise ValueError so that the sentence parsers
can reject the whole sentence at a single boundary.
"""

# Coordinates are decoded with a decimal shift rather than the degrees-minutes
# formula (degrees + minutes / 60). The range checks below are tuned to these
# divisors; change both together or not at all.
LATITUDE_DIVISOR = 100.0
LONGITUDE_DIVISOR = 1000.0

MAX_LATITUDE_DEGREES = 90.0
MAX_LONGITUDE_DEGREES = 180.0


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    Example:
        >>> parse_float_field("45.0")
        45.0
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def strip_checksum(value: str) -> str:
    """Drop a trailing ``*hh`` checksum from the last field of a sentence.

    The checksum is not verified, only removed so the field itself parses.

    Example:
        >>> strip_checksum("36*7A")
        '36'
    """
    return value.split("*", 1)[0]


def shift_coordinate(value: str, divisor: float, maximum: float) -> float:
    """Decode an unsigned NMEA coordinate field by a decimal shift.

    Args:
        value: Raw coordinate field (e.g. ``"5159.5578"``).
        divisor: ``LATITUDE_DIVISOR`` or ``LONGITUDE_DIVISOR``.
        maximum: Largest acceptable magnitude after the shift.

    Returns:
        The shifted, still unsigned, coordinate.

    Raises:
        ValueError: If the field is not a number, or the shifted value falls
            outside ``[0, maximum]`` (treated as transmission corruption).
    """
    degrees = float(value) / divisor
    # Written so that NaN fails the check as well.
    if not 0.0 <= degrees <= maximum:
        raise ValueError(f"Coordinate {value!r} out of range")
    return degrees


def apply_hemisphere(degrees: float, direction: str, negative: str) -> float:
    """Apply the sign convention: South/West negative, anything else positive.

    Example:
        >>> apply_hemisphere(51.5, "S", negative="S")
        -51.5
        >>> apply_hemisphere(1.31, "E", negative="W")
        1.31
    """
    if direction == negative:
        return -degrees
    return degrees
