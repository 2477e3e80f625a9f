"""GGA sentence parser.

GGA (Global Positioning System Fix Data) is the sentence this estimator takes
position fixes from. Only the coordinate fields are read.

GGA Sentence Format:
    $GPGGA,224904.054,5159.5578,N,00131.000,E,1,04,...
           |          |         | |         | | |
           |          |         | |         | | +-- Number of satellites
           |          |         | |         | +-- Fix quality
           |          |         | +---------+-- Longitude + E/W
           |          +---------+-- Latitude + N/S
           +-- UTC time (HHMMSS.sss)

Coordinate decoding:
    latitude  = field / 100.0,  accepted range 0-90 before the N/S sign
    longitude = field / 1000.0, accepted range 0-180 before the E/W sign

    This decimal shift is not the degrees-minutes conversion. See
    ``positioning.nmea.fields`` for why it is kept.
"""

import logging

from positioning.nmea.fields import (
    LATITUDE_DIVISOR,
    LONGITUDE_DIVISOR,
    MAX_LATITUDE_DEGREES,
    MAX_LONGITUDE_DEGREES,
    apply_hemisphere,
    shift_coordinate,
    strip_checksum,
)
from positioning.nmea.types import Fix

_LOGGER = logging.getLogger(__name__)

GGA_IDENTIFIER = "$GPGGA"

# Identifier, UTC time, latitude, N/S, longitude, E/W
_MINIMUM_FIELD_COUNT = 6


def _build_fix(fields: list[str]) -> Fix:
    """Construct a Fix from the coordinate fields of a GGA sentence.

    Maps NMEA field indices to the fix:
        fields[2] -> latitude value
        fields[3] -> latitude hemisphere (N/S)
        fields[4] -> longitude value
        fields[5] -> longitude hemisphere (E/W)

    Raises:
        ValueError: If either coordinate is non-numeric or out of range.
    """
    latitude = shift_coordinate(fields[2], LATITUDE_DIVISOR, MAX_LATITUDE_DEGREES)
    latitude = apply_hemisphere(latitude, fields[3], negative="S")

    longitude = shift_coordinate(
        fields[4], LONGITUDE_DIVISOR, MAX_LONGITUDE_DEGREES
    )
    longitude = apply_hemisphere(longitude, fields[5], negative="W")

    return Fix(latitude_degrees=latitude, longitude_degrees=longitude)


def parse_gga(sentence: str) -> Fix | None:
    """Parse a GGA sentence into a position fix.

    Args:
        sentence: Raw NMEA GGA sentence string.

    Returns:
        Fix if the sentence carries a usable position, or None if:
        - The identifier is not ``$GPGGA``
        - The sentence has too few fields
        - A coordinate is not a number
        - A coordinate is out of range before sign correction

    Example:
        >>> fix = parse_gga("$GPGGA,224904.054,5159.5578,N,00131.000,E,1,04")
        >>> fix.latitude_degrees, fix.longitude_degrees
        (51.595578..., 0.131)
        >>> parse_gga("$GPGGA,abc,xx,N,yyy,E,1,04") is None
        True
    """
    fields = sentence.strip().split(",")

    if fields[0] != GGA_IDENTIFIER:
        return None

    if len(fields) < _MINIMUM_FIELD_COUNT:
        _LOGGER.debug("GGA sentence too short: %r", sentence)
        return None

    fields[-1] = strip_checksum(fields[-1])

    try:
        return _build_fix(fields)
    except ValueError as err:
        _LOGGER.debug("Discarding GGA sentence %r: %s", sentence, err)
        return None
