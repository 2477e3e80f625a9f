"""Sentence dispatch: one raw line in, a position fix or None out."""

import logging

from positioning.nmea.gga import GGA_IDENTIFIER, parse_gga
from positioning.nmea.gsv import GSV_IDENTIFIER, parse_gsv
from positioning.nmea.types import Fix

__all__ = ["parse_sentence"]

_LOGGER = logging.getLogger(__name__)


def _identifier(line: str) -> str:
    return line.strip().split(",", 1)[0]


def parse_sentence(line: str) -> Fix | None:
    """Classify one NMEA line and extract a position fix if it has one.

    ``$GPGGA`` lines are decoded by ``parse_gga``. ``$GPGSV`` lines are
    decoded for their satellite azimuth and elevation, which are logged, and
    always yield None. Every other line yields None.

    This function never raises for ``str`` input: corrupted, truncated, or
    unrecognized lines are all reported as None so an ingestion loop can run
    indefinitely over noisy input.

    Args:
        line: One raw line from the receiver, with or without terminator.

    Returns:
        The decoded Fix, or None if the line does not carry a usable position.
    """
    identifier = _identifier(line)

    if identifier == GGA_IDENTIFIER:
        return parse_gga(line)

    if identifier == GSV_IDENTIFIER:
        gsv = parse_gsv(line)
        if gsv is not None and _LOGGER.isEnabledFor(logging.DEBUG):
            for satellite in gsv.satellites:
                _LOGGER.debug(
                    "Satellite %s: elevation=%s azimuth=%s",
                    satellite.prn,
                    satellite.elevation_degrees,
                    satellite.azimuth_degrees,
                )
        return None

    return None
