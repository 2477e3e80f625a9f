"""NMEA 0183 parser for GGA position fixes and GSV satellite data."""

from positioning.nmea.gga import parse_gga
from positioning.nmea.gsv import parse_gsv
from positioning.nmea.sentence import parse_sentence
from positioning.nmea.types import Fix, GSVData, SatelliteInView

__all__ = [
    "Fix",
    "GSVData",
    "SatelliteInView",
    "parse_gga",
    "parse_gsv",
    "parse_sentence",
]
