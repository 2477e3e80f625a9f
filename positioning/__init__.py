"""Rolling-average position estimation from NMEA 0183 GPS sentences."""

from positioning.gnss import NMEAReader
from positioning.ingest import IngestionThread, run_ingest_loop
from positioning.nmea import (
    Fix,
    GSVData,
    SatelliteInView,
    parse_gga,
    parse_gsv,
    parse_sentence,
)
from positioning.tracker import PositionTracker, spherical_mean

__all__ = [
    "Fix",
    "GSVData",
    "IngestionThread",
    "NMEAReader",
    "PositionTracker",
    "SatelliteInView",
    "parse_gga",
    "parse_gsv",
    "parse_sentence",
    "run_ingest_loop",
    "spherical_mean",
]
