"""GNSS module for streaming raw NMEA 0183 lines from gpsd."""

from positioning.gnss.reader import NMEAReader

__all__ = ["NMEAReader"]
