"""NMEA data types for parsed sentences.

Design Decisions:
    1. Fix is frozen: once the parser has validated a coordinate pair it is a
       value, shared between the tracker history and any number of readers
       without copying.

    2. Absent values are None: the parser returns None for an unusable line
       and the tracker returns None for "no position yet". There is never a
       default (0, 0) fix standing in for missing data.

    3. GSV data is informational only. Satellites in view carry no position,
       so GSVData never becomes a Fix.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Fix:
    """A single position fix in decimal degrees.

    Attributes:
        latitude_degrees: Latitude, positive=North. Range: -90.0 to +90.0.

        longitude_degrees: Longitude, positive=East. Range: -180.0 to +180.0.

    Example:
        >>> fix = parse_sentence("$GPGGA,224904.054,5159.5578,N,00131.000,E,1,04")
        >>> fix.latitude_degrees
        51.595578...
        >>> fix.longitude_degrees
        0.131
    """

    latitude_degrees: float
    longitude_degrees: float


@dataclass(frozen=True)
class SatelliteInView:
    """One satellite block of a GSV sentence.

    Attributes:
        prn: Satellite PRN number, None if field was empty.
        elevation_degrees: Elevation above the horizon (0-90), None if empty.
        azimuth_degrees: Azimuth from true north (0-359), None if empty.
        snr_db: Signal-to-noise ratio in dB-Hz, None if not tracked.
    """

    prn: int | None
    elevation_degrees: float | None
    azimuth_degrees: float | None
    snr_db: float | None


@dataclass
class GSVData:
    """Parsed GSV (Satellites in View) sentence.

    Attributes:
        total_messages: Number of GSV sentences in this cycle.
        message_number: Index of this sentence within the cycle (1-based).
        satellites_in_view: Total satellites visible, None if empty.
        satellites: Up to four satellite blocks carried by this sentence.
    """

    total_messages: int | None
    message_number: int | None
    satellites_in_view: int | None
    satellites: list[SatelliteInView] = field(default_factory=list)
