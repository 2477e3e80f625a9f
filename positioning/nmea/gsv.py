"""GSV sentence parser.

GSV (Satellites in View) lists the satellites the receiver can see, up to
four per sentence. It carries no position, so it is parsed for diagnostics
only and never contributes a fix.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*74
           | | |  |  |  |   |  +-- next satellite block ...
           | | |  |  |  |   +-- SNR (dB-Hz, empty when not tracking)
           | | |  |  |  +-- Azimuth (degrees true)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- Satellite PRN
           | | +-- Satellites in view
           | +-- Message number
           +-- Total number of messages
"""

from positioning.nmea.fields import (
    parse_float_field,
    parse_int_field,
    strip_checksum,
)
from positioning.nmea.types import GSVData, SatelliteInView

GSV_IDENTIFIER = "$GPGSV"

_HEADER_FIELD_COUNT = 4
_BLOCK_SIZE = 4


def _parse_satellites(fields: list[str]) -> list[SatelliteInView]:
    """Read the satellite blocks following the four header fields.

    A trailing partial block (fewer than four fields) is ignored.
    """
    satellites = []
    for start in range(_HEADER_FIELD_COUNT, len(fields), _BLOCK_SIZE):
        block = fields[start : start + _BLOCK_SIZE]
        if len(block) < _BLOCK_SIZE:
            break
        prn, elevation, azimuth, snr = block
        satellites.append(
            SatelliteInView(
                prn=parse_int_field(prn),
                elevation_degrees=parse_float_field(elevation),
                azimuth_degrees=parse_float_field(azimuth),
                snr_db=parse_float_field(snr),
            )
        )
    return satellites


def parse_gsv(sentence: str) -> GSVData | None:
    """Parse a GSV sentence into satellite elevation and azimuth data.

    Args:
        sentence: Raw NMEA GSV sentence string.

    Returns:
        GSVData, or None if the identifier is not ``$GPGSV`` or the header
        fields are missing.
    """
    fields = sentence.strip().split(",")

    if fields[0] != GSV_IDENTIFIER or len(fields) < _HEADER_FIELD_COUNT:
        return None

    fields[-1] = strip_checksum(fields[-1])

    return GSVData(
        total_messages=parse_int_field(fields[1]),
        message_number=parse_int_field(fields[2]),
        satellites_in_view=parse_int_field(fields[3]),
        satellites=_parse_satellites(fields),
    )
