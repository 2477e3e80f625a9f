"""JSON formatting utilities for the averaged position."""

import json
from typing import Any

from positioning.nmea import Fix

__all__ = ["format_position_message", "position_payload"]


def position_payload(position: Fix | None, num_fixes: int) -> dict[str, Any]:
    """Build the position message body; ``lat``/``lon`` are null when absent."""
    return {
        "type": "position",
        "lat": position.latitude_degrees if position is not None else None,
        "lon": position.longitude_degrees if position is not None else None,
        "num_fixes": num_fixes,
        "valid": position is not None,
    }


def format_position_message(position: Fix | None, num_fixes: int) -> str:
    """Serialize the averaged position into a JSON string for WebSocket transmission."""
    return json.dumps(position_payload(position, num_fixes))
