"""Tests for the position HTTP route and formatters."""

import json
import time
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from positioning.nmea import Fix
from positioning.tracker import PositionTracker
from server.formatters import format_position_message, position_payload
from server.main import _position_snapshot, app
from tests.server.conftest import ControlledNMEAReader

_GGA = "$GPGGA,224904.054,5159.5578,N,00131.000,E,1,04"


def _wait_for_fixes(client: TestClient, count: int) -> dict:
    deadline = time.monotonic() + 5.0
    while True:
        data = client.get("/position").json()
        if data["num_fixes"] >= count or time.monotonic() > deadline:
            return data
        time.sleep(0.01)


def test_position_absent_before_first_fix() -> None:
    with TestClient(app) as client:
        data = client.get("/position").json()
    assert data == {
        "type": "position",
        "lat": None,
        "lon": None,
        "num_fixes": 0,
        "valid": False,
    }


def test_position_after_fix(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client:
        nmea_controller.message_queue.put("$GPGSV,1,1,01,07,79,048,42*75")
        nmea_controller.message_queue.put(_GGA)
        data = _wait_for_fixes(client, 1)
    assert data["valid"] is True
    assert data["num_fixes"] == 1
    assert abs(data["lat"] - 51.595578) < 1e-9
    assert abs(data["lon"] - 0.131) < 1e-9


def test_payload_for_absent_position() -> None:
    assert position_payload(None, 0)["valid"] is False


def test_message_is_json() -> None:
    message = json.loads(format_position_message(Fix(1.5, -2.5), 3))
    assert message == {
        "type": "position",
        "lat": 1.5,
        "lon": -2.5,
        "num_fixes": 3,
        "valid": True,
    }


def test_snapshot_reads_history_once() -> None:
    tracker = MagicMock(spec=PositionTracker)
    tracker.history.return_value = (Fix(0.0, 10.0), Fix(0.0, 20.0))
    tracker.current_position.side_effect = AssertionError("second lock acquisition")
    tracker.__len__.side_effect = AssertionError("second lock acquisition")

    position, num_fixes = _position_snapshot(tracker)

    tracker.history.assert_called_once_with()
    assert num_fixes == 2
    assert position is not None
    assert abs(position.longitude_degrees - 15.0) < 1e-9


def test_snapshot_of_empty_tracker() -> None:
    assert _position_snapshot(PositionTracker(3)) == (None, 0)
