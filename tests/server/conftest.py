"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest


class ControlledNMEAReader:
    def __init__(self) -> None:
        self.message_queue: queue.Queue[str | None] = queue.Queue()

    def __enter__(self) -> "ControlledNMEAReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self.message_queue.get()
            if item is None:
                raise EOFError("cancelled")
            yield item


@pytest.fixture(autouse=True)
def nmea_controller() -> Iterator[ControlledNMEAReader]:
    controller = ControlledNMEAReader()
    with patch("server.main.NMEAReader", return_value=controller):
        yield controller
    controller.message_queue.put(None)
