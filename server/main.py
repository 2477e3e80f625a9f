"""FastAPI web server exposing the rolling-average GPS position.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

``GET /position`` returns the current averaged position as JSON.
WebSocket clients connect to ``ws://<host>:8000/ws`` and receive one
``type="position"`` message each time a new fix is recorded (~1 Hz with a
typical receiver).
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect

from positioning.gnss import NMEAReader
from positioning.ingest import run_ingest_loop
from positioning.nmea import Fix
from positioning.tracker import PositionTracker, spherical_mean
from server.formatters import format_position_message, position_payload
from server.logging_config import setup_logging

_LOGGER = logging.getLogger(__name__)

_HISTORY_SIZE = 10
_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0
_subscribers: list[asyncio.Queue[str]] = []


def _position_snapshot(tracker: PositionTracker) -> tuple[Fix | None, int]:
    """Average and count the same history copy so the two always agree."""
    history = tracker.history()
    return spherical_mean(history), len(history)


def _enqueue(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def _broadcast(message: str, loop: asyncio.AbstractEventLoop) -> None:
    """Dispatch a message from the ingestion thread to every subscriber queue."""
    for queue in list(_subscribers):
        loop.call_soon_threadsafe(_enqueue, queue, message)


def _run_position_thread(
    reader: NMEAReader,
    tracker: PositionTracker,
    loop: asyncio.AbstractEventLoop,
) -> int:
    def _publish(_fix: Fix) -> None:
        message = format_position_message(*_position_snapshot(tracker))
        _broadcast(message, loop)

    return run_ingest_loop(reader, tracker, on_fix=_publish)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    loop = asyncio.get_running_loop()
    tracker = PositionTracker(_HISTORY_SIZE)
    application.state.tracker = tracker
    executor = ThreadPoolExecutor(max_workers=1)
    with NMEAReader() as reader:
        ingestion = loop.run_in_executor(
            executor, _run_position_thread, reader, tracker, loop
        )
        try:
            yield
        finally:
            reader.cancel()
            fix_count = await ingestion
            _LOGGER.info("Ingestion stopped after %d fixes", fix_count)
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.get("/position")
async def get_position(request: Request) -> dict[str, Any]:
    """Return the current averaged position; ``valid`` is false before the first fix."""
    tracker: PositionTracker = request.app.state.tracker
    return position_payload(*_position_snapshot(tracker))


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream averaged-position JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall ingestion. The connection closes, and the client should
    reconnect, if no message arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    _subscribers.append(queue)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        _subscribers.remove(queue)
