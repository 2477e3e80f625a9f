"""NMEAReader: gpsd client streaming raw NMEA 0183 sentences.

Connects to a local gpsd instance over TCP (localhost:2947) instead of
opening the serial port directly, so the estimator can share the receiver
with other gpsd clients.

Reading strategy:
    The WATCH command asks gpsd for raw NMEA passthrough. gpsd then relays
    every sentence from the receiver as one newline-terminated line. Lines
    are decoded as UTF-8 with undecodable bytes dropped; classifying them is
    left to the sentence parser, which tolerates garbage.
"""

import contextlib
import socket
from collections.abc import Iterator
from types import TracebackType
from typing import IO, Any

__all__ = ["NMEAReader"]

# --- gpsd connection defaults -------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # socket read timeout; determines maximum cancel() latency

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'


class NMEAReader:
    """Context manager yielding raw NMEA lines from a gpsd stream.

    Continuous iteration::

        with NMEAReader() as reader:
            for line in reader:
                fix = parse_sentence(line)

    Single read::

        with NMEAReader() as reader:
            line = reader.read()

    Iteration never ends on its own. It stops when ``cancel()`` is called or
    the connection drops, both of which raise ``EOFError``.

    Args:
        host: gpsd host (default: ``"localhost"``).
        port: gpsd TCP port (default: ``2947``).
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
    ) -> None:
        """Store connection parameters; the socket is opened in ``__enter__``."""
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled: bool = False

    def __enter__(self) -> "NMEAReader":
        """Open the gpsd connection and request raw NMEA."""
        self._sock = socket.create_connection((self._host, self._port))
        try:
            self._sock.settimeout(_TIMEOUT)
            self._sock.sendall(_WATCH_CMD)
            self._stream = self._sock.makefile("rb")
        except OSError:
            self._sock.close()
            self._sock = None
            raise
        self._cancelled = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the gpsd connection."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and shuts down the socket so that any
        in-progress ``readline()`` unblocks immediately and raises
        ``EOFError``, letting the ingestion thread exit without waiting for
        the next timeout cycle.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _recv_raw(self, stream: IO[Any]) -> bytes | None:
        """Read one raw line from gpsd; returns ``None`` on timeout retry.

        Raises:
            EOFError: If the stream ended or the connection was closed.
        """
        try:
            raw: bytes = stream.readline()
            if not raw:
                raise EOFError("gpsd stream ended.")
            return raw
        except TimeoutError:
            return None
        except OSError as e:
            raise EOFError("gpsd connection closed.") from e

    def read(self) -> str:
        """Block until the next non-empty line and return it without terminator.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the stream ends.
        """
        if self._stream is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        while True:
            if self._cancelled:
                raise EOFError("gpsd read cancelled.")
            raw = self._recv_raw(self._stream)
            if raw is None:
                continue
            line = raw.decode("utf-8", errors="ignore").strip()
            if line:
                return line

    def __iter__(self) -> Iterator[str]:
        """Yield NMEA lines indefinitely.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.
        """
        while True:
            yield self.read()
