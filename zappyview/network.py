"""Line-oriented TCP connection to the game server."""

from __future__ import annotations

import logging
import queue
import socket
import threading
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)


class LineBuffer:
    """Accumulates received bytes and yields complete newline-terminated lines."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._pending = b""
        self._encoding = encoding

    def feed(self, data: Union[bytes, str]) -> list[str]:
        """Add data and return every line it completes, without the newline."""
        if isinstance(data, str):
            data = data.encode(self._encoding)
        self._pending += data
        *lines, self._pending = self._pending.split(b"\n")
        return [line.decode(self._encoding, errors="replace") for line in lines]


class Connection:
    """A TCP connection whose incoming lines are queued by a background thread."""

    receive_timeout = 1.0
    chunk_size = 1023

    def __init__(self) -> None:
        self._socket: Optional[socket.socket] = None
        self._connected = False
        self._running = False
        self._buffer = LineBuffer()
        self._queue: queue.Queue[str] = queue.Queue()
        self._thread: Optional[threading.Thread] = None

    @property
    def connected(self) -> bool:
        return self._connected

    def connect(self, host: str, port: int) -> None:
        """Open the connection; raises OSError when it cannot be made."""
        self.disconnect()
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.connect((host, port))
        except OSError:
            sock.close()
            raise
        sock.settimeout(self.receive_timeout)
        self._socket = sock
        self._buffer = LineBuffer()
        self._connected = True
        self._running = True
        self._thread = threading.Thread(
            target=self._receive_loop, args=(sock,), daemon=True
        )
        self._thread.start()

    def disconnect(self) -> None:
        """Close the connection and stop the receiving thread."""
        self._running = False
        self._connected = False
        if self._socket is not None:
            try:
                self._socket.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
            self._socket.close()
            self._socket = None
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None

    def send_command(self, command: str) -> bool:
        """Send one command line; False when not connected or the send fails."""
        if not self._connected or self._socket is None:
            return False
        try:
            self._socket.sendall((command + "\n").encode("utf-8"))
        except OSError:
            return False
        return True

    def receive_message(self) -> Optional[str]:
        """Pop the oldest received line, or None when none is waiting."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def messages(self) -> Iterator[str]:
        """Yield every line received so far."""
        while (message := self.receive_message()) is not None:
            yield message

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *args) -> None:
        self.disconnect()

    def _receive_loop(self, sock: socket.socket) -> None:
        while self._running and self._connected:
            try:
                chunk = sock.recv(self.chunk_size)
            except socket.timeout:
                continue
            except OSError as error:
                if self._running:
                    logger.error("Network error: %s", error)
                break
            if not chunk:
                logger.info("Server disconnected")
                break
            for line in self._buffer.feed(chunk):
                self._queue.put(line)
        self._connected = False