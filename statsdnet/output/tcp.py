"""
statsdnet - TCP output channel

The connection is opened lazily on the first send and reused until a send
fails on it.  Each send is tried once and then retried immediately up to
`retry_attempts` more times, after which the line is dropped.  Errors are
logged, never raised.

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
import logging
import socket
import threading
from typing import Optional

from statsdnet.errors import InvalidArgumentError

from .base import buffer_view, validate_destination

DEFAULT_RETRY_ATTEMPTS = 3


class TcpOutputChannel:
    def __init__(
        self,
        host: str,
        port: int,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
        *,
        log: Optional[logging.Logger] = None
    ) -> None:
        validate_destination(host, port)
        if not isinstance(retry_attempts, int) or retry_attempts < 0:
            raise InvalidArgumentError("Expected non-negative retry attempt count but was {!r}".format(retry_attempts))
        self.log = log or logging.getLogger(self.__class__.__name__)
        self.host = host
        self.port = port
        self.retry_attempts = retry_attempts
        self._connection: Optional[socket.socket] = None
        # covers the whole connect + write sequence so that concurrent lines
        # are never interleaved on the stream
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def send(self, buffer: bytes, length: Optional[int] = None) -> None:
        data = buffer_view(buffer, length)
        with self._lock:
            attempt = 0
            while attempt <= self.retry_attempts:
                if self._try_send(data):
                    return
                attempt += 1
            self.log.warning(
                "Dropping metric after %d failed attempts to send it to %s:%s", attempt, self.host, self.port
            )

    def close(self) -> None:
        with self._lock:
            self._disconnect()

    def _try_send(self, data: memoryview) -> bool:
        try:
            if self._connection is None:
                self._connection = socket.create_connection((self.host, self.port))
            self._connection.sendall(data)
            return True
        except OSError as ex:
            self.log.warning(
                "Sending metrics via TCP to %s:%s failed: %s: %s", self.host, self.port, ex.__class__.__name__, ex
            )
            self._disconnect()
            return False

    def _disconnect(self) -> None:
        if self._connection is None:
            return
        connection, self._connection = self._connection, None
        try:
            connection.close()
        except OSError as ex:
            self.log.debug("Closing connection to %s:%s failed: %r", self.host, self.port, ex)
