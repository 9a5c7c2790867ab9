"""
statsdnet - UDP output channel

The destination is resolved once when the channel is created and every line
is sent to it as a single datagram.  Delivery is best effort: nothing is
acknowledged or retried and send errors never reach the caller.

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
import logging
import socket
from typing import Optional

from .base import buffer_view, validate_destination


class UdpOutputChannel:
    def __init__(self, host: str, port: int, *, log: Optional[logging.Logger] = None) -> None:
        validate_destination(host, port)
        self.log = log or logging.getLogger(self.__class__.__name__)
        self.host = host
        self.port = port
        self._dest_addr = None
        self._socket: Optional[socket.socket] = None
        try:
            family, socktype, proto, _, sockaddr = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)[0]
        except OSError as ex:
            self.log.warning(
                "Resolving %s:%s failed, metrics will not be sent: %s: %s", host, port, ex.__class__.__name__, ex
            )
            return
        self._socket = socket.socket(family, socktype, proto)
        self._dest_addr = sockaddr

    @property
    def resolved(self) -> bool:
        return self._socket is not None

    def send(self, buffer: bytes, length: Optional[int] = None) -> None:
        if self._socket is None:
            return
        try:
            self._socket.sendto(buffer_view(buffer, length), self._dest_addr)
        except OSError as ex:
            self.log.debug("Sending metric to %s:%s failed: %s: %s", self.host, self.port, ex.__class__.__name__, ex)

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
