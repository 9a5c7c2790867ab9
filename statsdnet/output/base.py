"""
statsdnet - output channel interface

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
from typing import Optional, Protocol

from statsdnet.errors import InvalidArgumentError

MAX_PORT = 65535


class OutputChannel(Protocol):
    """Sends a line of stats data to the server"""
    def send(self, buffer: bytes, length: Optional[int] = None) -> None:
        ...


class NullOutputChannel:
    def send(self, buffer: bytes, length: Optional[int] = None) -> None:
        pass

    def close(self) -> None:
        pass


def validate_destination(host: str, port: int) -> None:
    if not host:
        raise InvalidArgumentError("Expected valid hostname or ip address but was {!r}".format(host))
    if not isinstance(port, int) or isinstance(port, bool) or not 1 <= port <= MAX_PORT:
        raise InvalidArgumentError("Expected port between 1 and {} but was {!r}".format(MAX_PORT, port))


def buffer_view(buffer: bytes, length: Optional[int]) -> memoryview:
    view = memoryview(buffer)
    if length is None:
        return view
    return view[:length]
