"""
statsdnet - output channels

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
from statsdnet.errors import InvalidConfigurationError

from .base import NullOutputChannel, OutputChannel
from .tcp import TcpOutputChannel
from .udp import UdpOutputChannel

PROTOCOLS = ("udp", "tcp", "null")


def get_class_for_protocol(protocol):
    if protocol == "udp":
        return UdpOutputChannel
    elif protocol == "tcp":
        return TcpOutputChannel
    elif protocol == "null":
        return NullOutputChannel

    raise InvalidConfigurationError("unsupported output protocol {0!r}".format(protocol))
