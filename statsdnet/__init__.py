"""
statsdnet - client for statsd.net compatible metrics servers

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
from .common import CalendargramPeriod, MetricType
from .errors import Error, InvalidArgumentError, InvalidConfigurationError
from .output import NullOutputChannel, TcpOutputChannel, UdpOutputChannel
from .statsd import Statsd, StatsdBase
