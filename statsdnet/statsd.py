"""
statsdnet - statsd client

Supports the statsd.net protocol extensions for calendargrams and raw
metrics:

  <name>:<value>|cg|<period>
  <name>:<value>|r[|<epoch>]

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
import logging
import math
from typing import Optional, Union

from .common import MetricType
from .encoder import MetricValue, format_metric
from .errors import InvalidArgumentError
from .output import OutputChannel


class StatsdBase:
    def log_count(self, name: str, count: int = 1) -> None:
        raise NotImplementedError

    def log_timing(self, name: str, milliseconds: int) -> None:
        raise NotImplementedError

    def log_gauge(self, name: str, value: int) -> None:
        raise NotImplementedError

    def log_set(self, name: str, value: int) -> None:
        raise NotImplementedError

    def log_calendargram(self, name: str, value: Union[str, int], period: str) -> None:
        raise NotImplementedError

    def log_raw(self, name: str, value: int, epoch: Optional[int] = None) -> None:
        raise NotImplementedError


class Statsd(StatsdBase):
    def __init__(
        self,
        output_channel: OutputChannel,
        prefix: Optional[str] = None,
        *,
        log: Optional[logging.Logger] = None
    ) -> None:
        if output_channel is None:
            raise InvalidArgumentError("output_channel is required, use NullOutputChannel to disable metrics")
        self.log = log or logging.getLogger(self.__class__.__name__)
        self._output_channel = output_channel
        # the encoder always inserts exactly one "." after the prefix
        if prefix is not None:
            prefix = prefix.rstrip(".")
        self._prefix = prefix if prefix and prefix.strip() else None

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix

    @property
    def output_channel(self) -> OutputChannel:
        return self._output_channel

    def log_count(self, name: str, count: int = 1) -> None:
        self._send(MetricType.COUNT, name, count)

    def log_timing(self, name: str, milliseconds: int) -> None:
        self._send(MetricType.TIMING, name, milliseconds)

    def log_gauge(self, name: str, value: int) -> None:
        self._send(MetricType.GAUGE, name, value)

    def log_set(self, name: str, value: int) -> None:
        """Count of distinct values seen per period, computed by the server"""
        self._send(MetricType.SET, name, value)

    def log_calendargram(self, name: str, value: Union[str, int], period: str) -> None:
        """Count `value` as a unique occurrence within `period`.

        `period` is normally one of `CalendargramPeriod` but it is passed to
        the server as is.
        """
        self._send(MetricType.CALENDARGRAM, name, value, postfix=str(period))

    def log_raw(self, name: str, value: int, epoch: Optional[int] = None) -> None:
        """Send a value the server stores without aggregating it.

        Without `epoch` the server timestamps the value on arrival.
        """
        self._send(MetricType.RAW, name, value, postfix=None if epoch is None else str(int(epoch)))

    def _send(self, metric_type: MetricType, name: str, value: MetricValue, postfix: Optional[str] = None) -> None:
        if not name:
            raise InvalidArgumentError("Metric name must not be empty")
        if not isinstance(value, str):
            if value < 0:
                self.log.warning("Metric value for %s was less than zero: %s. Not sending.", name, value)
                return
            if not math.isfinite(value):
                self.log.warning("Metric value for %s is not a finite number: %s. Not sending.", name, value)
                return

        line = format_metric(metric_type, name, self._prefix, value, postfix)
        payload = line.encode("utf-8")
        self._output_channel.send(payload, len(payload))
