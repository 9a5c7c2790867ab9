"""
statsdnet - metric type constants

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
import enum


class StrEnum(str, enum.Enum):
    def __str__(self):
        return str(self.value)


@enum.unique
class MetricType(StrEnum):
    COUNT = "c"
    GAUGE = "g"
    TIMING = "ms"
    SET = "s"
    CALENDARGRAM = "cg"
    RAW = "r"


@enum.unique
class CalendargramPeriod(StrEnum):
    """Retention periods understood by the server for calendargrams.

    The client passes periods through as given, these exist for callers
    that don't want to spell the short forms out.
    """
    ONE_MINUTE = "1min"
    FIVE_MINUTE = "5min"
    HOUR = "h"
    DAY = "d"
    WEEK = "w"
    DAY_OF_WEEK = "dow"
    MONTH = "m"
