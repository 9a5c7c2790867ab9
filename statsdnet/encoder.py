"""
statsdnet - metric line encoding

Lines are formatted as:

  [<prefix>.]<name>:<value>|<type>[|<postfix>]

e.g. "DC1.Service.requests:1|c" or "users:bob|cg|d".  The encoder does no
validation, callers are expected to have checked the name and the value.

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
from typing import Optional, Union

from .common import MetricType

MetricValue = Union[int, float, str]


def format_value(value: MetricValue) -> str:
    # numbers are always written as base-10 integers, str() of an int is not
    # affected by the locale; fractions are truncated toward zero
    if isinstance(value, str):
        return value
    return str(int(value))


def format_metric(
    metric_type: MetricType,
    name: str,
    prefix: Optional[str],
    value: MetricValue,
    postfix: Optional[str] = None,
) -> str:
    parts = []
    if prefix:
        parts.append(prefix)
        parts.append(".")
    parts.extend([name, ":", format_value(value), "|", str(metric_type)])
    if postfix is not None:
        parts.extend(["|", postfix])
    return "".join(parts)
