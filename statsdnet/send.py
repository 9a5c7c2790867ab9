"""
statsdnet - send a single metric from the command line

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
import argparse
import logging
import os
import sys

from . import logutil, version
from .common import CalendargramPeriod, MetricType
from .config import StatsdConfig, create_client, parse_config, read_json_config_file
from .errors import InvalidArgumentError, InvalidConfigurationError

METRIC_TYPES = {
    "count": MetricType.COUNT,
    "gauge": MetricType.GAUGE,
    "timing": MetricType.TIMING,
    "set": MetricType.SET,
    "calendargram": MetricType.CALENDARGRAM,
    "raw": MetricType.RAW,
}


class CommandError(Exception):
    pass


def build_config(args):
    if args.config:
        config = read_json_config_file(args.config)
    else:
        config = StatsdConfig()
    options = {
        "host": config.host,
        "port": config.port,
        "protocol": config.protocol,
        "prefix": config.prefix,
        "retry_attempts": config.retry_attempts,
    }
    for key in options:
        value = getattr(args, key)
        if value is not None:
            options[key] = value
    return parse_config(options)


def send_metric(client, metric_type, name, value, period=None, epoch=None):
    if metric_type == MetricType.CALENDARGRAM:
        if not period:
            raise CommandError("--period is required for calendargrams")
        client.log_calendargram(name, value, period)
        return

    try:
        value = int(value)
    except ValueError:
        raise CommandError("{} value must be an integer, not {!r}".format(metric_type.name.lower(), value))
    if metric_type == MetricType.COUNT:
        client.log_count(name, value)
    elif metric_type == MetricType.GAUGE:
        client.log_gauge(name, value)
    elif metric_type == MetricType.TIMING:
        client.log_timing(name, value)
    elif metric_type == MetricType.SET:
        client.log_set(name, value)
    elif metric_type == MetricType.RAW:
        client.log_raw(name, value, epoch)


def main(args=None):
    if args is None:
        args = sys.argv[1:]

    parser = argparse.ArgumentParser(prog="statsdnet_send", description="send a metric to a statsd.net server")
    parser.add_argument("-D", "--debug", help="Enable debug logging", action="store_true")
    parser.add_argument("--version", action="version", help="show program version", version=version.__version__)
    parser.add_argument("--config", help="configuration file path", default=os.environ.get("STATSDNET_CONFIG"))
    parser.add_argument("--host", help="server host name or address")
    parser.add_argument("--port", help="server port", type=int)
    parser.add_argument("--protocol", help="transport protocol", choices=["udp", "tcp"])
    parser.add_argument("--prefix", help="prefix for the metric name")
    parser.add_argument("--retry-attempts", help="number of retries for tcp sends", type=int)
    parser.add_argument(
        "--period",
        help="calendargram period, one of: {}".format(", ".join(str(period) for period in CalendargramPeriod)),
    )
    parser.add_argument("--epoch", help="timestamp for raw metrics, assigned by the server if not set", type=int)
    parser.add_argument("metric_type", help="metric type", choices=sorted(METRIC_TYPES))
    parser.add_argument("name", help="metric name")
    parser.add_argument("value", help="metric value")
    arg = parser.parse_args(args)

    logutil.configure_logging(short_log=True, level=logging.DEBUG if arg.debug else logging.INFO)

    try:
        client = create_client(build_config(arg))
    except (InvalidArgumentError, InvalidConfigurationError) as ex:
        print("statsdnet_send: invalid configuration: {}".format(ex))
        return 1

    try:
        send_metric(client, METRIC_TYPES[arg.metric_type], arg.name, arg.value, period=arg.period, epoch=arg.epoch)
    except (CommandError, InvalidArgumentError) as ex:
        print("statsdnet_send: {}".format(ex))
        return 1
    finally:
        client.output_channel.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
