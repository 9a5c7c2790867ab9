"""
statsdnet - configuration validation

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""
import json
import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import InvalidConfigurationError
from .output import OutputChannel, get_class_for_protocol
from .output.base import MAX_PORT
from .output.tcp import DEFAULT_RETRY_ATTEMPTS
from .statsd import Statsd

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8125


class StatsdConfig(BaseModel):
    class Config:
        # Unknown keys are most likely typos, e.g. "retry_attempt"
        extra = "forbid"

    host: str = Field(DEFAULT_HOST, min_length=1)
    port: int = Field(DEFAULT_PORT, ge=1, le=MAX_PORT)
    protocol: Literal["udp", "tcp", "null"] = "udp"
    prefix: Optional[str] = None
    # only used by the tcp protocol
    retry_attempts: int = Field(DEFAULT_RETRY_ATTEMPTS, ge=0)


def parse_config(config: Dict[str, Any]) -> StatsdConfig:
    if not isinstance(config, dict):
        raise InvalidConfigurationError("Configuration must be a JSON object, not {}".format(type(config).__name__))
    # settings may also be embedded in a larger application configuration
    if isinstance(config.get("statsd"), dict):
        config = config["statsd"]
    try:
        return StatsdConfig(**config)
    except ValidationError as ex:
        raise InvalidConfigurationError("Invalid statsd configuration: {}".format(ex))


def read_json_config_file(filename: str) -> StatsdConfig:
    try:
        with open(filename, "r") as fp:
            config = json.load(fp)
    except FileNotFoundError:
        raise InvalidConfigurationError("Configuration file {!r} does not exist".format(filename))
    except ValueError as ex:
        raise InvalidConfigurationError("Configuration file {!r} does not contain valid JSON: {}".format(filename, str(ex)))
    except OSError as ex:
        raise InvalidConfigurationError(
            "Configuration file {!r} can't be opened: {}".format(filename, ex.__class__.__name__)
        )

    return parse_config(config)


def create_output_channel(config: StatsdConfig, *, log: Optional[logging.Logger] = None) -> OutputChannel:
    channel_class = get_class_for_protocol(config.protocol)
    if config.protocol == "tcp":
        return channel_class(config.host, config.port, config.retry_attempts, log=log)
    elif config.protocol == "udp":
        return channel_class(config.host, config.port, log=log)
    return channel_class()


def create_client(config: StatsdConfig, *, log: Optional[logging.Logger] = None) -> Statsd:
    """Create a client along with its output channel.

    The channel belongs to the caller, it is available as
    `client.output_channel` for closing once the client is no longer used.
    """
    return Statsd(create_output_channel(config, log=log), config.prefix, log=log)
