"""
statsdnet - exception classes

Copyright (c) 2026 statsdnet developers
See LICENSE for details
"""


class Error(Exception):
    """Generic statsdnet exception"""


class InvalidConfigurationError(Error):
    """Invalid configuration"""


class InvalidArgumentError(Error, ValueError):
    """Invalid argument given to a client or an output channel"""
