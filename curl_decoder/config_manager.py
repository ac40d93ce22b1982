"""
Configuration manager for library and CLI usage.

Provides a typed configuration object on top of the module-level defaults
in config.py. Explicit arguments win over environment variables, which win
over the built-in defaults.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class DecoderConfig:
    """Configuration for the curl decoder CLI and API server.

    Any field left as None is filled from config.py, which itself reads
    the CURL_DECODER_* environment variables.

    Args:
        host: Interface the API server binds to.
        port: Port for the API server.
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        strict: Reject commands with trailing text no option parser matched.
        cors_origins: Origins allowed to call the API from a browser.
    """

    host: Optional[str] = None
    port: Optional[int] = None
    log_level: Optional[str] = None
    strict: Optional[bool] = None
    cors_origins: Optional[List[str]] = None

    def __post_init__(self):
        """Resolve unset fields from config.py and validate."""
        from . import config

        if self.host is None:
            self.host = config.API_HOST
        if self.port is None:
            self.port = config.API_PORT
        if self.log_level is None:
            self.log_level = config.LOG_LEVEL
        if self.strict is None:
            self.strict = config.STRICT_MODE
        if self.cors_origins is None:
            self.cors_origins = list(config.CORS_ORIGINS)

        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid port: {self.port!r}")
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"Port out of range: {self.port}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level!r}")

    def apply(self):
        """Write this configuration back to the config module.

        Modules that read config at call time (the CLI and server helpers)
        pick the new values up immediately.
        """
        from . import config

        config.API_HOST = self.host
        config.API_PORT = self.port
        config.LOG_LEVEL = self.log_level
        config.STRICT_MODE = self.strict
        config.CORS_ORIGINS = list(self.cors_origins)

    def configure_logging(self):
        """Set up root logging at the configured level."""
        logging.basicConfig(level=getattr(logging, self.log_level), format=LOG_FORMAT)
