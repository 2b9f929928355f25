"""
This module holds common helper functions for making testing easy
"""

# Standard
from typing import List, Tuple
import os

# First Party
import aconfig
import alog

# Local
from tlsbuilder import config
from tlsbuilder.ssl_config import SslConfig

log = alog.use_channel("TEST")


def configure_logging():
    """Configure logging for tests, silent unless LOG_LEVEL is exported"""
    config.configure_logging(
        aconfig.Config(
            {
                "log_level": os.environ.get("LOG_LEVEL", "off"),
                "log_filters": os.environ.get("LOG_FILTERS", ""),
                "log_json": os.environ.get("LOG_JSON", "").lower() == "true",
                "log_thread_id": os.environ.get("LOG_THREAD_ID", "").lower()
                == "true",
            }
        )
    )


configure_logging()


def make_ssl_config(**kwargs) -> SslConfig:
    """Build an SslConfig from keyword args where underscores stand in for the
    dots of the flat key, minus the leading ssl. prefix.

    Example: make_ssl_config(keystore_location="/k.jks")
    """
    return SslConfig(
        {"ssl." + key.replace("_", "."): val for key, val in kwargs.items()}
    )


class RecordingSink:
    """Diagnostic sink that keeps every warning so tests can assert on them"""

    def __init__(self):
        self.warnings: List[Tuple[str, tuple]] = []

    def warning(self, msg: str, *args):
        log.debug("Recording warning: %s", msg % args)
        self.warnings.append((msg, args))

    @property
    def messages(self) -> List[str]:
        return [msg % args for msg, args in self.warnings]
