"""
This module loads the library boot config at import time and applies the
initial log configuration from it
"""

# Standard
from typing import Optional
import os

# First Party
import aconfig
import alog

# Local
from ..exceptions import assert_config
from .validation import get_invalid_params

_CONFIG_DIR = os.path.dirname(__file__)


def _load_yaml(file_name: str, override_env_vars: bool) -> aconfig.Config:
    return aconfig.Config.from_yaml(
        os.path.join(_CONFIG_DIR, file_name),
        override_env_vars=override_env_vars,
    )


def configure_logging(log_config: Optional[aconfig.Config] = None):
    """Apply the log settings from the given config (the library config by
    default) to alog

    Args:
        log_config:  Optional[aconfig.Config]
            Config holding log_level, log_filters, log_json and log_thread_id
    """
    log_config = log_config or library_config
    invalid_params = get_invalid_params(log_config, validation_config)
    assert_config(
        not invalid_params,
        f"Library configuration found invalid values: {invalid_params}",
    )
    alog.configure(
        default_level=log_config.log_level,
        filters=log_config.log_filters,
        formatter="json" if log_config.log_json else "pretty",
        thread_id=log_config.log_thread_id,
    )


# Read the library config, allowing env overrides (LOG_LEVEL, LOG_JSON, ...)
library_config = _load_yaml("config.yaml", override_env_vars=True)

# The validation file is never overridden
validation_config = _load_yaml("config_validation.yaml", override_env_vars=False)

configure_logging()
