"""
The SslConfig is the read-only snapshot of ssl.* settings that a TLS context is
built from. It merges the caller's values onto the library defaults, coerces
loosely-typed input (strings from env files, comma-separated lists, raw
secrets) into the declared types and answers whether a given key was supplied
explicitly by the caller.
"""

# Standard
from typing import Any, List, Mapping, Optional
import copy
import os

# First Party
import aconfig
import alog

# Local
from . import constants
from .config.validation import get_invalid_params, get_param_types
from .exceptions import ConfigurationError, assert_config
from .password import Password
from .utils import (
    flatten_keys,
    merge_configs,
    nested_contains,
    nested_get,
    nested_set,
    unflatten,
)

log = alog.use_channel("SSLCF")

## Defaults and schema #########################################################

_DEFAULTS_FILE = os.path.join(os.path.dirname(__file__), "ssl_config.yaml")
_VALIDATION_FILE = os.path.join(
    os.path.dirname(__file__), "ssl_config_validation.yaml"
)

# Environment loading of ssl.* keys belongs to the caller, so no env overrides
_defaults = aconfig.Config.from_yaml(_DEFAULTS_FILE, override_env_vars=False)
_validation_config = aconfig.Config.from_yaml(
    _VALIDATION_FILE, override_env_vars=False
)

# Map from nested key to declared type key (str, bool, list, password)
_param_types = get_param_types(_validation_config)

_TRUE_STRINGS = ("true",)
_FALSE_STRINGS = ("false",)


## SslConfig ###################################################################


class SslConfig:
    """Typed, read-only view over a set of ssl.* configuration values"""

    def __init__(self, originals: Optional[Mapping[str, Any]] = None):
        """Construct from the values supplied by the caller

        Args:
            originals:  Optional[Mapping[str, Any]]
                The explicitly supplied values. Keys may be flat
                ("ssl.keystore.location") or nested
                ({"ssl": {"keystore": {"location": ...}}}). A value of None
                counts as supplied but leaves the default in place.
        """
        try:
            self._originals = unflatten(dict(originals or {}))
        except TypeError as err:
            raise ConfigurationError(f"Malformed ssl configuration: {err}") from err

        # Coerce the supplied values and merge them onto the defaults
        overrides = {}
        for key in flatten_keys(self._originals):
            if key not in _param_types:
                log.debug("Ignoring unknown ssl config key [%s]", key)
                continue
            value = nested_get(self._originals, key)
            if value is None:
                log.debug2("Using default for [%s]", key)
                continue
            nested_set(overrides, key, _coerce(value, _param_types[key]))
        defaults = _coerce_defaults(unflatten(_defaults))
        self._values = merge_configs(defaults, overrides)

        # Make sure everything matches the declared types
        invalid_params = get_invalid_params(self._values, _validation_config)
        assert_config(
            not invalid_params,
            f"Invalid ssl configuration values for: {invalid_params}",
            key=invalid_params[0] if len(invalid_params) == 1 else None,
        )
        log.debug2("Explicitly set ssl config keys: %s", self.explicit_keys())

    @classmethod
    def from_yaml(cls, yaml_file: str) -> "SslConfig":
        """Load the explicitly supplied values from a yaml file

        Args:
            yaml_file:  str
                Path to a yaml file holding flat or nested ssl.* keys

        Returns:
            ssl_config:  SslConfig
                The snapshot built from the file's content
        """
        log.debug("Loading ssl config from %s", yaml_file)
        return cls(aconfig.Config.from_yaml(yaml_file, override_env_vars=False))

    ## Typed accessors #########################################################

    def get_string(self, key: str) -> str:
        return self._get(key, "str")

    def get_boolean(self, key: str) -> bool:
        return self._get(key, "bool")

    def get_list(self, key: str) -> List[str]:
        return list(self._get(key, "list"))

    def get_password(self, key: str) -> Password:
        return self._get(key, "password")

    ## Explicit-set queries ####################################################

    def is_set(self, key: str) -> bool:
        """Whether the given key was explicitly supplied by the caller, even if
        the supplied value matches the default
        """
        try:
            return nested_contains(self._originals, key)
        except TypeError:
            # An intermediate section was supplied as a scalar
            return False

    def explicit_keys(self) -> List[str]:
        """All leaf keys that were explicitly supplied by the caller"""
        return flatten_keys(self._originals)

    def originals(self) -> dict:
        """A copy of the (nested) values supplied by the caller"""
        return copy.deepcopy(self._originals)

    ## Implementation ##########################################################

    def _get(self, key: str, type_key: str) -> Any:
        declared_type = _param_types.get(key)
        assert_config(
            declared_type is not None,
            f"Unknown ssl configuration key: {key}",
            key=key,
        )
        assert_config(
            declared_type == type_key,
            f"Configuration {key} is of type {declared_type}, not {type_key}",
            key=key,
        )
        return nested_get(self._values, key)

    def __repr__(self) -> str:
        return f"SslConfig(explicit_keys={self.explicit_keys()})"


## Helpers #####################################################################


def _coerce(value: Any, type_key: str) -> Any:
    """Coerce a loosely-typed value to the declared type where the conversion
    is unambiguous. Values that cannot be converted are returned unchanged and
    caught by validation.
    """
    if type_key == "bool" and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    elif type_key == "list":
        if isinstance(value, str):
            return [
                item.strip()
                for item in value.split(constants.LIST_VALUE_DELIM)
                if item.strip()
            ]
        if isinstance(value, tuple):
            return list(value)
    elif type_key == "password" and isinstance(value, str):
        return Password(value)
    return value


def _coerce_defaults(defaults: dict) -> dict:
    """Wrap the default secrets so that they validate as passwords"""
    for key, type_key in _param_types.items():
        value = nested_get(defaults, key)
        if value is not None:
            nested_set(defaults, key, _coerce(value, type_key))
    return defaults
