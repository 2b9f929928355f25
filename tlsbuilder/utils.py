"""
Common utilities shared across components in the library
"""

# Standard
from typing import Any, Dict, List
import copy

# Local
from . import constants

# Sentinel for missing dict values
__MISSING__ = "__MISSING__"

## Dicts #######################################################################


def merge_configs(base, overrides) -> dict:
    """Helper to perform a deep merge of the overrides into the base. The merge
    is done in place, but the resulting dict is also returned for convenience.

    The merge logic is quite simple: If both the base and overrides have a key
    and the type of the key for both is a dict, recursively merge, otherwise
    set the base value to the override value.

    Args:
        base:  dict
            The base config that will be updated with the overrides
        overrides:  dict
            The override config

    Returns:
        merged:  dict
            The merged results of overrides merged onto base
    """
    for key, value in overrides.items():
        if (
            key not in base
            or not isinstance(base[key], dict)
            or not isinstance(value, dict)
        ):
            base[key] = value
        else:
            base[key] = merge_configs(base[key], value)

    return base


def nested_set(dct: dict, key: str, val: Any):
    """Helper to set values in a dict using 'foo.bar' key notation

    Args:
        dct:  dict
            The dict into which the key will be set
        key:  str
            Key that may contain '.' notation indicating dict nesting
        val:  Any
            The value to place at the nested key
    """
    parts = key.split(constants.NESTED_DICT_DELIM)
    for i, part in enumerate(parts[:-1]):
        dct = dct.setdefault(part, {})
        if not isinstance(dct, dict):
            raise TypeError(
                "Intermediate key {} is not a dict".format(  # pylint: disable=consider-using-f-string
                    constants.NESTED_DICT_DELIM.join(parts[: i + 1])
                )
            )
    dct[parts[-1]] = val


def nested_get(dct: dict, key: str, dflt=None) -> Any:
    """Helper to get values from a dict using 'foo.bar' key notation

    Args:
        dct:  dict
            The dict into which the key will be set
        key:  str
            Key that may contain '.' notation indicating dict nesting

    Returns:
        val:  Any
            Whatever is found at the given key or None if the key is not found.
            This includes missing intermediate dicts.
    """
    parts = key.split(constants.NESTED_DICT_DELIM)
    for i, part in enumerate(parts[:-1]):
        dct = dct.get(part, __MISSING__)
        if dct is __MISSING__:
            return dflt
        if not isinstance(dct, dict):
            raise TypeError(
                "Intermediate key {} is not a dict".format(  # pylint: disable=consider-using-f-string
                    constants.NESTED_DICT_DELIM.join(parts[: i + 1])
                )
            )
    return dct.get(parts[-1], dflt)


def nested_contains(dct: dict, key: str) -> bool:
    """Helper to check whether a 'foo.bar' key is present in a nested dict,
    regardless of the value it holds
    """
    return nested_get(dct, key, __MISSING__) is not __MISSING__


def flatten_keys(dct: dict, prefix: str = "") -> List[str]:
    """Get the list of all leaf keys in a nested dict in 'foo.bar' notation"""
    keys = []
    for key, val in dct.items():
        full_key = (
            f"{prefix}{constants.NESTED_DICT_DELIM}{key}" if prefix else str(key)
        )
        if isinstance(val, dict) and val:
            keys.extend(flatten_keys(val, full_key))
        else:
            keys.append(full_key)
    return keys


def unflatten(dct: Dict[str, Any]) -> dict:
    """Convert a dict whose keys may use 'foo.bar' notation into a fully
    nested dict. Keys that are already nested are merged in place. The input
    is not modified.
    """
    nested = {}
    for key, val in dct.items():
        if not isinstance(key, str):
            raise TypeError(f"Config keys must be str, got {type(key).__name__}")
        if isinstance(val, dict):
            val = unflatten(val)
            existing = nested_get(nested, key, __MISSING__)
            if isinstance(existing, dict):
                val = merge_configs(existing, val)
        else:
            val = copy.copy(val)
        nested_set(nested, key, val)
    return nested
