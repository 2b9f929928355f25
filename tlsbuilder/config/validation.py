"""
Type checks for loaded config. A validation yaml mirrors the layout of the
config it checks, with a {"type": ...} entry at every checked leaf.
"""

# Standard
from typing import Any, Dict, List, Optional
import abc
import builtins

# First Party
import aconfig
import alog

# Local
from .. import constants
from ..password import Password
from ..utils import nested_get  # pylint: disable=cyclic-import

log = alog.use_channel("CONFG")


## Public ######################################################################


def get_invalid_params(
    config: aconfig.Config,
    validation_config: aconfig.Config,
) -> List[str]:
    """Get the keys of every value in config that fails its declared check

    Args:
        config:  aconfig.Config
            The merged config values
        validation_config:  aconfig.Config
            The parallel config declaring the parameter types

    Returns:
        invalid_params:  List[str]
            Nested keys ("ssl.client.auth") of the values that failed
    """
    invalid_params = []
    for key, param in parse_validation_config(validation_config).items():
        if not param.validate(nested_get(config, key)):
            log.warning("Found invalid config key [%s]", key)
            invalid_params.append(key)
    return invalid_params


def get_param_types(validation_config: aconfig.Config) -> Dict[str, str]:
    """Map each declared nested key to its type key (e.g. "bool")"""
    return {
        key: param.TYPE_KEY
        for key, param in parse_validation_config(validation_config).items()
    }


## Parameter types #############################################################

# pylint: disable=too-few-public-methods


class _ValidatedParameter(abc.ABC):
    """A declared parameter that checks the python type of a value and then
    any type-specific constraints
    """

    TYPE_KEY = None
    TYPES = []

    def validate(self, value: Any) -> bool:
        if not isinstance(value, tuple(self.TYPES)):
            log.warning("Invalid type <%s> for %s", type(value), self.TYPE_KEY)
            return False
        if not self._validate_value(value):
            log.warning("Invalid %s value", self.TYPE_KEY)
            return False
        return True

    @abc.abstractmethod
    def _validate_value(self, value: Any) -> bool:
        """Constraints beyond the python type"""


class _StrParameter(_ValidatedParameter):
    TYPE_KEY = "str"
    TYPES = [str]

    def _validate_value(self, value: str) -> bool:
        return True


class _PasswordParameter(_ValidatedParameter):
    """A secret, which must be wrapped in a Password around a str"""

    TYPE_KEY = "password"
    TYPES = [Password]

    def _validate_value(self, value: Password) -> bool:
        return isinstance(value.value, str)


class _BoolParameter(_ValidatedParameter):
    TYPE_KEY = "bool"
    TYPES = [bool]

    def _validate_value(self, value: bool) -> bool:
        return True


class _EnumParameter(_ValidatedParameter):
    """A str that must be one of a fixed set of values"""

    TYPE_KEY = "enum"
    TYPES = [str]

    def __init__(self, *, values: List[str]):
        assert (
            isinstance(values, list) and values
        ), "Must specify at least one enum value!"
        self.values = values

    def _validate_value(self, value: str) -> bool:
        return value in self.values


class _ListParameter(_ValidatedParameter):
    """A list whose items may be required to be of a named builtin type"""

    TYPE_KEY = "list"
    TYPES = [list]

    def __init__(self, *, item_type: Optional[str] = None):
        self._item_type = None
        if item_type is not None:
            self._item_type = getattr(builtins, item_type, None)
            assert isinstance(
                self._item_type, type
            ), f"Unsupported item_type: {item_type}"

    def _validate_value(self, value: list) -> bool:
        return self._item_type is None or all(
            isinstance(item, self._item_type) for item in value
        )


# pylint: enable=too-few-public-methods

# Map from type key to parameter class
_factory_map = {
    param_class.TYPE_KEY: param_class
    for param_class in [
        _StrParameter,
        _PasswordParameter,
        _BoolParameter,
        _EnumParameter,
        _ListParameter,
    ]
}


## Parsing #####################################################################


def _construct_parameter(param_args: Dict[str, Any]) -> Optional[_ValidatedParameter]:
    """Build the parameter declared by a {"type": ..., **kwargs} entry. Returns
    None when "type" is not a known type key (e.g. it is itself a nested
    section named "type").
    """
    param_type = param_args.get("type")
    if not isinstance(param_type, str) or param_type not in _factory_map:
        return None
    kwargs = {key: val for key, val in param_args.items() if key != "type"}
    return _factory_map[param_type](**kwargs)


def parse_validation_config(
    validation_config: aconfig.Config,
    prefix: str = "",
) -> Dict[str, _ValidatedParameter]:
    """Walk the validation config and collect the declared parameters by
    nested key
    """
    params = {}
    for key, val in validation_config.items():
        assert isinstance(key, str), "Only string keys allowed!"
        if not isinstance(val, dict):
            continue
        nested_key = f"{prefix}{constants.NESTED_DICT_DELIM}{key}" if prefix else key
        param = _construct_parameter(val)
        if param is not None:
            log.debug3("Found parameter at %s", nested_key)
            params[nested_key] = param
        else:
            params.update(parse_validation_config(val, prefix=nested_key))
    return params
