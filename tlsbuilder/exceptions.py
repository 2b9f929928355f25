"""
This module implements custom exceptions
"""

# Standard
from typing import Any, Optional

## Base Error ##################################################################


class TlsBuilderError(Exception):
    """Base class for all tlsbuilder exceptions"""

    def __init__(self, message: str, is_fatal_error: bool):
        """Construct with a flag indicating whether this is a fatal error. This
        will be a static property of all children.
        """
        super().__init__(message)
        self._is_fatal_error = is_fatal_error

    @property
    def is_fatal_error(self):
        """Property indicating whether or not this error should halt the
        startup of the service that is building the context
        """
        return self._is_fatal_error


## Fatal Errors ################################################################


class TlsBuilderFatalError(TlsBuilderError):
    """A TlsBuilderFatalError is one that indicates the TLS context cannot be
    built from the given inputs and the caller must not continue.
    """

    def __init__(self, message: str = ""):
        super().__init__(message=message, is_fatal_error=True)


class ConfigurationError(TlsBuilderFatalError):
    """Exception caused by a configuration value that is malformed or does not
    match its recognized value set
    """

    def __init__(
        self,
        message: str = "",
        key: Optional[str] = None,
        value: Any = None,
    ):
        self.key = key
        self.value = value
        if not message and key is not None:
            message = f"Unexpected value for {key} configuration: {value}"
        super().__init__(message)


## Assertions ##################################################################


def assert_config(
    condition: bool,
    message: str = "",
    key: Optional[str] = None,
    value: Any = None,
):
    """Replacement for assert() which will throw a ConfigurationError. This
    should be used when a configured value does not meet the conditions needed
    to build a TLS context.
    """
    if not condition:
        raise ConfigurationError(message, key=key, value=value)
