"""
This module resolves the effective client authentication mode from the
deprecated boolean ssl.client.auth flag and its replacement, the enumerated
ssl.client.authentication setting.
"""

# Standard
from enum import Enum
from typing import Optional, Protocol

# First Party
import alog

# Local
from . import constants
from .exceptions import ConfigurationError
from .ssl_config import SslConfig

log = alog.use_channel("CAUTH")


class ClientAuthMode(Enum):
    """Handshake policy for peer certificates"""

    NONE = constants.SSL_CLIENT_AUTHENTICATION_NONE
    REQUESTED = constants.SSL_CLIENT_AUTHENTICATION_REQUESTED
    REQUIRED = constants.SSL_CLIENT_AUTHENTICATION_REQUIRED

    @classmethod
    def from_config_value(cls, value: str) -> "ClientAuthMode":
        """Parse a configured token. Only the exact lower-case tokens are
        recognized.

        Raises:
            ConfigurationError: If the token is not one of the known modes
        """
        for mode in cls:
            if mode.value == value:
                return mode
        raise ConfigurationError(
            key=constants.SSL_CLIENT_AUTHENTICATION_CONFIG,
            value=value,
        )


class DiagnosticSink(Protocol):
    """Anything with a logging-style warning method. An alog channel satisfies
    this, as does a recorder in tests.
    """

    def warning(self, msg: str, *args) -> None:
        ...


def resolve_client_auth(
    config: SslConfig,
    diagnostics: Optional[DiagnosticSink] = None,
) -> ClientAuthMode:
    """Determine the client authentication mode to apply to a TLS context.

    | ssl.client.auth set | ssl.client.authentication set | result               |
    |---------------------|-------------------------------|----------------------|
    | no                  | no                            | enum default         |
    | no                  | yes                           | enum value           |
    | yes                 | no                            | true: REQUIRED, false: NONE |
    | yes                 | yes                           | enum value           |

    Both cases where the deprecated flag is set emit a warning.

    Args:
        config:  SslConfig
            The ssl config snapshot
        diagnostics:  Optional[DiagnosticSink]
            Where deprecation warnings go. Defaults to this module's log
            channel.

    Returns:
        mode:  ClientAuthMode
            The resolved mode

    Raises:
        ConfigurationError: If the enumerated value is not recognized
    """
    if diagnostics is None:
        diagnostics = log
    deprecated_set = config.is_set(constants.SSL_CLIENT_AUTH_CONFIG)
    enum_set = config.is_set(constants.SSL_CLIENT_AUTHENTICATION_CONFIG)
    client_authentication = config.get_string(
        constants.SSL_CLIENT_AUTHENTICATION_CONFIG
    )

    if deprecated_set and enum_set:
        diagnostics.warning(
            "The %s configuration is deprecated. Since a value has been supplied "
            "for the %s configuration, that will be used instead",
            constants.SSL_CLIENT_AUTH_CONFIG,
            constants.SSL_CLIENT_AUTHENTICATION_CONFIG,
        )
    elif deprecated_set:
        diagnostics.warning(
            "The configuration %s is deprecated and should be replaced with %s",
            constants.SSL_CLIENT_AUTH_CONFIG,
            constants.SSL_CLIENT_AUTHENTICATION_CONFIG,
        )
        client_authentication = (
            constants.SSL_CLIENT_AUTHENTICATION_REQUIRED
            if config.get_boolean(constants.SSL_CLIENT_AUTH_CONFIG)
            else constants.SSL_CLIENT_AUTHENTICATION_NONE
        )

    mode = ClientAuthMode.from_config_value(client_authentication)
    log.debug2("Resolved client authentication mode: %s", mode.name)
    return mode
