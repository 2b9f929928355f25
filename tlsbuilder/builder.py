"""
This module builds TlsContextDescriptors from ssl.* configuration. The same
field mapping applies to both roles. The role only tells the engine which side
of the handshake to set up.
"""

# Standard
from typing import Any, Mapping, Optional, Union

# First Party
import alog

# Local
from . import constants
from .client_auth import DiagnosticSink, resolve_client_auth
from .descriptor import (
    KeyStoreSettings,
    TlsContextDescriptor,
    TlsRole,
    TrustStoreSettings,
)
from .exceptions import ConfigurationError
from .ssl_config import SslConfig

log = alog.use_channel("TLSBD")

ConfigInput = Union[SslConfig, Mapping[str, Any]]


## Interface ###################################################################


@alog.logged_function(log.debug2)
def build_tls_context(
    config: ConfigInput,
    role: Union[TlsRole, str],
    diagnostics: Optional[DiagnosticSink] = None,
) -> TlsContextDescriptor:
    """Build a fresh TlsContextDescriptor for the given role

    Args:
        config:  ConfigInput
            The ssl config snapshot, or a mapping of ssl.* values to build one
            from
        role:  Union[TlsRole, str]
            Which side of the handshake the context is for
        diagnostics:  Optional[DiagnosticSink]
            Where deprecation warnings go. Defaults to the client_auth log
            channel.

    Returns:
        descriptor:  TlsContextDescriptor
            The populated descriptor. Nothing keeps a reference to it.

    Raises:
        ConfigurationError: If any configured value is malformed or an
            enumerated value is not recognized
    """
    role = _parse_role(role)
    if not isinstance(config, SslConfig):
        config = SslConfig(config)

    descriptor = TlsContextDescriptor(
        role=role,
        protocol=config.get_string(constants.SSL_PROTOCOL_CONFIG),
        endpoint_identification_algorithm=config.get_string(
            constants.SSL_ENDPOINT_IDENTIFICATION_ALGORITHM_CONFIG
        ),
    )

    descriptor.key_store = _get_key_store(config)
    descriptor.client_auth = resolve_client_auth(config, diagnostics)

    enabled_protocols = config.get_list(constants.SSL_ENABLED_PROTOCOLS_CONFIG)
    if enabled_protocols:
        descriptor.include_protocols = enabled_protocols

    cipher_suites = config.get_list(constants.SSL_CIPHER_SUITES_CONFIG)
    if cipher_suites:
        descriptor.include_cipher_suites = cipher_suites

    descriptor.trust_store = _get_trust_store(config)

    # NOTE: A non-empty ssl.provider replaces the protocol. The two settings
    #   name different things, but existing deployments rely on this.
    provider = config.get_string(constants.SSL_PROVIDER_CONFIG)
    if provider:
        log.debug(
            "Overriding protocol [%s] with provider [%s]",
            descriptor.protocol,
            provider,
        )
        descriptor.protocol = provider

    log.debug("Built %s TLS context: %s", role.value, descriptor)
    return descriptor


def create_server_tls_context(
    config: ConfigInput,
    diagnostics: Optional[DiagnosticSink] = None,
) -> TlsContextDescriptor:
    """Build a descriptor for the server side of the handshake"""
    return build_tls_context(config, TlsRole.SERVER, diagnostics)


def create_client_tls_context(
    config: ConfigInput,
    diagnostics: Optional[DiagnosticSink] = None,
) -> TlsContextDescriptor:
    """Build a descriptor for an outbound client connection"""
    return build_tls_context(config, TlsRole.CLIENT, diagnostics)


## Implementation Details ######################################################


def _parse_role(role: Union[TlsRole, str]) -> TlsRole:
    if isinstance(role, TlsRole):
        return role
    try:
        return TlsRole(str(role).lower())
    except ValueError as err:
        raise ConfigurationError(f"Unknown TLS context role: {role}") from err


def _get_key_store(config: SslConfig) -> Optional[KeyStoreSettings]:
    """Without a location there is no identity to present, so the whole
    section is left out
    """
    location = config.get_string(constants.SSL_KEYSTORE_LOCATION_CONFIG)
    if not location:
        log.debug2("No key store configured")
        return None

    key_store = KeyStoreSettings(
        path=location,
        password=config.get_password(constants.SSL_KEYSTORE_PASSWORD_CONFIG),
        key_manager_password=config.get_password(constants.SSL_KEY_PASSWORD_CONFIG),
        store_type=config.get_string(constants.SSL_KEYSTORE_TYPE_CONFIG),
    )
    algorithm = config.get_string(constants.SSL_KEYMANAGER_ALGORITHM_CONFIG)
    if algorithm:
        key_store.key_manager_factory_algorithm = algorithm
    return key_store


def _get_trust_store(config: SslConfig) -> Optional[TrustStoreSettings]:
    location = config.get_string(constants.SSL_TRUSTSTORE_LOCATION_CONFIG)
    if not location:
        log.debug2("No trust store configured")
        return None

    trust_store = TrustStoreSettings(
        path=location,
        password=config.get_password(constants.SSL_TRUSTSTORE_PASSWORD_CONFIG),
        store_type=config.get_string(constants.SSL_TRUSTSTORE_TYPE_CONFIG),
    )
    algorithm = config.get_string(constants.SSL_TRUSTMANAGER_ALGORITHM_CONFIG)
    if algorithm:
        trust_store.trust_manager_factory_algorithm = algorithm
    return trust_store
