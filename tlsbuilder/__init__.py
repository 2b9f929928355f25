"""
Package exports
"""

# Local
from . import config
from .builder import (
    build_tls_context,
    create_client_tls_context,
    create_server_tls_context,
)
from .client_auth import ClientAuthMode, resolve_client_auth
from .descriptor import (
    KeyStoreSettings,
    TlsContextDescriptor,
    TlsRole,
    TrustStoreSettings,
)
from .exceptions import ConfigurationError, assert_config
from .password import Password
from .ssl_config import SslConfig
