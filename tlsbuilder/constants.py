"""
Shared module to hold constant values for the library
"""

# Delimiter used for nested dict keys
NESTED_DICT_DELIM = "."

# Delimiter used when a list-typed value is supplied as a single string
LIST_VALUE_DELIM = ","

## Config keys #################################################################

# Key store
SSL_KEYSTORE_LOCATION_CONFIG = "ssl.keystore.location"
SSL_KEYSTORE_PASSWORD_CONFIG = "ssl.keystore.password"
SSL_KEY_PASSWORD_CONFIG = "ssl.key.password"
SSL_KEYSTORE_TYPE_CONFIG = "ssl.keystore.type"
SSL_KEYMANAGER_ALGORITHM_CONFIG = "ssl.keymanager.algorithm"

# Client authentication
# DEPRECATED: ssl.client.auth is superseded by ssl.client.authentication
SSL_CLIENT_AUTH_CONFIG = "ssl.client.auth"
SSL_CLIENT_AUTHENTICATION_CONFIG = "ssl.client.authentication"

# Protocols and ciphers
SSL_ENABLED_PROTOCOLS_CONFIG = "ssl.enabled.protocols"
SSL_CIPHER_SUITES_CONFIG = "ssl.cipher.suites"
SSL_ENDPOINT_IDENTIFICATION_ALGORITHM_CONFIG = "ssl.endpoint.identification.algorithm"

# Trust store
SSL_TRUSTSTORE_LOCATION_CONFIG = "ssl.truststore.location"
SSL_TRUSTSTORE_PASSWORD_CONFIG = "ssl.truststore.password"
SSL_TRUSTSTORE_TYPE_CONFIG = "ssl.truststore.type"
SSL_TRUSTMANAGER_ALGORITHM_CONFIG = "ssl.trustmanager.algorithm"

# Protocol selection
SSL_PROTOCOL_CONFIG = "ssl.protocol"
SSL_PROVIDER_CONFIG = "ssl.provider"

# The root section that all ssl keys live under
SSL_CONFIG_SECTION = "ssl"

## Client authentication values ################################################

SSL_CLIENT_AUTHENTICATION_REQUIRED = "required"
SSL_CLIENT_AUTHENTICATION_REQUESTED = "requested"
SSL_CLIENT_AUTHENTICATION_NONE = "none"
