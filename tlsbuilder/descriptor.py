"""
This module holds the TlsContextDescriptor, the set of parameters that a TLS
engine needs to set up either side of a handshake. The descriptor only names
locations and settings. Loading key material is up to the engine.
"""

# Standard
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import dataclasses
import json

# Local
from .client_auth import ClientAuthMode
from .password import Password


class TlsRole(Enum):
    """Which side of the handshake the context is built for"""

    SERVER = "server"
    CLIENT = "client"


@dataclass
class KeyStoreSettings:
    """The identity presented during the handshake"""

    path: str
    password: Password
    key_manager_password: Password
    store_type: str
    # None leaves the engine default in place
    key_manager_factory_algorithm: Optional[str] = None


@dataclass
class TrustStoreSettings:
    """The certificates used to validate the peer"""

    path: str
    password: Password
    store_type: str
    # None leaves the engine default in place
    trust_manager_factory_algorithm: Optional[str] = None


@dataclass
class TlsContextDescriptor:
    """Everything the TLS engine needs for one context. Optional sections and
    overrides are None when not configured so that the engine applies its own
    defaults.
    """

    role: TlsRole
    protocol: str
    endpoint_identification_algorithm: str
    client_auth: ClientAuthMode = ClientAuthMode.NONE
    key_store: Optional[KeyStoreSettings] = None
    trust_store: Optional[TrustStoreSettings] = None
    include_protocols: Optional[List[str]] = None
    include_cipher_suites: Optional[List[str]] = None
    renegotiation_allowed: bool = field(default=False, init=False)

    @property
    def need_client_auth(self) -> bool:
        return self.client_auth is ClientAuthMode.REQUIRED

    @property
    def want_client_auth(self) -> bool:
        return self.client_auth is ClientAuthMode.REQUESTED

    def __str__(self) -> str:
        return json.dumps(self.to_dict())

    def to_dict(self) -> dict:
        """Render as a json-friendly dict with every secret hidden"""
        rendered = dataclasses.asdict(self)
        rendered["role"] = self.role.value
        rendered["client_auth"] = self.client_auth.value
        rendered["need_client_auth"] = self.need_client_auth
        rendered["want_client_auth"] = self.want_client_auth
        for section in ("key_store", "trust_store"):
            if rendered[section] is not None:
                rendered[section] = {
                    key: (Password.HIDDEN if isinstance(val, Password) else val)
                    for key, val in rendered[section].items()
                }
        return rendered
