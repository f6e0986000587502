"""Component representations used for user federation.

Keycloak stores user federation providers (LDAP, Kerberos, custom user
storage) and their attribute mappers as generic components. Config values
are always lists of strings on the wire.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import Representation

USER_STORAGE_PROVIDER = "org.keycloak.storage.UserStorageProvider"
LDAP_STORAGE_MAPPER = "org.keycloak.storage.ldap.mappers.LDAPStorageMapper"


@dataclass(frozen=True, kw_only=True)
class Component(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    provider_id: Optional[str] = None
    provider_type: Optional[str] = None
    parent_id: Optional[str] = None
    sub_type: Optional[str] = None
    config: Optional[Dict[str, List[str]]] = None


@dataclass(frozen=True, kw_only=True)
class UserFederationMapper(Component):
    """Attribute mapper attached to a user federation provider."""

    @property
    def federation_provider_id(self) -> Optional[str]:
        return self.parent_id
