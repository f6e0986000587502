"""Typed representations of Keycloak admin API objects."""
from .base import Representation
from .client import Client, ClientScope, ClientSecret, ProtocolMapper
from .component import (
    LDAP_STORAGE_MAPPER,
    USER_STORAGE_PROVIDER,
    Component,
    UserFederationMapper,
)
from .group import Group
from .organization import Member, Organization, OrganizationDomain
from .realm import AdminEvent, AuthDetails, Key, KeysMetadata, Realm
from .role import Role, RoleComposites
from .server_info import ServerInfo
from .user import BruteForceStatus, Credential, User, UserSession

__all__ = [
    "Representation",
    "AdminEvent",
    "AuthDetails",
    "BruteForceStatus",
    "Client",
    "ClientScope",
    "ClientSecret",
    "Component",
    "Credential",
    "Group",
    "Key",
    "KeysMetadata",
    "Member",
    "Organization",
    "OrganizationDomain",
    "ProtocolMapper",
    "Realm",
    "Role",
    "RoleComposites",
    "ServerInfo",
    "User",
    "UserFederationMapper",
    "UserSession",
    "LDAP_STORAGE_MAPPER",
    "USER_STORAGE_PROVIDER",
]
