"""Keycloak Admin REST API client library.

Architecture:
- keycloak.py: Keycloak facade, one accessor per resource
- client.py: HTTP client with authentication and token refresh
- resources/: one class per admin resource (users, groups, roles, ...)
- representation/: immutable dataclasses mirroring Keycloak JSON objects
- collection.py: typed, lazily decoded results of list endpoints
- criteria.py: query parameters for search endpoints
- exceptions.py: typed exceptions for error handling
- config/: settings loaded from the environment and /run/secrets

Usage:
    from keycloak_admin import Keycloak, Criteria, User

    keycloak = Keycloak("http://keycloak:8080", "admin", "admin")
    users = keycloak.users()

    user_id = users.create("demo", User(username="alice", enabled=True))
    alice = users.search("demo", Criteria(username="alice", exact=True)).first()
    users.update("demo", alice.id, alice.with_first_name("Alice"))
"""
from .client import KeycloakClient, REQUEST_TIMEOUT
from .collection import (
    AdminEventCollection,
    ClientCollection,
    ClientScopeCollection,
    Collection,
    ComponentCollection,
    CredentialCollection,
    GroupCollection,
    MemberCollection,
    OrganizationCollection,
    ProtocolMapperCollection,
    RealmCollection,
    RoleCollection,
    UserCollection,
    UserFederationMapperCollection,
    UserSessionCollection,
)
from .config import Settings, load_settings
from .criteria import Criteria
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    EmptyCollectionError,
    KeycloakAPIError,
    KeycloakError,
    NotFoundError,
)
from .keycloak import Keycloak
from .representation import (
    AdminEvent,
    BruteForceStatus,
    Client,
    ClientScope,
    ClientSecret,
    Component,
    Credential,
    Group,
    KeysMetadata,
    Member,
    Organization,
    ProtocolMapper,
    Realm,
    Representation,
    Role,
    ServerInfo,
    User,
    UserFederationMapper,
    UserSession,
)

__version__ = "0.1.0"

__all__ = [
    # Facade and client
    "Keycloak",
    "KeycloakClient",
    "REQUEST_TIMEOUT",
    "Settings",
    "load_settings",
    "Criteria",

    # Exceptions
    "KeycloakError",
    "KeycloakAPIError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "EmptyCollectionError",
    "ConfigurationError",

    # Collections
    "Collection",
    "AdminEventCollection",
    "ClientCollection",
    "ClientScopeCollection",
    "ComponentCollection",
    "CredentialCollection",
    "GroupCollection",
    "MemberCollection",
    "OrganizationCollection",
    "ProtocolMapperCollection",
    "RealmCollection",
    "RoleCollection",
    "UserCollection",
    "UserFederationMapperCollection",
    "UserSessionCollection",

    # Representations
    "Representation",
    "AdminEvent",
    "BruteForceStatus",
    "Client",
    "ClientScope",
    "ClientSecret",
    "Component",
    "Credential",
    "Group",
    "KeysMetadata",
    "Member",
    "Organization",
    "ProtocolMapper",
    "Realm",
    "Role",
    "ServerInfo",
    "User",
    "UserFederationMapper",
    "UserSession",
]
