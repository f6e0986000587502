"""Admin API resources, one class per Keycloak resource type."""
from .attack_detection import AttackDetection
from .base import Resource
from .clients import Clients, ClientScopes
from .groups import Groups
from .organizations import Organizations
from .realms import Realms
from .roles import Roles
from .server_info import ServerInfoResource
from .user_federation import UserFederation
from .users import Users

__all__ = [
    "Resource",
    "AttackDetection",
    "Clients",
    "ClientScopes",
    "Groups",
    "Organizations",
    "Realms",
    "Roles",
    "ServerInfoResource",
    "UserFederation",
    "Users",
]
