"""Entry point bundling the HTTP client and every admin resource."""
from __future__ import annotations
from typing import Optional

from .client import REQUEST_TIMEOUT, KeycloakClient
from .config import Settings, load_settings
from .resources import (
    AttackDetection,
    Clients,
    ClientScopes,
    Groups,
    Organizations,
    Realms,
    Roles,
    ServerInfoResource,
    UserFederation,
    Users,
)


class Keycloak:
    """Admin API facade.

    Usage:
        keycloak = Keycloak("http://keycloak:8080", "admin", "admin")
        for user in keycloak.users().all("master"):
            print(user.username)
        keycloak.attack_detection().clear_user("master", user_id)
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        realm: str = "master",
        client_id: str = "admin-cli",
        timeout: float = REQUEST_TIMEOUT,
        verify: bool = True,
    ):
        self.client = KeycloakClient(
            base_url,
            username,
            password,
            realm=realm,
            client_id=client_id,
            timeout=timeout,
            verify=verify,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Keycloak":
        """Build a facade from explicit settings or from the environment."""
        settings = settings or load_settings()
        return cls(
            settings.base_url,
            settings.username,
            settings.password,
            realm=settings.realm,
            client_id=settings.client_id,
            timeout=settings.timeout,
            verify=settings.verify,
        )

    @property
    def base_url(self) -> str:
        return self.client.base_url

    def attack_detection(self) -> AttackDetection:
        return AttackDetection(self.client)

    def clients(self) -> Clients:
        return Clients(self.client)

    def client_scopes(self) -> ClientScopes:
        return ClientScopes(self.client)

    def groups(self) -> Groups:
        return Groups(self.client)

    def organizations(self) -> Organizations:
        return Organizations(self.client)

    def realms(self) -> Realms:
        return Realms(self.client)

    def roles(self) -> Roles:
        return Roles(self.client)

    def server_info(self) -> ServerInfoResource:
        return ServerInfoResource(self.client)

    def user_federation(self) -> UserFederation:
        return UserFederation(self.client)

    def users(self) -> Users:
        return Users(self.client)
