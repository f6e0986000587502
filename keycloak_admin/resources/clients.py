"""Keycloak client and client scope operations.

Clients are addressed by their internal UUID (``Client.id``), not by the
human-readable ``clientId``. Use ``all(realm, Criteria(clientId=...))`` to
resolve one from the other.
"""
from __future__ import annotations
import logging
from typing import Optional, Union

from ..collection import (
    ClientCollection,
    ClientScopeCollection,
    ProtocolMapperCollection,
    UserSessionCollection,
)
from ..criteria import Criteria
from ..representation import Client, ClientScope, ClientSecret
from .base import Resource, realm_path, segment

logger = logging.getLogger(__name__)


class Clients(Resource):
    """Clients of a realm."""

    def all(self, realm: str, criteria: Optional[Criteria] = None) -> ClientCollection:
        """List clients.

        Args:
            realm: Realm name
            criteria: Optional filters (clientId, search, viewableOnly, first, max)
        """
        return self._get_collection(ClientCollection, realm_path(realm, "clients"), criteria)

    def get(self, realm: str, client_uuid: str) -> Client:
        return self._get_representation(Client, realm_path(realm, "clients", segment(client_uuid)))

    def create(self, realm: str, client: Union[Client, dict]) -> Optional[str]:
        """Create a client and return its internal UUID."""
        client_uuid = self._create(realm_path(realm, "clients"), client)
        logger.info("Client created in realm '%s' (id=%s)", realm, client_uuid)
        return client_uuid

    def update(self, realm: str, client_uuid: str, client: Union[Client, dict]) -> None:
        self._update(realm_path(realm, "clients", segment(client_uuid)), client)

    def delete(self, realm: str, client_uuid: str) -> None:
        self._delete(realm_path(realm, "clients", segment(client_uuid)))

    def user_sessions(
        self, realm: str, client_uuid: str, criteria: Optional[Criteria] = None
    ) -> UserSessionCollection:
        return self._get_collection(
            UserSessionCollection,
            realm_path(realm, "clients", segment(client_uuid), "user-sessions"),
            criteria,
        )

    def client_secret(self, realm: str, client_uuid: str) -> ClientSecret:
        return self._get_representation(
            ClientSecret, realm_path(realm, "clients", segment(client_uuid), "client-secret")
        )

    def regenerate_secret(self, realm: str, client_uuid: str) -> ClientSecret:
        """Generate a new secret for a confidential client and return it."""
        resp = self.client.post(realm_path(realm, "clients", segment(client_uuid), "client-secret"))
        logger.info("Secret regenerated for client %s in realm '%s'", client_uuid, realm)
        return ClientSecret.from_json(resp.json())

    def protocol_mappers(
        self, realm: str, client_uuid: str, criteria: Optional[Criteria] = None
    ) -> ProtocolMapperCollection:
        return self._get_collection(
            ProtocolMapperCollection,
            realm_path(realm, "clients", segment(client_uuid), "protocol-mappers", "models"),
            criteria,
        )


class ClientScopes(Resource):
    """Client scopes of a realm."""

    def all(self, realm: str, criteria: Optional[Criteria] = None) -> ClientScopeCollection:
        return self._get_collection(ClientScopeCollection, realm_path(realm, "client-scopes"), criteria)

    def get(self, realm: str, scope_id: str) -> ClientScope:
        return self._get_representation(ClientScope, realm_path(realm, "client-scopes", segment(scope_id)))

    def create(self, realm: str, scope: Union[ClientScope, dict]) -> Optional[str]:
        return self._create(realm_path(realm, "client-scopes"), scope)

    def update(self, realm: str, scope_id: str, scope: Union[ClientScope, dict]) -> None:
        self._update(realm_path(realm, "client-scopes", segment(scope_id)), scope)

    def delete(self, realm: str, scope_id: str) -> None:
        self._delete(realm_path(realm, "client-scopes", segment(scope_id)))
