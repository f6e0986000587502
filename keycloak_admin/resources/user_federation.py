"""User federation providers and their mappers.

Keycloak models federation providers (LDAP, Kerberos, custom user storage)
as components of type ``org.keycloak.storage.UserStorageProvider``. Their
attribute mappers are components whose ``parentId`` is the provider id.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Union

from ..collection import ComponentCollection, UserFederationMapperCollection
from ..criteria import Criteria
from ..representation import (
    LDAP_STORAGE_MAPPER,
    USER_STORAGE_PROVIDER,
    Component,
)
from .base import Resource, realm_path, segment

logger = logging.getLogger(__name__)

SYNC_ACTIONS = ("triggerFullSync", "triggerChangedUsersSync")


class UserFederation(Resource):
    """User storage providers of a realm."""

    def providers(self, realm: str, criteria: Optional[Criteria] = None) -> ComponentCollection:
        """List user federation providers.

        Args:
            realm: Realm name
            criteria: Optional extra filters (name, parent); the type filter is always applied
        """
        criteria = (criteria or Criteria()).with_(type=USER_STORAGE_PROVIDER)
        return self._get_collection(ComponentCollection, realm_path(realm, "components"), criteria)

    def get(self, realm: str, provider_id: str) -> Component:
        return self._get_representation(Component, realm_path(realm, "components", segment(provider_id)))

    def create(self, realm: str, component: Union[Component, dict]) -> Optional[str]:
        """Register a federation provider and return its id.

        ``providerType`` defaults to the user storage provider type.
        """
        if isinstance(component, Component):
            if component.provider_type is None:
                component = component.with_provider_type(USER_STORAGE_PROVIDER)
        else:
            component = {"providerType": USER_STORAGE_PROVIDER, **component}
        provider_id = self._create(realm_path(realm, "components"), component)
        logger.info("User federation provider created in realm '%s' (id=%s)", realm, provider_id)
        return provider_id

    def update(self, realm: str, provider_id: str, component: Union[Component, dict]) -> None:
        self._update(realm_path(realm, "components", segment(provider_id)), component)

    def delete(self, realm: str, provider_id: str) -> None:
        self._delete(realm_path(realm, "components", segment(provider_id)))

    def mappers(
        self,
        realm: str,
        provider_id: str,
        mapper_type: str = LDAP_STORAGE_MAPPER,
        criteria: Optional[Criteria] = None,
    ) -> UserFederationMapperCollection:
        """Mappers attached to a provider."""
        criteria = (criteria or Criteria()).with_(parent=provider_id, type=mapper_type)
        return self._get_collection(UserFederationMapperCollection, realm_path(realm, "components"), criteria)

    def sync(self, realm: str, provider_id: str, action: str = "triggerChangedUsersSync") -> Dict[str, Any]:
        """Synchronize users from the provider into Keycloak.

        Args:
            realm: Realm name
            provider_id: Federation provider id
            action: triggerFullSync or triggerChangedUsersSync

        Returns:
            Synchronization result (added, updated, removed, failed counts and status)
        """
        if action not in SYNC_ACTIONS:
            raise ValueError(f"Unknown sync action '{action}', expected one of {SYNC_ACTIONS}")
        resp = self.client.post(
            realm_path(realm, "user-storage", segment(provider_id), "sync"),
            params={"action": action},
        )
        result = resp.json() if resp.content else {}
        logger.info("User federation sync %s for %s: %s", action, provider_id, result.get("status"))
        return result
