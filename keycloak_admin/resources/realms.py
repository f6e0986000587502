"""Keycloak realm management operations."""
from __future__ import annotations
import logging
from typing import Optional, Union

from ..collection import AdminEventCollection, RealmCollection
from ..criteria import Criteria
from ..representation import KeysMetadata, Realm
from .base import Resource, realm_path, to_body

logger = logging.getLogger(__name__)


class Realms(Resource):
    """Realms of the server, their caches, keys and admin events."""

    def all(self, criteria: Optional[Criteria] = None) -> RealmCollection:
        """List realms visible to the authenticated admin.

        Args:
            criteria: Optional filters (briefRepresentation)
        """
        return self._get_collection(RealmCollection, "/admin/realms", criteria)

    def get(self, realm: str) -> Realm:
        """Return the full realm representation.

        Raises:
            NotFoundError: If the realm does not exist
        """
        return self._get_representation(Realm, realm_path(realm))

    def import_realm(self, realm: Union[Realm, dict]) -> Realm:
        """Create (import) a realm and return it as stored by the server.

        Args:
            realm: Realm representation; may carry users, groups, clients and roles

        Returns:
            The created realm

        Raises:
            ValueError: If the representation has no realm name
        """
        name = realm.realm if isinstance(realm, Realm) else realm.get("realm")
        if not name:
            raise ValueError("Realm representation needs a 'realm' name to be imported")
        self.client.post("/admin/realms", json=to_body(realm))
        logger.info("Realm '%s' imported", name)
        return self.get(name)

    def update(self, realm: str, updated: Union[Realm, dict]) -> Realm:
        """Update top-level realm settings and return the stored realm."""
        self._update(realm_path(realm), updated)
        # a rename moves the realm, so read it back under its new name
        new_name = updated.realm if isinstance(updated, Realm) else updated.get("realm")
        return self.get(new_name or realm)

    def delete(self, realm: str) -> None:
        self._delete(realm_path(realm))
        logger.info("Realm '%s' deleted", realm)

    def admin_events(self, realm: str, criteria: Optional[Criteria] = None) -> AdminEventCollection:
        """Admin events of a realm.

        Args:
            realm: Realm name
            criteria: Optional filters (operationTypes, resourcePath, dateFrom, dateTo, first, max, ...)
        """
        return self._get_collection(AdminEventCollection, realm_path(realm, "admin-events"), criteria)

    def delete_admin_events(self, realm: str) -> None:
        self._delete(realm_path(realm, "admin-events"))

    def clear_keys_cache(self, realm: str) -> None:
        self.client.post(realm_path(realm, "clear-keys-cache"))

    def clear_realm_cache(self, realm: str) -> None:
        self.client.post(realm_path(realm, "clear-realm-cache"))

    def clear_user_cache(self, realm: str) -> None:
        self.client.post(realm_path(realm, "clear-user-cache"))

    def keys(self, realm: str) -> KeysMetadata:
        return self._get_representation(KeysMetadata, realm_path(realm, "keys"))
