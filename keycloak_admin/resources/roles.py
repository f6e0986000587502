"""Keycloak realm role operations. Roles are addressed by name."""
from __future__ import annotations
import logging
from typing import Optional, Union

from ..collection import RoleCollection, UserCollection
from ..criteria import Criteria
from ..representation import Role
from .base import Resource, realm_path, segment

logger = logging.getLogger(__name__)


class Roles(Resource):
    """Realm-level roles."""

    def all(self, realm: str, criteria: Optional[Criteria] = None) -> RoleCollection:
        return self._get_collection(RoleCollection, realm_path(realm, "roles"), criteria)

    def get(self, realm: str, role_name: str) -> Role:
        """Return a realm role by name.

        Raises:
            NotFoundError: If the role does not exist
        """
        return self._get_representation(Role, realm_path(realm, "roles", segment(role_name)))

    def create(self, realm: str, role: Union[Role, dict]) -> Optional[str]:
        """Create a realm role.

        Returns:
            The role name, which is how Keycloak addresses realm roles
        """
        name = self._create(realm_path(realm, "roles"), role)
        if name is None:
            name = role.name if isinstance(role, Role) else role.get("name")
        logger.info("Role '%s' created in realm '%s'", name, realm)
        return name

    def update(self, realm: str, role_name: str, role: Union[Role, dict]) -> None:
        self._update(realm_path(realm, "roles", segment(role_name)), role)

    def delete(self, realm: str, role_name: str) -> None:
        self._delete(realm_path(realm, "roles", segment(role_name)))

    def users(self, realm: str, role_name: str, criteria: Optional[Criteria] = None) -> UserCollection:
        """Users that hold the role directly."""
        return self._get_collection(
            UserCollection, realm_path(realm, "roles", segment(role_name), "users"), criteria
        )
