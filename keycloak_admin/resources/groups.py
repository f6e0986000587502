"""Keycloak group management operations."""
from __future__ import annotations
import logging
from typing import Iterable, Optional, Union

from ..collection import GroupCollection, RoleCollection, UserCollection
from ..criteria import Criteria
from ..representation import Group, Role
from .base import Resource, realm_path, segment, to_body

logger = logging.getLogger(__name__)


class Groups(Resource):
    """Groups of a realm, their hierarchy, members and realm role mappings."""

    def all(self, realm: str, criteria: Optional[Criteria] = None) -> GroupCollection:
        """List top-level groups.

        Args:
            realm: Realm name
            criteria: Optional filters (search, q, exact, first, max, briefRepresentation)
        """
        return self._get_collection(GroupCollection, realm_path(realm, "groups"), criteria)

    def get(self, realm: str, group_id: str) -> Group:
        return self._get_representation(Group, realm_path(realm, "groups", segment(group_id)))

    def by_path(self, realm: str, path: str) -> Group:
        """Retrieve a group by its path (e.g. '/engineering/backend').

        Raises:
            NotFoundError: If no group has this path
        """
        return self._get_representation(
            Group, realm_path(realm, "group-by-path", segment(path.strip("/"), safe="/"))
        )

    def create(self, realm: str, group: Union[Group, dict]) -> Optional[str]:
        """Create a top-level group and return its id."""
        group_id = self._create(realm_path(realm, "groups"), group)
        logger.info("Group created in realm '%s' (id=%s)", realm, group_id)
        return group_id

    def update(self, realm: str, group_id: str, group: Union[Group, dict]) -> None:
        self._update(realm_path(realm, "groups", segment(group_id)), group)

    def delete(self, realm: str, group_id: str) -> None:
        self._delete(realm_path(realm, "groups", segment(group_id)))

    def children(self, realm: str, group_id: str, criteria: Optional[Criteria] = None) -> GroupCollection:
        return self._get_collection(
            GroupCollection, realm_path(realm, "groups", segment(group_id), "children"), criteria
        )

    def create_child(self, realm: str, group_id: str, group: Union[Group, dict]) -> Optional[str]:
        """Create a subgroup below group_id and return its id."""
        return self._create(realm_path(realm, "groups", segment(group_id), "children"), group)

    def members(self, realm: str, group_id: str, criteria: Optional[Criteria] = None) -> UserCollection:
        return self._get_collection(
            UserCollection, realm_path(realm, "groups", segment(group_id), "members"), criteria
        )

    def retrieve_realm_roles(
        self, realm: str, group_id: str, criteria: Optional[Criteria] = None
    ) -> RoleCollection:
        return self._get_collection(
            RoleCollection, realm_path(realm, "groups", segment(group_id), "role-mappings", "realm"), criteria
        )

    def add_realm_roles(self, realm: str, group_id: str, roles: Iterable[Union[Role, dict]]) -> None:
        self.client.post(
            realm_path(realm, "groups", segment(group_id), "role-mappings", "realm"),
            json=to_body(list(roles)),
        )

    def remove_realm_roles(self, realm: str, group_id: str, roles: Iterable[Union[Role, dict]]) -> None:
        self._delete(realm_path(realm, "groups", segment(group_id), "role-mappings", "realm"), roles)
