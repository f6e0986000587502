"""Keycloak user management operations."""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Union

from ..collection import (
    CredentialCollection,
    GroupCollection,
    RoleCollection,
    UserCollection,
    UserSessionCollection,
)
from ..criteria import Criteria, params
from ..representation import Credential, Role, User
from .base import Resource, realm_path, segment, to_body

logger = logging.getLogger(__name__)


class Users(Resource):
    """Users of a realm, their group memberships, role mappings and sessions."""

    def all(self, realm: str, criteria: Optional[Criteria] = None) -> UserCollection:
        """List users of a realm.

        Args:
            realm: Realm name
            criteria: Optional filters (search, username, email, exact, first, max, ...)

        Returns:
            Users matching the criteria
        """
        return self._get_collection(UserCollection, realm_path(realm, "users"), criteria)

    def search(self, realm: str, criteria: Optional[Criteria] = None) -> UserCollection:
        """Search users; same endpoint as all(), kept for readability at call sites."""
        return self.all(realm, criteria)

    def count(self, realm: str, criteria: Optional[Criteria] = None) -> int:
        resp = self.client.get(realm_path(realm, "users", "count"), params=params(criteria))
        return int(resp.json())

    def get(self, realm: str, user_id: str) -> User:
        """Return a single user.

        Raises:
            NotFoundError: If the user does not exist
        """
        return self._get_representation(User, realm_path(realm, "users", segment(user_id)))

    def create(self, realm: str, user: Union[User, dict]) -> Optional[str]:
        """Create a user and return the server-assigned id."""
        user_id = self._create(realm_path(realm, "users"), user)
        logger.info("User created in realm '%s' (id=%s)", realm, user_id)
        return user_id

    def update(self, realm: str, user_id: str, user: Union[User, dict]) -> None:
        self._update(realm_path(realm, "users", segment(user_id)), user)

    def delete(self, realm: str, user_id: str) -> None:
        self._delete(realm_path(realm, "users", segment(user_id)))
        logger.info("User %s deleted from realm '%s'", user_id, realm)

    # ── Groups ──────────────────────────────────────────────────────────────

    def join_group(self, realm: str, user_id: str, group_id: str) -> None:
        self.client.put(realm_path(realm, "users", segment(user_id), "groups", segment(group_id)))

    def leave_group(self, realm: str, user_id: str, group_id: str) -> None:
        self.client.delete(realm_path(realm, "users", segment(user_id), "groups", segment(group_id)))

    def retrieve_groups(self, realm: str, user_id: str, criteria: Optional[Criteria] = None) -> GroupCollection:
        return self._get_collection(
            GroupCollection, realm_path(realm, "users", segment(user_id), "groups"), criteria
        )

    # ── Realm role mappings ─────────────────────────────────────────────────

    def retrieve_realm_roles(
        self, realm: str, user_id: str, criteria: Optional[Criteria] = None
    ) -> RoleCollection:
        return self._get_collection(
            RoleCollection, realm_path(realm, "users", segment(user_id), "role-mappings", "realm"), criteria
        )

    def retrieve_available_realm_roles(
        self, realm: str, user_id: str, criteria: Optional[Criteria] = None
    ) -> RoleCollection:
        """Realm roles that can still be mapped to the user."""
        return self._get_collection(
            RoleCollection,
            realm_path(realm, "users", segment(user_id), "role-mappings", "realm", "available"),
            criteria,
        )

    def add_realm_roles(self, realm: str, user_id: str, roles: Iterable[Union[Role, dict]]) -> None:
        self.client.post(
            realm_path(realm, "users", segment(user_id), "role-mappings", "realm"),
            json=to_body(list(roles)),
        )

    def remove_realm_roles(self, realm: str, user_id: str, roles: Iterable[Union[Role, dict]]) -> None:
        self._delete(realm_path(realm, "users", segment(user_id), "role-mappings", "realm"), roles)

    # ── Client role mappings ────────────────────────────────────────────────

    def retrieve_client_roles(
        self, realm: str, user_id: str, client_uuid: str, criteria: Optional[Criteria] = None
    ) -> RoleCollection:
        return self._get_collection(
            RoleCollection,
            realm_path(realm, "users", segment(user_id), "role-mappings", "clients", segment(client_uuid)),
            criteria,
        )

    def add_client_roles(
        self, realm: str, user_id: str, client_uuid: str, roles: Iterable[Union[Role, dict]]
    ) -> None:
        self.client.post(
            realm_path(realm, "users", segment(user_id), "role-mappings", "clients", segment(client_uuid)),
            json=to_body(list(roles)),
        )

    def remove_client_roles(
        self, realm: str, user_id: str, client_uuid: str, roles: Iterable[Union[Role, dict]]
    ) -> None:
        self._delete(
            realm_path(realm, "users", segment(user_id), "role-mappings", "clients", segment(client_uuid)),
            roles,
        )

    # ── Credentials, actions and sessions ───────────────────────────────────

    def execute_actions_email(
        self,
        realm: str,
        user_id: str,
        actions: Optional[List[str]] = None,
        criteria: Optional[Criteria] = None,
    ) -> None:
        """Send an email asking the user to perform required actions.

        Args:
            realm: Realm name
            user_id: User ID
            actions: Required action aliases (e.g. UPDATE_PASSWORD, VERIFY_EMAIL)
            criteria: Optional client_id, lifespan and redirect_uri parameters
        """
        self.client.put(
            realm_path(realm, "users", segment(user_id), "execute-actions-email"),
            json=list(actions or []),
            params=params(criteria),
        )

    def credentials(self, realm: str, user_id: str, criteria: Optional[Criteria] = None) -> CredentialCollection:
        return self._get_collection(
            CredentialCollection, realm_path(realm, "users", segment(user_id), "credentials"), criteria
        )

    def reset_password(self, realm: str, user_id: str, credential: Union[Credential, dict]) -> None:
        """Set a new password; pass a credential with type "password" and a value."""
        self._update(realm_path(realm, "users", segment(user_id), "reset-password"), credential)

    def sessions(self, realm: str, user_id: str, criteria: Optional[Criteria] = None) -> UserSessionCollection:
        return self._get_collection(
            UserSessionCollection, realm_path(realm, "users", segment(user_id), "sessions"), criteria
        )

    def logout(self, realm: str, user_id: str) -> None:
        """Revoke all sessions of the user."""
        self.client.post(realm_path(realm, "users", segment(user_id), "logout"))
