"""Keycloak organization operations (Keycloak 25+)."""
from __future__ import annotations
import logging
from typing import Optional, Union

from ..collection import MemberCollection, OrganizationCollection
from ..criteria import Criteria
from ..representation import Organization
from .base import Resource, realm_path, segment

logger = logging.getLogger(__name__)


class Organizations(Resource):
    """Organizations of a realm and their members.

    The realm must have ``organizationsEnabled`` set, otherwise the server
    answers every call with an error.
    """

    def all(self, realm: str, criteria: Optional[Criteria] = None) -> OrganizationCollection:
        """List organizations.

        Args:
            realm: Realm name
            criteria: Optional filters (search, q, exact, first, max, briefRepresentation)
        """
        return self._get_collection(OrganizationCollection, realm_path(realm, "organizations"), criteria)

    def get(self, realm: str, org_id: str) -> Organization:
        return self._get_representation(Organization, realm_path(realm, "organizations", segment(org_id)))

    def create(self, realm: str, organization: Union[Organization, dict]) -> Optional[str]:
        org_id = self._create(realm_path(realm, "organizations"), organization)
        logger.info("Organization created in realm '%s' (id=%s)", realm, org_id)
        return org_id

    def update(self, realm: str, org_id: str, organization: Union[Organization, dict]) -> None:
        self._update(realm_path(realm, "organizations", segment(org_id)), organization)

    def delete(self, realm: str, org_id: str) -> None:
        self._delete(realm_path(realm, "organizations", segment(org_id)))

    def members(self, realm: str, org_id: str, criteria: Optional[Criteria] = None) -> MemberCollection:
        return self._get_collection(
            MemberCollection, realm_path(realm, "organizations", segment(org_id), "members"), criteria
        )

    def add_member(self, realm: str, org_id: str, user_id: str) -> None:
        """Add an existing realm user to the organization."""
        # the endpoint takes the bare user id as a JSON string body
        self.client.post(realm_path(realm, "organizations", segment(org_id), "members"), json=user_id)

    def remove_member(self, realm: str, org_id: str, user_id: str) -> None:
        self._delete(realm_path(realm, "organizations", segment(org_id), "members", segment(user_id)))

    def invite_user(
        self,
        realm: str,
        org_id: str,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> None:
        """Email an invitation link to join the organization."""
        form = {"email": email}
        if first_name:
            form["firstName"] = first_name
        if last_name:
            form["lastName"] = last_name
        self.client.post(
            realm_path(realm, "organizations", segment(org_id), "members", "invite-user"),
            data=form,
        )
