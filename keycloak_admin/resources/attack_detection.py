"""Brute force detection state of users."""
from __future__ import annotations
import logging

from ..representation import BruteForceStatus
from .base import Resource, realm_path, segment

logger = logging.getLogger(__name__)


class AttackDetection(Resource):
    """Inspect and reset login failure tracking."""

    def clear(self, realm: str) -> None:
        """Clear login failures for all users, releasing temporarily locked accounts."""
        self.client.delete(realm_path(realm, "attack-detection", "brute-force", "users"))
        logger.info("Cleared login failures for all users in realm '%s'", realm)

    def clear_user(self, realm: str, user_id: str) -> None:
        """Clear login failures for one user."""
        self.client.delete(realm_path(realm, "attack-detection", "brute-force", "users", segment(user_id)))
        logger.info("Cleared login failures for user %s in realm '%s'", user_id, realm)

    def user_status(self, realm: str, user_id: str) -> BruteForceStatus:
        return self._get_representation(
            BruteForceStatus, realm_path(realm, "attack-detection", "brute-force", "users", segment(user_id))
        )
