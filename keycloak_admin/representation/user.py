"""User, credential, session and brute-force status representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import Representation, json_field, nested


@dataclass(frozen=True, kw_only=True)
class Credential(Representation):
    id: Optional[str] = None
    type: Optional[str] = None
    user_label: Optional[str] = None
    created_date: Optional[int] = None
    secret_data: Optional[str] = None
    credential_data: Optional[str] = None
    priority: Optional[int] = None
    value: Optional[str] = None
    temporary: Optional[bool] = None


@dataclass(frozen=True, kw_only=True)
class User(Representation):
    id: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    enabled: Optional[bool] = None
    totp: Optional[bool] = None
    created_timestamp: Optional[int] = None
    attributes: Optional[Dict[str, List[str]]] = None
    credentials: Optional[tuple] = nested(Credential, many=True)
    required_actions: Optional[List[str]] = None
    groups: Optional[List[str]] = None
    realm_roles: Optional[List[str]] = None
    client_roles: Optional[Dict[str, List[str]]] = None
    federation_link: Optional[str] = None
    service_account_client_id: Optional[str] = None
    not_before: Optional[int] = None
    access: Optional[Dict[str, bool]] = None


@dataclass(frozen=True, kw_only=True)
class UserSession(Representation):
    id: Optional[str] = None
    username: Optional[str] = None
    user_id: Optional[str] = None
    ip_address: Optional[str] = None
    start: Optional[int] = None
    last_access: Optional[int] = None
    remember_me: Optional[bool] = None
    clients: Optional[Dict[str, str]] = None
    transient_user: Optional[bool] = None


@dataclass(frozen=True, kw_only=True)
class BruteForceStatus(Representation):
    """Login failure state of a user as tracked by attack detection."""
    num_failures: Optional[int] = None
    disabled: Optional[bool] = None
    last_ip_failure: Optional[str] = json_field("lastIPFailure")
    last_failure: Optional[int] = None
    num_temporary_lockouts: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "BruteForceStatus":
        return super().from_json(data or {})
