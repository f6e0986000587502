"""Realm, admin event and realm key representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import Representation, nested
from .client import Client, ClientScope
from .group import Group
from .role import Role
from .user import User


@dataclass(frozen=True, kw_only=True)
class Realm(Representation):
    id: Optional[str] = None
    realm: Optional[str] = None
    display_name: Optional[str] = None
    display_name_html: Optional[str] = None
    enabled: Optional[bool] = None
    ssl_required: Optional[str] = None
    registration_allowed: Optional[bool] = None
    registration_email_as_username: Optional[bool] = None
    remember_me: Optional[bool] = None
    verify_email: Optional[bool] = None
    login_with_email_allowed: Optional[bool] = None
    duplicate_emails_allowed: Optional[bool] = None
    reset_password_allowed: Optional[bool] = None
    edit_username_allowed: Optional[bool] = None
    brute_force_protected: Optional[bool] = None
    permanent_lockout: Optional[bool] = None
    max_failure_wait_seconds: Optional[int] = None
    minimum_quick_login_wait_seconds: Optional[int] = None
    wait_increment_seconds: Optional[int] = None
    quick_login_check_milli_seconds: Optional[int] = None
    max_delta_time_seconds: Optional[int] = None
    failure_factor: Optional[int] = None
    access_token_lifespan: Optional[int] = None
    sso_session_idle_timeout: Optional[int] = None
    sso_session_max_lifespan: Optional[int] = None
    password_policy: Optional[str] = None
    otp_policy_type: Optional[str] = None
    login_theme: Optional[str] = None
    account_theme: Optional[str] = None
    admin_theme: Optional[str] = None
    email_theme: Optional[str] = None
    internationalization_enabled: Optional[bool] = None
    supported_locales: Optional[List[str]] = None
    default_locale: Optional[str] = None
    events_enabled: Optional[bool] = None
    events_expiration: Optional[int] = None
    events_listeners: Optional[List[str]] = None
    enabled_event_types: Optional[List[str]] = None
    admin_events_enabled: Optional[bool] = None
    admin_events_details_enabled: Optional[bool] = None
    organizations_enabled: Optional[bool] = None
    smtp_server: Optional[Dict[str, str]] = None
    attributes: Optional[Dict[str, str]] = None
    users: Optional[tuple] = nested(User, many=True)
    groups: Optional[tuple] = nested(Group, many=True)
    clients: Optional[tuple] = nested(Client, many=True)
    client_scopes: Optional[tuple] = nested(ClientScope, many=True)
    roles: Optional[Dict[str, Any]] = None
    default_role: Optional[Role] = nested(Role)


@dataclass(frozen=True, kw_only=True)
class AuthDetails(Representation):
    realm_id: Optional[str] = None
    client_id: Optional[str] = None
    user_id: Optional[str] = None
    ip_address: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class AdminEvent(Representation):
    id: Optional[str] = None
    time: Optional[int] = None
    realm_id: Optional[str] = None
    auth_details: Optional[AuthDetails] = nested(AuthDetails)
    operation_type: Optional[str] = None
    resource_type: Optional[str] = None
    resource_path: Optional[str] = None
    representation: Optional[str] = None
    error: Optional[str] = None
    details: Optional[Dict[str, str]] = None


@dataclass(frozen=True, kw_only=True)
class Key(Representation):
    provider_id: Optional[str] = None
    provider_priority: Optional[int] = None
    kid: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    algorithm: Optional[str] = None
    public_key: Optional[str] = None
    certificate: Optional[str] = None
    use: Optional[str] = None
    valid_to: Optional[int] = None


@dataclass(frozen=True, kw_only=True)
class KeysMetadata(Representation):
    active: Optional[Dict[str, str]] = None
    keys: Optional[tuple] = nested(Key, many=True)
