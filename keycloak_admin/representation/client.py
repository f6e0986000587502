"""Client, client scope and protocol mapper representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import Representation, nested


@dataclass(frozen=True, kw_only=True)
class ProtocolMapper(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    protocol: Optional[str] = None
    protocol_mapper: Optional[str] = None
    consent_required: Optional[bool] = None
    config: Optional[Dict[str, str]] = None


@dataclass(frozen=True, kw_only=True)
class Client(Representation):
    id: Optional[str] = None
    client_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    root_url: Optional[str] = None
    admin_url: Optional[str] = None
    base_url: Optional[str] = None
    enabled: Optional[bool] = None
    client_authenticator_type: Optional[str] = None
    secret: Optional[str] = None
    redirect_uris: Optional[List[str]] = None
    web_origins: Optional[List[str]] = None
    bearer_only: Optional[bool] = None
    consent_required: Optional[bool] = None
    standard_flow_enabled: Optional[bool] = None
    implicit_flow_enabled: Optional[bool] = None
    direct_access_grants_enabled: Optional[bool] = None
    service_accounts_enabled: Optional[bool] = None
    authorization_services_enabled: Optional[bool] = None
    public_client: Optional[bool] = None
    frontchannel_logout: Optional[bool] = None
    protocol: Optional[str] = None
    attributes: Optional[Dict[str, str]] = None
    full_scope_allowed: Optional[bool] = None
    protocol_mappers: Optional[tuple] = nested(ProtocolMapper, many=True)
    default_client_scopes: Optional[List[str]] = None
    optional_client_scopes: Optional[List[str]] = None
    access: Optional[Dict[str, bool]] = None


@dataclass(frozen=True, kw_only=True)
class ClientScope(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    protocol: Optional[str] = None
    attributes: Optional[Dict[str, str]] = None
    protocol_mappers: Optional[tuple] = nested(ProtocolMapper, many=True)


@dataclass(frozen=True, kw_only=True)
class ClientSecret(Representation):
    """Credential returned by the client-secret endpoints."""
    type: Optional[str] = None
    value: Optional[str] = None
