"""Organization representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import Representation, nested
from .user import User


@dataclass(frozen=True, kw_only=True)
class OrganizationDomain(Representation):
    name: Optional[str] = None
    verified: Optional[bool] = None


@dataclass(frozen=True, kw_only=True)
class Organization(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    alias: Optional[str] = None
    enabled: Optional[bool] = None
    description: Optional[str] = None
    redirect_url: Optional[str] = None
    attributes: Optional[Dict[str, List[str]]] = None
    domains: Optional[tuple] = nested(OrganizationDomain, many=True)


@dataclass(frozen=True, kw_only=True)
class Member(User):
    """Organization member; a user plus its membership type."""
    membership_type: Optional[str] = None
