"""Group representation."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import SELF, Representation, nested


@dataclass(frozen=True, kw_only=True)
class Group(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    path: Optional[str] = None
    parent_id: Optional[str] = None
    sub_group_count: Optional[int] = None
    sub_groups: Optional[tuple] = nested(SELF, many=True)
    attributes: Optional[Dict[str, List[str]]] = None
    realm_roles: Optional[List[str]] = None
    client_roles: Optional[Dict[str, List[str]]] = None
    access: Optional[Dict[str, bool]] = None
