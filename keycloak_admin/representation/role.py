"""Role representations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import Representation, nested


@dataclass(frozen=True, kw_only=True)
class RoleComposites(Representation):
    realm: Optional[List[str]] = None
    client: Optional[Dict[str, List[str]]] = None


@dataclass(frozen=True, kw_only=True)
class Role(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    composite: Optional[bool] = None
    composites: Optional[RoleComposites] = nested(RoleComposites)
    client_role: Optional[bool] = None
    container_id: Optional[str] = None
    attributes: Optional[Dict[str, List[str]]] = None
