"""Server info representation returned by /admin/serverinfo."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import Representation


@dataclass(frozen=True, kw_only=True)
class ServerInfo(Representation):
    system_info: Optional[Dict[str, Any]] = None
    memory_info: Optional[Dict[str, Any]] = None
    profile_info: Optional[Dict[str, Any]] = None
    features: Optional[List[Dict[str, Any]]] = None
    themes: Optional[Dict[str, Any]] = None
    providers: Optional[Dict[str, Any]] = None
    protocol_mapper_types: Optional[Dict[str, Any]] = None
    builtin_protocol_mappers: Optional[Dict[str, Any]] = None
    enums: Optional[Dict[str, List[str]]] = None

    @property
    def version(self) -> Optional[str]:
        return (self.system_info or {}).get("version")
