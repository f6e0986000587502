"""Query parameter builder for search and filter endpoints."""
from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode


class Criteria:
    """Filter specification serialized to query parameters.

    Keys are passed to the server verbatim; the server decides which filters
    it understands. ``None`` values are dropped.

    Usage:
        Criteria({"username": "alice", "exact": True})
        Criteria(first=0, max=50, briefRepresentation=True)
    """

    def __init__(self, mapping: Optional[Mapping[str, Any]] = None, **filters: Any):
        self._filters: Dict[str, Any] = {**(mapping or {}), **filters}

    def with_(self, **filters: Any) -> "Criteria":
        """Return new criteria with extra or replaced filters."""
        return Criteria(self._filters, **filters)

    def to_params(self) -> Dict[str, str]:
        return {
            key: _to_param(value)
            for key, value in self._filters.items()
            if value is not None
        }

    def query_string(self) -> str:
        return urlencode(self.to_params())

    def __contains__(self, key: object) -> bool:
        return key in self._filters

    def __getitem__(self, key: str) -> Any:
        return self._filters[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Criteria):
            return NotImplemented
        return self.to_params() == other.to_params()

    def __repr__(self) -> str:
        return f"Criteria({self._filters!r})"


def _to_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _to_param(value.value)
    if isinstance(value, (datetime, date)):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, (list, tuple)):
        return ",".join(_to_param(item) for item in value)
    return str(value)


def params(criteria: Optional[Criteria]) -> Optional[Dict[str, str]]:
    """Query parameters for an optional criteria argument."""
    if criteria is None:
        return None
    return criteria.to_params() or None
