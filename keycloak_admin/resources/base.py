"""Shared plumbing for admin API resources."""
from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

from ..client import KeycloakClient
from ..collection import Collection
from ..criteria import Criteria, params
from ..representation import Representation

C = TypeVar("C", bound=Collection)
R = TypeVar("R", bound=Representation)

Body = Union[Representation, Mapping[str, Any]]


def segment(value: str, safe: str = "") -> str:
    """Quote a user-supplied path segment (role names, group paths, ...)."""
    return quote(str(value), safe=safe)


def realm_path(realm: str, *parts: str) -> str:
    """Build /admin/realms/{realm}/... with the realm name quoted."""
    path = f"/admin/realms/{segment(realm)}"
    if parts:
        path += "/" + "/".join(parts)
    return path


def to_body(value: Any) -> Any:
    """JSON body for a representation, a mapping, or a list of either."""
    if isinstance(value, Representation):
        return value.to_json()
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)):
        return [to_body(item) for item in value]
    return value


class Resource:
    """Base class for a Keycloak admin resource."""

    def __init__(self, client: KeycloakClient):
        """Initialize resource.

        Args:
            client: Keycloak HTTP client shared by all resources
        """
        self.client = client

    def _get_collection(self, collection: Type[C], path: str, criteria: Optional[Criteria] = None) -> C:
        resp = self.client.get(path, params=params(criteria))
        return collection.from_json(resp.json())

    def _get_representation(self, representation: Type[R], path: str, criteria: Optional[Criteria] = None) -> R:
        resp = self.client.get(path, params=params(criteria))
        return representation.from_json(resp.json())

    def _create(self, path: str, body: Body, criteria: Optional[Criteria] = None) -> Optional[str]:
        resp = self.client.post(path, json=to_body(body), params=params(criteria))
        return self.client.id_from_location(resp)

    def _update(self, path: str, body: Body) -> None:
        self.client.put(path, json=to_body(body))

    def _delete(self, path: str, body: Optional[Iterable[Body]] = None) -> None:
        self.client.delete(path, json=to_body(list(body)) if body is not None else None)
