"""Typed collections returned by list endpoints.

A collection holds the decoded JSON array of a list endpoint and turns each
element into the collection's declared representation only when it is
iterated. The backing tuple never changes, so iteration can be restarted.
"""
from __future__ import annotations
import copy
from typing import Any, ClassVar, Generic, Iterable, Iterator, Mapping, Type, TypeVar, Union

from .exceptions import EmptyCollectionError
from .representation import (
    AdminEvent,
    Client,
    ClientScope,
    Component,
    Credential,
    Group,
    Member,
    Organization,
    ProtocolMapper,
    Realm,
    Representation,
    Role,
    User,
    UserFederationMapper,
    UserSession,
)

T = TypeVar("T", bound=Representation)


class Collection(Generic[T]):
    """Ordered, immutable sequence of one representation type."""

    representation: ClassVar[Type[Representation]] = Representation

    def __init__(self, items: Iterable[Union[Mapping[str, Any], T]] = ()):
        items = tuple(items)
        for item in items:
            if isinstance(item, Representation) and not isinstance(item, self.representation):
                raise TypeError(
                    f"{type(self).__name__} holds {self.representation.__name__}, "
                    f"got {type(item).__name__}"
                )
            if not isinstance(item, (Representation, Mapping)):
                raise TypeError(f"{type(self).__name__} cannot hold {type(item).__name__}")
        # snapshot raw JSON so later changes to the source array do not leak in
        self._items = tuple(
            item if isinstance(item, Representation) else copy.deepcopy(dict(item)) for item in items
        )

    @classmethod
    def from_json(cls, data: Iterable[Mapping[str, Any]] | None) -> "Collection[T]":
        return cls(data or ())

    def count(self) -> int:
        return len(self._items)

    def first(self) -> T:
        """Return the first element.

        Raises:
            EmptyCollectionError: If the collection has no elements
        """
        if not self._items:
            raise EmptyCollectionError(f"{type(self).__name__} is empty")
        return self.representation.from_json(self._items[0])

    def __iter__(self) -> Iterator[T]:
        for item in self._items:
            yield self.representation.from_json(item)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, value: object) -> bool:
        return any(element == value for element in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self.representation is other.representation and list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count()})"


class AdminEventCollection(Collection[AdminEvent]):
    representation = AdminEvent


class ClientCollection(Collection[Client]):
    representation = Client


class ClientScopeCollection(Collection[ClientScope]):
    representation = ClientScope


class ComponentCollection(Collection[Component]):
    representation = Component


class CredentialCollection(Collection[Credential]):
    representation = Credential


class GroupCollection(Collection[Group]):
    representation = Group


class MemberCollection(Collection[Member]):
    representation = Member


class OrganizationCollection(Collection[Organization]):
    representation = Organization


class ProtocolMapperCollection(Collection[ProtocolMapper]):
    representation = ProtocolMapper


class RealmCollection(Collection[Realm]):
    representation = Realm


class RoleCollection(Collection[Role]):
    representation = Role


class UserCollection(Collection[User]):
    representation = User


class UserFederationMapperCollection(Collection[UserFederationMapper]):
    representation = UserFederationMapper


class UserSessionCollection(Collection[UserSession]):
    representation = UserSession
