"""Pagination options and paginated responses.

See https://resend.com/docs/pagination for more information.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, Union

from .errors import InvalidArgumentError

T = TypeVar("T")

MIN_LIMIT = 1
MAX_LIMIT = 100


@dataclass(frozen=True)
class ListBefore:
    """Retrieve items listed before this id (the id itself is excluded)."""

    id: str


@dataclass(frozen=True)
class ListAfter:
    """Retrieve items listed after this id (the id itself is excluded)."""

    id: str


Cursor = Union[ListBefore, ListAfter]


@dataclass
class ListOptions:
    """
    Query parameters for retrieving a list of things.

    ``ListOptions()`` applies no filters. At most one cursor can be set:

        ListOptions().with_limit(3).list_before("71f170f3-826e-47e3-9128-a5958e3b375e")
    """

    limit: Optional[int] = None
    cursor: Optional[Cursor] = None

    def with_limit(self, limit: int) -> "ListOptions":
        """
        Number of things to retrieve (1 to 100). Without a limit the endpoint's
        default is used.
        """
        self.limit = limit
        return self

    def list_before(self, id: str) -> "ListOptions":
        self._set_cursor(ListBefore(id))
        return self

    def list_after(self, id: str) -> "ListOptions":
        self._set_cursor(ListAfter(id))
        return self

    def _set_cursor(self, cursor: Cursor) -> None:
        if self.cursor is not None:
            raise InvalidArgumentError(
                "cursor", f"cannot set {type(cursor).__name__}, already set to {self.cursor!r}"
            )
        self.cursor = cursor

    def validate(self) -> None:
        if self.limit is not None and not MIN_LIMIT <= self.limit <= MAX_LIMIT:
            raise InvalidArgumentError(
                "limit", f"must be between {MIN_LIMIT} and {MAX_LIMIT}, got {self.limit}"
            )

    def to_params(self) -> dict[str, str]:
        """Serialise as query parameters, validating the limit."""
        self.validate()
        params: dict[str, str] = {}
        if self.limit is not None:
            params["limit"] = str(self.limit)
        if isinstance(self.cursor, ListBefore):
            params["before"] = self.cursor.id
        elif isinstance(self.cursor, ListAfter):
            params["after"] = self.cursor.id
        return params


def parse_nullable_vec(value: Optional[list[Any]]) -> list[Any]:
    """Decode a JSON array that the API may send as ``null`` into a list."""
    if value is None:
        return []
    return list(value)


@dataclass
class ListResponse(Generic[T]):
    """Paginated response."""

    has_more: bool
    data: list[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def is_empty(self) -> bool:
        return not self.data

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], parse_item: Callable[[dict[str, Any]], T]
    ) -> "ListResponse[T]":
        """Create from API response dict, decoding each item with ``parse_item``."""
        return cls(
            has_more=bool(data.get("has_more", False)),
            data=[parse_item(item) for item in parse_nullable_vec(data.get("data"))],
        )
