"""Page requests and page results shared by all listing operations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Collection, Generic, Iterable, Literal, TypeVar

from wallet_backend.core import message_keys as keys
from wallet_backend.core.exceptions import InvalidSortPropertyError
from wallet_backend.core.messages import MessageSource

T = TypeVar("T")
U = TypeVar("U")

Direction = Literal["asc", "desc"]


@dataclass(frozen=True, slots=True)
class SortOrder:
    property: str
    direction: Direction = "asc"

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """Parse ``"field"`` or ``"field,desc"``."""
        name, _, direction = raw.partition(",")
        direction = direction.strip().lower() or "asc"
        if direction not in ("asc", "desc"):
            raise ValueError(f"invalid sort direction: {direction}")
        return cls(property=name.strip(), direction=direction)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Pageable:
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page index must not be negative")
        if self.size < 1:
            raise ValueError("page size must be at least 1")

    @classmethod
    def of(cls, page: int = 0, size: int = 20, sort: Iterable[str] = ()) -> "Pageable":
        return cls(page=page, size=size, sort=tuple(SortOrder.parse(item) for item in sort))

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(slots=True)
class Page(Generic[T]):
    content: list[T]
    pageable: Pageable
    total_elements: int = field(default=0)

    @property
    def page(self) -> int:
        return self.pageable.page

    @property
    def size(self) -> int:
        return self.pageable.size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.pageable.size)

    def __len__(self) -> int:
        return len(self.content)

    def is_empty(self) -> bool:
        return not self.content

    def map(self, converter: Callable[[T], U]) -> "Page[U]":
        return Page(
            content=[converter(item) for item in self.content],
            pageable=self.pageable,
            total_elements=self.total_elements,
        )


def ensure_sortable(pageable: Pageable, allowed: Collection[str], messages: MessageSource) -> None:
    for order in pageable.sort:
        if order.property not in allowed:
            raise InvalidSortPropertyError(messages.get(keys.ERROR_INVALID_SORT_PROPERTY, order.property))


__all__ = ["Direction", "Page", "Pageable", "SortOrder", "ensure_sortable"]
