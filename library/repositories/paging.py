# library/repositories/paging.py
"""Paging and sorting value types used by the generic repository.

Page indexes are zero-based: ``Pageable(0, 20)`` is the first page of
twenty rows.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse a direction, ignoring case"""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid sort direction {value!r}. Must be 'asc' or 'desc'") from None


@dataclass(frozen=True)
class Order:
    property: str
    direction: Direction = Direction.ASC

    @property
    def is_ascending(self) -> bool:
        return self.direction is Direction.ASC


@dataclass(frozen=True)
class Sort:
    orders: Tuple[Order, ...] = ()

    @classmethod
    def by(cls, *properties: str, direction: Direction | str = Direction.ASC) -> "Sort":
        """Sort by the given properties, all in the same direction"""
        if isinstance(direction, str):
            direction = Direction.from_string(direction)
        return cls(tuple(Order(prop, direction) for prop in properties))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    def and_(self, other: "Sort") -> "Sort":
        return Sort(self.orders + other.orders)

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)


@dataclass(frozen=True)
class Pageable:
    page: int = 0
    size: int = 20
    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "Pageable":
        return Pageable(self.page + 1, self.size, self.sort)

    def previous_or_first(self) -> "Pageable":
        return Pageable(max(self.page - 1, 0), self.size, self.sort)

    def first(self) -> "Pageable":
        return Pageable(0, self.size, self.sort)


@dataclass(frozen=True)
class Page(Generic[T]):
    content: List[T]
    pageable: Pageable
    total_elements: int

    @property
    def number(self) -> int:
        return self.pageable.page

    @property
    def size(self) -> int:
        return self.pageable.size

    @property
    def sort(self) -> Sort:
        return self.pageable.sort

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def next_pageable(self) -> Optional[Pageable]:
        return self.pageable.next() if self.has_next else None

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)
