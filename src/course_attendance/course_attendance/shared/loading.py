"""Child collections that remember whether they were loaded.

``Unloaded`` means the relationship was never fetched; ``Loaded(())`` means it
was fetched and is empty. Querying an ``Unloaded`` collection raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar, Union

from ..core.exceptions import NotLoadedError

T = TypeVar("T")


@dataclass(frozen=True)
class Loaded(Generic[T]):
    items: tuple

    @classmethod
    def of(cls, items: Iterable[T]) -> "Loaded[T]":
        return cls(items=tuple(items))

    @property
    def loaded(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self.items if predicate(item)), None)

    def select(self, predicate: Callable[[T], bool]) -> list[T]:
        return [item for item in self.items if predicate(item)]


@dataclass(frozen=True)
class Unloaded:
    what: str = "Collection"

    @property
    def loaded(self) -> bool:
        return False

    def _fail(self):
        raise NotLoadedError(f"{self.what} not loaded")

    def __iter__(self):
        self._fail()

    def __len__(self) -> int:
        self._fail()

    def find(self, predicate):
        self._fail()

    def select(self, predicate):
        self._fail()


Collection = Union[Loaded, Unloaded]


def loaded_or_unloaded(items: Optional[Iterable[T]], what: str) -> Collection:
    """``None`` means not fetched; any iterable (even empty) means loaded."""
    if items is None:
        return Unloaded(what)
    if isinstance(items, (Loaded, Unloaded)):
        return items
    return Loaded.of(items)
