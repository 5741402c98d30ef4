"""Read-only collections handed out by every deck backend."""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any, Dict, Generic, Hashable, Iterable, Iterator, Tuple, TypeVar, Union, overload

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class UnsupportedMutationError(TypeError):
    """Raised when a read-only collection is asked to change."""


def _reject(self: Any, *args: Any, **kwargs: Any) -> Any:
    raise UnsupportedMutationError(f"{type(self).__name__} does not support mutation")


class ImmutableSortedSet(Set, Generic[T]):
    """Set of orderable items that iterates in ascending order."""

    __slots__ = ("_items", "_members")

    def __init__(self, items: Iterable[T] = ()) -> None:
        members = frozenset(items)
        self._members = members
        self._items: Tuple[T, ...] = tuple(sorted(members))  # type: ignore[type-var]

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "ImmutableSortedSet[T]": ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(item) for item in self._items)}])"

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def first(self) -> T:
        return self._items[0]

    def last(self) -> T:
        return self._items[-1]

    def to_list(self) -> list:
        return list(self._items)

    add = _reject
    discard = _reject
    remove = _reject
    pop = _reject
    clear = _reject
    update = _reject
    difference_update = _reject
    intersection_update = _reject
    symmetric_difference_update = _reject
    __ior__ = _reject
    __iand__ = _reject
    __isub__ = _reject
    __ixor__ = _reject


class ImmutableMapping(Mapping, Generic[K, V]):
    """Insertion-ordered mapping that rejects every mutator."""

    __slots__ = ("_data",)

    def __init__(self, data: Union[Mapping, Iterable[Tuple[K, V]]] = ()) -> None:
        self._data: Dict[K, V] = dict(data)

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    __setitem__ = _reject
    __delitem__ = _reject
    pop = _reject
    popitem = _reject
    clear = _reject
    update = _reject
    setdefault = _reject
    __ior__ = _reject


class ImmutableBag(ImmutableMapping[K, int]):
    """Occurrence counts keyed by item; compares equal to a ``Counter`` with the same counts."""

    __slots__ = ()

    def __init__(self, counts: Union[Mapping, Iterable[Tuple[K, int]]] = ()) -> None:
        super().__init__((item, int(count)) for item, count in dict(counts).items() if count)

    @classmethod
    def from_counts(cls, counts: Union[Mapping, Iterable[Tuple[K, int]]]) -> "ImmutableBag[K]":
        return cls(counts)

    @classmethod
    def of(cls, items: Iterable[K]) -> "ImmutableBag[K]":
        counts: Dict[K, int] = {}
        for item in items:
            counts[item] = counts.get(item, 0) + 1
        return cls(counts)

    def occurrences_of(self, item: K) -> int:
        return self._data.get(item, 0)

    def size(self) -> int:
        return sum(self._data.values())

    def distinct_count(self) -> int:
        return len(self._data)

    add = _reject
    remove = _reject
