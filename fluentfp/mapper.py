"""One fluent, immutable sequence type for map/filter/fold chains.

``Mapper.of(1, 2, 3).keep_if(is_even).map(str).to_list()``
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Set, Sequence, Tuple, TypeVar

from .either import Either, Left, Right
from .option import NotOk, Option, Some

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True)
class Mapper(Generic[T]):
    _items: Tuple[T, ...]

    @staticmethod
    def of(*items: T) -> "Mapper[T]":
        return Mapper(tuple(items))

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "Mapper[T]":
        return Mapper(tuple(items))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int) -> T:
        return self._items[i]

    def to_list(self) -> List[T]:
        return list(self._items)

    def map(self, f: Callable[[T], U]) -> "Mapper[U]":
        return Mapper(tuple(f(x) for x in self._items))

    def convert(self, f: Callable[[T], T]) -> "Mapper[T]":
        return self.map(f)

    def flat_map(self, f: Callable[[T], Iterable[U]]) -> "Mapper[U]":
        out: List[U] = []
        for x in self._items:
            out.extend(f(x))
        return Mapper(tuple(out))

    def keep_if(self, p: Callable[[T], bool]) -> "Mapper[T]":
        return Mapper(tuple(x for x in self._items if p(x)))

    def remove_if(self, p: Callable[[T], bool]) -> "Mapper[T]":
        return Mapper(tuple(x for x in self._items if not p(x)))

    def take_first(self, n: int) -> "Mapper[T]":
        return Mapper(self._items[:max(0, n)])

    def each(self, f: Callable[[T], Any]) -> None:
        for x in self._items:
            f(x)

    def find(self, p: Callable[[T], bool]) -> Option[T]:
        for x in self._items:
            if p(x):
                return Some(x)
        return NotOk()

    def index_where(self, p: Callable[[T], bool]) -> Option[int]:
        for i, x in enumerate(self._items):
            if p(x):
                return Some(i)
        return NotOk(int)

    def any(self, p: Callable[[T], bool]) -> bool:
        return any(p(x) for x in self._items)

    def contains(self, target: T) -> bool:
        return target in self._items

    def contains_any(self, targets: Iterable[T]) -> bool:
        wanted = set(targets)
        return bool(wanted) and any(x in wanted for x in self._items)

    def matches(self, targets: Sequence[T]) -> bool:
        # an empty filter places no constraint
        return len(targets) == 0 or self.contains_any(targets)

    def unique(self) -> "Mapper[T]":
        seen: Set[T] = set()
        out: List[T] = []
        for x in self._items:
            if x not in seen:
                seen.add(x)
                out.append(x)
        return Mapper(tuple(out))

    def to_set(self) -> Set[T]:
        return set(self._items)

    def single(self) -> Either[int, T]:
        """Right(item) when there is exactly one item, else Left(count)."""
        if len(self._items) == 1:
            return Right(self._items[0], int)
        return Left(len(self._items))

    def fold(self, initial: R, f: Callable[[R, T], R]) -> R:
        return fold(self._items, initial, f)

    def sort_by(self, key: Callable[[T], Any]) -> "Mapper[T]":
        return Mapper(tuple(sorted(self._items, key=key)))

    def sort_by_desc(self, key: Callable[[T], Any]) -> "Mapper[T]":
        return Mapper(tuple(sorted(self._items, key=key, reverse=True)))

    def append(self, x: T) -> "Mapper[T]":
        return Mapper(self._items + (x,))

    def extend(self, xs: Iterable[T]) -> "Mapper[T]":
        return Mapper(self._items + tuple(xs))


def fold(items: Iterable[T], initial: R, f: Callable[[R, T], R]) -> R:
    acc = initial
    for x in items:
        acc = f(acc, x)
    return acc


def unzip2(items: Iterable[T], fa: Callable[[T], A], fb: Callable[[T], B]) -> Tuple[Mapper[A], Mapper[B]]:
    as_: List[A] = []; bs: List[B] = []
    for x in items:
        as_.append(fa(x)); bs.append(fb(x))
    return Mapper(tuple(as_)), Mapper(tuple(bs))


def unzip3(items: Iterable[T], fa: Callable[[T], A], fb: Callable[[T], B], fc: Callable[[T], C]) -> Tuple[Mapper[A], Mapper[B], Mapper[C]]:
    as_: List[A] = []; bs: List[B] = []; cs: List[C] = []
    for x in items:
        as_.append(fa(x)); bs.append(fb(x)); cs.append(fc(x))
    return Mapper(tuple(as_)), Mapper(tuple(bs)), Mapper(tuple(cs))


def unzip4(items: Iterable[T], fa: Callable[[T], A], fb: Callable[[T], B], fc: Callable[[T], C], fd: Callable[[T], D]) -> Tuple[Mapper[A], Mapper[B], Mapper[C], Mapper[D]]:
    as_: List[A] = []; bs: List[B] = []; cs: List[C] = []; ds: List[D] = []
    for x in items:
        as_.append(fa(x)); bs.append(fb(x)); cs.append(fc(x)); ds.append(fd(x))
    return Mapper(tuple(as_)), Mapper(tuple(bs)), Mapper(tuple(cs)), Mapper(tuple(ds))
