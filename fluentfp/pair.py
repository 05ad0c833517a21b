from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, List, Sequence, TypeVar

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    v1: A
    v2: B


def of(v1: A, v2: B) -> Pair[A, B]:
    return Pair(v1, v2)


def zip_(a: Sequence[A], b: Sequence[B]) -> List[Pair[A, B]]:
    if len(a) != len(b):
        raise ValueError("zip: arguments must have same length")
    return [Pair(x, y) for x, y in zip(a, b)]


def zip_with(a: Sequence[A], b: Sequence[B], f: Callable[[A, B], R]) -> List[R]:
    if len(a) != len(b):
        raise ValueError("zip_with: arguments must have same length")
    return [f(x, y) for x, y in zip(a, b)]
