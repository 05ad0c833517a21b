from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .option import NotOk, Option, Some, new

T = TypeVar("T")


@dataclass(frozen=True)
class Cond(Generic[T]):
    value: T

    def when(self, ok: bool) -> Option[T]:
        return new(self.value, ok)


@dataclass(frozen=True)
class LazyCond(Generic[T]):
    fn: Callable[[], T]

    def when(self, ok: bool) -> Option[T]:
        # fn only runs when the condition holds
        if ok:
            return Some(self.fn())
        return NotOk()


def of(v: T) -> Cond[T]:
    return Cond(v)


def of_call(fn: Callable[[], T]) -> LazyCond[T]:
    return LazyCond(fn)
