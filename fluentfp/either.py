"""Right-biased sum type. By convention Left carries failure, Right success."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from .errors import WrongSideError
from .zero import zero_of

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


class Either(Generic[E, A]):
    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def get(self) -> Tuple[A, bool]:
        if self.is_right():
            return self.value, True  # type: ignore[attr-defined]
        return zero_of(self.kind), False  # type: ignore[attr-defined]

    def get_left(self) -> Tuple[E, bool]:
        if self.is_left():
            return self.error, True  # type: ignore[attr-defined]
        return zero_of(self.kind), False  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_right() else default  # type: ignore[attr-defined]

    def left_or_else(self, default: E) -> E:
        return self.error if self.is_left() else default  # type: ignore[attr-defined]

    def get_or_call(self, f: Callable[[], A]) -> A:
        if self.is_right():
            return self.value  # type: ignore[attr-defined]
        return f()

    def left_or_call(self, f: Callable[[], E]) -> E:
        if self.is_left():
            return self.error  # type: ignore[attr-defined]
        return f()

    def must_get(self) -> A:
        if self.is_left():
            raise WrongSideError("either: must_get called on Left")
        return self.value  # type: ignore[attr-defined]

    def must_get_left(self) -> E:
        if self.is_right():
            raise WrongSideError("either: must_get_left called on Right")
        return self.error  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Either[E, B]":
        if self.is_right():
            return Right(f(self.value), self.kind)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[A], "Either[E, B]"]) -> "Either[E, B]":
        if self.is_right():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[E], B]) -> "Either[B, A]":
        if self.is_left():
            return Left(f(self.error), self.kind)  # type: ignore[attr-defined]
        return Right(self.value)  # type: ignore[attr-defined]

    def fold(self, on_left: Callable[[E], T], on_right: Callable[[A], T]) -> T:
        if self.is_right():
            return on_right(self.value)  # type: ignore[attr-defined]
        return on_left(self.error)  # type: ignore[attr-defined]

    def if_right(self, f: Callable[[A], Any]) -> None:
        if self.is_right():
            f(self.value)  # type: ignore[attr-defined]

    def if_left(self, f: Callable[[E], Any]) -> None:
        if self.is_left():
            f(self.error)  # type: ignore[attr-defined]

    call = if_right
    call_left = if_left

    def to_option(self) -> "Option[A]":
        from .option import NotOk, Some
        if self.is_right():
            return Some(self.value)  # type: ignore[attr-defined]
        return NotOk(self.kind)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Left(Either[E, A]):
    error: E
    # type of the Right side, for the zero value of get()
    kind: Optional[type] = field(default=None, compare=False)
    def is_left(self) -> bool: return True
    def __repr__(self) -> str: return f"Left({self.error!r})"


@dataclass(frozen=True)
class Right(Either[E, A]):
    value: A
    # type of the Left side, for the zero value of get_left()
    kind: Optional[type] = field(default=None, compare=False)
    def is_left(self) -> bool: return False
    def __repr__(self) -> str: return f"Right({self.value!r})"


def left(e: E, kind: Optional[type] = None) -> Either[E, Any]:
    return Left(e, kind)


def right(v: A, kind: Optional[type] = None) -> Either[Any, A]:
    return Right(v, kind)


def fold(e: Either[E, A], on_left: Callable[[E], T], on_right: Callable[[A], T]) -> T:
    return e.fold(on_left, on_right)


def map_right(e: Either[E, A], f: Callable[[A], B]) -> Either[E, B]:
    if e.is_left():
        return Left(e.error)  # type: ignore[attr-defined]
    return Right(f(e.value), e.kind)  # type: ignore[attr-defined]


def map_left(e: Either[E, A], f: Callable[[E], B]) -> Either[B, A]:
    return e.map_left(f)
