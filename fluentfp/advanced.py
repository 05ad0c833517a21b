"""Advanced options: wrappers around an Option that forward method calls only
when a value is present.

A subclass adds named methods that delegate through ``call``, e.g. ``close``
below, so callers can write ``app.db.close()`` without checking whether the
dependency was ever opened.
"""
from __future__ import annotations
from typing import Any, Callable, Generic, Optional, Tuple, Type, TypeVar

from .option import NONE, Option, if_provided

T = TypeVar("T")
A = TypeVar("A")
W = TypeVar("W", bound="Advanced[Any]")


class Advanced(Generic[T]):
    __slots__ = ("basic",)

    def __init__(self, basic: Option[T] = NONE):
        self.basic = basic

    def is_ok(self) -> bool: return self.basic.is_ok()
    def get(self) -> Tuple[T, bool]: return self.basic.get()
    def must_get(self) -> T: return self.basic.must_get()
    def or_(self, default: T) -> T: return self.basic.or_(default)
    def call(self, f: Callable[[T], Any]) -> None: self.basic.call(f)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.basic == other.basic  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.basic))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.basic!r})"


class ClosableOption(Advanced[T]):
    __slots__ = ()

    def close(self) -> None:
        self.call(lambda v: v.close())  # type: ignore[attr-defined]

    def __enter__(self) -> "ClosableOption[T]":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def open_as_option(arg: A, opener: Callable[[A], T], wrap: Optional[Type[W]] = None) -> Any:
    """Open a dependency when ``arg`` is provided (not a zero value)."""
    cls = wrap if wrap is not None else ClosableOption
    return cls(if_provided(arg).map(opener))
