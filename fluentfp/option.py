"""Optional values: a value of type T, or nothing.

Absence is not an error. Only ``must_get`` raises, and only on a not-ok option.

Caller trap: ``if_not_zero``/``if_provided`` treat a type's zero value as
absence, so an explicit ``0`` or ``""`` yields a not-ok option. Use ``of`` or
``new`` when zero is a legitimate value.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import json
import os
from typing import Any, Callable, Generic, Mapping, Optional, Tuple, TypeVar

from .errors import NotOkError
from .zero import is_zero, zero_of

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")


class Option(Generic[T]):
    def is_ok(self) -> bool: raise NotImplementedError
    def is_some(self) -> bool: return self.is_ok()
    def is_none(self) -> bool: return not self.is_ok()

    def get(self) -> Tuple[T, bool]:
        if self.is_ok():
            return self.value, True  # type: ignore[attr-defined]
        return zero_of(self.kind), False  # type: ignore[attr-defined]

    def must_get(self) -> T:
        if not self.is_ok():
            raise NotOkError("option: not ok")
        return self.value  # type: ignore[attr-defined]

    def or_(self, default: T) -> T:
        return self.value if self.is_ok() else default  # type: ignore[attr-defined]

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_ok() else default  # type: ignore[attr-defined]

    def or_zero(self) -> T:
        v, _ = self.get()
        return v

    # readable aliases of or_zero for str and bool options
    or_empty = or_zero
    or_false = or_zero

    def or_call(self, f: Callable[[], T]) -> T:
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        return f()

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_ok() else None  # type: ignore[attr-defined]

    def map(self, f: Callable[[T], U], kind: Optional[type] = None) -> "Option[U]":
        """Apply ``f`` when ok. A not-ok result zeroes to ``kind``; use ``convert`` to keep the current one."""
        if self.is_ok():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NotOk(kind)

    def convert(self, f: Callable[[T], T]) -> "Option[T]":
        if self.is_ok():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return self

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_ok():
            return f(self.value)  # type: ignore[attr-defined]
        return NotOk()

    def keep_ok_if(self, p: Callable[[T], bool]) -> "Option[T]":
        if not self.is_ok():
            return self
        if not p(self.value):  # type: ignore[attr-defined]
            return NotOk(self.kind)  # type: ignore[attr-defined]
        return self

    def to_not_ok_if(self, p: Callable[[T], bool]) -> "Option[T]":
        if not self.is_ok():
            return self
        if p(self.value):  # type: ignore[attr-defined]
            return NotOk(self.kind)  # type: ignore[attr-defined]
        return self

    def call(self, f: Callable[[T], Any]) -> None:
        if self.is_ok():
            f(self.value)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_ok(self) -> bool: return True
    def __repr__(self) -> str: return f"Some({self.value!r})"

    @property
    def kind(self) -> type:
        return type(self.value)


@dataclass(frozen=True)
class NotOk(Option[T]):
    # Only used to pick the zero value; all not-ok options compare equal.
    kind: Optional[type] = field(default=None, compare=False)
    def is_ok(self) -> bool: return False
    def __repr__(self) -> str: return "NotOk()"


NONE: Option[Any] = NotOk()


def of(v: T) -> Option[T]:
    return Some(v)


def new(v: T, ok: bool) -> Option[T]:
    if not ok:
        return NotOk(type(v) if v is not None else None)
    return Some(v)


def not_ok(kind: Optional[type] = None) -> Option[Any]:
    return NotOk(kind)


def from_nullable(v: Optional[T], kind: Optional[type] = None) -> Option[T]:
    return Some(v) if v is not None else NotOk(kind)


of_pointee = from_nullable


def if_not_zero(v: T) -> Option[T]:
    if is_zero(v):
        return NotOk(type(v) if v is not None else None)
    return Some(v)


if_provided = if_not_zero


def map_option(o: Option[T], f: Callable[[T], U], kind: Optional[type] = None) -> Option[U]:
    return o.map(f, kind)


def lift(f: Callable[[T], Any]) -> Callable[[Option[T]], None]:
    """Turn ``f(T)`` into a function of ``Option[T]`` that skips not-ok options."""
    def lifted(o: Option[T]) -> None:
        o.call(f)
    return lifted


def lookup(mapping: Optional[Mapping[K, T]], key: K, kind: Optional[type] = None) -> Option[T]:
    if mapping is None or key not in mapping:
        return NotOk(kind)
    return Some(mapping[key])


def getenv(key: str) -> Option[str]:
    return if_not_zero(os.environ.get(key, ""))


class OptionEncoder(json.JSONEncoder):
    """Encode ok options as their value and not-ok options as null."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Option):
            return o.to_nullable()
        return super().default(o)


def to_json(o: Option[Any]) -> str:
    if not o.is_ok():
        return "null"
    return json.dumps(o.must_get(), cls=OptionEncoder)


def from_json(text: str | bytes, decode: Optional[Callable[[Any], T]] = None, kind: Optional[type] = None) -> Option[T]:
    obj = json.loads(text)
    if obj is None:
        return NotOk(kind)
    return Some(decode(obj) if decode is not None else obj)
