"""Fluent ternary: ``if_(cond).then("yes").else_("no")``.

Arguments to ``then``/``else_`` are evaluated before the ternary sees them;
pass a function to ``then_call``/``else_call`` to defer expensive values.
Without ``then``/``then_call`` a true condition yields None.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class Ternary(Generic[R]):
    condition: bool
    then_value: Optional[R] = None
    then_fn: Optional[Callable[[], R]] = None

    def then(self, v: R) -> "Ternary[R]":
        return Ternary(self.condition, then_value=v)

    def then_call(self, f: Callable[[], R]) -> "Ternary[R]":
        return Ternary(self.condition, then_fn=f)

    def _then(self) -> R:
        if self.then_fn is None:
            return self.then_value  # type: ignore[return-value]
        return self.then_fn()

    def else_(self, v: R) -> R:
        return self._then() if self.condition else v

    def else_call(self, f: Callable[[], R]) -> R:
        return self._then() if self.condition else f()


def if_(condition: bool) -> Ternary[R]:
    return Ternary(bool(condition))
