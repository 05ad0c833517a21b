"""Lower-order functions, for passing to map/each and friends."""
from __future__ import annotations
from typing import Sized


def len_(xs: Sized) -> int:
    return len(xs)


def string_len(s: str) -> int:
    return len(s)


def println(s: str) -> None:
    print(s)
