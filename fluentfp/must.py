"""Turn errors into immediate exceptions.

For code that receives ``(value, err)`` pairs and wants to fail loudly at the
point of misuse instead of threading the error along.
"""
from __future__ import annotations
import os
from typing import Any, Callable, Optional, Tuple, TypeVar

from .errors import MustError

T = TypeVar("T")
T2 = TypeVar("T2")
R = TypeVar("R")


def be_nil(err: Optional[Any]) -> None:
    if err is None:
        return
    if isinstance(err, BaseException):
        raise err
    raise MustError(err)


def get(t: T, err: Optional[Any]) -> T:
    be_nil(err)
    return t


def get2(t: T, t2: T2, err: Optional[Any]) -> Tuple[T, T2]:
    be_nil(err)
    return t, t2


def of(fn: Callable[[T], Tuple[R, Optional[Any]]]) -> Callable[[T], R]:
    def must_fn(t: T) -> R:
        result, err = fn(t)
        be_nil(err)
        return result
    return must_fn


def getenv(key: str) -> str:
    result = os.environ.get(key, "")
    if result == "":
        raise MustError(f"expected value for environment variable {key}")
    return result
