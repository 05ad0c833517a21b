from __future__ import annotations
from typing import Any, Callable, Dict, Optional


# Builtins whose no-argument construction is their empty value.
_ZEROS: Dict[type, Callable[[], Any]] = {
    int: int,
    float: float,
    complex: complex,
    str: str,
    bytes: bytes,
    bool: bool,
    list: list,
    dict: dict,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
}


def zero_of(kind: Optional[type]) -> Any:
    """Return a fresh zero value for ``kind``, or None when it has none."""
    make = _ZEROS.get(kind) if kind is not None else None
    return make() if make is not None else None


def is_zero(v: Any) -> bool:
    if v is None:
        return True
    make = _ZEROS.get(type(v))
    return make is not None and v == make()
