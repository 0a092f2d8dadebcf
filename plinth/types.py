"""Runtime values and helpers for Plinth.

Plinth has three runtime types. Integers are plain Python ints kept in
the signed 32-bit range, booleans are Python bools, and the absence of a
value is the `UNDEFINED` marker. Values are immutable, so they can be
shared freely between the environment and the caller.
"""

from __future__ import annotations

from typing import Any


INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class UndefinedVal:
    """Marker object for the Plinth `undefined` value."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'Undefined'


UNDEFINED = UndefinedVal()


def wrap_i32(n: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit integer."""
    return ((n - INT_MIN) % 2 ** 32) + INT_MIN


def fits_i32(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero.

    Python's `//` floors, so `-7 // 2` is -4. Plinth integers follow
    machine semantics where the quotient is truncated (-3).
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, matching `trunc_div`."""
    return a - b * trunc_div(a, b)


def type_name(value: Any) -> str:
    """Return the Plinth runtime type name of a value."""
    # bool is a subclass of int; check it first
    if isinstance(value, bool):
        return 'Boolean'
    if isinstance(value, int):
        return 'Integer'
    if isinstance(value, UndefinedVal):
        return 'Undefined'
    return type(value).__name__


def to_string(value: Any) -> str:
    """Convert a Plinth value to the text written by `print`."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, UndefinedVal):
        return 'undefined'
    return str(value)
