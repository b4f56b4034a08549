"""Combinators over :class:`~userctl.domain.result.Result`.

These compose Result-producing steps without unwrapping unsafely:

* ``map_result``  — transform an Ok payload, pass errors through.
* ``flat_map``    — chain a step that itself returns a Result.
* ``unwrap_or``   — extract the payload or fall back to a default.
* ``is_success`` / ``is_error`` — narrowing predicates.

An Ok result whose payload is absent (only possible by building
``Result(ok=True)`` directly) is treated as a failure by every combinator.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeGuard, TypeVar

from userctl.domain.result import Result, err, ok
from userctl.domain.validators import is_not_undefined

T = TypeVar("T")
U = TypeVar("U")

_UNKNOWN_ERROR = "Unknown error"
_DATA_UNDEFINED = "Data is undefined"


def map_result(result: Result[T], fn: Callable[[T], U]) -> Result[U]:
    """Apply *fn* to the payload of an Ok result and wrap the outcome.

    Errors propagate unchanged (``"Unknown error"`` if the message is
    missing). ``map_result(ok(x), f) == ok(f(x))``.
    """
    if not result.ok:
        return err(result.error or _UNKNOWN_ERROR)
    if is_not_undefined(result.data):
        return ok(fn(result.data))
    return err(_DATA_UNDEFINED)


def flat_map(result: Result[T], fn: Callable[[T], Result[U]]) -> Result[U]:
    """Chain *fn* onto an Ok result, returning its Result without re-wrapping.

    ``flat_map(ok(x), f) == f(x)`` and ``flat_map(r, ok) == r``.
    """
    if not result.ok:
        return err(result.error or _UNKNOWN_ERROR)
    if is_not_undefined(result.data):
        return fn(result.data)
    return err(_DATA_UNDEFINED)


def unwrap_or(result: Result[T], default: T) -> T:
    """Return the payload of an Ok result, otherwise *default*."""
    if result.ok and is_not_undefined(result.data):
        return result.data
    return default


def is_error(result: Result[Any]) -> bool:
    """True when *result* is an Err. Only the flag is inspected."""
    return not result.ok


def is_success(result: Result[T]) -> TypeGuard[Result[T]]:
    """True when *result* is Ok **and** carries a payload.

    Stricter than ``not is_error(result)``: an Ok result with an absent
    payload is neither a success nor an error by these predicates.
    """
    return result.ok and is_not_undefined(result.data)
