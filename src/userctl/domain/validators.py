"""Boolean guard predicates for boundary checks on untyped input.

Each predicate is total and side-effect free. The ``TypeGuard`` return
types let type checkers narrow the argument at the call site.
"""

from __future__ import annotations

from typing import TypeGuard, TypeVar

from userctl.domain.result import UNSET, Unset

T = TypeVar("T")


def is_not_null(value: T | None) -> TypeGuard[T]:
    return value is not None


def is_not_undefined(value: T | Unset) -> TypeGuard[T]:
    return value is not UNSET


def is_not_null_or_undefined(value: T | Unset | None) -> TypeGuard[T]:
    return value is not None and value is not UNSET


def is_empty(value: str) -> bool:
    return len(value) == 0


def is_not_empty(value: str) -> bool:
    return len(value) > 0
