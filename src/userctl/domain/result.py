"""Result — the tagged success/error union returned by every core operation.

A Result is either *Ok* (``ok=True``, carrying ``data``) or *Err*
(``ok=False``, carrying a human-readable ``error``). Recoverable failures
travel through this type only; nothing in the core raises for them.

INVARIANT: exactly one arm is populated. An Ok result never carries an
error message and an Err result never carries a payload.

``None`` is a legitimate payload, so an *absent* payload is marked with
the :data:`UNSET` sentinel instead.
"""

from __future__ import annotations

from typing import Any, Final, Generic, Self, TypeVar

from pydantic import BaseModel, field_serializer, model_validator

T = TypeVar("T")


class Unset:
    """Marker type for a value that was never provided (distinct from ``None``)."""

    _instance: Unset | None = None

    def __new__(cls) -> Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Unset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Unset:
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final = Unset()


class Result(BaseModel, Generic[T]):
    """Outcome of a core operation.

    Attributes:
        ok: Whether the operation succeeded.
        data: Payload on success (:data:`UNSET` when absent).
        error: Failure message when ``ok`` is False.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    data: T | Unset = UNSET
    error: str | None = None

    @model_validator(mode="after")
    def _check_single_arm(self) -> Self:
        if self.ok and self.error is not None:
            msg = "An Ok result cannot carry an error message"
            raise ValueError(msg)
        if not self.ok and self.data is not UNSET:
            msg = "An Err result cannot carry a payload"
            raise ValueError(msg)
        return self

    @field_serializer("data")
    def _serialize_data(self, data: Any) -> Any:
        return None if data is UNSET else data


def ok(value: T) -> Result[T]:
    """Wrap *value* in a successful Result."""
    return Result(ok=True, data=value)


def err(message: str) -> Result[Any]:
    """Wrap *message* in a failed Result. The payload type is never materialized."""
    return Result(ok=False, error=message)
