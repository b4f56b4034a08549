"""Apply a sequence of raw (JSON-decoded) operations to one UserService.

Each item is a mapping with an ``"op"`` key (``create``, ``get``,
``list``, ``update`` or ``delete``) plus that operation's fields. Items
are untyped input, so every field goes through an explicit check or a
conversion before it reaches the store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from userctl.domain.combinators import flat_map
from userctl.domain.conversions import to_string, type_name
from userctl.domain.result import UNSET, Result, err, ok
from userctl.domain.users import UserCreateRequest, UserUpdateRequest
from userctl.services.users import UserService

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("name", "email")


@dataclass(frozen=True)
class BatchOutcome:
    """Result of one batch item."""

    index: int
    op: str
    result: Result[Any]


def run_batch(
    service: UserService,
    items: Iterable[object],
    *,
    keep_going: bool = False,
) -> list[BatchOutcome]:
    """Apply *items* in order. Stops after the first failure unless *keep_going*."""
    outcomes: list[BatchOutcome] = []
    for index, item in enumerate(items):
        op, result = apply_operation(service, item)
        outcomes.append(BatchOutcome(index=index, op=op, result=result))
        if not result.ok:
            logger.debug("Batch item %d (%s) failed: %s", index, op, result.error)
            if not keep_going:
                break
    return outcomes


def apply_operation(service: UserService, item: object) -> tuple[str, Result[Any]]:
    """Dispatch one raw item. Returns ``(op name, Result)``."""
    if not isinstance(item, Mapping):
        return "invalid", err(f"Batch item must be an object, got {type_name(item)}")

    op = item.get("op")
    if not isinstance(op, str) or op not in _HANDLERS:
        return str(op), err(f"Unknown operation: {op!r}")
    return op, _HANDLERS[op](service, item)


def _string_field(item: Mapping[str, Any], key: str) -> Result[str]:
    value = item.get(key, UNSET)
    if isinstance(value, str):
        return ok(value)
    return err(f"Field '{key}' must be a string, got {type_name(value)}")


def _id_field(item: Mapping[str, Any]) -> Result[str]:
    return to_string(item.get("id", UNSET))


def _create(service: UserService, item: Mapping[str, Any]) -> Result[Any]:
    return flat_map(
        _string_field(item, "name"),
        lambda name: flat_map(
            _string_field(item, "email"),
            lambda email: service.create(UserCreateRequest(name=name, email=email)),
        ),
    )


def _get(service: UserService, item: Mapping[str, Any]) -> Result[Any]:
    return flat_map(_id_field(item), service.get_by_id)


def _list(service: UserService, item: Mapping[str, Any]) -> Result[Any]:
    return service.list_users()


def _update(service: UserService, item: Mapping[str, Any]) -> Result[Any]:
    fields: dict[str, str] = {}
    for key in _UPDATABLE_FIELDS:
        if key not in item:
            continue
        checked = _string_field(item, key)
        if not checked.ok:
            return checked
        fields[key] = item[key]
    updates = UserUpdateRequest(**fields)
    return flat_map(_id_field(item), lambda user_id: service.update(user_id, updates))


def _delete(service: UserService, item: Mapping[str, Any]) -> Result[Any]:
    return flat_map(_id_field(item), service.delete)


_HANDLERS: dict[str, Callable[[UserService, Mapping[str, Any]], Result[Any]]] = {
    "create": _create,
    "get": _get,
    "list": _list,
    "update": _update,
    "delete": _delete,
}
