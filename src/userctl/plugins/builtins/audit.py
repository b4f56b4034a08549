"""Built-in audit plugin.

Records every lifecycle event in memory and logs it through structlog,
giving an ordered trail of store mutations for the current process.
"""

from __future__ import annotations

from typing import Any

import pluggy
import structlog

hookimpl = pluggy.HookimplMarker("userctl")


class AuditPlugin:
    """Keeps an in-memory trail of user lifecycle events."""

    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []
        self._log = structlog.get_logger("userctl.audit")

    def _record(self, event: str, **fields: Any) -> None:
        self.events.append({"event": event, **fields})
        self._log.info(event, **fields)

    @hookimpl
    def post_user_create(self, user_id: int, name: str, email: str) -> None:
        self._record("user.created", user_id=user_id, name=name, email=email)

    @hookimpl
    def post_user_update(self, user_id: int, fields_changed: list[str]) -> None:
        self._record("user.updated", user_id=user_id, fields_changed=list(fields_changed))

    @hookimpl
    def post_user_delete(self, user_id: int) -> None:
        self._record("user.deleted", user_id=user_id)
