"""UserService — in-memory CRUD store built on the Result algebra.

State per id: absent → present → absent (hard delete). Ids come from a
post-incremented counter starting at 1 and are never reused.

INVARIANT: every public operation returns a Result and leaves the store
untouched when it fails. Validation and conflict checks run before any
write.

INVARIANT: no two stored users share an email (exact, case-sensitive).

The mapping and the counter are guarded by one re-entrant lock, held for
the whole check-then-act sequence of each operation.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from userctl.domain.combinators import flat_map, is_error, is_success
from userctl.domain.conversions import to_number
from userctl.domain.result import Result, err, ok
from userctl.domain.users import (
    MAX_NAME_LENGTH,
    User,
    UserCreateRequest,
    UserUpdateRequest,
    validate_email,
    validate_name,
)
from userctl.domain.validators import is_not_undefined
from userctl.services.base import BaseService

if TYPE_CHECKING:
    from userctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Creates, reads, updates, lists, and deletes users held in memory."""

    def __init__(
        self,
        *,
        max_name_length: int = MAX_NAME_LENGTH,
        plugins: PluginManager | None = None,
    ) -> None:
        super().__init__(plugins)
        self._users: dict[int, User] = {}
        self._next_id = 1
        self._max_name_length = max_name_length
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, request: UserCreateRequest) -> Result[User]:
        """Validate *request*, reject duplicate emails, and store a new user."""
        checked = flat_map(
            validate_name(request.name, max_length=self._max_name_length),
            lambda _: validate_email(request.email),
        )
        if is_error(checked):
            return err(checked.error or "User validation failed")

        with self._lock:
            if is_success(self._find_by_email(request.email)):
                return err("User with this email already exists")

            user = User(id=self._next_id, name=request.name, email=request.email)
            self._next_id += 1
            self._users[user.id] = user

        logger.debug("Created user %d", user.id)
        self._dispatch_event(
            "post_user_create", user_id=user.id, name=user.name, email=user.email
        )
        return ok(user)

    def get_by_id(self, user_id: str) -> Result[User]:
        """Look up a user by the textual form of its id."""
        resolved = self._resolve_id(user_id)
        if not is_success(resolved):
            return err(resolved.error or "Invalid ID")

        numeric_id = resolved.data
        with self._lock:
            user = self._users.get(numeric_id)
        if user is None:
            return err(f"User not found with ID: {numeric_id}")
        return ok(user)

    def list_users(self) -> Result[list[User]]:
        """All stored users in insertion order. An empty store is not an error."""
        with self._lock:
            return ok(list(self._users.values()))

    def update(self, user_id: str, updates: UserUpdateRequest) -> Result[User]:
        """Apply the fields supplied in *updates* to an existing user.

        Fields left unset keep their stored values. A supplied field is
        always validated, so an empty string is rejected rather than ignored.
        """
        with self._lock:
            found = self.get_by_id(user_id)
            if not is_success(found):
                return err(found.error or "User not found")
            existing = found.data

            name = existing.name
            if is_not_undefined(updates.name):
                checked = validate_name(updates.name, max_length=self._max_name_length)
                if is_error(checked):
                    return err(checked.error or "Name validation failed")
                name = updates.name

            email = existing.email
            if is_not_undefined(updates.email):
                checked = validate_email(updates.email)
                if is_error(checked):
                    return err(checked.error or "Email validation failed")
                holder = self._find_by_email(updates.email)
                if is_success(holder) and holder.data.id != existing.id:
                    return err("Email is already in use by another user")
                email = updates.email

            updated = User(id=existing.id, name=name, email=email)
            self._users[updated.id] = updated

        fields_changed = updates.provided_fields()
        logger.debug("Updated user %d (%s)", updated.id, ", ".join(fields_changed) or "no fields")
        self._dispatch_event(
            "post_user_update", user_id=updated.id, fields_changed=fields_changed
        )
        return ok(updated)

    def delete(self, user_id: str) -> Result[bool]:
        """Remove a user. Its id is never issued again."""
        resolved = self._resolve_id(user_id)
        if not is_success(resolved):
            return err(resolved.error or "Invalid ID")

        numeric_id = resolved.data
        with self._lock:
            removed = self._users.pop(numeric_id, None)
        if removed is None:
            return err(f"User not found with ID: {numeric_id}")

        logger.debug("Deleted user %d", removed.id)
        self._dispatch_event("post_user_delete", user_id=removed.id)
        return ok(True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_id(user_id: str) -> Result[int | float]:
        converted = to_number(user_id)
        if is_error(converted):
            return err(f"Invalid ID format: {converted.error or 'unknown error'}")
        return converted

    def _find_by_email(self, email: str) -> Result[User]:
        for user in self._users.values():
            if user.email == email:
                return ok(user)
        return err("User not found")
