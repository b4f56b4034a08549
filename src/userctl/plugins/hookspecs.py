"""Pluggy hook specifications for userctl lifecycle events.

Three events fire after a successful store mutation. Hook results are
ignored; a failing hook never changes the outcome of the operation.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("userctl")


class UserctlHookSpec:
    """Hook specifications for the userctl plugin system."""

    @hookspec
    def post_user_create(self, user_id: int, name: str, email: str) -> None:
        """Called after a user is created."""

    @hookspec
    def post_user_update(self, user_id: int, fields_changed: list[str]) -> None:
        """Called after a user is updated."""

    @hookspec
    def post_user_delete(self, user_id: int) -> None:
        """Called after a user is deleted."""
