"""BaseService — shared foundation for userctl services.

A service optionally receives a :class:`PluginManager` at construction
time and uses it to announce lifecycle events after successful mutations.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from userctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class UserService(BaseService):
            def create(self, request: UserCreateRequest) -> Result[User]:
                ...
                self._dispatch_event("post_user_create", user_id=user.id, ...)
    """

    def __init__(self, plugins: PluginManager | None = None) -> None:
        self._plugins = plugins

    def _dispatch_event(self, hook_name: str, **payload: Any) -> None:
        """Dispatch a lifecycle event. No-op without a plugin manager.

        INVARIANT: Plugin failures are logged, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.warning("Event dispatch failed for %s", hook_name, exc_info=True)
