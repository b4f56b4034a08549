"""Tests for BaseService event dispatch."""

from __future__ import annotations

import pluggy

from userctl.plugins.manager import PluginManager
from userctl.services.base import BaseService
from userctl.services.users import UserService

hookimpl = pluggy.HookimplMarker("userctl")


class _Recorder:
    def __init__(self) -> None:
        self.deleted: list[int] = []

    @hookimpl
    def post_user_delete(self, user_id: int) -> None:
        self.deleted.append(user_id)


class TestBaseService:
    def test_dispatch_without_plugins_is_noop(self) -> None:
        BaseService()._dispatch_event("post_user_delete", user_id=1)

    def test_dispatch_reaches_plugin(self) -> None:
        pm = PluginManager()
        recorder = _Recorder()
        pm.register_plugin(recorder)
        BaseService(pm)._dispatch_event("post_user_delete", user_id=5)
        assert recorder.deleted == [5]

    def test_unknown_hook_is_logged_not_raised(self) -> None:
        BaseService(PluginManager())._dispatch_event("post_nothing", user_id=1)

    def test_user_service_is_a_base_service(self) -> None:
        assert issubclass(UserService, BaseService)
