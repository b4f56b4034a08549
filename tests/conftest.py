"""Shared pytest fixtures and test helpers for userctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from userctl.domain.users import User, UserCreateRequest
from userctl.plugins.builtins.audit import AuditPlugin
from userctl.plugins.manager import PluginManager
from userctl.services.users import UserService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> UserService:
    """A fresh, empty store without plugins."""
    return UserService()


@pytest.fixture
def audit() -> AuditPlugin:
    return AuditPlugin()


@pytest.fixture
def audited_service(audit: AuditPlugin) -> UserService:
    """A fresh store whose lifecycle events are recorded by ``audit``."""
    pm = PluginManager()
    pm.register_plugin(audit, name="audit")
    return UserService(plugins=pm)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no stray userctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.delenv("USERCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def create_user(service: UserService, name: str, email: str) -> User:
    """Create a user via UserService, asserting success."""
    result = service.create(UserCreateRequest(name=name, email=email))
    assert result.ok, result.error
    return result.data
