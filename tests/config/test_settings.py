"""Tests for UserctlSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from userctl.config.settings import UserctlSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("USERCTL_CONFIG", raising=False)
    monkeypatch.delenv("USERCTL_STORE__MAX_NAME_LENGTH", raising=False)
    monkeypatch.delenv("USERCTL_PLUGINS__ENABLED", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = UserctlSettings.from_cli(search_root=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.store.max_name_length == 50
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = UserctlSettings.from_cli(search_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "userctl.toml"
        toml.write_text("[store]\nmax_name_length = 20\n[plugins]\nenabled = false\n")
        settings = UserctlSettings.from_cli(search_root=tmp_path)
        assert settings.config_path == toml
        assert settings.store.max_name_length == 20
        assert settings.plugins.enabled is False

    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "userctl.toml").write_text("[plugins]\nenabled = false\n")
        settings = UserctlSettings.from_cli(search_root=tmp_path)
        assert settings.store.max_name_length == 50

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[store]\nmax_name_length = 10\n")
        settings = UserctlSettings.from_cli(config_path=str(custom), search_root=tmp_path)
        assert settings.store.max_name_length == 10
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = UserctlSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.store.max_name_length == 50

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "userctl.toml").write_text("[store\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            UserctlSettings.from_cli(search_root=tmp_path)

    def test_rejects_non_positive_limit(self, tmp_path: Path) -> None:
        (tmp_path / "userctl.toml").write_text("[store]\nmax_name_length = 0\n")
        with pytest.raises(ValidationError):
            UserctlSettings.from_cli(search_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "userctl.toml").write_text("[store]\nmax_name_length = 20\n")
        monkeypatch.setenv("USERCTL_STORE__MAX_NAME_LENGTH", "30")
        settings = UserctlSettings.from_cli(search_root=tmp_path)
        assert settings.store.max_name_length == 30

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USERCTL_QUIET", "false")
        settings = UserctlSettings.from_cli(search_root=tmp_path, quiet=True)
        assert settings.quiet is True
