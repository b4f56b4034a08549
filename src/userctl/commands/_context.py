"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the lazily built :class:`UserService` and the
routing of results to stdout/stderr with exit codes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from userctl.config.logging import configure_logging
from userctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from userctl.config.settings import UserctlSettings
    from userctl.domain.result import Result
    from userctl.plugins.manager import PluginManager
    from userctl.services.users import UserService

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is created on first access, so ``--help`` and ``--version``
    never load plugins.
    """

    def __init__(self, settings: UserctlSettings) -> None:
        self.settings = settings
        self._service: UserService | None = None
        self._plugins: PluginManager | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )

    @property
    def plugins(self) -> PluginManager | None:
        """Plugin manager, or None when ``[plugins] enabled = false``."""
        if self._plugins is None and self.settings.plugins.enabled:
            from userctl.plugins.builtins.audit import AuditPlugin
            from userctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
            self._plugins.register_plugin(AuditPlugin(), name="audit")
        return self._plugins

    @property
    def service(self) -> UserService:
        """The in-memory store for this invocation (created lazily)."""
        if self._service is None:
            from userctl.services.users import UserService

            self._service = UserService(
                max_name_length=self.settings.store.max_name_length,
                plugins=self.plugins,
            )
            logger.debug("User store initialized")
        return self._service

    def render(self, op: str, result: Result[Any]) -> str:
        return format_result(op, result, settings=self.output_settings)

    def emit(self, op: str, result: Result[Any]) -> None:
        """Format and output a Result with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = self.render(op, result)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
