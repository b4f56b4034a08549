"""Extension layer — lifecycle hooks via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are logged, never returned as errors.
"""

from userctl.plugins.manager import PluginManager

__all__ = ["PluginManager"]
