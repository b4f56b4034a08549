"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, userctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from userctl.domain.users import MAX_NAME_LENGTH


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    max_name_length: int = Field(default=MAX_NAME_LENGTH, ge=1)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
