"""Environment configuration and cache key resolution.

Settings are read from the process environment via ``pydantic-settings``
and passed explicitly to the resolvers below; nothing here caches a global
settings instance.
"""

from __future__ import annotations

import logging

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from boringcache_action.exceptions import MissingInputError
from boringcache_action.models.entry import CacheConfig
from boringcache_action.platform import platform_suffix

__all__ = [
    "DEFAULT_WORKSPACE",
    "ActionSettings",
    "resolve_config",
    "resolve_workspace",
    "select_workspace",
]

logger = logging.getLogger(__name__)

DEFAULT_WORKSPACE = "default/default"


class ActionSettings(BaseSettings):
    """Environment variables consumed by the action."""

    boringcache_workspace: str = Field("", description="Explicit workspace override")
    boringcache_default_workspace: str = Field("", description="Fallback workspace")
    github_repository: str = Field("", description="owner/repo of the running workflow")
    boringcache_api_token: SecretStr | None = Field(None, description="CLI API token")
    boringcache_cli: str = Field("boringcache", description="CLI executable name or path")
    boringcache_cli_version: str = Field("v1.0.0", description="Default CLI version")

    model_config = SettingsConfigDict(extra="ignore")

    @property
    def api_token(self) -> str:
        """The API token in clear text, or ``""`` when unset."""
        if self.boringcache_api_token is None:
            return ""
        return self.boringcache_api_token.get_secret_value()


def resolve_workspace(settings: ActionSettings) -> str:
    """Pick the workspace from the environment.

    Priority: ``BORINGCACHE_WORKSPACE``, ``BORINGCACHE_DEFAULT_WORKSPACE``,
    ``GITHUB_REPOSITORY`` (first two segments), then ``default/default``.
    A value without ``/`` is placed in the ``default`` namespace.
    """
    repository = "/".join(settings.github_repository.split("/")[:2])
    workspace = (
        settings.boringcache_workspace
        or settings.boringcache_default_workspace
        or repository
        or DEFAULT_WORKSPACE
    )
    if "/" not in workspace:
        workspace = f"default/{workspace}"
    return workspace


def select_workspace(workspace_input: str, settings: ActionSettings) -> str:
    """An explicit ``workspace`` input wins over anything in the environment."""
    if workspace_input:
        return workspace_input
    workspace = resolve_workspace(settings)
    logger.debug("Using workspace %s from environment", workspace)
    return workspace


def resolve_config(
    base_key: str,
    cross_os_archive: bool,
    no_platform: bool = False,
    *,
    workspace: str = "",
    settings: ActionSettings | None = None,
) -> CacheConfig:
    """Resolve the workspace and decorate *base_key* with the platform suffix.

    An explicit *workspace* wins over the environment chain.

    Raises:
        MissingInputError: If the resolved values do not form a valid
            ``CacheConfig``, such as a workspace without ``/``.
    """
    settings = settings if settings is not None else ActionSettings()
    suffix = platform_suffix(no_platform, cross_os_archive)
    try:
        return CacheConfig(
            workspace=select_workspace(workspace, settings),
            full_key=base_key + suffix,
            platform_suffix=suffix,
        )
    except ValidationError as exc:
        msg = f"Invalid cache configuration: {exc.errors()[0]['msg']}"
        raise MissingInputError(msg) from exc
