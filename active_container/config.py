"""Configuration loading for active-container.

Configuration is optional. When `ACTIVE_CONTAINER_CONFIG` (or an explicit
path) points at a TOML file, the profile named by `ACTIVE_CONTAINER_PROFILE`
(default: `default`) is read from it:

    [default]
    suffix = "Wrapper"
    modules = ["myapp.models", "myapp.wrappers"]
"""

import os
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import pydantic
import tomlkit
from pydantic import BaseModel, Field

from active_container.exceptions import ConfigError
from active_container.logging import log

if TYPE_CHECKING:
    from active_container.registry import ClassRegistry

DEFAULT_PROFILE = "default"


class ContainerConfig(BaseModel):
    """Settings for class-name resolution."""

    model_config = pydantic.ConfigDict(extra="forbid", frozen=True)

    suffix: str = Field(default="Wrapper", min_length=1)
    modules: list[str] = Field(default_factory=list)


def load_config(
    path: Optional[Union[str, PathLike]] = None, profile: Optional[str] = None
) -> ContainerConfig:
    """Loads a resolution configuration.

    If neither `path` nor the `ACTIVE_CONTAINER_CONFIG` environment variable
    is set, the default configuration is returned.

    Raises:
        ConfigError:
            If the configuration file cannot be read or parsed, the profile
            is missing, or the profile contains invalid fields.
    """
    if path is None:
        path = os.getenv("ACTIVE_CONTAINER_CONFIG")
    if path is None:
        return ContainerConfig()
    if profile is None:
        profile = os.getenv("ACTIVE_CONTAINER_PROFILE", DEFAULT_PROFILE)

    config_path = Path(path)
    try:
        with open(config_path, encoding="utf-8") as config_fp:
            config_raw = config_fp.read()
    except IOError as ex:
        raise ConfigError(
            f"Failed to read active-container configuration at {config_path.resolve()}."
        ) from ex

    try:
        configs = tomlkit.parse(config_raw)
    except tomlkit.exceptions.TOMLKitError as ex:
        raise ConfigError(
            "Failed to parse active-container configuration at "
            f"{config_path.resolve()}."
        ) from ex

    try:
        raw_profile = configs[profile]
    except KeyError:
        raise ConfigError(
            f'Profile "{profile}" not found in configuration '
            f"at {config_path.resolve()}."
        )

    try:
        config = ContainerConfig.model_validate(raw_profile.unwrap())
    except pydantic.ValidationError as ex:
        raise ConfigError(
            f'Profile "{profile}" in configuration at {config_path.resolve()} '
            "is invalid."
        ) from ex

    log.debug("Loaded profile %s from %s.", profile, config_path)
    return config


def configure(
    path: Optional[Union[str, PathLike]] = None,
    profile: Optional[str] = None,
    registry: Optional["ClassRegistry"] = None,
) -> ContainerConfig:
    """Loads a configuration and applies it to a registry.

    Args:
        path: TOML configuration file (falls back to `ACTIVE_CONTAINER_CONFIG`).
        profile: Profile within the file (falls back to
            `ACTIVE_CONTAINER_PROFILE`, then `default`).
        registry: Registry to configure; the shared default registry if omitted.

    Returns:
        The applied configuration.
    """
    if registry is None:
        from active_container.registry import registry as default_registry

        registry = default_registry

    config = load_config(path=path, profile=profile)
    registry.configure(config)
    return config
