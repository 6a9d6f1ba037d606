"""Name-based wrappers for model records."""

import os

from active_container.config import ContainerConfig, configure, load_config
from active_container.delegates import Delegate, WrapDelegate
from active_container.exceptions import (
    ActiveContainerError,
    ConfigError,
    RecordError,
    ResolutionError,
)
from active_container.helpers import unwrap, wrap, wraps_result
from active_container.model import ModelMethods
from active_container.registry import ClassRegistry, registry
from active_container.wrapper import Wrapper

__all__ = [
    "ActiveContainerError",
    "ClassRegistry",
    "ConfigError",
    "ContainerConfig",
    "Delegate",
    "ModelMethods",
    "RecordError",
    "ResolutionError",
    "WrapDelegate",
    "Wrapper",
    "configure",
    "load_config",
    "registry",
    "unwrap",
    "wrap",
    "wraps_result",
]

if os.getenv("ACTIVE_CONTAINER_CONFIG"):
    configure()  # pragma: no cover
