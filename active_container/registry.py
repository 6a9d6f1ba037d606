"""Name-based class resolution for wrappers and models."""

import importlib
import sys
from typing import Iterable, Optional

from active_container.config import ContainerConfig
from active_container.exceptions import ResolutionError
from active_container.logging import log


class ClassRegistry:
    """Maps class names to classes.

    Wrapper and model classes register themselves here when they are
    created. Names that were never registered are looked up as attributes
    of the configured `modules`, and finally as dotted import paths.
    """

    suffix: str
    modules: list[str]

    _classes: dict[str, type]

    def __init__(self, suffix: str = "Wrapper", modules: Iterable[str] = ()):
        self.suffix = suffix
        self.modules = list(modules)
        self._classes = {}

    def configure(self, config: ContainerConfig) -> None:
        """Applies a resolution configuration."""
        self.suffix = config.suffix
        self.modules = list(config.modules)
        log.debug(
            "Registry configured with suffix %r and modules %s.",
            self.suffix,
            self.modules,
        )

    def register(self, cls: type, name: Optional[str] = None) -> type:
        """Registers `cls` under `name` (default: the class name)."""
        name = cls.__name__ if name is None else name
        previous = self._classes.get(name)
        if previous is not None and previous is not cls:
            log.info(
                "Replacing registered class %s (%s.%s) with %s.%s.",
                name,
                previous.__module__,
                previous.__qualname__,
                cls.__module__,
                cls.__qualname__,
            )
        self._classes[name] = cls
        return cls

    def unregister(self, name: str) -> None:
        self._classes.pop(name, None)

    def lookup(self, name: str, module: Optional[str] = None) -> type:
        """Resolves a class by name.

        Registered classes win; then `module` (typically the module of the
        class asking) is searched, then the configured modules, and finally
        `name` is imported as a dotted path.

        Raises:
            ResolutionError: If no class by that name can be found, or a
                module to search cannot be imported.
        """
        try:
            return self._classes[name]
        except KeyError:
            pass

        hinted = sys.modules.get(module) if module is not None else None
        cls = getattr(hinted, name, None)
        if isinstance(cls, type):
            log.debug("Resolved %s from module %s.", name, module)
            return cls

        for module_name in self.modules:
            cls = getattr(self._import(module_name, name), name, None)
            if isinstance(cls, type):
                log.debug("Resolved %s from module %s.", name, module_name)
                return cls

        if "." in name:
            module_name, _, attr = name.rpartition(".")
            cls = getattr(self._import(module_name, name), attr, None)
            if isinstance(cls, type):
                return cls

        raise ResolutionError(f"uninitialized constant {name}")

    @staticmethod
    def _import(module_name: str, name: str):
        module = sys.modules.get(module_name)
        if module is not None:
            return module
        try:
            return importlib.import_module(module_name)
        except ImportError as ex:
            raise ResolutionError(
                f"uninitialized constant {name} (cannot import {module_name})"
            ) from ex

    def wrapper_name(self, model_name: str) -> str:
        """Gets the wrapper class name for a model class name."""
        return f"{model_name}{self.suffix}"

    def object_name(self, wrapper_name: str) -> str:
        """Gets the model class name for a wrapper class name."""
        return wrapper_name.replace(self.suffix, "")

    def names(self) -> list[str]:
        return sorted(self._classes)

    def snapshot(self) -> tuple:
        """Captures the registry state (see `restore`)."""
        return dict(self._classes), self.suffix, list(self.modules)

    def restore(self, state: tuple) -> None:
        classes, self.suffix, modules = state
        self._classes = dict(classes)
        self.modules = list(modules)

    def __contains__(self, name: str) -> bool:
        return name in self._classes

    def __repr__(self) -> str:
        return f"ClassRegistry(suffix={self.suffix!r}, classes={len(self._classes)})"


registry = ClassRegistry()
