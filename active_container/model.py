"""Mixin for model classes that can produce their own wrapper."""

from typing import Optional

from active_container.registry import registry
from active_container.wrapper import Wrapper


class ModelMethods:
    """Lets a model record wrap itself.

    The wrapper class is looked up by name, so a `FooBar` model is wrapped
    by `FooBarWrapper`. Model classes using the mixin are registered so
    their wrappers can resolve them by name in turn.
    """

    wrapped = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        registry.register(cls)

    def wrap(self) -> Optional[Wrapper]:
        return Wrapper.wrap(self)
