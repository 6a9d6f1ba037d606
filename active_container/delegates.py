"""Descriptors that forward attribute access from a wrapper to its record."""

import copy
import inspect
from functools import wraps
from typing import Any, Callable, Optional

import inflection


def is_plural(name: str) -> bool:
    """Determines whether an attribute name is an English plural.

    Only the last underscore-separated word is inspected, so `line_items`
    is plural and `primary_owner` is singular.
    """
    word = name.strip("_").rsplit("_", 1)[-1]
    if not word:
        return False
    word = word.lower()
    return inflection.singularize(word) != word


class Delegate:
    """Forwards reads (and optionally writes) of one attribute to the record.

    Used like `property`; a custom setter replaces the forwarding one:

        class AccountWrapper(Wrapper):
            email = Delegate()

            @email.setter
            def email(self, value):
                self.record.email = value.lower()
    """

    name: Optional[str]
    writable: bool
    fset: Optional[Callable[[Any, Any], None]]

    def __init__(
        self,
        name: Optional[str] = None,
        writable: bool = True,
        fset: Optional[Callable[[Any, Any], None]] = None,
    ):
        self.name = name
        self.writable = writable
        self.fset = fset

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name is None:
            self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return self.get(instance)

    def __set__(self, instance: Any, value: Any) -> None:
        if self.fset is not None:
            self.fset(instance, value)
        elif not self.writable:
            raise AttributeError(f"Delegated attribute '{self.name}' is read-only.")
        else:
            setattr(instance.record, self.name, self.prepare(value))

    def get(self, instance: Any) -> Any:
        return getattr(instance.record, self.name)

    def prepare(self, value: Any) -> Any:
        """Converts a value before it is assigned to the record."""
        return value

    def setter(self, fset: Callable[[Any, Any], None]) -> "Delegate":
        delegate = copy.copy(self)
        delegate.fset = fset
        return delegate

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class WrapDelegate(Delegate):
    """Forwards reads to the record and wraps whatever comes back.

    Singular names are wrapped as one record and plural names as a
    collection, unless `many` says otherwise. Wrappers assigned through the
    delegate are unwrapped before they reach the record.
    """

    many: Optional[bool]

    def __init__(
        self,
        name: Optional[str] = None,
        many: Optional[bool] = None,
        fset: Optional[Callable[[Any, Any], None]] = None,
    ):
        super().__init__(name=name, writable=True, fset=fset)
        self.many = many

    @property
    def plural(self) -> bool:
        if self.many is not None:
            return self.many
        return is_plural(self.name)

    def get(self, instance: Any) -> Any:
        value = super().get(instance)
        if inspect.ismethod(value):

            @wraps(value)
            def wrapped_call(*args, **kwargs):
                return self.convert(value(*args, **kwargs))

            return wrapped_call
        return self.convert(value)

    def convert(self, value: Any) -> Any:
        # Resolved by name at call time; wrapper classes for related records
        # are often defined after the class holding the delegate.
        from active_container.wrapper import Wrapper

        if self.plural:
            return Wrapper.wrap_collection(value)
        return Wrapper.wrap(value)

    def prepare(self, value: Any) -> Any:
        from active_container.helpers import unwrap

        return unwrap(value)
