"""Base wrapper for decorating model records."""

from functools import wraps
from typing import Any, Callable, Iterable, Optional

import pydantic

from active_container.delegates import Delegate, WrapDelegate
from active_container.exceptions import RecordError, ResolutionError
from active_container.logging import log
from active_container.registry import registry


def err(message: str) -> Callable:
    """Decorator for translating record construction errors."""

    def err_decorator(func: Callable) -> Callable:
        @wraps(func)
        def err_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except pydantic.ValidationError as ex:
                raise RecordError(f"{message}: invalid attributes.") from ex
            except TypeError as ex:
                raise RecordError(f"{message}: {ex}") from ex

        return err_wrapper

    return err_decorator


class Wrapper:
    """Decorates a model record with presentation-oriented behavior.

    Subclasses are named after the model they wrap (`FooBar` is wrapped by
    `FooBarWrapper`) and declare which record attributes they forward:

        class FooBarWrapper(Wrapper):
            delegates = ("name", "email")
            wrap_delegates = ("owner", "line_items")

            @property
            def display_name(self):
                return self.name.title()

    `owner` is returned as a wrapper for whatever record the model returns,
    `line_items` as a list of wrappers.
    """

    wrapped = True

    delegates: tuple[str, ...] = ()
    wrap_delegates: tuple[str, ...] = ()

    id = Delegate(writable=False)
    save = Delegate(writable=False)
    reload = Delegate(writable=False)
    errors = Delegate(writable=False)

    _record: Any

    def __init_subclass__(cls, model: Optional[type] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if model is not None:
            cls._object_class = model
        registry.register(cls)

        if "delegates" in cls.__dict__:
            cls.delegate(*cls.delegates)
        if "wrap_delegates" in cls.__dict__:
            cls.wrap_delegate(*cls.wrap_delegates)

    def __init__(self, record: Any):
        """Wraps `record`, building it first if it is a dict of attributes.

        Raises:
            RecordError: If `record` is a dict that cannot be turned into
                an instance of the wrapper's object class.
        """
        if isinstance(record, dict):
            record = type(self).build_record(record)
        self._record = record

    @property
    def record(self) -> Any:
        """The wrapped record."""
        return self._record

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._record!r}>"

    @classmethod
    @err("Failed to build record")
    def build_record(cls, attrs: dict) -> Any:
        """Builds an instance of the object class from attributes."""
        object_class = cls.object_class()
        if object_class is None:
            raise RecordError(
                f"{cls.__name__} has no object class to build a record from."
            )
        if issubclass(object_class, pydantic.BaseModel):
            return object_class.model_validate(attrs)
        return object_class(**attrs)

    @classmethod
    def wrap(cls, record: Any) -> Optional["Wrapper"]:
        """Wraps a record.

        On `Wrapper` itself, the wrapper class is resolved from the record's
        class name; on a subclass, the subclass is used directly.
        `None` and `False` are not wrapped.

        Raises:
            ResolutionError: If no wrapper class exists for the record.
        """
        if record is None or record is False:
            return None
        if isinstance(record, Wrapper):
            return record

        if cls is Wrapper:
            wrapper_name = registry.wrapper_name(type(record).__name__)
            wrapper_class = registry.lookup(
                wrapper_name, module=type(record).__module__
            )
            if not issubclass(wrapper_class, Wrapper):
                raise ResolutionError(f"{wrapper_name} is not a wrapper class")
            return wrapper_class(record)
        return cls(record)

    @classmethod
    def wrap_collection(cls, records: Optional[Iterable[Any]]) -> list["Wrapper"]:
        """Wraps each record in `records` (`None` is an empty collection)."""
        if records is None or records is False:
            return []
        return [cls.wrap(record) for record in records]

    @classmethod
    def object_class(cls) -> Optional[type]:
        """Gets the model class wrapped by this class.

        Resolved from the class name on first use and cached per class.

        Raises:
            ResolutionError: If no class matches the wrapper's name.
        """
        if cls is Wrapper:
            return None
        if "_object_class" in cls.__dict__:
            return cls.__dict__["_object_class"]

        object_class = registry.lookup(
            registry.object_name(cls.__name__), module=cls.__module__
        )
        log.debug("Resolved object class of %s: %s.", cls.__name__, object_class)
        cls._object_class = object_class
        return object_class

    @classmethod
    def delegate(cls, *names: str) -> None:
        """Forwards reads and writes of each attribute to the record.

        A setter already defined for one of the names (on this class or a
        base) takes precedence over forwarding.
        """
        for name in names:
            existing = getattr(cls, name, None)
            fset = existing.fset if isinstance(existing, (property, Delegate)) else None
            setattr(cls, name, Delegate(name, fset=fset))

    @classmethod
    def wrap_delegate(cls, *names: str, many: Optional[bool] = None) -> None:
        """Forwards reads of each attribute to the record and wraps the result."""
        for name in names:
            setattr(cls, name, WrapDelegate(name, many=many))

    @classmethod
    def delegated(cls) -> dict[str, Delegate]:
        """Gets all delegated attributes of this class, by name."""
        found = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Delegate):
                    found[name] = attr
                elif name in found:
                    del found[name]
        return found
