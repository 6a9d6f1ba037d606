"""Tests for name-based class resolution."""

from collections import OrderedDict
from types import SimpleNamespace

import pytest

from active_container.config import ContainerConfig
from active_container.exceptions import ResolutionError
from active_container.registry import ClassRegistry


@pytest.fixture
def reg():
    return ClassRegistry()


class Widget:
    """Dummy class to register."""


def test_registry_register_lookup(reg):
    reg.register(Widget)
    assert reg.lookup("Widget") is Widget
    assert "Widget" in reg


def test_registry_register_alias(reg):
    reg.register(Widget, "Gizmo")
    assert reg.lookup("Gizmo") is Widget
    assert "Widget" not in reg


def test_registry_register_replaces(reg):
    class Other:
        pass

    reg.register(Widget, "Thing")
    reg.register(Other, "Thing")
    assert reg.lookup("Thing") is Other


def test_registry_unregister(reg):
    reg.register(Widget)
    reg.unregister("Widget")
    reg.unregister("Widget")
    assert "Widget" not in reg


def test_registry_lookup__missing(reg):
    with pytest.raises(ResolutionError, match="uninitialized constant FooBarWrapper"):
        reg.lookup("FooBarWrapper")


def test_registry_lookup__missing_is_name_error(reg):
    with pytest.raises(NameError):
        reg.lookup("FooBarWrapper")


def test_registry_lookup__module_search():
    reg = ClassRegistry(modules=["types"])
    assert reg.lookup("SimpleNamespace") is SimpleNamespace


def test_registry_lookup__module_search_ignores_non_classes():
    reg = ClassRegistry(modules=["types"])
    with pytest.raises(ResolutionError):
        reg.lookup("new_class")


def test_registry_lookup__registered_before_modules():
    reg = ClassRegistry(modules=["types"])
    reg.register(Widget, "SimpleNamespace")
    assert reg.lookup("SimpleNamespace") is Widget


def test_registry_lookup__dotted(reg):
    assert reg.lookup("collections.OrderedDict") is OrderedDict


def test_registry_lookup__dotted_missing_module(reg):
    with pytest.raises(ResolutionError, match="uninitialized constant"):
        reg.lookup("no_such_module_for_tests.Widget")


def test_registry_lookup__dotted_missing_attr(reg):
    with pytest.raises(ResolutionError):
        reg.lookup("collections.NoSuchClass")


def test_registry_names(reg):
    reg.register(Widget)
    reg.register(Widget, "Gizmo")
    assert reg.names() == ["Gizmo", "Widget"]


@pytest.mark.parametrize(
    "suffix,model_name,wrapper_name",
    [
        ("Wrapper", "FooBar", "FooBarWrapper"),
        ("Decorator", "FooBar", "FooBarDecorator"),
    ],
)
def test_registry_wrapper_object_names(suffix, model_name, wrapper_name):
    reg = ClassRegistry(suffix=suffix)
    assert reg.wrapper_name(model_name) == wrapper_name
    assert reg.object_name(wrapper_name) == model_name


def test_registry_object_name__removes_every_suffix(reg):
    assert reg.object_name("WrapperCacheWrapper") == "Cache"


def test_registry_configure(reg):
    reg.configure(ContainerConfig(suffix="Presenter", modules=["types"]))
    assert reg.suffix == "Presenter"
    assert reg.modules == ["types"]
    assert reg.wrapper_name("Foo") == "FooPresenter"


def test_registry_snapshot_restore(reg):
    state = reg.snapshot()
    reg.register(Widget)
    reg.configure(ContainerConfig(suffix="Presenter", modules=["types"]))
    reg.restore(state)
    assert "Widget" not in reg
    assert reg.suffix == "Wrapper"
    assert reg.modules == []


def test_registry_lookup__module_hint(reg):
    assert reg.lookup("Widget", module=__name__) is Widget


def test_registry_lookup__module_hint_not_loaded(reg):
    with pytest.raises(ResolutionError, match="uninitialized constant Widget"):
        reg.lookup("Widget", module="no_such_module_for_tests")


def test_registry_lookup__registered_before_module_hint(reg):
    class Other:
        pass

    reg.register(Other, "Widget")
    assert reg.lookup("Widget", module=__name__) is Other


def test_registry_lookup__configured_module_missing():
    reg = ClassRegistry(modules=["no_such_module_for_tests"])
    with pytest.raises(ResolutionError, match="cannot import no_such_module_for_tests"):
        reg.lookup("Widget")
