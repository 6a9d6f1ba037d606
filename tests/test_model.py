"""Tests for the model mixin."""

import pytest

from active_container.exceptions import ResolutionError
from active_container.model import ModelMethods
from active_container.registry import registry
from active_container.wrapper import Wrapper


@pytest.fixture
def model_class():
    class Invoice(ModelMethods):
        def __init__(self, total=0):
            self.total = total

    return Invoice


def test_model_wrapped(model_class):
    assert model_class().wrapped is False


def test_model_registered(model_class):
    assert registry.lookup("Invoice") is model_class


def test_model_wrap(model_class):
    class InvoiceWrapper(Wrapper):
        delegates = ("total",)

    invoice = model_class(total=12)
    wrapped = invoice.wrap()
    assert isinstance(wrapped, InvoiceWrapper)
    assert wrapped.record is invoice
    assert wrapped.total == 12


def test_model_wrap__missing_wrapper(model_class):
    with pytest.raises(ResolutionError, match="InvoiceWrapper"):
        model_class().wrap()


def test_model_wrapper_builds_model_from_dict(model_class):
    class InvoiceWrapper(Wrapper):
        delegates = ("total",)

    assert InvoiceWrapper.object_class() is model_class
    assert InvoiceWrapper({"total": 3}).record.total == 3
