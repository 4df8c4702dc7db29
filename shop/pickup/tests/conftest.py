"""Фикстуры для тестов пунктов выдачи."""

import pytest
from django.contrib.sessions.backends.db import SessionStore
from django.test import RequestFactory

from checkout.services.cart_context import SessionCartContext
from shipping.models import ShippingMethod

from .helpers import TEST_CALCULATORS, StaticCartContext


@pytest.fixture
def test_calculators(settings):
    """Реестр с тестовыми калькуляторами."""
    settings.SHIPPING_CALCULATORS = TEST_CALCULATORS
    return TEST_CALCULATORS


@pytest.fixture
def make_method(db, test_calculators):
    """Фабрика способов доставки с тестовыми калькуляторами."""

    def _make_method(code, calculator, **kwargs):
        return ShippingMethod.objects.create(
            code=code, name=code, calculator=calculator, **kwargs
        )

    return _make_method


@pytest.fixture
def cart_context(cart):
    return StaticCartContext(cart)


@pytest.fixture
def empty_cart_context(db):
    """Контекст сессии без корзины."""
    request = RequestFactory().get("/")
    request.session = SessionStore()
    return SessionCartContext(request)
