"""Вспомогательные классы для тестов пунктов выдачи."""

from shipping.services.calculator_strategies import (
    PickupCalculator,
    StorePickupCalculator,
)


class CustomTemplateCalculator(StorePickupCalculator):
    """Самовывоз со своим шаблоном списка."""

    type = "custom_template"
    pickup_template = "pickup/custom/list.html"


class EmptyTemplateCalculator(StorePickupCalculator):
    """Пустой шаблон означает шаблон по умолчанию."""

    type = "empty_template"
    pickup_template = ""


class DictPickupCalculator(PickupCalculator):
    """Калькулятор, который возвращает пункты словарями."""

    type = "dict_pickup"

    def calculate(self, shipment, configuration):
        return 0

    def get_pickup_list(self, address, cart, method):
        return [
            {"id": "A1", "name": "Locker A", "city": address.city},
            {"id": 2, "name": "Locker B", "city": address.city},
        ]


TEST_CALCULATORS = {
    "flat_rate": "shipping.services.calculator_strategies.FlatRateCalculator",
    "store_pickup": "shipping.services.calculator_strategies.StorePickupCalculator",
    "custom_template": "pickup.tests.helpers.CustomTemplateCalculator",
    "empty_template": "pickup.tests.helpers.EmptyTemplateCalculator",
    "dict_pickup": "pickup.tests.helpers.DictPickupCalculator",
}


class StaticCartContext:
    """Контекст корзины, который всегда возвращает заданную корзину."""

    def __init__(self, cart):
        self.cart = cart
        self.calls = 0

    def get_cart(self):
        self.calls += 1
        return self.cart
