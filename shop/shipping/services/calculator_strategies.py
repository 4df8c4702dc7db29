"""Калькуляторы стоимости доставки."""

from abc import ABC, abstractmethod

from django.conf import settings
from django.core.exceptions import ValidationError


class ShippingCalculator(ABC):
    """Базовый калькулятор стоимости доставки."""

    type = None

    @abstractmethod
    def calculate(self, shipment, configuration: dict) -> int:
        """
        Рассчитать стоимость доставки.

        Args:
            shipment: Отправление
            configuration: Настройки способа доставки

        Returns:
            int: Стоимость в минимальных единицах валюты
        """

    def get_type(self) -> str:
        """Имя калькулятора в реестре."""
        return self.type

    def _get_amount(self, configuration: dict) -> int:
        try:
            amount = int(configuration.get("amount", 0))
        except (TypeError, ValueError):
            raise ValidationError({"configuration": "Некорректная стоимость доставки"})
        if amount < 0:
            raise ValidationError(
                {"configuration": "Стоимость доставки не может быть отрицательной"}
            )
        return amount


class PickupCalculator(ShippingCalculator):
    """
    Калькулятор с поддержкой пунктов выдачи.

    Кроме стоимости умеет вернуть список пунктов выдачи рядом с адресом
    и, при необходимости, собственный шаблон для этого списка.
    """

    pickup_template = None

    def get_pickup_template(self) -> str | None:
        """Шаблон списка пунктов выдачи (None - шаблон по умолчанию)."""
        return self.pickup_template

    @abstractmethod
    def get_pickup_list(self, address, cart, method) -> list:
        """
        Получить пункты выдачи для адреса.

        Args:
            address: Адрес доставки (может быть не сохранен)
            cart: Текущая корзина
            method: Способ доставки

        Returns:
            list: Пункты выдачи
        """


def is_pickup_calculator(calculator) -> bool:
    """Проверка, поддерживает ли калькулятор пункты выдачи."""
    return isinstance(calculator, PickupCalculator)


class FlatRateCalculator(ShippingCalculator):
    """Фиксированная стоимость доставки."""

    type = "flat_rate"

    def calculate(self, shipment, configuration: dict) -> int:
        """Вернуть фиксированную стоимость из настроек."""
        return self._get_amount(configuration)


class StorePickupCalculator(PickupCalculator):
    """
    Самовывоз из пунктов выдачи магазина.

    Пункты берутся из PickupLocation способа доставки:
        - только активные пункты
        - только в стране адреса, если она указана
        - сначала пункты с тем же префиксом почтового индекса
        - не больше configuration["limit"] (по умолчанию PICKUP_LIST_LIMIT)
    """

    type = "store_pickup"
    postcode_prefix_length = 2

    def calculate(self, shipment, configuration: dict) -> int:
        """Вернуть фиксированную стоимость самовывоза."""
        return self._get_amount(configuration)

    def get_pickup_list(self, address, cart, method) -> list:
        """Получить пункты выдачи рядом с адресом."""
        locations = method.pickup_locations.filter(is_enabled=True)

        country_code = (getattr(address, "country_code", "") or "").strip()
        if country_code:
            locations = locations.filter(country_code__iexact=country_code)

        locations = list(locations.order_by("position", "name"))

        postcode = (getattr(address, "postcode", "") or "").strip()
        if postcode:
            prefix = postcode[: self.postcode_prefix_length]
            locations.sort(key=lambda location: not location.postcode.startswith(prefix))

        return locations[: self._get_limit(method.configuration)]

    def _get_limit(self, configuration: dict) -> int:
        try:
            limit = int(configuration.get("limit", settings.PICKUP_LIST_LIMIT))
        except (TypeError, ValueError):
            limit = settings.PICKUP_LIST_LIMIT
        return max(limit, 0)
