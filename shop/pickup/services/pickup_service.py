"""
Сервисы выбора пункта выдачи в оформлении заказа.

Основные компоненты:
    - PickupListService: Сборка данных для списка пунктов выдачи
    - PickupSelectionService: Сохранение выбранного пункта в отправлении

Процесс построения списка:
    1. Поиск способа доставки по точному коду
    2. Получение калькулятора способа из реестра
    3. Проверка поддержки пунктов выдачи калькулятором
    4. Получение текущей корзины (только если она сохранена)
    5. Заполнение адреса доставки данными формы
    6. Запрос списка пунктов у калькулятора
    7. Сборка контекста для шаблона

Примеры использования:
    service = PickupListService()
    template, context = service.list_pickups(
        "pickup_store", SessionCartContext(request), request.POST.dict(), index=1
    )

Примечания:
    - Неизвестный код способа дает пустой список и current_id = None
    - Калькулятор без поддержки пунктов дает тот же пустой результат
    - Для несохраненной корзины адрес и список не заполняются
    - Адрес не сохраняется в базу
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from addressing.models import Address
from addressing.services.address_updater import AddressFieldUpdater
from addressing.services.countries import get_available_countries
from checkout.models import Order, Shipment
from shipping.models import ShippingMethod
from shipping.services.calculator_registry import get_calculator_registry
from shipping.services.calculator_strategies import is_pickup_calculator

from .pickup_points import extract_pickup_id

logger = logging.getLogger(__name__)


def parse_index(value) -> int:
    """Номер способа доставки в форме; всё, что не число, считается 0."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class PickupListService:
    """Сервис построения списка пунктов выдачи."""

    def __init__(self, registry=None, address_updater=None):
        self.registry = registry or get_calculator_registry()
        self.address_updater = address_updater or AddressFieldUpdater()

    def get_method(self, code):
        """Способ доставки по коду или None."""
        return ShippingMethod.objects.find_one_by_code(code)

    def get_calculator(self, code):
        """
        Калькулятор способа доставки.

        Returns:
            ShippingCalculator: Калькулятор способа
            None: Если способ доставки не найден

        Raises:
            CalculatorNotFoundError: Если калькулятор способа не зарегистрирован
        """
        method = self.get_method(code)
        if method is None:
            return None
        return self.registry.get(method.calculator)

    def get_default_template(self) -> str:
        """Шаблон списка пунктов выдачи по умолчанию."""
        return settings.PICKUP_DEFAULT_TEMPLATE

    def list_pickups(self, code, cart_context, fields, index=0) -> tuple[str, dict]:
        """
        Собрать шаблон и контекст списка пунктов выдачи.

        Args:
            code: Код способа доставки (может быть None)
            cart_context: Контекст корзины с методом get_cart()
            fields: Данные формы адреса {ключ: значение}
            index: Номер способа доставки в форме

        Returns:
            tuple: (имя_шаблона, контекст)
        """
        calculator = self.get_calculator(code)

        template = self.get_default_template()
        current_id = None
        pickup_list = []
        current_address = None

        if is_pickup_calculator(calculator):
            if calculator.get_pickup_template():
                template = calculator.get_pickup_template()

            cart = cart_context.get_cart()
            if cart.pk is not None:
                current_id, pickup_list, current_address = self._collect_pickups(
                    calculator, cart, code, fields
                )
        else:
            logger.debug(
                "Способ доставки %s не поддерживает пункты выдачи", code
            )

        context = {
            "method": {
                "pickup": {
                    "current_id": current_id,
                    "list": pickup_list,
                },
                "address": current_address,
                "countries": get_available_countries(),
                "index": parse_index(index),
                "code": code,
            }
        }
        return template, context

    def _collect_pickups(self, calculator, cart, code, fields):
        summary_cart = Order.objects.find_cart_for_summary(cart.pk)
        if summary_cart is None:
            logger.warning("Корзина %s не найдена при загрузке итогов", cart.pk)
            return None, [], None

        address = summary_cart.shipping_address or Address()

        shipment = summary_cart.get_current_shipment()
        current_id = shipment.pickup_id if shipment is not None else None

        self.address_updater.apply(address, fields)

        pickup_list = list(
            calculator.get_pickup_list(address, summary_cart, self.get_method(code))
        )
        logger.info(
            "Найдено пунктов выдачи: %d (способ %s, корзина %s)",
            len(pickup_list),
            code,
            summary_cart.pk,
        )
        return current_id, pickup_list, address


class PickupSelectionService:
    """Сервис сохранения выбранного пункта выдачи в отправлении корзины."""

    def __init__(self, registry=None, address_updater=None):
        self.registry = registry or get_calculator_registry()
        self.address_updater = address_updater or AddressFieldUpdater()

    @transaction.atomic
    def select(self, cart, code, pickup_id, fields=None) -> Shipment:
        """
        Сохранить пункт выдачи в текущем отправлении корзины.

        Пункт проверяется по списку калькулятора для адреса корзины,
        уточненного полями поиска. Адрес при этом не сохраняется.

        Args:
            cart: Текущая корзина
            code: Код способа доставки
            pickup_id: Идентификатор выбранного пункта
            fields: Поля адреса, по которым искались пункты {ключ: значение}

        Returns:
            Shipment: Обновленное отправление

        Raises:
            ShippingMethod.DoesNotExist: Если способ доставки не найден
            ValidationError: Если выбор пункта невозможен
        """
        if cart.pk is None:
            raise ValidationError({"cart": "Корзина еще не создана"})

        method = ShippingMethod.objects.find_one_by_code(code)
        if method is None:
            raise ShippingMethod.DoesNotExist(f"Способ доставки '{code}' не найден")

        calculator = self.registry.get(method.calculator)
        if not is_pickup_calculator(calculator):
            raise ValidationError(
                {"method": f"Способ доставки '{code}' не поддерживает пункты выдачи"}
            )

        pickup_id = (pickup_id or "").strip()
        if not pickup_id:
            raise ValidationError({"pickup_id": "Не выбран пункт выдачи"})

        summary_cart = Order.objects.find_cart_for_summary(cart.pk)
        if summary_cart is None:
            raise ValidationError({"cart": "Корзина не найдена"})

        address = summary_cart.shipping_address or Address()
        self.address_updater.apply(address, fields or {})

        available_ids = {
            extract_pickup_id(item)
            for item in calculator.get_pickup_list(address, summary_cart, method)
        }
        if pickup_id not in available_ids:
            raise ValidationError(
                {"pickup_id": f"Пункт выдачи '{pickup_id}' недоступен для адреса"}
            )

        shipment = summary_cart.get_current_shipment() or Shipment(order=summary_cart)
        shipment.method = method
        shipment.pickup_id = pickup_id
        shipment.save()

        logger.info(
            "Выбран пункт выдачи %s (способ %s, корзина %s)",
            pickup_id,
            code,
            summary_cart.pk,
        )
        return shipment
