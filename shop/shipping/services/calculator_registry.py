"""
Реестр калькуляторов стоимости доставки.

Каждый способ доставки хранит имя калькулятора, по которому реестр
возвращает его экземпляр. Реестр по умолчанию собирается из настройки
SHIPPING_CALCULATORS вида {имя: путь.к.Классу}.

Примеры использования:
    registry = get_calculator_registry()
    calculator = registry.get(method.calculator)

Примечания:
    - При отсутствии калькулятора вызывается CalculatorNotFoundError
    - Повторная регистрация имени запрещена
    - Реестр по умолчанию пересобирается при изменении SHIPPING_CALCULATORS
"""

from functools import lru_cache

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from .calculator_strategies import ShippingCalculator


class CalculatorNotFoundError(LookupError):
    """Калькулятор с указанным именем не зарегистрирован."""


class CalculatorRegistry:
    """Реестр калькуляторов {имя: экземпляр}."""

    def __init__(self):
        self._calculators = {}

    def register(self, name: str, calculator: ShippingCalculator) -> None:
        """
        Зарегистрировать калькулятор.

        Raises:
            TypeError: Если объект не является калькулятором
            ValueError: Если имя уже занято
        """
        if not isinstance(calculator, ShippingCalculator):
            raise TypeError(
                f"Калькулятор '{name}' должен наследовать ShippingCalculator"
            )
        if name in self._calculators:
            raise ValueError(f"Калькулятор '{name}' уже зарегистрирован")
        self._calculators[name] = calculator

    def has(self, name) -> bool:
        """Проверка наличия калькулятора."""
        return name in self._calculators

    def get(self, name) -> ShippingCalculator:
        """
        Получить калькулятор по имени.

        Raises:
            CalculatorNotFoundError: Если калькулятор не найден
        """
        try:
            return self._calculators[name]
        except KeyError:
            raise CalculatorNotFoundError(
                f"Калькулятор '{name}' не зарегистрирован"
            ) from None

    def all(self) -> dict[str, ShippingCalculator]:
        """Все зарегистрированные калькуляторы."""
        return dict(self._calculators)

    def choices(self) -> list[tuple[str, str]]:
        """Список для выбора калькулятора в формах."""
        return [
            (name, calculator.__class__.__name__)
            for name, calculator in sorted(self._calculators.items())
        ]

    @classmethod
    def from_paths(cls, paths: dict[str, str]) -> "CalculatorRegistry":
        """Собрать реестр из словаря {имя: путь.к.Классу}."""
        registry = cls()
        for name, path in paths.items():
            registry.register(name, import_string(path)())
        return registry


@lru_cache(maxsize=None)
def get_calculator_registry() -> CalculatorRegistry:
    """Реестр калькуляторов по умолчанию."""
    return CalculatorRegistry.from_paths(settings.SHIPPING_CALCULATORS)


@receiver(setting_changed)
def reset_calculator_registry(sender, setting, **kwargs):
    """Сброс реестра при изменении настроек (используется в тестах)."""
    if setting == "SHIPPING_CALCULATORS":
        get_calculator_registry.cache_clear()
