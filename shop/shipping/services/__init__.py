"""Сервисы для работы со способами доставки."""

from .calculator_registry import (
    CalculatorNotFoundError,
    CalculatorRegistry,
    get_calculator_registry,
)
from .calculator_strategies import (
    PickupCalculator,
    ShippingCalculator,
    is_pickup_calculator,
)

__all__ = [
    "CalculatorNotFoundError",
    "CalculatorRegistry",
    "PickupCalculator",
    "ShippingCalculator",
    "get_calculator_registry",
    "is_pickup_calculator",
]
