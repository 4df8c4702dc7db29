"""Модели приложения shipping."""

import logging

from django.core.exceptions import ValidationError
from django.db import models

logger = logging.getLogger(__name__)


class ShippingMethodQuerySet(models.QuerySet):
    """QuerySet для модели ShippingMethod."""

    def enabled(self):
        """Активные способы доставки."""
        return self.filter(is_enabled=True)

    def find_one_by_code(self, code):
        """
        Поиск способа доставки по точному совпадению кода.

        Args:
            code: Код способа доставки или None

        Returns:
            ShippingMethod: Найденный способ доставки
            None: Если код не передан или способ не найден
        """
        if code is None:
            return None
        return self.filter(code=code).first()


class ShippingMethod(models.Model):
    """Модель способа доставки."""

    code = models.CharField("Код", max_length=255, unique=True)
    name = models.CharField("Название", max_length=255)
    calculator = models.CharField("Калькулятор", max_length=255)
    configuration = models.JSONField(
        "Настройки калькулятора", default=dict, blank=True
    )
    is_enabled = models.BooleanField("Активен", default=True)
    position = models.PositiveIntegerField("Порядок", default=0)
    created_at = models.DateTimeField("Дата создания", auto_now_add=True)
    updated_at = models.DateTimeField("Дата обновления", auto_now=True)

    objects = ShippingMethodQuerySet.as_manager()

    class Meta:
        """Метаданные модели."""

        verbose_name = "Способ доставки"
        verbose_name_plural = "Способы доставки"
        ordering = ["position", "code"]

    def __str__(self):
        """Строковое представление модели."""
        return self.name or self.code

    def clean(self):
        """Валидация модели."""
        from .services.calculator_registry import get_calculator_registry

        if self.code:
            self.code = self.code.strip()
        if not self.code:
            raise ValidationError({"code": "Код способа доставки обязателен"})

        if not get_calculator_registry().has(self.calculator):
            raise ValidationError(
                {"calculator": f"Калькулятор '{self.calculator}' не зарегистрирован"}
            )

        if not isinstance(self.configuration, dict):
            raise ValidationError(
                {"configuration": "Настройки калькулятора должны быть словарем"}
            )

    def save(self, *args, **kwargs):
        """Сохранение с валидацией."""
        self.full_clean()
        super().save(*args, **kwargs)
        logger.info(
            "Сохранен способ доставки %s (калькулятор: %s)", self.code, self.calculator
        )


class PickupLocation(models.Model):
    """Модель пункта выдачи заказов."""

    method = models.ForeignKey(
        ShippingMethod,
        on_delete=models.CASCADE,
        related_name="pickup_locations",
        verbose_name="Способ доставки",
    )
    code = models.CharField("Код пункта", max_length=64)
    name = models.CharField("Название", max_length=255)
    street = models.CharField("Улица", max_length=255)
    postcode = models.CharField("Почтовый индекс", max_length=32)
    city = models.CharField("Город", max_length=255)
    country_code = models.CharField("Код страны", max_length=2)
    opening_hours = models.TextField("Часы работы", blank=True)
    is_enabled = models.BooleanField("Активен", default=True)
    position = models.PositiveIntegerField("Порядок", default=0)

    class Meta:
        """Метаданные модели."""

        verbose_name = "Пункт выдачи"
        verbose_name_plural = "Пункты выдачи"
        ordering = ["position", "name"]
        constraints = [
            models.UniqueConstraint(
                fields=["method", "code"], name="unique_pickup_location_code"
            )
        ]

    def __str__(self):
        """Строковое представление модели."""
        return f"{self.name} ({self.postcode} {self.city})"

    @property
    def pickup_id(self) -> str:
        """Идентификатор пункта, который сохраняется в отправлении."""
        return self.code

    def clean(self):
        """Нормализация кода страны."""
        if self.country_code:
            self.country_code = self.country_code.strip().upper()
