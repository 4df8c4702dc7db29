"""Модели приложения addressing."""

from django.core.exceptions import ValidationError
from django.db import models


class CountryQuerySet(models.QuerySet):
    """QuerySet для модели Country."""

    def enabled(self):
        """Страны, включенные оператором магазина."""
        return self.filter(enabled=True)


class Country(models.Model):
    """Модель страны, настроенной в магазине."""

    code = models.CharField("Код страны (ISO 3166-1)", max_length=2, unique=True)
    enabled = models.BooleanField("Включена", default=True)

    objects = CountryQuerySet.as_manager()

    class Meta:
        """Метаданные модели."""

        verbose_name = "Страна"
        verbose_name_plural = "Страны"
        ordering = ["code"]

    def __str__(self):
        """Строковое представление модели."""
        return self.code

    def clean(self):
        """Валидация кода страны."""
        if self.code:
            self.code = self.code.strip().upper()
        if not self.code or len(self.code) != 2 or not self.code.isalpha():
            raise ValidationError(
                {"code": "Код страны должен состоять из двух латинских букв"}
            )

    def save(self, *args, **kwargs):
        """Сохранение с валидацией."""
        self.full_clean()
        super().save(*args, **kwargs)


class Address(models.Model):
    """Модель адреса доставки."""

    # Поля, которые можно заполнить из данных формы
    UPDATABLE_FIELDS = (
        "first_name",
        "last_name",
        "company",
        "phone_number",
        "street",
        "city",
        "postcode",
        "country_code",
        "province_code",
        "province_name",
    )

    first_name = models.CharField("Имя", max_length=255, blank=True)
    last_name = models.CharField("Фамилия", max_length=255, blank=True)
    company = models.CharField("Компания", max_length=255, blank=True)
    phone_number = models.CharField("Телефон", max_length=64, blank=True)
    street = models.CharField("Улица", max_length=255, blank=True)
    city = models.CharField("Город", max_length=255, blank=True)
    postcode = models.CharField("Почтовый индекс", max_length=32, blank=True)
    country_code = models.CharField("Код страны", max_length=2, blank=True)
    province_code = models.CharField("Код региона", max_length=32, blank=True)
    province_name = models.CharField("Регион", max_length=255, blank=True)
    created_at = models.DateTimeField("Дата создания", auto_now_add=True)
    updated_at = models.DateTimeField("Дата обновления", auto_now=True)

    class Meta:
        """Метаданные модели."""

        verbose_name = "Адрес"
        verbose_name_plural = "Адреса"

    def __str__(self):
        """Строковое представление модели."""
        parts = [self.street, self.postcode, self.city, self.country_code]
        return ", ".join(part for part in parts if part) or f"Адрес {self.pk}"

    @property
    def full_name(self) -> str:
        """Имя и фамилия получателя."""
        return f"{self.first_name} {self.last_name}".strip()
