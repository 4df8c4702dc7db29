"""Конфигурация приложения pickup."""

from django.apps import AppConfig


class PickupConfig(AppConfig):
    """Конфигурация приложения pickup."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "pickup"
