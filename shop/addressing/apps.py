from django.apps import AppConfig


class AddressingConfig(AppConfig):
    """Конфигурация приложения addressing."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "addressing"
