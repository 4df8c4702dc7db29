from django.apps import AppConfig


class ShippingConfig(AppConfig):
    """Конфигурация приложения shipping."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "shipping"
