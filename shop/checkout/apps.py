from django.apps import AppConfig


class CheckoutConfig(AppConfig):
    """Конфигурация приложения checkout."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "checkout"
