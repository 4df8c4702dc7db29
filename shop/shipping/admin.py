"""Административный интерфейс для приложения shipping."""

from django import forms
from django.contrib import admin

from .models import PickupLocation, ShippingMethod
from .services.calculator_registry import get_calculator_registry


class ShippingMethodAdminForm(forms.ModelForm):
    """Форма способа доставки с выбором калькулятора из реестра."""

    calculator = forms.ChoiceField(label="Калькулятор", choices=())

    class Meta:
        model = ShippingMethod
        fields = "__all__"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["calculator"].choices = get_calculator_registry().choices()


class PickupLocationInline(admin.TabularInline):
    """Пункты выдачи способа доставки."""

    model = PickupLocation
    extra = 0
    fields = (
        "code",
        "name",
        "street",
        "postcode",
        "city",
        "country_code",
        "is_enabled",
        "position",
    )


@admin.register(ShippingMethod)
class ShippingMethodAdmin(admin.ModelAdmin):
    """Административный интерфейс для модели ShippingMethod."""

    form = ShippingMethodAdminForm
    inlines = [PickupLocationInline]
    list_display = ("code", "name", "calculator", "is_enabled", "position")
    list_filter = ("calculator", "is_enabled")
    search_fields = ("code", "name")
    ordering = ("position", "code")


@admin.register(PickupLocation)
class PickupLocationAdmin(admin.ModelAdmin):
    """Административный интерфейс для модели PickupLocation."""

    list_display = ("code", "name", "postcode", "city", "country_code", "method")
    list_filter = ("method", "country_code", "is_enabled")
    search_fields = ("code", "name", "postcode", "city")
