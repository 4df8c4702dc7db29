"""Административный интерфейс для приложения addressing."""

from django.contrib import admin

from .models import Address, Country
from .services.countries import get_country_names


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    """Административный интерфейс для модели Country."""

    list_display = ("code", "display_name", "enabled")
    list_filter = ("enabled",)
    list_editable = ("enabled",)
    search_fields = ("code",)

    def display_name(self, obj):
        """Отображение названия страны."""
        return get_country_names().get(obj.code, "—")

    display_name.short_description = "Название"


@admin.register(Address)
class AddressAdmin(admin.ModelAdmin):
    """Административный интерфейс для модели Address."""

    list_display = ("full_name", "street", "postcode", "city", "country_code")
    list_filter = ("country_code",)
    search_fields = ("first_name", "last_name", "street", "city", "postcode")
    readonly_fields = ("created_at", "updated_at")
