"""Административный интерфейс для приложения checkout."""

from django.contrib import admin

from .models import Order, Shipment


class ShipmentInline(admin.TabularInline):
    """Отправления заказа."""

    model = Shipment
    extra = 0
    fields = ("method", "pickup_id", "created_at")
    readonly_fields = ("created_at",)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Административный интерфейс для модели Order."""

    inlines = [ShipmentInline]
    list_display = ("id", "state", "shipping_address", "created_at")
    list_filter = ("state", "created_at")
    search_fields = ("token_value",)
    raw_id_fields = ("shipping_address",)
    readonly_fields = ("token_value", "created_at", "updated_at")


@admin.register(Shipment)
class ShipmentAdmin(admin.ModelAdmin):
    """Административный интерфейс для модели Shipment."""

    list_display = ("id", "order", "method", "pickup_id")
    list_filter = ("method",)
    search_fields = ("pickup_id",)
