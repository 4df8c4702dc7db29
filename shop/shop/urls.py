"""Конфигурация URL маршрутов проекта SHOP.

Этот модуль определяет основные URL маршруты проекта:
- Административный интерфейс
- Пункты выдачи в оформлении заказа
- API endpoints
"""

from django.contrib import admin
from django.urls import path, include

from api.v1.router import api

urlpatterns = [
    path("admin/", admin.site.urls),
    path("pickup/", include("pickup.urls", namespace="pickup")),
    path("api/v1/", api.urls),
]
