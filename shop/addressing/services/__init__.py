"""Сервисы для работы с адресами и странами."""

from .address_updater import AddressFieldUpdater
from .countries import get_available_countries, get_country_names

__all__ = [
    "AddressFieldUpdater",
    "get_available_countries",
    "get_country_names",
]
