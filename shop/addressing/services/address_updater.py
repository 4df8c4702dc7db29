"""
Заполнение адреса данными из формы.

Ключи формы приходят в snake_case (``first_name``, ``country_code``), но
клиенты присылают и другие варианты написания (``firstName``, ``FIRSTNAME``).
Ключ нормализуется так же, как при поиске сеттера по имени поля:
подчеркивания отбрасываются, регистр не учитывается.

Правила:
    - Обновляются только поля из Address.UPDATABLE_FIELDS
    - Неизвестные ключи молча пропускаются
    - Первичный ключ и служебные поля никогда не изменяются
    - Адрес не сохраняется в базу
"""

import logging

from addressing.models import Address

logger = logging.getLogger(__name__)


def normalize_field_name(name: str) -> str:
    """Приводит имя поля к виду для сравнения: без подчеркиваний, в нижнем регистре."""
    return name.replace("_", "").lower()


class AddressFieldUpdater:
    """Сервис заполнения адреса из произвольного набора полей формы."""

    def __init__(self, allowed_fields=Address.UPDATABLE_FIELDS):
        self._fields = {normalize_field_name(field): field for field in allowed_fields}

    def resolve_field(self, key) -> str | None:
        """
        Определяет поле адреса по ключу формы.

        Args:
            key: Ключ из данных формы

        Returns:
            str: Имя поля модели
            None: Если ключ не соответствует ни одному полю
        """
        if not isinstance(key, str):
            return None
        return self._fields.get(normalize_field_name(key))

    def apply(self, address: Address, fields) -> list[str]:
        """
        Записывает значения формы в адрес.

        Args:
            address: Адрес, который нужно заполнить
            fields: Словарь {ключ_формы: значение}

        Returns:
            list[str]: Имена полей, которые были обновлены
        """
        updated = []
        for key, value in fields.items():
            field = self.resolve_field(key)
            if field is None:
                continue
            setattr(address, field, "" if value is None else str(value))
            updated.append(field)

        if updated:
            logger.debug("Обновлены поля адреса %s: %s", address.pk, ", ".join(updated))
        return updated
