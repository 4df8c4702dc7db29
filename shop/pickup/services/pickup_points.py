"""
Чтение пунктов выдачи, возвращенных калькулятором.

Калькулятор сам решает, в каком виде вернуть пункты: модели, словари
или любые объекты с атрибутами. Здесь собраны функции, которые достают
из такого пункта идентификатор и поля для ответа API.
"""

POINT_FIELDS = ("name", "street", "postcode", "city", "country_code", "opening_hours")


def _read(item, key):
    if isinstance(item, dict):
        return item.get(key)
    return getattr(item, key, None)


def extract_pickup_id(item) -> str | None:
    """
    Идентификатор пункта выдачи.

    Порядок поиска: pickup_id, затем id.

    Returns:
        str: Идентификатор в виде строки
        None: Если идентификатора нет
    """
    for key in ("pickup_id", "id"):
        value = _read(item, key)
        if value not in (None, ""):
            return str(value)
    return None


def serialize_pickup_point(item) -> dict:
    """Пункт выдачи в виде словаря для ответа API."""
    data = {"id": extract_pickup_id(item)}
    for field in POINT_FIELDS:
        value = _read(item, field)
        data[field] = None if value is None else str(value)
    return data
