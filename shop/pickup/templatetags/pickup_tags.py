"""Фильтры шаблонов для списка пунктов выдачи."""

from django import template

from pickup.services.pickup_points import extract_pickup_id

register = template.Library()


@register.filter
def pickup_id(item):
    """Идентификатор пункта выдачи."""
    return extract_pickup_id(item) or ""


@register.filter
def is_current_pickup(item, current_id):
    """Проверка, выбран ли пункт в текущем отправлении."""
    return current_id is not None and extract_pickup_id(item) == str(current_id)
