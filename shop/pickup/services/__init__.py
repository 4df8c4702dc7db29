"""Сервисы пунктов выдачи."""

from .pickup_points import extract_pickup_id, serialize_pickup_point
from .pickup_service import PickupListService, PickupSelectionService, parse_index

__all__ = [
    "PickupListService",
    "PickupSelectionService",
    "extract_pickup_id",
    "parse_index",
    "serialize_pickup_point",
]
