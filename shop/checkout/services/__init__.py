"""Сервисы оформления заказа."""

from .cart_context import SessionCartContext

__all__ = ["SessionCartContext"]
