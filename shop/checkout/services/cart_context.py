"""Контекст текущей корзины покупателя."""

import logging

from django.conf import settings

from checkout.models import Order

logger = logging.getLogger(__name__)


class SessionCartContext:
    """
    Корзина, связанная с сессией покупателя.

    Идентификатор корзины хранится в сессии под ключом CART_SESSION_KEY.
    Если корзины нет, возвращается новая несохраненная корзина без идентификатора.
    """

    def __init__(self, request):
        self.request = request

    @property
    def session_key(self) -> str:
        return settings.CART_SESSION_KEY

    def get_cart(self) -> Order:
        """Получить текущую корзину."""
        cart_id = self.request.session.get(self.session_key)
        if cart_id is not None:
            cart = Order.objects.carts().filter(pk=cart_id).first()
            if cart is not None:
                return cart

            logger.info("Корзина %s из сессии не найдена, создаем новую", cart_id)
            del self.request.session[self.session_key]

        return Order()
