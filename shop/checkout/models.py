"""Модели приложения checkout."""

import uuid

from django.db import models


def generate_token() -> str:
    """Случайный токен корзины."""
    return uuid.uuid4().hex


class OrderState(models.TextChoices):
    """Состояния заказа."""

    CART = "cart", "Корзина"
    NEW = "new", "Новый"


class OrderQuerySet(models.QuerySet):
    """QuerySet для модели Order."""

    def carts(self):
        """Заказы в состоянии корзины."""
        return self.filter(state=OrderState.CART)

    def find_cart_for_summary(self, cart_id):
        """
        Загрузка корзины для итоговой страницы.

        Подгружает адрес доставки и отправления вместе со способами доставки.

        Args:
            cart_id: Идентификатор корзины

        Returns:
            Order: Корзина
            None: Если корзина не найдена
        """
        return (
            self.carts()
            .select_related("shipping_address")
            .prefetch_related("shipments__method")
            .filter(pk=cart_id)
            .first()
        )


class Order(models.Model):
    """Модель заказа (корзины)."""

    state = models.CharField(
        "Состояние",
        max_length=16,
        choices=OrderState.choices,
        default=OrderState.CART,
    )
    token_value = models.CharField(
        "Токен", max_length=64, unique=True, default=generate_token
    )
    shipping_address = models.ForeignKey(
        "addressing.Address",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
        verbose_name="Адрес доставки",
    )
    created_at = models.DateTimeField("Дата создания", auto_now_add=True)
    updated_at = models.DateTimeField("Дата обновления", auto_now=True)

    objects = OrderQuerySet.as_manager()

    class Meta:
        """Метаданные модели."""

        verbose_name = "Заказ"
        verbose_name_plural = "Заказы"
        ordering = ["-created_at"]

    def __str__(self):
        """Строковое представление модели."""
        return f"Заказ {self.pk or 'новый'}"

    def get_current_shipment(self):
        """Текущее (первое) отправление заказа или None."""
        if self.pk is None:
            return None
        shipments = sorted(self.shipments.all(), key=lambda shipment: shipment.pk)
        return shipments[0] if shipments else None


class Shipment(models.Model):
    """Модель отправления заказа."""

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="shipments",
        verbose_name="Заказ",
    )
    method = models.ForeignKey(
        "shipping.ShippingMethod",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="shipments",
        verbose_name="Способ доставки",
    )
    pickup_id = models.CharField(
        "Пункт выдачи", max_length=255, null=True, blank=True
    )
    created_at = models.DateTimeField("Дата создания", auto_now_add=True)
    updated_at = models.DateTimeField("Дата обновления", auto_now=True)

    class Meta:
        """Метаданные модели."""

        verbose_name = "Отправление"
        verbose_name_plural = "Отправления"
        ordering = ["id"]

    def __str__(self):
        """Строковое представление модели."""
        return f"Отправление {self.pk} заказа {self.order_id}"
