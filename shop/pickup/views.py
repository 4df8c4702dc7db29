"""Views для приложения pickup.

Модуль содержит представления для:
- Отображения списка пунктов выдачи способа доставки
- Сохранения выбранного пункта выдачи
"""

import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import Http404
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST

from checkout.services.cart_context import SessionCartContext
from shipping.models import ShippingMethod

from .services.pickup_service import PickupListService, PickupSelectionService

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def pickup_list(request, method=None):
    """Отображение списка пунктов выдачи."""
    service = PickupListService()
    template, context = service.list_pickups(
        method,
        SessionCartContext(request),
        request.POST.dict(),
        index=request.GET.get("index", request.POST.get("index", 0)),
    )
    return render(request, template, context)


@require_POST
def select_pickup(request, method):
    """Сохранение выбранного пункта выдачи в отправлении корзины."""
    cart = SessionCartContext(request).get_cart()
    service = PickupSelectionService()

    try:
        service.select(
            cart, method, request.POST.get("pickup_id"), request.POST.dict()
        )
        messages.success(request, "Пункт выдачи сохранен")
    except ShippingMethod.DoesNotExist:
        raise Http404(f"Способ доставки '{method}' не найден")
    except ValidationError as e:
        logger.warning("Не удалось выбрать пункт выдачи: %s", e)
        for error in e.messages:
            messages.error(request, error)

    next_url = request.POST.get("next")
    if next_url and url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return redirect(next_url)
    return redirect(reverse("pickup:list", args=[method]))
