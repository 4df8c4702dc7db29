"""API endpoints для поиска и выбора пунктов выдачи."""

from django.core.exceptions import ValidationError
from ninja import Router

from checkout.services.cart_context import SessionCartContext
from pickup.services.pickup_points import serialize_pickup_point
from pickup.services.pickup_service import PickupListService, PickupSelectionService
from shipping.models import ShippingMethod
from shipping.services.calculator_registry import CalculatorNotFoundError

from ..exceptions import ConflictAPIError, NotFoundAPIError, ValidationAPIError
from .schemas import (
    AddressSchema,
    PickupListResponse,
    PickupSelectRequest,
    PickupSelectResponse,
)

router = Router(tags=["pickup"])


@router.get(
    "/{method}/points",
    response=PickupListResponse,
    summary="Список пунктов выдачи",
    description=(
        "Пункты выдачи способа доставки для адреса корзины. "
        "Поля адреса можно передать в параметрах запроса."
    ),
)
def list_points(request, method: str, index: str = "0"):
    """Получение списка пунктов выдачи."""
    fields = request.GET.dict()
    fields.pop("index", None)

    try:
        _, context = PickupListService().list_pickups(
            method, SessionCartContext(request), fields, index=index
        )
    except CalculatorNotFoundError as e:
        raise ConflictAPIError(str(e))

    data = context["method"]
    address = data["address"]
    return {
        "code": data["code"],
        "index": data["index"],
        "pickup": {
            "current_id": data["pickup"]["current_id"],
            "list": [serialize_pickup_point(item) for item in data["pickup"]["list"]],
        },
        "address": (
            AddressSchema.model_validate(address).model_dump()
            if address is not None
            else None
        ),
        "countries": data["countries"],
    }


@router.post(
    "/{method}/select",
    response=PickupSelectResponse,
    summary="Выбор пункта выдачи",
    description="Сохранение пункта выдачи в отправлении текущей корзины",
)
def select_point(request, method: str, payload: PickupSelectRequest):
    """Выбор пункта выдачи."""
    cart = SessionCartContext(request).get_cart()

    try:
        fields = (
            payload.address.model_dump(exclude_none=True) if payload.address else {}
        )
        shipment = PickupSelectionService().select(
            cart, method, payload.pickup_id, fields
        )
    except ShippingMethod.DoesNotExist as e:
        raise NotFoundAPIError(str(e))
    except CalculatorNotFoundError as e:
        raise ConflictAPIError(str(e))
    except ValidationError as e:
        raise ValidationAPIError("; ".join(e.messages))

    return {
        "code": method,
        "pickup_id": shipment.pickup_id,
        "shipment_id": shipment.pk,
    }
