"""Схемы для сериализации данных пунктов выдачи."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class PickupPointSchema(BaseModel):
    """Схема пункта выдачи."""

    id: Optional[str] = Field(None, description="Идентификатор пункта выдачи")
    name: Optional[str] = Field(None, description="Название")
    street: Optional[str] = Field(None, description="Улица")
    postcode: Optional[str] = Field(None, description="Почтовый индекс")
    city: Optional[str] = Field(None, description="Город")
    country_code: Optional[str] = Field(None, description="Код страны")
    opening_hours: Optional[str] = Field(None, description="Часы работы")


class PickupSchema(BaseModel):
    """Схема списка пунктов выдачи с текущим выбором."""

    current_id: Optional[str] = Field(None, description="Выбранный пункт выдачи")
    list: List[PickupPointSchema] = Field(
        default_factory=lambda: [], description="Пункты выдачи"
    )


class AddressSchema(BaseModel):
    """Схема адреса, по которому искались пункты выдачи."""

    first_name: str = ""
    last_name: str = ""
    company: str = ""
    phone_number: str = ""
    street: str = ""
    city: str = ""
    postcode: str = ""
    country_code: str = ""
    province_code: str = ""
    province_name: str = ""

    class Config:
        """Конфигурация схемы."""

        from_attributes = True


class PickupListResponse(BaseModel):
    """Схема ответа со списком пунктов выдачи."""

    code: Optional[str] = Field(None, description="Код способа доставки")
    index: int = Field(0, description="Номер способа доставки в форме")
    pickup: PickupSchema
    address: Optional[AddressSchema] = None
    countries: Dict[str, str] = Field(
        default_factory=dict, description="Доступные страны {код: название}"
    )


class PickupSearchAddressSchema(BaseModel):
    """Схема полей адреса, по которым искались пункты выдачи."""

    street: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    country_code: Optional[str] = None


class PickupSelectRequest(BaseModel):
    """Схема запроса выбора пункта выдачи."""

    pickup_id: str = Field(..., description="Идентификатор пункта выдачи")
    address: Optional[PickupSearchAddressSchema] = Field(
        None, description="Адрес поиска, если он отличается от адреса корзины"
    )

    @field_validator("pickup_id")
    @classmethod
    def validate_pickup_id(cls, v):
        """Валидация идентификатора."""
        v = v.strip()
        if not v:
            raise ValueError("Идентификатор пункта выдачи не может быть пустым")
        return v


class PickupSelectResponse(BaseModel):
    """Схема ответа после выбора пункта выдачи."""

    code: str = Field(..., description="Код способа доставки")
    pickup_id: str = Field(..., description="Выбранный пункт выдачи")
    shipment_id: int = Field(..., description="Отправление корзины")
