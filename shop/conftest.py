import os
import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shop.settings")
django.setup()


# Импортируем модели после настройки Django
from django.conf import settings
from addressing.models import Address, Country
from checkout.models import Order, Shipment
from shipping.models import PickupLocation, ShippingMethod


@pytest.fixture
def countries(db):
    """Страны магазина: FR и BE включены, DE выключена."""
    return [
        Country.objects.create(code="FR"),
        Country.objects.create(code="BE"),
        Country.objects.create(code="DE", enabled=False),
    ]


@pytest.fixture
def flat_rate_method(db):
    """Способ доставки без пунктов выдачи."""
    return ShippingMethod.objects.create(
        code="flat",
        name="Flat rate",
        calculator="flat_rate",
        configuration={"amount": 990},
    )


@pytest.fixture
def pickup_method(db):
    """Самовывоз с пунктами выдачи во Франции и Бельгии."""
    method = ShippingMethod.objects.create(
        code="pickup_store",
        name="Store pickup",
        calculator="store_pickup",
        configuration={"amount": 500, "limit": 10},
    )
    locations = [
        ("PAR-01", "Paris Bastille", "12 rue de la Roquette", "75011", "Paris", "FR", 1),
        ("LYO-01", "Lyon Part-Dieu", "5 place Charles Béraudier", "69003", "Lyon", "FR", 0),
        ("BRU-01", "Bruxelles Centre", "1 Grand Place", "1000", "Bruxelles", "BE", 0),
    ]
    for code, name, street, postcode, city, country_code, position in locations:
        PickupLocation.objects.create(
            method=method,
            code=code,
            name=name,
            street=street,
            postcode=postcode,
            city=city,
            country_code=country_code,
            position=position,
        )
    PickupLocation.objects.create(
        method=method,
        code="PAR-99",
        name="Paris closed",
        street="1 rue fermée",
        postcode="75001",
        city="Paris",
        country_code="FR",
        is_enabled=False,
    )
    return method


@pytest.fixture
def address(db):
    """Адрес доставки в Париже."""
    return Address.objects.create(
        first_name="Jeanne",
        last_name="Martin",
        street="3 boulevard Voltaire",
        postcode="75011",
        city="Paris",
        country_code="FR",
    )


@pytest.fixture
def cart(db, address, pickup_method):
    """Корзина с адресом и отправлением, в котором выбран пункт PAR-01."""
    cart = Order.objects.create(shipping_address=address)
    Shipment.objects.create(order=cart, method=pickup_method, pickup_id="PAR-01")
    return cart


@pytest.fixture
def cart_client(client, cart):
    """Клиент, в сессии которого сохранена корзина."""
    session = client.session
    session[settings.CART_SESSION_KEY] = cart.pk
    session.save()
    return client
