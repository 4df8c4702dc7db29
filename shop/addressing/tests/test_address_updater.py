"""Тесты заполнения адреса данными формы."""

import pytest

from addressing.models import Address
from addressing.services.address_updater import AddressFieldUpdater


class TestAddressFieldUpdater:
    """Тесты для AddressFieldUpdater."""

    @pytest.fixture
    def updater(self):
        return AddressFieldUpdater()

    def test_snake_case_fields(self, updater):
        """Поля в snake_case записываются в адрес."""
        address = Address()
        updated = updater.apply(
            address,
            {"first_name": "Jeanne", "postcode": "75011", "country_code": "FR"},
        )

        assert address.first_name == "Jeanne"
        assert address.postcode == "75011"
        assert address.country_code == "FR"
        assert updated == ["first_name", "postcode", "country_code"]

    @pytest.mark.parametrize("key", ["firstName", "FirstName", "FIRST_NAME", "firstname"])
    def test_key_spelling_variants(self, updater, key):
        """Ключ сравнивается без подчеркиваний и без учета регистра."""
        address = Address()
        updater.apply(address, {key: "Jeanne"})

        assert address.first_name == "Jeanne"

    def test_unknown_fields_are_ignored(self, updater):
        """Неизвестные поля не вызывают ошибок и ничего не меняют."""
        address = Address(street="3 boulevard Voltaire", city="Paris")
        before = {field: getattr(address, field) for field in Address.UPDATABLE_FIELDS}

        updated = updater.apply(
            address,
            {
                "csrfmiddlewaretoken": "token",
                "index": "2",
                "first-name": "Jeanne",
                "street name": "rue",
                "__class__": "hack",
                "save": "x",
                42: "answer",
            },
        )

        assert updated == []
        assert {
            field: getattr(address, field) for field in Address.UPDATABLE_FIELDS
        } == before
        assert address.__class__ is Address

    def test_protected_fields_are_not_updatable(self, updater):
        """Первичный ключ и служебные поля не заполняются из формы."""
        address = Address(pk=10)
        updated = updater.apply(address, {"id": "99", "pk": "99", "created_at": "x"})

        assert updated == []
        assert address.pk == 10
        assert address.created_at is None

    def test_none_value_becomes_empty_string(self, updater):
        address = Address(city="Paris")
        updater.apply(address, {"city": None})

        assert address.city == ""

    def test_address_is_not_saved(self, updater, db):
        """Заполнение адреса не сохраняет его в базу."""
        address = Address.objects.create(city="Paris")
        updater.apply(address, {"city": "Lyon"})

        address.refresh_from_db()
        assert address.city == "Paris"

    def test_custom_allow_list(self):
        updater = AddressFieldUpdater(allowed_fields=("city",))
        address = Address()
        updated = updater.apply(address, {"city": "Lyon", "street": "rue"})

        assert updated == ["city"]
        assert address.street == ""
