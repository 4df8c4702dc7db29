"""Тесты представлений списка и выбора пунктов выдачи."""

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from checkout.models import Shipment

DEFAULT_TEMPLATE = "pickup/checkout/select_shipping/pickup/list.html"


def list_url(code):
    return reverse("pickup:list", args=[code])


@pytest.mark.django_db
class TestPickupListView:
    """Тесты для представления pickup_list."""

    def test_list_for_cart(self, cart_client, countries):
        response = cart_client.get(list_url("pickup_store"))

        assert response.status_code == 200
        assert DEFAULT_TEMPLATE in [template.name for template in response.templates]

        method = response.context["method"]
        assert method["code"] == "pickup_store"
        assert method["index"] == 0
        assert method["pickup"]["current_id"] == "PAR-01"
        assert [item.code for item in method["pickup"]["list"]] == ["PAR-01", "LYO-01"]
        assert method["countries"] == {"BE": "Belgium", "FR": "France"}

    def test_rendered_html(self, cart_client, countries):
        """Текущий пункт отмечен, страна адреса выбрана."""
        content = cart_client.get(list_url("pickup_store")).content.decode()

        assert 'value="PAR-01" checked' in content
        assert 'value="LYO-01">' in content
        assert '<option value="FR" selected>France</option>' in content
        assert reverse("pickup:select", args=["pickup_store"]) in content

    def test_post_address_fields(self, cart_client, cart):
        """Поля формы адреса уточняют поиск пунктов."""
        response = cart_client.post(
            list_url("pickup_store") + "?index=3",
            {"country_code": "BE", "postcode": "1000", "csrfmiddlewaretoken": "x"},
        )

        method = response.context["method"]
        assert method["index"] == 3
        assert method["address"].country_code == "BE"
        assert [item.code for item in method["pickup"]["list"]] == ["BRU-01"]

        cart.shipping_address.refresh_from_db()
        assert cart.shipping_address.country_code == "FR"

    def test_index_from_body(self, cart_client):
        response = cart_client.post(list_url("pickup_store"), {"index": "4"})

        assert response.context["method"]["index"] == 4

    def test_invalid_index(self, cart_client):
        response = cart_client.get(list_url("pickup_store") + "?index=abc")

        assert response.context["method"]["index"] == 0

    def test_without_cart(self, client, pickup_method):
        """Без корзины в сессии список и адрес пустые."""
        response = client.get(list_url("pickup_store"))

        method = response.context["method"]
        assert response.status_code == 200
        assert method["pickup"] == {"current_id": None, "list": []}
        assert method["address"] is None
        assert "No pickup point available." in response.content.decode()

    def test_unknown_method(self, cart_client):
        response = cart_client.get(list_url("missing"))

        method = response.context["method"]
        assert response.status_code == 200
        assert method["pickup"] == {"current_id": None, "list": []}
        assert method["code"] == "missing"

    def test_method_without_pickup(self, cart_client, flat_rate_method):
        response = cart_client.get(list_url("flat"))

        assert response.context["method"]["pickup"] == {
            "current_id": None,
            "list": [],
        }
        assert response.context["method"]["address"] is None

    def test_without_method_code(self, cart_client):
        response = cart_client.get(reverse("pickup:list_default"))

        assert response.status_code == 200
        assert response.context["method"]["code"] is None

    def test_method_not_allowed(self, cart_client):
        response = cart_client.put(list_url("pickup_store"))

        assert response.status_code == 405


@pytest.mark.django_db
class TestSelectPickupView:
    """Тесты для представления select_pickup."""

    def select_url(self, code="pickup_store"):
        return reverse("pickup:select", args=[code])

    def test_select(self, cart_client, cart):
        response = cart_client.post(self.select_url(), {"pickup_id": "LYO-01"})

        assert response.status_code == 302
        assert response.url == list_url("pickup_store")
        assert Shipment.objects.get(order=cart).pickup_id == "LYO-01"

        messages = [str(message) for message in get_messages(response.wsgi_request)]
        assert messages == ["Пункт выдачи сохранен"]

    def test_select_after_address_search(self, cart_client, cart):
        """Пункт, найденный по другому адресу, сохраняется из формы списка."""
        page = cart_client.post(
            list_url("pickup_store"), {"country_code": "BE", "postcode": "1000"}
        ).content.decode()
        assert '<input type="hidden" name="country_code" value="BE">' in page
        assert '<input type="hidden" name="postcode" value="1000">' in page

        response = cart_client.post(
            self.select_url(),
            {
                "pickup_id": "BRU-01",
                "street": "",
                "postcode": "1000",
                "city": "Paris",
                "country_code": "BE",
            },
        )

        assert response.status_code == 302
        assert Shipment.objects.get(order=cart).pickup_id == "BRU-01"
        messages = [str(message) for message in get_messages(response.wsgi_request)]
        assert messages == ["Пункт выдачи сохранен"]

    def test_unavailable_pickup(self, cart_client, cart):
        """Без полей поиска пункт проверяется по адресу корзины."""
        response = cart_client.post(self.select_url(), {"pickup_id": "BRU-01"})

        assert response.status_code == 302
        assert Shipment.objects.get(order=cart).pickup_id == "PAR-01"
        messages = list(get_messages(response.wsgi_request))
        assert len(messages) == 1
        assert messages[0].level_tag == "error"

    def test_without_cart(self, client, pickup_method):
        response = client.post(self.select_url(), {"pickup_id": "PAR-01"})

        assert response.status_code == 302
        assert Shipment.objects.count() == 0

    def test_unknown_method(self, cart_client):
        response = cart_client.post(self.select_url("missing"), {"pickup_id": "X"})

        assert response.status_code == 404

    def test_redirect_to_next(self, cart_client):
        response = cart_client.post(
            self.select_url(), {"pickup_id": "LYO-01", "next": "/checkout/shipping/"}
        )

        assert response.url == "/checkout/shipping/"

    def test_external_next_is_ignored(self, cart_client):
        response = cart_client.post(
            self.select_url(), {"pickup_id": "LYO-01", "next": "https://example.org/"}
        )

        assert response.url == list_url("pickup_store")

    def test_get_not_allowed(self, cart_client):
        assert cart_client.get(self.select_url()).status_code == 405
