from decimal import Decimal

import pytest
from sib_api_v3_sdk.rest import ApiException

from orders import emails
from orders.models import Order, OrderItem

pytestmark = pytest.mark.django_db


def shipping(**overrides):
    data = {
        "first_name": "Марко",
        "last_name": "Петровски",
        "email": "marko@example.mk",
        "phone": "070123456",
        "address": "Партизанска 12",
        "city": "Скопје",
        "postal_code": "1000",
        "payment_method": "cash",
    }
    data.update(overrides)
    return data


def submission(products, total="3900.00", **overrides):
    return {
        "order": dict(shipping(**overrides), total=total),
        "items": [
            {"product_id": product.id, "quantity": quantity, "price": str(product.price)}
            for product, quantity in products
        ],
    }


def test_create_order_persists_order_and_items(api_client, brake_pads, oil_filter):
    payload = submission([(brake_pads, 1), (oil_filter, 1)], total="3700.00")

    response = api_client.post("/api/orders", payload)

    assert response.status_code == 201
    order = Order.objects.get(id=response.data["id"])
    assert order.total == Decimal("3700.00")
    assert order.status == "pending"
    assert order.items.count() == 2
    assert response.data["total"] == "3700.00"
    assert [item["product_id"] for item in response.data["items"]] == [brake_pads.id, oil_filter.id]


def test_order_prices_are_snapshots(api_client, brake_pads):
    response = api_client.post("/api/orders", submission([(brake_pads, 2)], total="5700.00"))
    order_id = response.data["id"]

    brake_pads.price = Decimal("9999.00")
    brake_pads.save()

    detail = api_client.get(f"/api/orders/{order_id}")
    assert detail.status_code == 200
    assert detail.data["total"] == "5700.00"
    assert detail.data["items"][0]["price"] == "2850.00"
    assert OrderItem.objects.get(order_id=order_id).subtotal == Decimal("5700.00")


def test_postal_code_whitespace_is_stripped(api_client, brake_pads):
    response = api_client.post("/api/orders", submission([(brake_pads, 1)], postal_code="10 00"))

    assert response.status_code == 201
    assert response.data["postal_code"] == "1000"


@pytest.mark.parametrize("field, value", [
    ("email", "not-an-email"),
    ("phone", "070123"),
    ("postal_code", "123"),
    ("postal_code", "123456"),
    ("address", "Ul"),
    ("first_name", "   "),
    ("payment_method", "crypto"),
])
def test_invalid_shipping_fields_are_rejected(api_client, brake_pads, field, value):
    response = api_client.post("/api/orders", submission([(brake_pads, 1)], **{field: value}))

    assert response.status_code == 400
    assert response.data["message"] == "Invalid order data"
    assert field in response.data["errors"]["order"]
    assert Order.objects.count() == 0


def test_order_requires_items(api_client, db):
    payload = {"order": dict(shipping(), total="200.00"), "items": []}

    response = api_client.post("/api/orders", payload)

    assert response.status_code == 400
    assert "items" in response.data["errors"]


def test_order_with_unknown_product_is_rejected(api_client, db):
    payload = {
        "order": dict(shipping(), total="200.00"),
        "items": [{"product_id": 777, "quantity": 1, "price": "100.00"}],
    }

    response = api_client.post("/api/orders", payload)

    assert response.status_code == 400
    assert Order.objects.count() == 0


def test_order_detail_not_found(api_client, db):
    response = api_client.get("/api/orders/31337")

    assert response.status_code == 404


def test_confirmation_email_is_sent_through_brevo(api_client, brake_pads, settings, monkeypatch):
    settings.BREVO_API_KEY = "xkeysib-test"
    sent = []
    monkeypatch.setattr(emails.brevo_api_instance, "send_transac_email", lambda email: sent.append(email))

    response = api_client.post("/api/orders", submission([(brake_pads, 1)], total="3050.00"))

    assert response.status_code == 201
    assert len(sent) == 1
    assert sent[0].to == [{"email": "marko@example.mk", "name": "Марко Петровски"}]
    assert f"#{response.data['id']}" in sent[0].subject
    assert brake_pads.name in sent[0].text_content


def test_email_failure_does_not_roll_back_order(api_client, brake_pads, settings, monkeypatch):
    settings.BREVO_API_KEY = "xkeysib-test"

    def fail(email):
        raise ApiException(status=500, reason="Internal Server Error")

    monkeypatch.setattr(emails.brevo_api_instance, "send_transac_email", fail)

    response = api_client.post("/api/orders", submission([(brake_pads, 1)], total="3050.00"))

    assert response.status_code == 201
    assert Order.objects.count() == 1
    assert OrderItem.objects.count() == 1


def test_email_is_only_logged_without_api_key(brake_pads, settings, monkeypatch):
    settings.BREVO_API_KEY = ""
    monkeypatch.setattr(
        emails.brevo_api_instance, "send_transac_email",
        lambda email: pytest.fail("Brevo must not be called without an API key"),
    )
    order = Order.objects.create(total=Decimal("3050.00"), **shipping())

    assert emails.send_order_confirmation(order) is True


def test_checkout_validate_reports_field_errors(api_client):
    response = api_client.post("/api/checkout/validate", shipping(email="bad", phone="123"))

    assert response.status_code == 400
    assert set(response.data["errors"]) == {"email", "phone"}


def test_checkout_validate_accepts_valid_form(api_client):
    response = api_client.post("/api/checkout/validate", shipping(payment_method="bank"))

    assert response.status_code == 200
    assert response.data["data"]["payment_method"] == "bank"


def test_failure_building_email_does_not_fail_order(api_client, brake_pads, monkeypatch):
    def broken(order):
        raise RuntimeError("database went away")

    monkeypatch.setattr(emails, "build_items_list", broken)

    response = api_client.post("/api/orders", submission([(brake_pads, 1)], total="3050.00"))

    assert response.status_code == 201
    assert Order.objects.filter(id=response.data["id"]).exists()
