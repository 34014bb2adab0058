from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from orders.models import Order, OrderItem

pytestmark = pytest.mark.django_db


def make_order(product, email, total):
    order = Order.objects.create(
        first_name="Ана", last_name="Илиевска", email=email, phone="071555666",
        address="Гоце Делчев 5", city="Битола", postal_code="7000", total=Decimal(total),
    )
    OrderItem.objects.create(order=order, product=product, quantity=1, price=product.price)
    return order


def test_login_with_valid_credentials(api_client, admin_user, admin_password):
    response = api_client.post("/api/admin/login", {"username": "admin", "password": admin_password})

    assert response.status_code == 200
    assert response.data["user"]["username"] == "admin"
    assert "password" not in response.data["user"]
    assert api_client.session["_auth_user_id"] == str(admin_user.pk)


def test_login_with_wrong_password(api_client, admin_user):
    response = api_client.post("/api/admin/login", {"username": "admin", "password": "wrong"})

    assert response.status_code == 401
    assert response.data["message"] == "Invalid username or password"
    assert "_auth_user_id" not in api_client.session


def test_login_requires_both_fields(api_client, db):
    response = api_client.post("/api/admin/login", {"username": "admin"})

    assert response.status_code == 400
    assert "password" in response.data["errors"]


def test_inactive_admin_cannot_login(api_client, admin_user, admin_password):
    admin_user.is_active = False
    admin_user.save()

    response = api_client.post("/api/admin/login", {"username": "admin", "password": admin_password})

    assert response.status_code == 401


def test_passwords_are_stored_with_bcrypt(admin_user, admin_password):
    stored = get_user_model().objects.get(pk=admin_user.pk)

    assert stored.password.startswith("bcrypt_sha256$")
    assert stored.check_password(admin_password)


def test_orders_require_login(api_client, db):
    response = api_client.get("/api/admin/orders")

    assert response.status_code == 401


def test_admin_lists_orders_newest_first(admin_client, brake_pads, oil_filter):
    older = make_order(brake_pads, "first@example.mk", "3050.00")
    newer = make_order(oil_filter, "second@example.mk", "1050.00")

    response = admin_client.get("/api/admin/orders")

    assert response.status_code == 200
    assert [order["id"] for order in response.data] == [newer.id, older.id]
    item = response.data[0]["items"][0]
    assert item["product"]["part_number"] == "BSH-0451103318"
    assert item["product_name"] == oil_filter.name


def test_check_reports_session_state(api_client, admin_user, admin_password):
    before = api_client.get("/api/admin/check")
    assert before.status_code == 200
    assert before.data == {"is_authenticated": False, "user": None}

    api_client.post("/api/admin/login", {"username": "admin", "password": admin_password})
    after = api_client.get("/api/admin/check")

    assert after.data["is_authenticated"] is True
    assert after.data["user"]["email"] == "admin@megaautoparts.mk"


def test_logout_ends_session(admin_client):
    response = admin_client.post("/api/admin/logout")

    assert response.status_code == 200
    assert admin_client.get("/api/admin/orders").status_code == 401
    assert admin_client.get("/api/admin/check").data["is_authenticated"] is False


def test_session_cookie_lasts_24_hours(api_client, admin_user, admin_password):
    response = api_client.post("/api/admin/login", {"username": "admin", "password": admin_password})

    assert response.status_code == 200
    assert response.cookies["sessionid"]["max-age"] == 86400


def test_logged_in_browser_without_csrf_token(admin_user, admin_password, brake_pads):
    client = APIClient(enforce_csrf_checks=True)
    assert client.post("/api/admin/login", {"username": "admin", "password": admin_password}).status_code == 200

    cart = client.post("/api/cart", {"session_id": "k3x9m2p7q1w8e5r4t6y0u2i3o9", "product_id": brake_pads.id})
    contact = client.post("/api/contact", {"name": "Ана", "email": "ana@example.mk", "message": "Hello"})
    assert cart.status_code == 201
    assert contact.status_code == 201
    assert client.get("/api/admin/orders").status_code == 200

    assert client.post("/api/admin/logout").status_code == 200
    assert client.get("/api/admin/orders").status_code == 401
