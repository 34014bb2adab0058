from types import SimpleNamespace

import pytest
import requests
import stripe

from payments import paypal
from payments.stripe_gateway import to_minor_units

pytestmark = pytest.mark.django_db


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self.payload = payload
        self.text = str(payload)

    def json(self):
        return self.payload


@pytest.fixture
def stripe_settings(settings):
    settings.STRIPE_SECRET_KEY = "sk_test_123"
    settings.STRIPE_CURRENCY = "mkd"
    return settings


@pytest.fixture
def paypal_settings(settings):
    settings.PAYPAL_CLIENT_ID = "client"
    settings.PAYPAL_CLIENT_SECRET = "secret"
    settings.PAYPAL_API_URL = "https://paypal.test/"
    settings.PAYPAL_CURRENCY = "EUR"
    return settings


@pytest.fixture
def paypal_calls(monkeypatch, paypal_settings):
    """Route requests.post to canned PayPal answers keyed by URL path."""
    calls = []
    responses = {
        "/v1/oauth2/token": FakeResponse(200, {"access_token": "A21AA"}),
        "/v1/identity/generate-token": FakeResponse(200, {"client_token": "ct-1"}),
        "/v2/checkout/orders": FakeResponse(201, {"id": "5O190127TN364715T", "status": "CREATED"}),
        "/v2/checkout/orders/5O190127TN364715T/capture": FakeResponse(201, {"id": "5O190127TN364715T", "status": "COMPLETED"}),
    }

    def fake_post(url, **kwargs):
        path = url.replace("https://paypal.test", "")
        calls.append((path, kwargs))
        return responses[path]

    monkeypatch.setattr(paypal.requests, "post", fake_post)
    return SimpleNamespace(calls=calls, responses=responses)


def test_minor_units_rounding():
    assert to_minor_units("2850.00") == 285000
    assert to_minor_units("10.005") == 1001


def test_stripe_intent_returns_client_secret(api_client, stripe_settings, monkeypatch):
    created = {}

    def fake_create(**kwargs):
        created.update(kwargs)
        return SimpleNamespace(id="pi_123", client_secret="pi_123_secret_456")

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)

    response = api_client.post("/api/payments/stripe/intent", {"amount": "2850.00"})

    assert response.status_code == 200
    assert response.data == {"client_secret": "pi_123_secret_456"}
    assert created == {"amount": 285000, "currency": "mkd"}


def test_stripe_intent_requires_amount(api_client, stripe_settings):
    response = api_client.post("/api/payments/stripe/intent", {})

    assert response.status_code == 400


def test_stripe_not_configured(api_client, settings):
    settings.STRIPE_SECRET_KEY = ""

    response = api_client.post("/api/payments/stripe/intent", {"amount": "100.00"})

    assert response.status_code == 500
    assert response.data["message"] == "Stripe not configured"


def test_stripe_error_maps_to_bad_gateway(api_client, stripe_settings, monkeypatch):
    def fail(**kwargs):
        raise stripe.APIConnectionError("Network is unreachable")

    monkeypatch.setattr(stripe.PaymentIntent, "create", fail)

    response = api_client.post("/api/payments/stripe/intent", {"amount": "100.00"})

    assert response.status_code == 502
    assert "Network is unreachable" in response.data["message"]


def test_paypal_setup_returns_client_token(api_client, paypal_calls):
    response = api_client.get("/api/payments/paypal/setup")

    assert response.status_code == 200
    assert response.data == {"client_token": "ct-1"}
    token_path, token_kwargs = paypal_calls.calls[0]
    assert token_path == "/v1/oauth2/token"
    assert token_kwargs["auth"] == ("client", "secret")
    assert paypal_calls.calls[1][1]["headers"]["Authorization"] == "Bearer A21AA"


def test_paypal_create_order(api_client, paypal_calls):
    response = api_client.post("/api/payments/paypal/order", {"amount": "49.9"})

    assert response.status_code == 200
    assert response.data["id"] == "5O190127TN364715T"
    path, kwargs = paypal_calls.calls[-1]
    assert path == "/v2/checkout/orders"
    assert kwargs["json"]["intent"] == "CAPTURE"
    assert kwargs["json"]["purchase_units"][0]["amount"] == {"currency_code": "EUR", "value": "49.90"}
    assert kwargs["timeout"] == 10


def test_paypal_capture_order(api_client, paypal_calls):
    response = api_client.post("/api/payments/paypal/order/5O190127TN364715T/capture")

    assert response.status_code == 200
    assert response.data["status"] == "COMPLETED"


def test_paypal_provider_error_is_passed_through(api_client, paypal_calls):
    paypal_calls.responses["/v2/checkout/orders"] = FakeResponse(422, {"name": "UNPROCESSABLE_ENTITY"})

    response = api_client.post("/api/payments/paypal/order", {"amount": "10.00"})

    assert response.status_code == 502
    assert response.data["status_code"] == 422
    assert response.data["details"] == {"name": "UNPROCESSABLE_ENTITY"}


def test_paypal_connection_failure(api_client, paypal_settings, monkeypatch):
    def refuse(url, **kwargs):
        raise requests.exceptions.ConnectionError("connection refused")

    monkeypatch.setattr(paypal.requests, "post", refuse)

    response = api_client.get("/api/payments/paypal/setup")

    assert response.status_code == 502
    assert response.data["message"] == "Failed to connect to payment service"


def test_paypal_not_configured(api_client, settings):
    settings.PAYPAL_CLIENT_ID = ""

    response = api_client.get("/api/payments/paypal/setup")

    assert response.status_code == 500
    assert response.data["message"] == "PayPal not configured"
