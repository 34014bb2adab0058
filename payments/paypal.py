"""Thin pass-through to the PayPal REST API (orders v2)."""
import logging
from decimal import Decimal

import requests
from django.conf import settings

from .errors import PaymentProviderError, PaymentProviderNotConfigured

logger = logging.getLogger(__name__)


def _base_url():
    return settings.PAYPAL_API_URL.rstrip('/')


def _json_or_text(response):
    try:
        return response.json()
    except ValueError:
        return response.text


def _check(response, action):
    if response.status_code >= 400:
        details = _json_or_text(response)
        logger.error(f"PayPal {action} failed [{response.status_code}]: {details}")
        raise PaymentProviderError(f"PayPal {action} failed", response.status_code, details)
    return response.json()


def get_access_token():
    if not (settings.PAYPAL_CLIENT_ID and settings.PAYPAL_CLIENT_SECRET):
        raise PaymentProviderNotConfigured('PayPal not configured')

    response = requests.post(
        f"{_base_url()}/v1/oauth2/token",
        data={"grant_type": "client_credentials"},
        auth=(settings.PAYPAL_CLIENT_ID, settings.PAYPAL_CLIENT_SECRET),
        timeout=settings.PAYMENT_TIMEOUT,
    )
    return _check(response, 'authentication')['access_token']


def _headers(access_token):
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {access_token}",
    }


def generate_client_token():
    access_token = get_access_token()
    response = requests.post(
        f"{_base_url()}/v1/identity/generate-token",
        headers=_headers(access_token),
        timeout=settings.PAYMENT_TIMEOUT,
    )
    return _check(response, 'client token')['client_token']


def create_order(amount, currency=None, intent='CAPTURE'):
    access_token = get_access_token()
    payload = {
        "intent": intent,
        "purchase_units": [
            {
                "amount": {
                    "currency_code": currency or settings.PAYPAL_CURRENCY,
                    "value": f"{Decimal(amount):.2f}",
                }
            }
        ],
    }
    response = requests.post(
        f"{_base_url()}/v2/checkout/orders",
        json=payload,
        headers=_headers(access_token),
        timeout=settings.PAYMENT_TIMEOUT,
    )
    data = _check(response, 'order create')
    logger.info(f"PayPal order {data.get('id')} created for {payload['purchase_units'][0]['amount']}")
    return data


def capture_order(order_id):
    access_token = get_access_token()
    response = requests.post(
        f"{_base_url()}/v2/checkout/orders/{order_id}/capture",
        headers=_headers(access_token),
        timeout=settings.PAYMENT_TIMEOUT,
    )
    data = _check(response, 'order capture')
    logger.info(f"PayPal order {order_id} captured with status {data.get('status')}")
    return data
