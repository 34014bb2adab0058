import logging
from decimal import Decimal, ROUND_HALF_UP

import stripe
from django.conf import settings

from .errors import PaymentProviderNotConfigured

logger = logging.getLogger(__name__)


def to_minor_units(amount):
    return int((Decimal(amount) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def create_payment_intent(amount):
    """Create a Stripe PaymentIntent for ``amount`` and return its client secret."""
    if not settings.STRIPE_SECRET_KEY:
        raise PaymentProviderNotConfigured('Stripe not configured')

    stripe.api_key = settings.STRIPE_SECRET_KEY
    intent = stripe.PaymentIntent.create(
        amount=to_minor_units(amount),
        currency=settings.STRIPE_CURRENCY,
    )
    logger.info(f"Stripe payment intent {intent.id} created for {amount} {settings.STRIPE_CURRENCY}")
    return intent.client_secret
