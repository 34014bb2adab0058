import logging

import sib_api_v3_sdk
from sib_api_v3_sdk.rest import ApiException
from django.conf import settings

logger = logging.getLogger(__name__)

# Initialize Brevo API client
configuration = sib_api_v3_sdk.Configuration()
configuration.api_key['api-key'] = settings.BREVO_API_KEY
brevo_api_instance = sib_api_v3_sdk.TransactionalEmailsApi(sib_api_v3_sdk.ApiClient(configuration))

PAYMENT_METHOD_LABELS = {
    'cash': 'Готовина при достава',
    'card': 'Картичка',
    'bank': 'Банковна дознака',
}


def build_items_list(order):
    return '\n'.join(
        f"• {item.product.name} - Количина: {item.quantity} - Цена: {item.price} ден."
        for item in order.items.select_related('product')
    )


def build_order_confirmation(order):
    """Return (subject, text, html) for an order confirmation email."""
    items_list = build_items_list(order)
    payment = PAYMENT_METHOD_LABELS.get(order.payment_method, order.payment_method)
    subject = f"Потврда за нарачка #{order.id} - MEGA AUTO PARTS"
    text = f"Ви благодариме за нарачката!\n\nДетали:\n{items_list}\n\nВкупно: {order.total} ден."
    html = f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h2 style="color: #dc2626; text-align: center;">MEGA AUTO PARTS</h2>
      <h3>Потврда за нарачка #{order.id}</h3>
      <p><strong>Име:</strong> {order.first_name} {order.last_name}</p>
      <p><strong>Емаил:</strong> {order.email}</p>
      <p><strong>Телефон:</strong> {order.phone}</p>
      <p><strong>Адреса:</strong> {order.address}, {order.city} {order.postal_code}</p>
      <p><strong>Начин на плаќање:</strong> {payment}</p>
      <pre style="font-family: Arial, sans-serif; white-space: pre-wrap;">{items_list}</pre>
      <p style="font-size: 18px; font-weight: bold;">Вкупно: {order.total} ден.</p>
      <p>Ви благодариме за нарачката! Ќе ве контактираме наскоро за потврда и достава.</p>
    </div>
    """
    return subject, text, html


def send_order_confirmation(order):
    """
    Send the confirmation email for ``order``. Returns True when the message
    was handed to Brevo (or logged because no API key is configured) and
    False when Brevo rejected it. Failures never propagate: the order is
    already stored.
    """
    try:
        subject, text, html = build_order_confirmation(order)

        if not settings.BREVO_API_KEY:
            logger.info(f"Email would be sent to: {order.email} Subject: {subject}")
            return True

        send_smtp_email = sib_api_v3_sdk.SendSmtpEmail(
            to=[{"email": order.email, "name": f"{order.first_name} {order.last_name}"}],
            sender={"email": settings.BREVO_SENDER_EMAIL, "name": settings.BREVO_SENDER_NAME},
            subject=subject,
            text_content=text,
            html_content=html,
        )
        brevo_api_instance.send_transac_email(send_smtp_email)
        logger.info(f"Order confirmation email sent to {order.email} for order #{order.id}")
        return True
    except ApiException as e:
        logger.error(f"Error sending order confirmation: {str(e)}, Status: {e.status}, Body: {e.body}")
        return False
    except Exception as e:
        logger.error(f"Unexpected error sending order confirmation for order #{order.id}: {str(e)}")
        return False
