import logging
from decimal import Decimal

from .emails import send_order_confirmation
from .models import Order, OrderItem

logger = logging.getLogger(__name__)


def place_order(order_data, items):
    """
    Persist an order and its line items, then send the confirmation email.

    ``order_data`` holds validated shipping fields plus the submitted
    ``total``; ``items`` is a list of dicts with ``product``, ``quantity`` and
    ``price``. The order row and the item rows are written one after the
    other without a surrounding transaction, and a failed email does not undo
    either write.
    """
    order = Order.objects.create(**order_data)
    logger.info(f"Order #{order.id} created for {order.email}, total {order.total}")

    OrderItem.objects.bulk_create([
        OrderItem(
            order=order,
            product=item['product'],
            quantity=item['quantity'],
            price=item['price'],
        )
        for item in items
    ])
    logger.info(f"Order #{order.id}: {len(items)} item(s) stored")

    items_total = sum((Decimal(item['price']) * item['quantity'] for item in items), Decimal('0'))
    if items_total > order.total:
        logger.warning(f"Order #{order.id}: submitted total {order.total} is below item subtotal {items_total}")

    if items:
        send_order_confirmation(order)
    return order
