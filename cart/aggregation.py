"""
Cart aggregation for the client-held cart.

The storefront keeps the cart on the client as an ordered list of lines,
each carrying a price snapshot taken when the product was added. This module
holds the same rules on the server so totals can be recomputed from a
submitted cart:

* adding a product that is already in the cart bumps its quantity instead of
  appending a second line;
* setting a line's quantity to zero or less removes the line;
* total price is the sum of price x quantity, total items the sum of
  quantities;
* shipping is free above ``FREE_SHIPPING_THRESHOLD``, otherwise a flat
  ``SHIPPING_COST`` (both in MKD).
"""
import random
import string
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

FREE_SHIPPING_THRESHOLD = Decimal('3000')
SHIPPING_COST = Decimal('200')
SESSION_ID_LENGTH = 26


def generate_session_id():
    return ''.join(random.choices(string.ascii_lowercase + string.digits, k=SESSION_ID_LENGTH))


@dataclass
class CartLine:
    product_id: int
    name: str
    price: Decimal
    quantity: int = 1
    image_url: Optional[str] = None

    @property
    def subtotal(self):
        return self.price * self.quantity

    def to_dict(self):
        return {
            'product_id': self.product_id,
            'name': self.name,
            'price': f"{self.price:.2f}",
            'quantity': self.quantity,
            'image_url': self.image_url,
            'subtotal': f"{self.subtotal:.2f}",
        }


@dataclass
class Cart:
    session_id: str = field(default_factory=generate_session_id)
    items: List[CartLine] = field(default_factory=list)

    def _find(self, product_id):
        for line in self.items:
            if line.product_id == product_id:
                return line
        return None

    def add_item(self, product_id, name, price, image_url=None, quantity=1):
        line = self._find(product_id)
        if line is not None:
            line.quantity += quantity
            return line
        line = CartLine(
            product_id=product_id,
            name=name,
            price=Decimal(str(price)),
            quantity=quantity,
            image_url=image_url,
        )
        self.items.append(line)
        return line

    def remove_item(self, product_id):
        self.items = [line for line in self.items if line.product_id != product_id]

    def update_quantity(self, product_id, quantity):
        if quantity <= 0:
            self.remove_item(product_id)
            return
        line = self._find(product_id)
        if line is not None:
            line.quantity = quantity

    def clear(self):
        self.items = []

    def total_price(self):
        return sum((line.subtotal for line in self.items), Decimal('0'))

    def total_items(self):
        return sum(line.quantity for line in self.items)

    def shipping_cost(self):
        if not self.items or self.total_price() > FREE_SHIPPING_THRESHOLD:
            return Decimal('0')
        return SHIPPING_COST

    def final_total(self):
        return self.total_price() + self.shipping_cost()

    @classmethod
    def from_lines(cls, lines, session_id=None):
        """Fold submitted lines into a cart, merging repeated product ids."""
        cart = cls(session_id=session_id) if session_id else cls()
        for line in lines:
            cart.add_item(
                product_id=line['product_id'],
                name=line['name'],
                price=line['price'],
                image_url=line.get('image_url'),
                quantity=line.get('quantity', 1),
            )
        return cart

    def to_dict(self):
        return {
            'session_id': self.session_id,
            'items': [line.to_dict() for line in self.items],
            'total_items': self.total_items(),
            'total_price': f"{self.total_price():.2f}",
            'shipping_cost': f"{self.shipping_cost():.2f}",
            'final_total': f"{self.final_total():.2f}",
        }
