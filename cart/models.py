from django.db import models
from django.db.models import F

from catalog.models import Product


class CartItemManager(models.Manager):
    def for_session(self, session_id):
        return self.filter(session_id=session_id).select_related('product', 'product__category')

    def add(self, session_id, product, quantity=1):
        """Add ``quantity`` of ``product`` to the session's cart, merging into an existing line."""
        item, created = self.get_or_create(
            session_id=session_id,
            product=product,
            defaults={'quantity': quantity},
        )
        if not created:
            self.filter(pk=item.pk).update(quantity=F('quantity') + quantity)
            item.refresh_from_db()
        return item, created

    def set_quantity(self, item_id, quantity):
        """
        Set a line's quantity. A quantity of zero or less removes the line and
        returns None; raises CartItem.DoesNotExist for an unknown id.
        """
        item = self.get(pk=item_id)
        if quantity <= 0:
            item.delete()
            return None
        item.quantity = quantity
        item.save(update_fields=['quantity'])
        return item

    def clear(self, session_id):
        deleted, _ = self.filter(session_id=session_id).delete()
        return deleted


class CartItem(models.Model):
    session_id = models.CharField(max_length=64, db_index=True)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='cart_items')
    quantity = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = CartItemManager()

    class Meta:
        unique_together = ('session_id', 'product')
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.session_id} - {self.product_id} x{self.quantity}"

    @property
    def subtotal(self):
        return self.product.price * self.quantity
