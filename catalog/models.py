from django.core.serializers.json import DjangoJSONEncoder
from django.db import models


class CompatibilityEncoder(DjangoJSONEncoder):
    """Keeps non-ASCII names (Škoda, Citroën) readable in the stored JSON text."""

    def __init__(self, *args, **kwargs):
        kwargs['ensure_ascii'] = False
        super().__init__(*args, **kwargs)


class Category(models.Model):
    name = models.CharField(max_length=100)
    name_en = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True, null=True)
    icon = models.CharField(max_length=20, blank=True, null=True)

    class Meta:
        ordering = ['id']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name_en


class Product(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name='products')
    image_url = models.URLField(max_length=500, blank=True, null=True)
    in_stock = models.BooleanField(default=True)
    part_number = models.CharField(max_length=100, blank=True, null=True)
    brand = models.CharField(max_length=100, blank=True, null=True)

    # Free-text vehicle compatibility, matched by substring (no FK to cars)
    compatible_brands = models.JSONField(default=list, blank=True, encoder=CompatibilityEncoder)
    compatible_models = models.JSONField(default=list, blank=True, encoder=CompatibilityEncoder)
    compatible_years = models.JSONField(default=list, blank=True, encoder=CompatibilityEncoder)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.part_number})" if self.part_number else self.name
