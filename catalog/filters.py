"""
Product listing filters.

Every filter is optional. Present filters are ANDed together, an absent or
blank filter adds no constraint, and the whole matching set is returned
(the catalog is small enough that no pagination is applied).

``search`` is a case-sensitive substring match against name, description or
part number. The three compatibility filters are case-sensitive substring
matches against the textual form of the corresponding list, so ``"BMW"``
matches a product whose ``compatible_brands`` is ``["BMW", "Mini"]``.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.db.models import Q, TextField, Value
from django.db.models.functions import Cast, StrIndex

logger = logging.getLogger(__name__)

COMPATIBILITY_LOOKUPS = {
    'compatible_brand': 'compatible_brands',
    'compatible_model': 'compatible_models',
    'compatible_year': 'compatible_years',
}


class InvalidFilter(ValueError):
    def __init__(self, field, message):
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass
class ProductFilters:
    category_id: Optional[int] = None
    brand_id: Optional[int] = None  # accepted for API compatibility, never applied
    search: Optional[str] = None
    compatible_brand: Optional[str] = None
    compatible_model: Optional[str] = None
    compatible_year: Optional[str] = None

    @classmethod
    def from_query_params(cls, params):
        values = {}
        for name in ('category_id', 'brand_id'):
            raw = params.get(name)
            if raw in (None, ''):
                continue
            try:
                values[name] = int(raw)
            except (TypeError, ValueError):
                raise InvalidFilter(name, f"{name} must be an integer")
        for name in ('search', *COMPATIBILITY_LOOKUPS):
            raw = params.get(name)
            if raw:
                values[name] = raw
        return cls(**values)


def filter_products(queryset, filters: ProductFilters):
    """Apply ``filters`` to a Product queryset and return the narrowed queryset."""
    if filters.category_id:
        queryset = queryset.filter(category_id=filters.category_id)

    if filters.search:
        # StrIndex is INSTR on SQLite and STRPOS on PostgreSQL, both case-sensitive
        search = Value(filters.search)
        queryset = queryset.alias(
            name_pos=StrIndex('name', search),
            description_pos=StrIndex('description', search),
            part_number_pos=StrIndex('part_number', search),
        ).filter(Q(name_pos__gt=0) | Q(description_pos__gt=0) | Q(part_number_pos__gt=0))

    for param, column in COMPATIBILITY_LOOKUPS.items():
        value = getattr(filters, param)
        if not value:
            continue
        alias = f"{column}_pos"
        queryset = queryset.alias(**{alias: StrIndex(Cast(column, output_field=TextField()), Value(value))})
        queryset = queryset.filter(**{f"{alias}__gt": 0})

    logger.debug(f"Product filters applied: {filters}")
    return queryset
