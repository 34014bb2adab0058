from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from catalog.models import Category, Product


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def brakes(db):
    return Category.objects.create(name="Кочници", name_en="Brakes", slug="brakes")


@pytest.fixture
def filters_category(db):
    return Category.objects.create(name="Филтери", name_en="Filters", slug="filters")


@pytest.fixture
def brake_pads(brakes):
    return Product.objects.create(
        name="Brake pads Brembo Premium",
        description="Premium brake pads for European vehicles",
        price=Decimal("2850.00"),
        category=brakes,
        part_number="BRM-P50020",
        brand="Brembo",
        compatible_brands=["BMW", "Mercedes-Benz", "Audi"],
        compatible_models=["3 Series", "C-Class", "A4"],
        compatible_years=["2015", "2016", "2017"],
    )


@pytest.fixture
def brake_discs(brakes):
    return Product.objects.create(
        name="Brake discs Zimmermann Sport",
        description="Drilled sport discs",
        price=Decimal("4200.00"),
        category=brakes,
        part_number="ZIM-100.3234.52",
        brand="Zimmermann",
        compatible_brands=["BMW", "Mercedes-Benz"],
        compatible_models=["X3", "GLC"],
        compatible_years=["2018", "2019", "2020"],
    )


@pytest.fixture
def oil_filter(filters_category):
    return Product.objects.create(
        name="Oil filter Bosch",
        description="Full-flow oil filtration",
        price=Decimal("850.00"),
        category=filters_category,
        part_number="BSH-0451103318",
        brand="Bosch",
        compatible_brands=["Volkswagen", "Škoda"],
        compatible_models=["Golf", "Octavia"],
        compatible_years=["2010", "2011", "2012"],
    )


@pytest.fixture
def catalog(brake_pads, brake_discs, oil_filter):
    return [brake_pads, brake_discs, oil_filter]


@pytest.fixture
def admin_password():
    return "admin123"


@pytest.fixture
def admin_user(db, admin_password):
    return get_user_model().objects.create_user(
        "admin", admin_password, email="admin@megaautoparts.mk", first_name="Admin", last_name="User"
    )


@pytest.fixture
def admin_client(api_client, admin_user, admin_password):
    response = api_client.post("/api/admin/login", {"username": "admin", "password": admin_password})
    assert response.status_code == 200
    return api_client
