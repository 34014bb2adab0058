import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils.text import slugify

from cars.models import CarBrand, CarModel
from catalog import seed_data
from catalog.models import Category, Product

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Load the starter catalog (categories, car brands and models, products) and the default admin user.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--admin-password',
            default=None,
            help='Password for the default admin user (defaults to SEED_ADMIN_PASSWORD).',
        )

    def handle(self, *args, **options):
        if Category.objects.exists():
            self.stdout.write('Catalog already initialized, nothing to do.')
        else:
            with transaction.atomic():
                self.seed_catalog()
            self.stdout.write(self.style.SUCCESS('Database initialized with automotive parts catalog'))

        password = options['admin_password'] or settings.SEED_ADMIN_PASSWORD
        self.seed_admin(password)

    def seed_catalog(self):
        categories = {
            data['slug']: Category.objects.create(**data)
            for data in seed_data.CATEGORIES
        }

        brands = {
            slug: CarBrand.objects.create(name=name, slug=slug)
            for name, slug in seed_data.CAR_BRANDS
        }
        CarModel.objects.bulk_create([
            CarModel(brand=brands[brand_slug], name=name, slug=slugify(name))
            for brand_slug, names in seed_data.CAR_MODELS.items()
            for name in names
        ])

        for data in seed_data.PRODUCTS:
            fields = dict(data)
            fields['category'] = categories[fields['category']]
            Product.objects.create(**fields)

        logger.info(
            f"Seeded {len(categories)} categories, {len(brands)} car brands "
            f"and {len(seed_data.PRODUCTS)} products"
        )

    def seed_admin(self, password):
        User = get_user_model()
        username = seed_data.ADMIN['username']
        if User.objects.filter(username=username).exists():
            return
        extra = {key: value for key, value in seed_data.ADMIN.items() if key != 'username'}
        User.objects.create_user(username, password, **extra)
        logger.info(f"Default admin user '{username}' created")
        self.stdout.write(self.style.SUCCESS(f"Admin user '{username}' created"))
