import logging

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from marketplace.models import Category


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Seeds the fixed product categories into the database."

    def handle(self, *args, **options):
        categories_to_seed = settings.PURCHASE_CATEGORIES

        self.stdout.write(self.style.SUCCESS("Seeding categories..."))

        created_count = 0
        with transaction.atomic():
            for category_name in categories_to_seed:
                category, created = Category.objects.get_or_create(name=category_name)
                if created:
                    self.stdout.write(self.style.SUCCESS(f"Created category: {category.name}"))
                    created_count += 1
                else:
                    self.stdout.write(self.style.WARNING(f"Category already exists: {category.name}"))

        logger.info(f"Seeded {created_count} of {len(categories_to_seed)} categories")
        self.stdout.write(self.style.SUCCESS(f"Category seeding complete. Created {created_count} categories."))
