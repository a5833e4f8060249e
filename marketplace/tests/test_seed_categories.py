from io import StringIO

from django.core.management import call_command
from django.test import TestCase, override_settings

from marketplace.models import Category


class SeedCategoriesCommandTest(TestCase):
    def test_seeds_fixed_categories_once(self):
        call_command("seed_categories", stdout=StringIO())
        call_command("seed_categories", stdout=StringIO())

        self.assertEqual(
            sorted(Category.objects.values_list("name", flat=True)),
            ["Beverage", "Clothes", "Food", "Furniture", "Tools"],
        )

    @override_settings(PURCHASE_CATEGORIES=["Food", "Books"])
    def test_reports_created_count(self):
        Category.objects.create(name="Food")
        out = StringIO()

        call_command("seed_categories", stdout=out)

        self.assertIn("Created 1 categories", out.getvalue())
