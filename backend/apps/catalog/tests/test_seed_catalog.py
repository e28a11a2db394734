from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.catalog.management.commands.seed_catalog import PRODUCTS
from apps.catalog.models import Product


class SeedCatalogCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_catalog", stdout=StringIO())
        call_command("seed_catalog", stdout=StringIO())
        self.assertEqual(Product.objects.count(), len(PRODUCTS))

    def test_flush_removes_unknown_products(self):
        Product.objects.create(slug="old", title="Old", price="1.00", in_stock=0, gender="men")
        out = StringIO()
        call_command("seed_catalog", "--flush", stdout=out)
        self.assertFalse(Product.objects.filter(slug="old").exists())
        self.assertIn("Catalog seed completed", out.getvalue())
