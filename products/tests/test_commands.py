from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from products.models import Product, ProductCategory


class SeedCatalogCommandTest(TestCase):

    def test_seed_is_idempotent(self):
        call_command('seed_catalog', stdout=StringIO())
        call_command('seed_catalog', stdout=StringIO())

        self.assertEqual(ProductCategory.objects.count(), 3)
        self.assertEqual(Product.objects.count(), 5)
        self.assertEqual(
            set(Product.objects.get(pk='wireless-mouse').categories.values_list('pk', flat=True)),
            {'electronics', 'office'}
        )

    def test_clear(self):
        ProductCategory.objects.create(category_id='old', name='Old')

        call_command('seed_catalog', '--clear', stdout=StringIO())

        self.assertFalse(ProductCategory.objects.filter(pk='old').exists())
        self.assertEqual(ProductCategory.objects.count(), 3)
