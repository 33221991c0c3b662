from datetime import timedelta
from decimal import Decimal

from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import IntegrityError
from django.test import TestCase
from django.utils import timezone

from products import services
from products.exceptions import MediaHostError
from products.models import Product, ProductCategory

from .fakes import FakeMediaHost


class ServicesTest(TestCase):
    """Test cases for the product write path"""

    def setUp(self):
        FakeMediaHost.reset()
        self.media_host = FakeMediaHost()
        self.category = ProductCategory.objects.create(category_id="c1", name="Electronics")

    def test_upload_image_reads_from_start(self):
        image = SimpleUploadedFile("p.png", b"pngbytes", content_type="image/png")
        image.read()

        url = services.upload_image(self.media_host, image)

        self.assertTrue(url.endswith('.png'))
        self.assertEqual(FakeMediaHost.uploads[0][1:], (b"pngbytes", "image/png"))

    def test_destroy_image_without_key(self):
        self.assertFalse(services.destroy_image(self.media_host, "https://example.com/"))
        self.assertEqual(FakeMediaHost.destroyed, [])

    def test_create_product_database_failure_leaves_upload(self):
        """An upload is not rolled back when the row cannot be written"""
        Product.objects.create(product_id="dup", name="Taken", price=Decimal("1.00"))
        image = SimpleUploadedFile("p.png", b"pngbytes", content_type="image/png")

        with self.assertRaises(IntegrityError):
            services.create_product(self.media_host, {
                'productId': 'dup',
                'name': 'Other',
                'price': Decimal('2.00'),
                'stockQuantity': 1,
                'categoryId': 'c1',
            }, image)

        self.assertEqual(len(FakeMediaHost.uploads), 1)

    def test_update_upload_failure_keeps_row(self):
        product = Product.objects.create(product_id="p1", name="Mouse", price=Decimal("1.00"))
        FakeMediaHost.fail_upload = True
        image = SimpleUploadedFile("p.png", b"pngbytes", content_type="image/png")

        with self.assertRaises(MediaHostError):
            services.update_product(self.media_host, "p1", {'name': 'Renamed'}, image=image)

        product.refresh_from_db()
        self.assertEqual(product.name, "Mouse")

    def test_new_arrivals_window(self):
        now = timezone.now()
        recent = Product.objects.create(product_id="r", name="Recent", price=Decimal("1.00"))
        old = Product.objects.create(product_id="o", name="Old", price=Decimal("1.00"))
        recent.categories.add(self.category)
        old.categories.add(self.category)
        Product.objects.filter(pk="r").update(created_at=now - timedelta(days=50))
        Product.objects.filter(pk="o").update(created_at=now - timedelta(days=70))

        categories = services.new_arrivals(now=now)

        self.assertEqual(len(categories), 1)
        self.assertEqual([p.product_id for p in categories[0].recent_products], ["r"])
