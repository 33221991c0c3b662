from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from products.models import Product, ProductCategory

from .fakes import FakeMediaHost

User = get_user_model()


class ProductAdminTest(TestCase):
    """Test cases for the product admin"""

    def setUp(self):
        FakeMediaHost.reset()
        admin = User.objects.create_superuser(email="admin@example.com", password="adminpass123")
        self.client.force_login(admin)

        category = ProductCategory.objects.create(category_id="c1", name="Electronics")
        for product_id in ("p1", "p2"):
            product = Product.objects.create(
                product_id=product_id,
                name=f"Product {product_id}",
                price=Decimal("10.00"),
                image_url=f"https://res.cloudinary.com/test-cloud/image/upload/v1/products/{product_id}.png"
            )
            product.categories.add(category)

    def test_changelists_render(self):
        response = self.client.get(reverse('admin:products_product_changelist'))
        self.assertEqual(response.status_code, 200)

        response = self.client.get(reverse('admin:products_productcategory_changelist'))
        self.assertEqual(response.status_code, 200)

    def test_bulk_delete_removes_images(self):
        response = self.client.post(
            reverse('admin:products_product_changelist'),
            {
                'action': 'delete_selected',
                '_selected_action': ['p1', 'p2'],
                'post': 'yes',
            }
        )

        self.assertEqual(response.status_code, 302)
        self.assertFalse(Product.objects.exists())
        self.assertEqual(sorted(FakeMediaHost.destroyed), ['products/p1', 'products/p2'])

    def test_delete_view_removes_image(self):
        response = self.client.post(
            reverse('admin:products_product_delete', args=['p1']),
            {'post': 'yes'}
        )

        self.assertEqual(response.status_code, 302)
        self.assertFalse(Product.objects.filter(pk='p1').exists())
        self.assertEqual(FakeMediaHost.destroyed, ['products/p1'])

    def test_primary_keys_read_only_on_change(self):
        response = self.client.get(reverse('admin:products_product_change', args=['p1']))
        self.assertEqual(response.status_code, 200)
        self.assertNotIn('product_id', response.context['adminform'].form.fields)

        response = self.client.get(reverse('admin:products_productcategory_change', args=['c1']))
        self.assertEqual(response.status_code, 200)
        self.assertNotIn('category_id', response.context['adminform'].form.fields)

    def test_primary_keys_editable_on_add(self):
        response = self.client.get(reverse('admin:products_product_add'))
        self.assertIn('product_id', response.context['adminform'].form.fields)

    def test_change_does_not_duplicate_product(self):
        response = self.client.post(
            reverse('admin:products_product_change', args=['p1']),
            {
                'product_id': 'p1-renamed',
                'name': 'Renamed',
                'price': '12.00',
                'stock_quantity': '3',
                'image_url': '',
                'category_links-TOTAL_FORMS': '1',
                'category_links-INITIAL_FORMS': '1',
                'category_links-MIN_NUM_FORMS': '0',
                'category_links-MAX_NUM_FORMS': '1000',
                'category_links-0-id': str(Product.objects.get(pk='p1').category_links.get().pk),
                'category_links-0-product': 'p1',
                'category_links-0-category': 'c1',
            }
        )

        self.assertEqual(response.status_code, 302)
        self.assertEqual(Product.objects.count(), 2)
        self.assertFalse(Product.objects.filter(pk='p1-renamed').exists())
        self.assertEqual(Product.objects.get(pk='p1').name, 'Renamed')
