from decimal import Decimal

from django.db import IntegrityError
from django.test import TestCase

from products.models import Product, ProductCategory, ProductCategoryLink


class ProductCategoryModelTest(TestCase):
    """Test cases for ProductCategory model"""

    def setUp(self):
        self.category = ProductCategory.objects.create(
            name="Electronics",
            description="Electronic products"
        )

    def test_category_creation(self):
        """Test category gets a generated string id"""
        self.assertEqual(self.category.name, "Electronics")
        self.assertIsInstance(self.category.category_id, str)
        self.assertEqual(len(self.category.category_id), 36)

    def test_client_supplied_id(self):
        category = ProductCategory.objects.create(category_id="cat-1", name="Toys")
        self.assertEqual(ProductCategory.objects.get(pk="cat-1"), category)

    def test_category_str(self):
        """Test category string representation"""
        self.assertEqual(str(self.category), "Electronics")


class ProductModelTest(TestCase):
    """Test cases for Product model"""

    def setUp(self):
        self.category = ProductCategory.objects.create(category_id="c1", name="Electronics")
        self.product = Product.objects.create(
            product_id="p1",
            name="Wireless Mouse",
            price=Decimal("29.99"),
            stock_quantity=100,
            image_url="https://res.cloudinary.com/demo/image/upload/v1/products/abc.png"
        )
        self.product.categories.add(self.category)

    def test_product_creation(self):
        """Test product is created correctly"""
        self.assertEqual(self.product.name, "Wireless Mouse")
        self.assertEqual(self.product.price, Decimal("29.99"))
        self.assertEqual(self.product.stock_quantity, 100)
        self.assertEqual(list(self.category.products.all()), [self.product])

    def test_product_str(self):
        self.assertIn("Wireless Mouse", str(self.product))

    def test_duplicate_link_rejected(self):
        with self.assertRaises(IntegrityError):
            ProductCategoryLink.objects.create(product=self.product, category=self.category)

    def test_deleting_category_keeps_product(self):
        """Test links cascade away but products survive"""
        self.category.delete()

        self.assertTrue(Product.objects.filter(pk="p1").exists())
        self.assertFalse(ProductCategoryLink.objects.exists())

    def test_deleting_product_removes_links(self):
        self.product.delete()

        self.assertTrue(ProductCategory.objects.filter(pk="c1").exists())
        self.assertFalse(ProductCategoryLink.objects.exists())
