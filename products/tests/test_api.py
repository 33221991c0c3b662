from datetime import timedelta
from decimal import Decimal

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from products.models import Product, ProductCategory

from .fakes import FakeMediaHost

OLD_IMAGE_URL = "https://res.cloudinary.com/test-cloud/image/upload/v1/products/old123.png"


def png(name="photo.png", size=64):
    return SimpleUploadedFile(name, b"\x89PNG" + b"0" * size, content_type="image/png")


class ProductAPITestBase(APITestCase):

    def setUp(self):
        FakeMediaHost.reset()
        self.category = ProductCategory.objects.create(category_id="c1", name="Electronics")
        self.other_category = ProductCategory.objects.create(category_id="c2", name="Office")

    def make_product(self, product_id, name="Mouse", image_url=OLD_IMAGE_URL, categories=None):
        product = Product.objects.create(
            product_id=product_id,
            name=name,
            price=Decimal("10.00"),
            stock_quantity=5,
            image_url=image_url
        )
        product.categories.set(categories if categories is not None else [self.category])
        return product


class ProductCreateAPITest(ProductAPITestBase):
    """Test cases for POST /products/"""

    def setUp(self):
        super().setUp()
        self.url = reverse('products:product_list')

    def form(self, **overrides):
        data = {
            'productId': 'p1',
            'name': 'Wireless Mouse',
            'price': '19.99',
            'stockQuantity': '3',
            'categoryId': 'c1',
            'image': png(),
        }
        data.update(overrides)
        return {key: value for key, value in data.items() if value is not None}

    def test_create_product(self):
        """Test product is created, uploaded and linked to its category"""
        response = self.client.post(self.url, self.form(), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['productId'], 'p1')
        self.assertEqual(response.data['price'], Decimal('19.99'))
        self.assertEqual(response.data['stockQuantity'], 3)
        self.assertEqual(len(FakeMediaHost.uploads), 1)

        product = Product.objects.get(pk='p1')
        self.assertTrue(product.image_url.startswith('https://res.cloudinary.com/test-cloud/'))
        self.assertEqual(response.data['imageUrl'], product.image_url)
        self.assertEqual(list(product.categories.values_list('pk', flat=True)), ['c1'])
        self.assertEqual(response.data['categories'][0]['categoryId'], 'c1')

    def test_create_generates_id_when_omitted(self):
        response = self.client.post(self.url, self.form(productId=None), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(response.data['productId']), 36)

    def test_missing_fields_listed_in_order(self):
        response = self.client.post(
            self.url,
            {'name': 'Mouse', 'categoryId': 'c1'},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Missing required fields')
        self.assertEqual(response.data['missingFields'], ['price', 'stockQuantity', 'image'])
        self.assertEqual(FakeMediaHost.uploads, [])
        self.assertFalse(Product.objects.exists())

    def test_zero_stock_is_not_missing(self):
        response = self.client.post(self.url, self.form(stockQuantity='0'), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['stockQuantity'], 0)

    def test_non_image_rejected(self):
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        response = self.client.post(self.url, self.form(image=upload), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Only image files are allowed!')
        self.assertEqual(FakeMediaHost.uploads, [])

    @override_settings(PRODUCT_IMAGE_MAX_SIZE=16)
    def test_oversized_image_rejected(self):
        response = self.client.post(self.url, self.form(image=png(size=64)), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data['message'].startswith('Image size should be less than'))

    def test_invalid_price_rejected(self):
        response = self.client.post(self.url, self.form(price='-1'), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('price', response.data['errors'])
        self.assertEqual(FakeMediaHost.uploads, [])

    def test_duplicate_product_id_rejected(self):
        self.make_product('p1')

        response = self.client.post(self.url, self.form(), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('productId', response.data['errors'])

    def test_unknown_category_uploads_nothing(self):
        response = self.client.post(self.url, self.form(categoryId='nope'), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Category not found')
        self.assertEqual(FakeMediaHost.uploads, [])
        self.assertFalse(Product.objects.exists())

    def test_upload_failure_writes_nothing(self):
        FakeMediaHost.fail_upload = True

        response = self.client.post(self.url, self.form(), format='multipart')

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['message'], 'Error uploading image')
        self.assertFalse(Product.objects.exists())


class ProductListAPITest(ProductAPITestBase):
    """Test cases for GET /products/"""

    def setUp(self):
        super().setUp()
        self.url = reverse('products:product_list')
        self.make_product('p1', name='Wireless Mouse')
        self.make_product('p2', name='Keyboard')

    def test_list_products(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual({item['productId'] for item in response.data}, {'p1', 'p2'})
        self.assertEqual(response.data[0]['categories'][0]['categoryId'], 'c1')

    def test_search_by_name_substring(self):
        response = self.client.get(self.url, {'search': 'Mouse'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['productId'] for item in response.data], ['p1'])

    def test_search_without_match(self):
        response = self.client.get(self.url, {'search': 'Monitor'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_no_authentication_required(self):
        self.client.credentials()
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)


class ProductUpdateAPITest(ProductAPITestBase):
    """Test cases for PUT /products/products/<productId>"""

    def setUp(self):
        super().setUp()
        self.product = self.make_product('p1', categories=[self.category, self.other_category])
        self.url = reverse('products:product_detail', kwargs={'product_id': 'p1'})

    def test_update_text_fields(self):
        response = self.client.put(
            self.url,
            {'name': 'Gaming Mouse', 'price': '25.50'},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'Gaming Mouse')
        self.assertEqual(self.product.price, Decimal('25.50'))
        self.assertEqual(self.product.stock_quantity, 5)
        self.assertEqual(self.product.image_url, OLD_IMAGE_URL)
        self.assertEqual(self.product.categories.count(), 2)
        self.assertEqual(FakeMediaHost.destroyed, [])

    def test_category_id_resets_links(self):
        third = ProductCategory.objects.create(category_id="c3", name="Garden")

        response = self.client.put(self.url, {'categoryId': 'c3'}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(list(self.product.categories.all()), [third])

    def test_new_image_replaces_old_one(self):
        response = self.client.put(self.url, {'image': png()}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(FakeMediaHost.destroyed, ['products/old123'])
        self.assertEqual(len(FakeMediaHost.uploads), 1)

        self.product.refresh_from_db()
        self.assertNotEqual(self.product.image_url, OLD_IMAGE_URL)
        self.assertEqual(response.data['imageUrl'], self.product.image_url)

    def test_destroy_failure_aborts_update(self):
        FakeMediaHost.fail_destroy = True

        response = self.client.put(
            self.url,
            {'name': 'Renamed', 'image': png()},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['message'], 'Error handling image update')
        self.assertEqual(FakeMediaHost.uploads, [])
        self.product.refresh_from_db()
        self.assertEqual(self.product.name, 'Mouse')
        self.assertEqual(self.product.image_url, OLD_IMAGE_URL)

    def test_unknown_product(self):
        url = reverse('products:product_detail', kwargs={'product_id': 'missing'})
        response = self.client.put(
            url,
            {'name': 'X', 'categoryId': 'c2', 'image': png()},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Product not found')
        self.assertEqual(FakeMediaHost.uploads, [])
        self.assertEqual(FakeMediaHost.destroyed, [])
        self.assertFalse(Product.objects.filter(pk='missing').exists())
        self.assertEqual(self.product.categories.count(), 2)

    def test_unknown_category(self):
        response = self.client.put(
            self.url,
            {'categoryId': 'nope', 'image': png()},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Category not found')
        self.assertEqual(FakeMediaHost.destroyed, [])
        self.assertEqual(self.product.categories.count(), 2)

    def test_negative_stock_rejected(self):
        response = self.client.put(self.url, {'stockQuantity': '-2'}, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class ProductDeleteAPITest(ProductAPITestBase):
    """Test cases for DELETE /products/products/<productId>"""

    def setUp(self):
        super().setUp()
        self.make_product('p1')
        self.url = reverse('products:product_detail', kwargs={'product_id': 'p1'})

    def test_delete_product(self):
        response = self.client.delete(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Product deleted successfully')
        self.assertEqual(FakeMediaHost.destroyed, ['products/old123'])
        self.assertFalse(Product.objects.filter(pk='p1').exists())
        self.assertEqual(self.category.products.count(), 0)

    def test_destroy_failure_still_deletes(self):
        FakeMediaHost.fail_destroy = True

        with self.assertLogs('products.services', 'WARNING') as logs:
            response = self.client.delete(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Product.objects.filter(pk='p1').exists())
        self.assertIn('Failed to delete image for product p1', logs.output[0])

    def test_delete_without_image(self):
        self.make_product('p2', image_url=None)
        url = reverse('products:product_detail', kwargs={'product_id': 'p2'})

        response = self.client.delete(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(FakeMediaHost.destroyed, [])

    def test_unknown_product(self):
        url = reverse('products:product_detail', kwargs={'product_id': 'missing'})
        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class MalformedRequestAPITest(ProductAPITestBase):
    """Unparseable bodies are client errors, not server errors"""

    def setUp(self):
        super().setUp()
        self.make_product('p1')

    def test_create_with_broken_json(self):
        response = self.client.post(
            reverse('products:product_list'),
            data='{"name": ',
            content_type='application/json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data['message'].startswith('JSON parse error'))
        self.assertNotIn('error', response.data)
        self.assertEqual(FakeMediaHost.uploads, [])

    def test_create_with_unsupported_content_type(self):
        response = self.client.post(
            reverse('products:product_list'),
            data='name=Mouse',
            content_type='text/plain'
        )

        self.assertEqual(response.status_code, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    def test_update_with_broken_json(self):
        response = self.client.put(
            reverse('products:product_detail', kwargs={'product_id': 'p1'}),
            data='{bad',
            content_type='application/json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Product.objects.get(pk='p1').name, 'Mouse')

    def test_create_category_with_broken_json(self):
        response = self.client.post(
            reverse('products:category_list'),
            data='{bad',
            content_type='application/json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_add_product_with_broken_json(self):
        response = self.client.post(
            reverse('products:category_add_product'),
            data='{bad',
            content_type='application/json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Product.objects.get(pk='p1').categories.count(), 1)


class CategoryAPITest(ProductAPITestBase):
    """Test cases for the category endpoints"""

    def test_list_categories_with_products(self):
        self.make_product('p1')

        response = self.client.get(reverse('products:category_list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        by_id = {item['categoryId']: item for item in response.data}
        self.assertEqual([p['productId'] for p in by_id['c1']['products']], ['p1'])
        self.assertEqual(by_id['c2']['products'], [])

    def test_create_category(self):
        response = self.client.post(
            reverse('products:category_list'),
            {'categoryId': 'c9', 'name': 'Garden', 'description': 'Outdoor'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['categoryId'], 'c9')
        self.assertEqual(response.data['products'], [])
        self.assertTrue(ProductCategory.objects.filter(pk='c9', name='Garden').exists())

    def test_create_category_generates_id(self):
        response = self.client.post(
            reverse('products:category_list'),
            {'name': 'Garden'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(response.data['categoryId']), 36)
        self.assertIsNone(response.data['description'])

    def test_create_category_requires_name(self):
        response = self.client.post(reverse('products:category_list'), {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data['errors'])

    def test_duplicate_category_id_rejected(self):
        response = self.client.post(
            reverse('products:category_list'),
            {'categoryId': 'c1', 'name': 'Again'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_category_keeps_products(self):
        self.make_product('p1')

        response = self.client.delete(
            reverse('products:category_detail', kwargs={'category_id': 'c1'})
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Product category deleted successfully')
        self.assertFalse(ProductCategory.objects.filter(pk='c1').exists())
        self.assertTrue(Product.objects.filter(pk='p1').exists())

    def test_delete_unknown_category(self):
        response = self.client.delete(
            reverse('products:category_detail', kwargs={'category_id': 'nope'})
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_category_products(self):
        self.make_product('p1')
        self.make_product('p2', categories=[self.other_category])

        response = self.client.get(
            reverse('products:category_products', kwargs={'category_id': 'c1'})
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Electronics')
        self.assertEqual([p['productId'] for p in response.data['products']], ['p1'])

    def test_category_products_unknown_category(self):
        response = self.client.get(
            reverse('products:category_products', kwargs={'category_id': 'nope'})
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Category not found')

    def test_add_product_to_category_is_additive(self):
        product = self.make_product('p1')

        response = self.client.post(
            reverse('products:category_add_product'),
            {'productId': 'p1', 'categoryId': 'c2'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            set(product.categories.values_list('pk', flat=True)),
            {'c1', 'c2'}
        )

    def test_add_product_to_category_twice(self):
        product = self.make_product('p1')

        response = self.client.post(
            reverse('products:category_add_product'),
            {'productId': 'p1', 'categoryId': 'c1'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(product.categories.count(), 1)

    def test_add_product_to_unknown_category(self):
        self.make_product('p1')

        response = self.client.post(
            reverse('products:category_add_product'),
            {'productId': 'p1', 'categoryId': 'nope'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_add_unknown_product_to_category(self):
        response = self.client.post(
            reverse('products:category_add_product'),
            {'productId': 'nope', 'categoryId': 'c1'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Product not found')


class NewArrivalsAPITest(ProductAPITestBase):
    """Test cases for GET /products/newArrivals"""

    def backdate(self, product_id, days):
        Product.objects.filter(pk=product_id).update(
            created_at=timezone.now() - timedelta(days=days)
        )

    def test_only_recent_products_listed(self):
        self.make_product('fresh')
        self.make_product('older', categories=[self.category, self.other_category])
        self.make_product('stale', categories=[self.other_category])
        self.backdate('fresh', 1)
        self.backdate('older', 10)
        self.backdate('stale', 120)

        response = self.client.get(reverse('products:new_arrivals'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        by_id = {item['categoryId']: item for item in response.data}
        self.assertEqual(
            [p['productId'] for p in by_id['c1']['products']],
            ['fresh', 'older']
        )
        self.assertEqual([p['productId'] for p in by_id['c2']['products']], ['older'])

    def test_categories_without_recent_products_dropped(self):
        self.make_product('stale', categories=[self.other_category])
        self.backdate('stale', 120)

        response = self.client.get(reverse('products:new_arrivals'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])
