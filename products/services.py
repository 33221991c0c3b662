"""
Product write path and reporting queries.

Each function is a single linear transaction: look up rows, optionally call
the media host once or twice, write rows. Nothing is retried. The media host
and the database are not kept consistent with each other:

- create: an upload failure aborts before any row is written; a database
  failure after a successful upload leaves the uploaded image orphaned.
- update: a failure destroying the previous image or uploading the new one
  aborts the request before the row is touched.
- delete: a failure destroying the image is logged and ignored, the row is
  deleted regardless.
"""
import logging

from django.db import transaction
from django.db.models import Prefetch

from .exceptions import MediaHostError
from .models import Product, ProductCategory
from .utils import months_ago

logger = logging.getLogger(__name__)

NEW_ARRIVALS_WINDOW_MONTHS = 2


def upload_image(media_host, image):
    """Push an uploaded file to the media host and return its secure URL."""
    image.seek(0)
    content = image.read()
    return media_host.upload(content, image.content_type).url


def destroy_image(media_host, image_url):
    """
    Delete the media host object behind `image_url`.

    Returns False when no storage key can be derived from the URL.
    Raises MediaHostError when the host call fails.
    """
    public_id = media_host.public_id_for(image_url)
    if not public_id:
        logger.warning(f"Could not derive a media key from {image_url}, skipping destroy")
        return False

    media_host.destroy(public_id)
    return True


def create_product(media_host, data, image):
    """
    Create a product connected to exactly one category.

    Args:
        media_host: MediaHost backend
        data: validated ProductCreateSerializer data
        image: uploaded image file (already validated)

    Raises:
        ProductCategory.DoesNotExist: unknown categoryId (nothing uploaded)
        MediaHostError: upload failed (nothing written)
    """
    category = ProductCategory.objects.get(pk=data['categoryId'])

    image_url = upload_image(media_host, image)

    fields = {
        'name': data['name'],
        'price': data['price'],
        'stock_quantity': data['stockQuantity'],
        'image_url': image_url,
    }
    if data.get('productId'):
        fields['product_id'] = data['productId']

    with transaction.atomic():
        product = Product.objects.create(**fields)
        product.categories.add(category)

    logger.info(f"Created product {product.product_id} in category {category.category_id}")
    return product


def update_product(media_host, product_id, data, image=None):
    """
    Update a product, optionally replacing its image and its category.

    When `categoryId` is given the category association is reset: every
    existing link is removed and exactly one is connected.

    Raises:
        Product.DoesNotExist: unknown product (no side effects)
        ProductCategory.DoesNotExist: unknown categoryId (no side effects)
        MediaHostError: previous image could not be destroyed or the new one
            could not be uploaded (row left untouched)
    """
    product = Product.objects.get(pk=product_id)

    category = None
    if data.get('categoryId'):
        category = ProductCategory.objects.get(pk=data['categoryId'])

    if image is not None:
        if product.image_url:
            destroy_image(media_host, product.image_url)
        product.image_url = upload_image(media_host, image)

    if 'name' in data:
        product.name = data['name']
    if 'price' in data:
        product.price = data['price']
    if 'stockQuantity' in data:
        product.stock_quantity = data['stockQuantity']

    with transaction.atomic():
        product.save()
        if category is not None:
            product.categories.set([category])

    logger.info(f"Updated product {product.product_id}")
    return product


def delete_product(media_host, product_id):
    """
    Delete a product and, best effort, its image.

    Raises:
        Product.DoesNotExist: unknown product
    """
    product = Product.objects.get(pk=product_id)

    if product.image_url:
        try:
            destroy_image(media_host, product.image_url)
        except MediaHostError as e:
            # Row deletion proceeds; the remote image may be left behind
            logger.warning(f"Failed to delete image for product {product_id}: {str(e)}")

    product.delete()
    logger.info(f"Deleted product {product_id}")


def add_product_to_category(product_id, category_id):
    """
    Connect one more category to a product, keeping existing links.

    Raises:
        Product.DoesNotExist, ProductCategory.DoesNotExist
    """
    product = Product.objects.get(pk=product_id)
    category = ProductCategory.objects.get(pk=category_id)
    product.categories.add(category)
    return product


def new_arrivals(now=None):
    """
    Categories with products created in the trailing two months.

    Each category carries only those products, newest first, in its
    `recent_products` attribute. Categories left without products are
    dropped.
    """
    cutoff = months_ago(NEW_ARRIVALS_WINDOW_MONTHS, now=now)

    recent_products = Product.objects.filter(
        created_at__gte=cutoff
    ).order_by('-created_at')

    categories = ProductCategory.objects.filter(
        products__created_at__gte=cutoff
    ).distinct().prefetch_related(
        Prefetch('products', queryset=recent_products, to_attr='recent_products')
    )

    return [category for category in categories if category.recent_products]
