import uuid

from django.db import models
from django.core.validators import MinValueValidator


def generate_id():
    """Default primary key for rows whose id the client did not supply."""
    return str(uuid.uuid4())


class ProductCategory(models.Model):
    """
    Named grouping of products.
    Many-to-many with Product through ProductCategoryLink.
    """
    category_id = models.CharField(
        max_length=64,
        primary_key=True,
        default=generate_id,
        help_text="Category identifier (client supplied or generated UUID)"
    )
    name = models.CharField(
        max_length=100,
        help_text="Category name"
    )
    description = models.TextField(
        blank=True,
        null=True,
        help_text="Optional category description"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when category was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when category was last updated"
    )

    class Meta:
        verbose_name = "Product Category"
        verbose_name_plural = "Product Categories"
        ordering = ['name']

    def __str__(self):
        return self.name


class Product(models.Model):
    """
    Sellable inventory item with price, stock count and an optional image
    stored on the media host.
    """
    product_id = models.CharField(
        max_length=64,
        primary_key=True,
        default=generate_id,
        help_text="Product identifier (client supplied or generated UUID)"
    )
    name = models.CharField(
        max_length=200,
        help_text="Product name"
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0.01)],
        help_text="Product price (must be positive)"
    )
    stock_quantity = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Available stock quantity"
    )
    image_url = models.URLField(
        max_length=500,
        blank=True,
        null=True,
        help_text="Secure URL of the product image on the media host"
    )
    categories = models.ManyToManyField(
        ProductCategory,
        through='ProductCategoryLink',
        related_name='products',
        blank=True,
        help_text="Categories this product belongs to"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when product was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when product was last updated"
    )

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['name'], name='product_name_idx'),
            models.Index(fields=['-created_at'], name='product_created_idx'),
        ]

    def __str__(self):
        return self.name


class ProductCategoryLink(models.Model):
    """Join table between products and categories, cascading on both sides."""
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='category_links'
    )
    category = models.ForeignKey(
        ProductCategory,
        on_delete=models.CASCADE,
        related_name='product_links'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Product Category Link"
        verbose_name_plural = "Product Category Links"
        constraints = [
            models.UniqueConstraint(
                fields=['product', 'category'],
                name='unique_product_category'
            ),
        ]

    def __str__(self):
        return f"{self.product_id} -> {self.category_id}"
