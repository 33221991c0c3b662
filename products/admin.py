from django.contrib import admin
from django.utils.html import format_html

from . import services
from .media_host import get_media_host
from .models import Product, ProductCategory, ProductCategoryLink


class ProductCategoryLinkInline(admin.TabularInline):
    """Category links edited from the product page"""
    model = ProductCategoryLink
    extra = 0
    autocomplete_fields = ['category']
    readonly_fields = ['created_at']


@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    """
    Admin interface for ProductCategory model.
    """
    list_display = ['name', 'category_id', 'product_count', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'description', 'category_id']
    ordering = ['name']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('category_id', 'name', 'description')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        # Primary key is fixed once the category exists
        if obj is not None:
            return self.readonly_fields + ['category_id']
        return self.readonly_fields

    def product_count(self, obj):
        """Display count of products in category"""
        count = obj.products.count()
        return format_html('<strong>{}</strong>', count)
    product_count.short_description = 'Products'


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """
    Admin interface for Product model.
    Deletions go through the product service so images are removed from the
    media host as well.
    """
    list_display = [
        'thumbnail', 'name', 'price', 'stock_quantity',
        'stock_status', 'created_at'
    ]
    list_display_links = ['thumbnail', 'name']
    list_filter = ['categories', 'created_at', 'updated_at']
    search_fields = ['name', 'product_id']
    readonly_fields = ['created_at', 'updated_at', 'image_preview']
    inlines = [ProductCategoryLinkInline]
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('product_id', 'name')
        }),
        ('Pricing & Inventory', {
            'fields': ('price', 'stock_quantity')
        }),
        ('Image', {
            'fields': ('image_url', 'image_preview')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return self.readonly_fields + ['product_id']
        return self.readonly_fields

    def thumbnail(self, obj):
        """Small image preview for the changelist"""
        if not obj.image_url:
            return '-'
        return format_html(
            '<img src="{}" style="height: 40px; width: 40px; object-fit: cover;" />',
            obj.image_url
        )
    thumbnail.short_description = 'Image'

    def image_preview(self, obj):
        if not obj.image_url:
            return 'No image'
        return format_html('<img src="{}" style="max-height: 200px;" />', obj.image_url)
    image_preview.short_description = 'Preview'

    def stock_status(self, obj):
        """Display stock status with color coding"""
        if obj.stock_quantity == 0:
            color = 'red'
            text = 'Out of Stock'
        else:
            color = 'green'
            text = 'In Stock'

        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, text
        )
    stock_status.short_description = 'Stock Status'

    def delete_model(self, request, obj):
        services.delete_product(get_media_host(), obj.pk)

    def delete_queryset(self, request, queryset):
        media_host = get_media_host()
        for product_id in list(queryset.values_list('pk', flat=True)):
            services.delete_product(media_host, product_id)
