from decimal import Decimal

from rest_framework import serializers

from .models import Product, ProductCategory


class CategorySummarySerializer(serializers.ModelSerializer):
    """
    Category fields without the nested product list.
    Used inside product payloads to avoid recursion.
    """
    categoryId = serializers.CharField(source='category_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = ProductCategory
        fields = ['categoryId', 'name', 'description', 'createdAt', 'updatedAt']


class ProductSummarySerializer(serializers.ModelSerializer):
    """
    Product fields without the nested category list.
    Used inside category payloads to avoid recursion.
    """
    productId = serializers.CharField(source='product_id', read_only=True)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True
    )
    stockQuantity = serializers.IntegerField(source='stock_quantity', read_only=True)
    imageUrl = serializers.URLField(source='image_url', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = [
            'productId', 'name', 'price', 'stockQuantity', 'imageUrl',
            'createdAt', 'updatedAt'
        ]


class ProductSerializer(ProductSummarySerializer):
    """Product with its connected categories"""
    categories = CategorySummarySerializer(many=True, read_only=True)

    class Meta(ProductSummarySerializer.Meta):
        fields = ProductSummarySerializer.Meta.fields + ['categories']


class ProductCategorySerializer(CategorySummarySerializer):
    """Category with its products eagerly included"""
    products = ProductSummarySerializer(many=True, read_only=True)

    class Meta(CategorySummarySerializer.Meta):
        fields = CategorySummarySerializer.Meta.fields + ['products']


class NewArrivalCategorySerializer(CategorySummarySerializer):
    """
    Category restricted to its recently created products.
    Expects the `recent_products` attribute set by the new-arrivals query.
    """
    products = ProductSummarySerializer(source='recent_products', many=True, read_only=True)

    class Meta(CategorySummarySerializer.Meta):
        fields = CategorySummarySerializer.Meta.fields + ['products']


class ProductWriteSerializer(serializers.Serializer):
    """
    Validates and parses the text fields of a product create/update form.
    The image file is handled separately by the view.
    """
    name = serializers.CharField(max_length=200)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    stockQuantity = serializers.IntegerField(min_value=0)
    categoryId = serializers.CharField(max_length=64)


class ProductCreateSerializer(ProductWriteSerializer):
    """Create form: the client may supply its own product id"""
    productId = serializers.CharField(
        max_length=64,
        required=False,
        allow_blank=True,
        help_text="Client-generated product id (a UUID is generated when omitted)"
    )

    def validate_productId(self, value):
        """Validate product id is not taken"""
        if value and Product.objects.filter(pk=value).exists():
            raise serializers.ValidationError(
                "A product with this id already exists."
            )
        return value


class ProductUpdateSerializer(ProductWriteSerializer):
    """Update form: every field is optional"""
    name = serializers.CharField(max_length=200, required=False)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=False
    )
    stockQuantity = serializers.IntegerField(min_value=0, required=False)
    categoryId = serializers.CharField(max_length=64, required=False)


class ProductCategoryCreateSerializer(serializers.ModelSerializer):
    """
    Serializer for category creation.
    The category id may be supplied by the client.
    """
    categoryId = serializers.CharField(
        source='category_id',
        max_length=64,
        required=False,
        help_text="Client-generated category id (a UUID is generated when omitted)"
    )

    class Meta:
        model = ProductCategory
        fields = ['categoryId', 'name', 'description']

    def validate_categoryId(self, value):
        """Validate category id is not taken"""
        if ProductCategory.objects.filter(pk=value).exists():
            raise serializers.ValidationError(
                "A category with this id already exists."
            )
        return value


class AddProductToCategorySerializer(serializers.Serializer):
    """Body of the add-product-to-category request"""
    productId = serializers.CharField(max_length=64)
    categoryId = serializers.CharField(max_length=64)
