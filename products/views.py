import logging

from rest_framework import status, permissions
from rest_framework.exceptions import APIException
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from . import services
from .exceptions import ImageValidationError, MediaHostError
from .media_host import get_media_host
from .models import Product, ProductCategory
from .serializers import (
    AddProductToCategorySerializer,
    NewArrivalCategorySerializer,
    ProductCategoryCreateSerializer,
    ProductCategorySerializer,
    ProductCreateSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
)
from .validators import validate_product_image

logger = logging.getLogger(__name__)

# Text fields a create request must carry, in reporting order
REQUIRED_PRODUCT_FIELDS = ['name', 'price', 'stockQuantity', 'categoryId']

PRODUCT_FORM_SCHEMA = {
    'multipart/form-data': {
        'type': 'object',
        'properties': {
            'productId': {'type': 'string'},
            'name': {'type': 'string'},
            'price': {'type': 'number'},
            'stockQuantity': {'type': 'integer', 'minimum': 0},
            'categoryId': {'type': 'string'},
            'image': {'type': 'string', 'format': 'binary'},
        },
    }
}


def product_not_found():
    return Response(
        {'message': 'Product not found'},
        status=status.HTTP_404_NOT_FOUND
    )


def category_not_found():
    return Response(
        {'message': 'Category not found'},
        status=status.HTTP_404_NOT_FOUND
    )


def invalid_data(message, errors):
    return Response(
        {'message': message, 'errors': errors},
        status=status.HTTP_400_BAD_REQUEST
    )


def request_rejected(exc):
    """Body that could not be parsed, or sent with an unsupported content type"""
    return Response(
        {'message': str(exc.detail)},
        status=exc.status_code
    )


@extend_schema_view(
    get=extend_schema(
        tags=['Products'],
        summary='List products',
        description='Retrieve all products, optionally filtered by a substring of the name.',
        parameters=[
            OpenApiParameter(
                name='search',
                type=OpenApiTypes.STR,
                description='Substring to match against product names'
            ),
        ],
        responses=ProductSerializer(many=True),
    ),
    post=extend_schema(
        tags=['Products'],
        summary='Create product',
        description=(
            'Create a product from a multipart form. The image is uploaded to the '
            'media host and the product is connected to exactly one category.'
        ),
        request=PRODUCT_FORM_SCHEMA,
        responses={201: ProductSerializer},
    ),
)
class ProductListCreateView(APIView):
    """
    GET  /products/ - list products
    POST /products/ - create product with image
    """
    permission_classes = [permissions.AllowAny]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get(self, request):
        try:
            queryset = Product.objects.prefetch_related('categories')

            search = request.query_params.get('search')
            if search:
                queryset = queryset.filter(name__contains=search)

            return Response(ProductSerializer(queryset, many=True).data)
        except Exception:
            logger.exception("Error retrieving products")
            return Response(
                {'message': 'Error retrieving products'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

    def post(self, request):
        try:
            image = request.FILES.get('image')

            missing_fields = [
                field for field in REQUIRED_PRODUCT_FIELDS
                if request.data.get(field) in (None, '')
            ]
            if image is None:
                missing_fields.append('image')

            if missing_fields:
                return Response(
                    {
                        'message': 'Missing required fields',
                        'missingFields': missing_fields
                    },
                    status=status.HTTP_400_BAD_REQUEST
                )

            validate_product_image(image)

            serializer = ProductCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return invalid_data('Invalid product data', serializer.errors)

            product = services.create_product(
                get_media_host(),
                serializer.validated_data,
                image
            )

            return Response(
                ProductSerializer(product).data,
                status=status.HTTP_201_CREATED
            )
        except ImageValidationError as e:
            return Response(
                {'message': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except ProductCategory.DoesNotExist:
            return category_not_found()
        except MediaHostError as e:
            logger.error(f"Media host upload error: {str(e)}")
            return Response(
                {'message': 'Error uploading image', 'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        except APIException as e:
            return request_rejected(e)
        except Exception as e:
            logger.exception("Error creating product")
            return Response(
                {'message': 'Server error', 'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@extend_schema_view(
    put=extend_schema(
        tags=['Products'],
        summary='Update product',
        description=(
            'Update product fields. A new image replaces the previous one on the '
            'media host; a categoryId replaces every existing category link.'
        ),
        request=PRODUCT_FORM_SCHEMA,
        responses=ProductSerializer,
    ),
    delete=extend_schema(
        tags=['Products'],
        summary='Delete product',
        description=(
            'Delete a product. The image is removed from the media host on a best '
            'effort basis; the product is deleted even if that fails.'
        ),
    ),
)
class ProductDetailView(APIView):
    """
    PUT    /products/products/<productId> - update product
    DELETE /products/products/<productId> - delete product
    """
    permission_classes = [permissions.AllowAny]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def put(self, request, product_id):
        try:
            if not Product.objects.filter(pk=product_id).exists():
                return product_not_found()

            image = request.FILES.get('image')
            if image is not None:
                validate_product_image(image)

            serializer = ProductUpdateSerializer(data=request.data)
            if not serializer.is_valid():
                return invalid_data('Invalid product data', serializer.errors)

            product = services.update_product(
                get_media_host(),
                product_id,
                serializer.validated_data,
                image=image
            )

            return Response(ProductSerializer(product).data)
        except ImageValidationError as e:
            return Response(
                {'message': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except Product.DoesNotExist:
            return product_not_found()
        except ProductCategory.DoesNotExist:
            return category_not_found()
        except MediaHostError as e:
            logger.error(f"Media host error during image update: {str(e)}")
            return Response(
                {'message': 'Error handling image update'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        except APIException as e:
            return request_rejected(e)
        except Exception:
            logger.exception(f"Error updating product {product_id}")
            return Response(
                {'message': 'Error updating product'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

    def delete(self, request, product_id):
        try:
            services.delete_product(get_media_host(), product_id)
            return Response(
                {'message': 'Product deleted successfully'},
                status=status.HTTP_200_OK
            )
        except Product.DoesNotExist:
            return product_not_found()
        except Exception:
            logger.exception(f"Error deleting product {product_id}")
            return Response(
                {'message': 'Error deleting product'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@extend_schema_view(
    get=extend_schema(
        tags=['Categories'],
        summary='List categories',
        description='Retrieve all product categories with their products.',
        responses=ProductCategorySerializer(many=True),
    ),
    post=extend_schema(
        tags=['Categories'],
        summary='Create category',
        description='Create a product category. The categoryId may be supplied by the client.',
        request=ProductCategoryCreateSerializer,
        responses={201: ProductCategorySerializer},
    ),
)
class CategoryListCreateView(APIView):
    """
    GET  /products/categories - list categories with products
    POST /products/categories - create category
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        try:
            categories = ProductCategory.objects.prefetch_related('products')
            return Response(ProductCategorySerializer(categories, many=True).data)
        except Exception:
            logger.exception("Error retrieving product categories")
            return Response(
                {'message': 'Error retrieving product categories'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

    def post(self, request):
        try:
            serializer = ProductCategoryCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return invalid_data('Invalid category data', serializer.errors)

            category = serializer.save()
            logger.info(f"Created product category {category.category_id}")

            return Response(
                ProductCategorySerializer(category).data,
                status=status.HTTP_201_CREATED
            )
        except APIException as e:
            return request_rejected(e)
        except Exception:
            logger.exception("Error creating product category")
            return Response(
                {'message': 'Error creating product category'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@extend_schema(
    tags=['Categories'],
    summary='Delete category',
    description='Delete a product category. Its products are kept; only their links to it are removed.',
)
class CategoryDetailView(APIView):
    """
    DELETE /products/categories/<categoryId>
    """
    permission_classes = [permissions.AllowAny]

    def delete(self, request, category_id):
        try:
            deleted, _ = ProductCategory.objects.filter(pk=category_id).delete()
            if not deleted:
                return category_not_found()

            logger.info(f"Deleted product category {category_id}")
            return Response(
                {'message': 'Product category deleted successfully'},
                status=status.HTTP_200_OK
            )
        except Exception:
            logger.exception(f"Error deleting product category {category_id}")
            return Response(
                {'message': 'Error deleting product category'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@extend_schema(
    tags=['Categories'],
    summary='Get category products',
    description='Retrieve a category together with its products.',
    responses=ProductCategorySerializer,
)
class CategoryProductsView(APIView):
    """
    GET /products/categories/<categoryId>/products
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request, category_id):
        try:
            category = ProductCategory.objects.prefetch_related('products').get(pk=category_id)
            return Response(ProductCategorySerializer(category).data)
        except ProductCategory.DoesNotExist:
            return category_not_found()
        except Exception:
            logger.exception(f"Error retrieving products for category {category_id}")
            return Response(
                {'message': 'Error retrieving products by category'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@extend_schema(
    tags=['Categories'],
    summary='Add product to category',
    description='Connect one more category to a product. Existing links are kept.',
    request=AddProductToCategorySerializer,
    responses=ProductSerializer,
)
class AddProductToCategoryView(APIView):
    """
    POST /products/categories/add-product
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        try:
            serializer = AddProductToCategorySerializer(data=request.data)
            if not serializer.is_valid():
                return invalid_data('Invalid request data', serializer.errors)

            product = services.add_product_to_category(
                serializer.validated_data['productId'],
                serializer.validated_data['categoryId']
            )
            return Response(ProductSerializer(product).data)
        except Product.DoesNotExist:
            return product_not_found()
        except ProductCategory.DoesNotExist:
            return category_not_found()
        except APIException as e:
            return request_rejected(e)
        except Exception:
            logger.exception("Error adding product to category")
            return Response(
                {'message': 'Error adding product to category'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@extend_schema(
    tags=['Reports'],
    summary='New arrivals',
    description=(
        'Categories with at least one product created in the last two months, '
        'each listing only those products, newest first.'
    ),
    responses=NewArrivalCategorySerializer(many=True),
)
class NewArrivalsView(APIView):
    """
    GET /products/newArrivals
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        try:
            categories = services.new_arrivals()
            return Response(NewArrivalCategorySerializer(categories, many=True).data)
        except Exception as e:
            logger.exception("Error retrieving new arrivals")
            return Response(
                {'message': 'Error retrieving new arrivals', 'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
