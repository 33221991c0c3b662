from django.urls import path

from .views import (
    AddProductToCategoryView,
    CategoryDetailView,
    CategoryListCreateView,
    CategoryProductsView,
    NewArrivalsView,
    ProductDetailView,
    ProductListCreateView,
)

app_name = 'products'

urlpatterns = [
    path('', ProductListCreateView.as_view(), name='product_list'),
    path('products/<str:product_id>', ProductDetailView.as_view(), name='product_detail'),

    # add-product must precede the <category_id> route
    path('categories/add-product', AddProductToCategoryView.as_view(), name='category_add_product'),
    path('categories', CategoryListCreateView.as_view(), name='category_list'),
    path('categories/<str:category_id>', CategoryDetailView.as_view(), name='category_detail'),
    path('categories/<str:category_id>/products', CategoryProductsView.as_view(), name='category_products'),

    path('newArrivals', NewArrivalsView.as_view(), name='new_arrivals'),
]

"""
Available endpoints (mounted under /products/):

PRODUCTS:
- GET    /products/                                   - List products (?search=substring)
- POST   /products/                                   - Create product (multipart, image required)
- PUT    /products/products/{productId}               - Update product
- DELETE /products/products/{productId}               - Delete product

CATEGORIES:
- GET    /products/categories                         - List categories with products
- POST   /products/categories                         - Create category
- DELETE /products/categories/{categoryId}            - Delete category
- GET    /products/categories/{categoryId}/products   - Category with its products
- POST   /products/categories/add-product             - Connect a product to a category

REPORTS:
- GET    /products/newArrivals                        - Categories with products from the last two months
"""
