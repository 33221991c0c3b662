from django.apps import AppConfig


class ProductsConfig(AppConfig):
    """
    Configuration for the Products app.
    Product and category CRUD with image upload to the media host.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'products'
    verbose_name = 'Product Management'
