from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Product, ProductCategory


CATEGORIES = [
    {'category_id': 'electronics', 'name': 'Electronics', 'description': 'Devices and accessories'},
    {'category_id': 'office', 'name': 'Office Supplies', 'description': 'Paper, pens and desk items'},
    {'category_id': 'home', 'name': 'Home & Kitchen', 'description': 'Household goods'},
]

PRODUCTS = [
    {'product_id': 'wireless-mouse', 'name': 'Wireless Mouse', 'price': '19.99', 'stock_quantity': 120, 'categories': ['electronics', 'office']},
    {'product_id': 'usb-c-hub', 'name': 'USB-C Hub', 'price': '34.50', 'stock_quantity': 45, 'categories': ['electronics']},
    {'product_id': 'notebook-a5', 'name': 'A5 Notebook', 'price': '4.25', 'stock_quantity': 300, 'categories': ['office']},
    {'product_id': 'gel-pens', 'name': 'Gel Pens (10 pack)', 'price': '6.80', 'stock_quantity': 0, 'categories': ['office']},
    {'product_id': 'chef-knife', 'name': 'Chef Knife', 'price': '42.00', 'stock_quantity': 18, 'categories': ['home']},
]


class Command(BaseCommand):
    help = 'Seeds the database with demo product categories and products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all products and categories before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write(self.style.WARNING('Clearing existing catalog...'))
            # Rows only; images on the media host are left alone
            Product.objects.all().delete()
            ProductCategory.objects.all().delete()
            self.stdout.write(self.style.SUCCESS('Catalog cleared!'))

        self.stdout.write(self.style.SUCCESS('Starting catalog seeding...'))

        categories = {}
        for category_data in CATEGORIES:
            category, created = ProductCategory.objects.get_or_create(
                category_id=category_data['category_id'],
                defaults={
                    'name': category_data['name'],
                    'description': category_data['description'],
                }
            )
            categories[category.category_id] = category
            if created:
                self.stdout.write(f'  Created category: {category.name}')

        for product_data in PRODUCTS:
            product, created = Product.objects.get_or_create(
                product_id=product_data['product_id'],
                defaults={
                    'name': product_data['name'],
                    'price': Decimal(product_data['price']),
                    'stock_quantity': product_data['stock_quantity'],
                }
            )
            if created:
                product.categories.set(
                    [categories[category_id] for category_id in product_data['categories']]
                )
                self.stdout.write(f'  Created product: {product.name}')

        self.stdout.write(self.style.SUCCESS(
            f'Catalog ready: {ProductCategory.objects.count()} categories, '
            f'{Product.objects.count()} products'
        ))
