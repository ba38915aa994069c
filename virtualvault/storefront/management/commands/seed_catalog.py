"""
Команда для наполнения каталога демонстрационными категориями и товарами
"""
import random

from django.core.management.base import BaseCommand
from django.db import transaction

from storefront.models import Category, Product

DEMO_CATEGORIES = ['Electronics', 'Book', 'Clothing']

DEMO_PRODUCTS = [
    ('Laptop', 'A powerful laptop', 1499.99, 'Electronics'),
    ('Smartphone', 'A best selling smartphone', 999.99, 'Electronics'),
    ('Headphones', 'Noise cancelling over-ear headphones', 79.99, 'Electronics'),
    ('Textbook', 'A comprehensive textbook', 79.99, 'Book'),
    ('Novel', 'A bestselling novel', 14.99, 'Book'),
    ('The Law of Contract in Singapore', 'A bestselling book in Singapore', 54.99, 'Book'),
    ('NUS T-shirt', 'Plain NUS T-shirt for sale', 4.99, 'Clothing'),
    ('Hoodie', 'Warm cotton hoodie', 39.99, 'Clothing'),
]


class Command(BaseCommand):
    help = 'Создаёт демонстрационные категории и товары'

    def add_arguments(self, parser):
        parser.add_argument(
            '--products',
            type=int,
            default=len(DEMO_PRODUCTS),
            help='Количество товаров для создания'
        )
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Удалить существующие товары и категории перед созданием'
        )

    @transaction.atomic
    def handle(self, *args, **options):
        count = max(options['products'], 0)

        if options['clear']:
            deleted, _ = Product.objects.all().delete()
            Category.objects.all().delete()
            self.stdout.write(f'Удалено товаров: {deleted}')

        categories = {}
        for name in DEMO_CATEGORIES:
            categories[name], _ = Category.objects.get_or_create(name=name)

        created = []
        for i in range(count):
            name, description, price, category_name = DEMO_PRODUCTS[i % len(DEMO_PRODUCTS)]
            if i >= len(DEMO_PRODUCTS):
                name = f'{name} {i // len(DEMO_PRODUCTS) + 1}'
            product = Product.objects.create(
                name=name,
                description=description,
                price=price,
                category=categories[category_name],
                quantity=random.randint(1, 100),
                shipping=bool(i % 2),
            )
            created.append(product.slug)

        self.stdout.write(
            self.style.SUCCESS(
                f'Успешно создано {len(created)} товаров:\n' +
                '\n'.join(created)
            )
        )
