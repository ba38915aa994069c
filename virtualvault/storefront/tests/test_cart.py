"""
Unit tests for the shopping cart (cart.py) and session cart views (views/cart.py).

Tests:
- Cart.add: append snapshot, duplicates, persistence, notification
- Cart.remove / remove_product / clear
- Cart.total / total_display / format_price
- view_cart, add_to_cart, remove_from_cart, clear_cart
- CSRF cookie from view_cart accepted by the POST views
"""

import json
from unittest import mock

from django.contrib.auth.models import User
from django.contrib.messages import get_messages
from django.test import TestCase, SimpleTestCase, Client
from django.urls import reverse

from accounts.models import UserProfile
from storefront.cart import Cart, format_price, ITEM_ADDED_MESSAGE
from storefront.models import Category, Product
from storefront.storage import MemoryStorage


def make_product(_id, price, **extra):
    product = {
        '_id': _id,
        'name': f'Product {_id}',
        'description': '',
        'price': price,
        'slug': f'product-{_id}',
    }
    product.update(extra)
    return product


class CartTests(SimpleTestCase):
    """Tests for Cart over an in-memory storage."""

    def setUp(self):
        self.storage = MemoryStorage()
        self.toaster = mock.Mock()
        self.cart = Cart(self.storage, toaster=self.toaster)

    def test_absent_storage_reads_as_none_and_empty(self):
        self.assertIsNone(self.cart.stored())
        self.assertEqual(self.cart.items, [])
        self.assertEqual(self.cart.count, 0)

    def test_add_persists_and_notifies(self):
        self.cart.add(make_product(1, 0))

        self.assertEqual(
            json.loads(self.storage.get_item('cart')),
            [make_product(1, 0)]
        )
        self.toaster.success.assert_called_once_with(ITEM_ADDED_MESSAGE)

    def test_add_keeps_insertion_order(self):
        for i in range(5):
            self.cart.add(make_product(i, i * 10))
        self.assertEqual([item['_id'] for item in self.cart.stored()], [0, 1, 2, 3, 4])
        self.assertEqual(self.toaster.success.call_count, 5)

    def test_same_product_twice_gives_two_entries(self):
        product = make_product(7, 19.99)
        self.cart.add(product)
        self.cart.add(product)
        self.assertEqual(self.cart.stored(), [product, product])

    def test_add_copies_product(self):
        product = make_product(1, 5)
        self.cart.add(product)
        product['price'] = 999
        self.assertEqual(self.cart.items[0]['price'], 5)

    def test_large_cart(self):
        for i in range(150):
            self.cart.add(make_product(i, 1))
        self.assertEqual(len(self.cart.stored()), 150)

    def test_prices_stored_exactly(self):
        self.cart.add(make_product(1, 19.999999999))
        self.assertEqual(self.cart.stored()[0]['price'], 19.999999999)

    def test_unicode_and_extra_fields_preserved(self):
        product = make_product(1, 3, name='Чашка ☕', quantity=2)
        self.cart.add(product)
        self.assertEqual(self.cart.stored()[0], product)

    def test_cart_reloads_from_storage(self):
        self.cart.add(make_product(1, 10))
        other = Cart(self.storage)
        self.assertEqual(other.count, 1)

    def test_remove_by_index(self):
        for i in range(3):
            self.cart.add(make_product(i, 1))
        self.cart.remove(1)
        self.assertEqual([item['_id'] for item in self.cart.stored()], [0, 2])

    def test_remove_out_of_range(self):
        self.cart.add(make_product(1, 1))
        with self.assertRaises(IndexError):
            self.cart.remove(5)
        self.assertEqual(self.cart.count, 1)

    def test_remove_product_removes_first_match_only(self):
        self.cart.add(make_product(1, 1))
        self.cart.add(make_product(2, 1))
        self.cart.add(make_product(1, 1))
        self.cart.remove_product(1)
        self.assertEqual([item['_id'] for item in self.cart.stored()], [2, 1])

    def test_remove_missing_product_is_noop(self):
        self.cart.add(make_product(1, 1))
        self.cart.remove_product(99)
        self.assertEqual(self.cart.count, 1)

    def test_clear(self):
        self.cart.add(make_product(1, 1))
        self.cart.clear()
        self.assertEqual(self.storage.get_item('cart'), '[]')

    def test_total_is_exact_sum(self):
        prices = [0, 19.999999999, 1499.99, 0.1, 0.2]
        for i, price in enumerate(prices):
            self.cart.add(make_product(i, price))

        expected = 0
        for price in prices:
            expected += price
        self.assertEqual(self.cart.total(), expected)

    def test_total_display(self):
        self.cart.add(make_product(1, 1000))
        self.cart.add(make_product(2, 234.5))
        self.assertEqual(self.cart.total_display(), '$1,234.50')

    def test_format_price(self):
        self.assertEqual(format_price(0), '$0.00')
        self.assertEqual(format_price(19.999), '$20.00')
        self.assertEqual(format_price(None), '$0.00')

    def test_without_toaster(self):
        cart = Cart(MemoryStorage())
        cart.add(make_product(1, 1))
        self.assertEqual(cart.count, 1)


class SessionCartViewTests(TestCase):
    """Tests for the session cart views."""

    def setUp(self):
        self.client = Client()
        category = Category.objects.create(name='Book')
        self.novel = Product.objects.create(
            name='Novel', description='A bestselling novel', price=14.99, category=category,
        )
        self.textbook = Product.objects.create(
            name='Textbook', description='', price=79.99, category=category,
        )

    def add(self, product_id):
        return self.client.post(reverse('cart_add'), {'product_id': product_id})

    def test_view_empty_cart(self):
        response = self.client.get(reverse('cart'))
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.content)
        self.assertEqual(data['items'], [])
        self.assertEqual(data['count'], 0)
        self.assertEqual(data['total'], 0)
        self.assertEqual(data['total_display'], '$0.00')
        self.assertEqual(data['user'], 'Guest')

    def test_add_to_cart(self):
        response = self.add(self.novel.pk)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.content), {'success': True, 'count': 1})

        messages = [str(m) for m in get_messages(response.wsgi_request)]
        self.assertIn(ITEM_ADDED_MESSAGE, messages)

    def test_add_same_product_twice(self):
        self.add(self.novel.pk)
        self.add(self.novel.pk)
        self.add(self.textbook.pk)

        data = json.loads(self.client.get(reverse('cart')).content)
        self.assertEqual(data['count'], 3)
        self.assertEqual([item['_id'] for item in data['items']],
                         [self.novel.pk, self.novel.pk, self.textbook.pk])
        self.assertEqual(data['total'], 14.99 + 14.99 + 79.99)

    def test_add_unknown_product(self):
        response = self.add(999999)
        self.assertEqual(response.status_code, 404)

    def test_add_invalid_product_id(self):
        response = self.add('abc')
        self.assertEqual(response.status_code, 400)

    def test_add_requires_post(self):
        response = self.client.get(reverse('cart_add'))
        self.assertEqual(response.status_code, 405)

    def test_remove_from_cart(self):
        self.add(self.novel.pk)
        self.add(self.textbook.pk)

        response = self.client.post(reverse('cart_remove'), {'index': 0})
        self.assertEqual(json.loads(response.content), {'success': True, 'count': 1})

        data = json.loads(self.client.get(reverse('cart')).content)
        self.assertEqual(data['items'][0]['_id'], self.textbook.pk)

    def test_remove_invalid_index(self):
        self.add(self.novel.pk)
        response = self.client.post(reverse('cart_remove'), {'index': 3})
        self.assertEqual(response.status_code, 400)

    def test_clear_cart(self):
        self.add(self.novel.pk)
        response = self.client.post(reverse('cart_clear'))
        self.assertEqual(json.loads(response.content), {'success': True, 'count': 0})
        data = json.loads(self.client.get(reverse('cart')).content)
        self.assertEqual(data['items'], [])

    def test_greets_logged_in_user_by_name(self):
        user = User.objects.create_user(username='jane@example.com', email='jane@example.com', password='pass')
        UserProfile.objects.create(user=user, name='Jane', phone='123', address='Street 1', answer='blue')
        self.client.force_login(user)

        data = json.loads(self.client.get(reverse('cart')).content)
        self.assertEqual(data['user'], 'Jane')


class CartCsrfTests(TestCase):
    """Cart POST views behind CsrfViewMiddleware."""

    def setUp(self):
        self.client = Client(enforce_csrf_checks=True)
        category = Category.objects.create(name='Book')
        self.novel = Product.objects.create(
            name='Novel', description='A bestselling novel', price=14.99, category=category,
        )

    def test_view_cart_sets_csrf_cookie(self):
        response = self.client.get(reverse('cart'))
        self.assertEqual(response.status_code, 200)
        self.assertIn('csrftoken', response.cookies)

    def test_post_with_token_from_cart_cookie(self):
        self.client.get(reverse('cart'))
        token = self.client.cookies['csrftoken'].value

        response = self.client.post(reverse('cart_add'), {'product_id': self.novel.pk}, HTTP_X_CSRFTOKEN=token)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.content), {'success': True, 'count': 1})

        response = self.client.post(reverse('cart_remove'), {'index': 0}, HTTP_X_CSRFTOKEN=token)
        self.assertEqual(response.status_code, 200)
        response = self.client.post(reverse('cart_clear'), HTTP_X_CSRFTOKEN=token)
        self.assertEqual(response.status_code, 200)

    def test_post_without_token_is_rejected(self):
        self.client.get(reverse('cart'))
        response = self.client.post(reverse('cart_add'), {'product_id': self.novel.pk})
        self.assertEqual(response.status_code, 403)
