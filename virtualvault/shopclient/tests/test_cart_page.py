"""
Unit tests for the cart page controller (cart_page.py).
"""

from unittest import mock

from django.test import SimpleTestCase

from shopclient.api import ApiResponse
from shopclient.app import ShopApp
from shopclient.auth import LoginForm
from shopclient.cart_page import (
    CartPage, EMPTY_CART_MESSAGE, LOGIN_TO_CHECKOUT_LABEL, PAYMENT_LABEL,
)
from shopclient.navigation import Navigator
from shopclient.session import AuthStore
from storefront.cart import Cart
from storefront.storage import MemoryStorage


def product(_id, price):
    return {'_id': _id, 'name': f'Product {_id}', 'description': '', 'price': price, 'slug': f'p-{_id}'}


JANE = {'_id': 1, 'name': 'Jane', 'email': 'jane@example.com', 'address': 'Street 1', 'role': 0}


class CartPageTestCase(SimpleTestCase):

    def setUp(self):
        self.storage = MemoryStorage()
        self.cart = Cart(self.storage)
        self.auth = AuthStore(self.storage)
        self.navigator = Navigator(start='/cart')
        self.page = CartPage(self.cart, self.auth, self.navigator)

    def login(self, user=JANE):
        self.auth.update(user=user, token='signed-token')


class GuestCartPageTests(CartPageTestCase):

    def test_empty_cart(self):
        self.assertEqual(self.page.greeting, 'Hello Guest')
        self.assertTrue(self.page.is_empty)
        self.assertEqual(self.page.summary, EMPTY_CART_MESSAGE)
        self.assertEqual(self.page.total_display, '$0.00')

    def test_summary_asks_guest_to_login(self):
        self.cart.add(product(1, 10))
        self.assertEqual(self.page.summary, 'You Have 1 items in your cart please login to checkout !')
        self.assertEqual(self.page.checkout_label, LOGIN_TO_CHECKOUT_LABEL)

    def test_checkout_sends_guest_to_login_and_remembers_cart(self):
        self.cart.add(product(1, 10))

        self.assertFalse(self.page.checkout())

        self.assertEqual(self.navigator.location, '/login')
        self.assertEqual(self.navigator.intended, '/cart')
        self.assertEqual(len(self.cart), 1)

    def test_login_after_checkout_returns_to_cart(self):
        self.cart.add(product(1, 10))
        self.page.checkout()

        api = mock.Mock()
        api.post.return_value = ApiResponse(200, {'success': True, 'message': 'ok', 'user': JANE, 'token': 't'})
        form = LoginForm(api, self.auth, self.storage, mock.Mock(), self.navigator)
        form.fill(email='jane@example.com', password='p').submit()

        self.assertEqual(self.navigator.location, '/cart')
        self.assertEqual(self.page.greeting, 'Hello Jane')
        self.assertEqual(len(self.cart), 1)

    def test_token_without_user_is_guest(self):
        self.auth.update(token='t')
        self.assertEqual(self.page.greeting, 'Hello Guest')


class UserCartPageTests(CartPageTestCase):

    def setUp(self):
        super().setUp()
        self.login()

    def test_greeting_uses_user_name(self):
        self.assertEqual(self.page.greeting, 'Hello Jane')
        self.assertEqual(self.page.checkout_label, PAYMENT_LABEL)
        self.assertEqual(self.page.address, 'Street 1')

    def test_summary_counts_items(self):
        self.cart.add(product(1, 10))
        self.cart.add(product(1, 10))
        self.assertEqual(self.page.summary, 'You Have 2 items in your cart')

    def test_remove_and_total(self):
        self.cart.add(product(1, 10))
        self.cart.add(product(2, 5.5))

        self.page.remove(0)

        self.assertEqual([item['_id'] for item in self.page.items], [2])
        self.assertEqual(self.page.total_display, '$5.50')

    def test_remove_invalid_index_is_logged(self):
        self.cart.add(product(1, 10))
        with self.assertLogs('shopclient.cart_page', level='WARNING'):
            self.page.remove(4)
        self.assertEqual(len(self.cart), 1)

    def test_checkout_ready_with_address(self):
        self.cart.add(product(1, 10))
        self.assertTrue(self.page.checkout())
        self.assertEqual(self.navigator.history, ['/cart'])

    def test_checkout_blocked_without_address(self):
        self.login({**JANE, 'address': ''})
        self.cart.add(product(1, 10))
        self.assertFalse(self.page.checkout())
        self.assertEqual(self.navigator.history, ['/cart'])

    def test_checkout_blocked_for_empty_cart(self):
        self.assertFalse(self.page.checkout())

    def test_update_address_opens_profile(self):
        self.page.update_address()
        self.assertEqual(self.navigator.location, '/dashboard/user/profile')


class ShopAppCartPageTests(SimpleTestCase):

    def test_cart_page_shares_app_state(self):
        app = ShopApp('http://shop.test', http=mock.Mock())
        page = app.cart_page()
        self.assertIs(page.cart, app.cart)
        self.assertIs(page.auth, app.auth)
        self.assertIs(page.navigator, app.navigator)
