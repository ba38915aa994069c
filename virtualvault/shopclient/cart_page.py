"""
Страница корзины клиента.

Гость видит приветствие "Hello Guest" и вместо оплаты кнопку входа:
checkout() запоминает /cart и уводит на /login, а форма входа после
успеха возвращает его обратно. Авторизованный пользователь без адреса
оплатить не может, адрес меняется в профиле.
"""

import logging

from .auth import LOGIN_ROUTE

logger = logging.getLogger('shopclient.cart_page')

CART_ROUTE = '/cart'
PROFILE_ROUTE = '/dashboard/user/profile'

EMPTY_CART_MESSAGE = 'Your Cart Is Empty'
LOGIN_TO_CHECKOUT_LABEL = 'Please Login to checkout'
PAYMENT_LABEL = 'Make Payment'
UPDATE_ADDRESS_LABEL = 'Update Address'


class CartPage:
    """
    Состояние страницы корзины.

    Args:
        cart: Cart поверх хранилища клиента
        auth: AuthStore
        navigator: Navigator
    """

    def __init__(self, cart, auth, navigator):
        self.cart = cart
        self.auth = auth
        self.navigator = navigator

    @property
    def user(self):
        return self.auth.current.get('user') if self.auth.is_authenticated else None

    @property
    def greeting(self):
        if self.user is None:
            return 'Hello Guest'
        return f"Hello {self.user.get('name') or ''}".rstrip()

    @property
    def items(self):
        return self.cart.items

    @property
    def is_empty(self):
        return self.cart.count == 0

    @property
    def summary(self):
        """Строка под приветствием: число позиций или сообщение о пустой корзине."""
        if self.is_empty:
            return EMPTY_CART_MESSAGE
        message = f'You Have {self.cart.count} items in your cart'
        if self.user is None:
            message += ' please login to checkout !'
        return message

    @property
    def total_display(self):
        return self.cart.total_display()

    @property
    def address(self):
        return (self.user or {}).get('address') or ''

    @property
    def checkout_label(self):
        return LOGIN_TO_CHECKOUT_LABEL if self.user is None else PAYMENT_LABEL

    def remove(self, index):
        """Убирает позицию по индексу; неверный индекс ничего не меняет."""
        try:
            return self.cart.remove(index)
        except (TypeError, IndexError) as e:
            logger.warning('Cannot remove cart item %r: %s', index, e)
            return self.cart.items

    def checkout(self):
        """
        Кнопка под итогом корзины.

        Returns:
            bool: True, если можно переходить к оплате
        """
        if self.user is None:
            self.navigator.intended = CART_ROUTE
            self.navigator.navigate(LOGIN_ROUTE)
            return False
        if self.is_empty or not self.address:
            logger.debug('Checkout unavailable: empty cart or no address')
            return False
        return True

    def update_address(self):
        return self.navigator.navigate(PROFILE_ROUTE)
