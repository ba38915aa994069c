"""
Корзина: упорядоченный список снимков товаров поверх key/value хранилища.

- Добавление копирует товар как есть (без слияния дублей и без количества)
- После каждого изменения весь список перезаписывается в хранилище как JSON
- Цена хранится без округления, форматирование только при выводе
"""

import json
import logging

cart_logger = logging.getLogger('storefront.cart')

CART_STORAGE_KEY = 'cart'
ITEM_ADDED_MESSAGE = 'Item Added to cart'


def format_price(value):
    """
    Форматирует сумму в долларах США (en-US).

    >>> format_price(1234.5)
    '$1,234.50'
    """
    amount = float(value or 0)
    sign = '-' if amount < 0 else ''
    return f'{sign}${abs(amount):,.2f}'


class Cart:
    """
    Корзина, привязанная к хранилищу.

    Args:
        storage: хранилище с get_item/set_item/remove_item
        toaster: получатель уведомлений (success/error), может быть None
        key: ключ в хранилище
    """

    def __init__(self, storage, toaster=None, key=CART_STORAGE_KEY):
        self.storage = storage
        self.toaster = toaster
        self.key = key
        self._items = None

    def stored(self):
        """Сырой список из хранилища или None, если записи ещё не было."""
        raw = self.storage.get_item(self.key)
        if raw is None:
            return None
        return json.loads(raw)

    @property
    def items(self):
        if self._items is None:
            self._items = self.stored() or []
        return self._items

    @property
    def count(self):
        return len(self.items)

    def _persist(self):
        self.storage.set_item(self.key, json.dumps(self.items))

    def add(self, product):
        """Добавляет поверхностную копию товара в конец корзины."""
        self._items = [*self.items, dict(product)]
        self._persist()
        cart_logger.debug('Cart add: %s (now %d items)', product.get('_id'), self.count)
        if self.toaster is not None:
            self.toaster.success(ITEM_ADDED_MESSAGE)
        return self.items

    def remove(self, index):
        """Удаляет одну позицию по индексу."""
        items = list(self.items)
        if not 0 <= index < len(items):
            raise IndexError(f'cart index {index} out of range')
        del items[index]
        self._items = items
        self._persist()
        return self.items

    def remove_product(self, product_id):
        """Удаляет первую позицию с данным _id; без совпадения ничего не делает."""
        for index, item in enumerate(self.items):
            if item.get('_id') == product_id:
                return self.remove(index)
        return self.items

    def clear(self):
        self._items = []
        self._persist()

    def total(self):
        total = 0
        for item in self.items:
            total += item.get('price', 0)
        return total

    def total_display(self):
        return format_price(self.total())

    def __len__(self):
        return self.count

    def __iter__(self):
        return iter(self.items)
