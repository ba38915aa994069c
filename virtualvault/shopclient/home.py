"""
Главная страница клиента: категории, фильтры по категории и цене,
постраничная загрузка товаров и добавление в корзину.

Ошибки запросов только логируются: страница остаётся в прежнем состоянии.
"""

import logging

from storefront.prices import PRICE_RANGES

logger = logging.getLogger('shopclient.home')

CATEGORIES_PATH = '/api/v1/category/get-category'
PRODUCT_COUNT_PATH = '/api/v1/product/product-count'
PRODUCT_LIST_PATH = '/api/v1/product/product-list/{page}'
PRODUCT_FILTERS_PATH = '/api/v1/product/product-filters'


class HomePage:
    """
    Состояние главной страницы.

    Args:
        api: ApiClient
        cart: Cart поверх хранилища клиента
    """

    def __init__(self, api, cart):
        self.api = api
        self.cart = cart
        self.categories = []
        self.products = []
        self.total = 0
        self.page = 1
        self.checked = []
        self.radio = []
        self.loading = False

    @property
    def filtering(self):
        return bool(self.checked) or bool(self.radio)

    @property
    def has_more(self):
        """Показывать ли кнопку "Load more"."""
        return not self.filtering and len(self.products) < self.total

    # ---- загрузка ----

    def load(self):
        self.load_categories()
        self.load_total()
        self.load_page(1)
        return self

    def load_categories(self):
        try:
            data = self.api.get(CATEGORIES_PATH).data
            if data and data.get('success'):
                self.categories = data.get('category') or []
        except Exception as e:
            logger.error('Failed to load categories: %s', e, exc_info=True)

    def load_total(self):
        try:
            data = self.api.get(PRODUCT_COUNT_PATH).data
            self.total = (data or {}).get('total') or 0
        except Exception as e:
            logger.error('Failed to load product count: %s', e, exc_info=True)

    def _fetch_page(self, page):
        self.loading = True
        try:
            data = self.api.get(PRODUCT_LIST_PATH.format(page=page)).data
            return (data or {}).get('products') or []
        finally:
            self.loading = False

    def load_page(self, page):
        """Заменяет список товаров страницей page."""
        try:
            self.products = self._fetch_page(page)
            self.page = page
        except Exception as e:
            logger.error('Failed to load products page %s: %s', page, e, exc_info=True)

    def load_more(self):
        """Догружает следующую страницу в конец списка."""
        next_page = self.page + 1
        try:
            self.products = self.products + self._fetch_page(next_page)
            self.page = next_page
        except Exception as e:
            logger.error('Failed to load more products (page %s): %s', next_page, e, exc_info=True)
        return self.products

    # ---- фильтры ----

    def toggle_category(self, category_id, checked):
        if checked:
            if category_id not in self.checked:
                self.checked = self.checked + [category_id]
        else:
            self.checked = [c for c in self.checked if c != category_id]
        self.apply_filters()

    def select_price(self, range_index):
        """Выбирает диапазон цены по индексу PRICE_RANGES (None = любой)."""
        if range_index is None:
            self.radio = []
        else:
            self.radio = list(PRICE_RANGES[range_index]['array'])
        self.apply_filters()

    def reset_filters(self):
        self.checked = []
        self.radio = []
        self.apply_filters()

    def apply_filters(self):
        if not self.filtering:
            self.load_page(1)
            return self.products
        try:
            data = self.api.post(PRODUCT_FILTERS_PATH, {
                'checked': self.checked,
                'radio': self.radio,
            }).data
            self.products = (data or {}).get('products') or []
        except Exception as e:
            logger.error('Failed to filter products: %s', e, exc_info=True)
        return self.products

    # ---- корзина ----

    def add_to_cart(self, product):
        return self.cart.add(product)
