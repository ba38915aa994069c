"""
Storefront views package.

Структура:
- utils.py - Константы и helper функции
- api.py - JSON API каталога и поиска (/api/v1/)
- cart.py - Корзина в сессии (/cart/)
"""

# Утилиты
from .utils import (
    error_response,
    get_cart_from_session,
    HOME_PRODUCTS_PER_PAGE,
)

# API каталога
from .api import (
    get_categories,
    get_single_category,
    get_products,
    get_single_product,
    product_photo,
    product_count,
    product_list,
    product_filters,
    search_product,
    related_products,
    products_by_category,
)

# Корзина
from .cart import (
    view_cart,
    add_to_cart,
    remove_from_cart,
    clear_cart,
)
