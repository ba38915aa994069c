"""
Поиск товаров по ключевому слову.

Ключевое слово используется как регулярное выражение без экранирования
и без нормализации: пустая строка совпадает со всеми товарами, `.*`
работает как шаблон, None передаётся в фильтр как есть.
"""

import logging

from django.db.models import Q

from .models import Product
from .serializers import ProductSerializer

search_logger = logging.getLogger('storefront.search')

SEARCH_ERROR_MESSAGE = 'Error In Search Product API'


def build_search_filter(keyword):
    """
    Фильтр: name ИЛИ description совпадает с keyword без учёта регистра.

    Example:
        >>> build_search_filter('lap')
        <Q: (OR: ('name__iregex', 'lap'), ('description__iregex', 'lap'))>
    """
    return Q(name__iregex=keyword) | Q(description__iregex=keyword)


def search_products(keyword):
    """
    Выполняет поиск и возвращает список товаров (без фото).

    Queryset вычисляется сразу, чтобы ошибки базы (например, некорректное
    регулярное выражение) поднимались здесь, а не при сериализации ответа.
    """
    queryset = (
        Product.objects
        .select_related('category')
        .filter(build_search_filter(keyword))
        .defer('photo')
    )
    products = list(queryset)
    search_logger.debug('Search %r matched %d products', keyword, len(products))
    return ProductSerializer(products, many=True).data


def search_error_envelope(error):
    """Ответ об ошибке поиска: фиксированное сообщение и текст исключения."""
    return {
        'success': False,
        'message': SEARCH_ERROR_MESSAGE,
        'error': str(error),
    }
