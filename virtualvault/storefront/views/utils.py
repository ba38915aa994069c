"""
Утилиты и helper функции для views модуля storefront.

Содержит общие функции, которые используются в разных view модулях.
"""

from rest_framework import status
from rest_framework.response import Response

from ..cart import Cart
from ..notifications import MessagesToaster
from ..storage import SessionStorage


# Константы
HOME_PRODUCTS_PER_PAGE = 6
ALL_PRODUCTS_LIMIT = 12
RELATED_PRODUCTS_LIMIT = 3


def error_response(message, error=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Стандартный ответ об ошибке API.

    Args:
        message (str): Фиксированное сообщение для клиента
        error: Исключение или текст ошибки (отдаётся строкой)
        status_code (int): HTTP статус

    Returns:
        Response: {success: False, message, error}
    """
    payload = {'success': False, 'message': message}
    if error is not None:
        payload['error'] = str(error)
    return Response(payload, status=status_code)


def get_cart_from_session(request):
    """
    Корзина текущей сессии.

    Уведомления о добавлении уходят в Django messages.

    Args:
        request: Django request object

    Returns:
        Cart: корзина поверх SessionStorage
    """
    return Cart(SessionStorage(request.session), toaster=MessagesToaster(request))
