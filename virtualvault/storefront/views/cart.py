"""
Cart views - Корзина покупок в сессии.

Содержит views для:
- Просмотра корзины
- Добавления товаров
- Удаления позиции
- Очистки корзины

Корзина хранится в сессии как JSON-массив снимков товаров (см. storefront.cart).
GET /cart/ выставляет cookie csrftoken: POST-запросы корзины передают его
в заголовке X-CSRFToken.
"""

import logging

from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from ..models import Product
from ..serializers import ProductSerializer
from .utils import get_cart_from_session

# Logger для корзины
cart_logger = logging.getLogger('storefront.cart')


def _greeting_name(user):
    """Имя для приветствия на странице корзины."""
    if not user.is_authenticated:
        return 'Guest'
    profile = getattr(user, 'profile', None)
    if profile is not None and profile.name:
        return profile.name
    return user.get_username()


@never_cache
@require_GET
@ensure_csrf_cookie
def view_cart(request):
    """
    Содержимое корзины.

    Returns:
        JsonResponse: items, count, total (без округления), total_display, user
    """
    cart = get_cart_from_session(request)
    return JsonResponse({
        'success': True,
        'items': cart.items,
        'count': cart.count,
        'total': cart.total(),
        'total_display': cart.total_display(),
        'user': _greeting_name(request.user),
    })


@require_POST
def add_to_cart(request):
    """
    Добавляет снимок товара в конец корзины.

    Дубли не объединяются: каждый вызов добавляет новую позицию.

    POST params:
        product_id: ID товара

    Returns:
        JsonResponse: success, count
    """
    try:
        product_id = int(request.POST.get('product_id'))
    except (TypeError, ValueError):
        return JsonResponse({'success': False, 'message': 'Invalid product id'}, status=400)

    product = Product.objects.select_related('category').defer('photo').filter(pk=product_id).first()
    if product is None:
        return JsonResponse({'success': False, 'message': 'Product not found'}, status=404)

    cart = get_cart_from_session(request)
    cart.add(ProductSerializer(product).data)
    cart_logger.info('Product %s added to session cart (%d items)', product.pk, cart.count)

    return JsonResponse({'success': True, 'count': cart.count})


@require_POST
def remove_from_cart(request):
    """
    Удаляет одну позицию корзины по её индексу.

    POST params:
        index: позиция в корзине (с нуля)
    """
    cart = get_cart_from_session(request)
    try:
        cart.remove(int(request.POST.get('index')))
    except (TypeError, ValueError, IndexError) as e:
        cart_logger.warning('Invalid cart index %r: %s', request.POST.get('index'), e)
        return JsonResponse({'success': False, 'message': 'Invalid cart index'}, status=400)

    return JsonResponse({'success': True, 'count': cart.count})


@require_POST
def clear_cart(request):
    """Очистка корзины."""
    cart = get_cart_from_session(request)
    cart.clear()
    return JsonResponse({'success': True, 'count': 0})
