"""
API views - JSON endpoints каталога (/api/v1/).

Содержит views для:
- Категорий (список, одна категория)
- Товаров (список, один товар, фото, количество, постраничный список)
- Фильтрации главной страницы (категории + диапазон цены)
- Поиска по ключевому слову
- Похожих товаров и товаров категории

Каждый обработчик ловит ошибки базы, пишет их в лог и отвечает
конвертом {success: False, message, error}.
"""

import logging

from django.core.paginator import Paginator, EmptyPage
from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..models import Product, Category
from ..search import search_products, search_error_envelope, search_logger
from ..serializers import CategorySerializer, ProductSerializer, ProductFilterSerializer
from .utils import (
    error_response,
    HOME_PRODUCTS_PER_PAGE,
    ALL_PRODUCTS_LIMIT,
    RELATED_PRODUCTS_LIMIT,
)

logger = logging.getLogger('storefront.api')


def _product_queryset():
    """Товары без тяжёлого поля photo, новые первыми."""
    return Product.objects.select_related('category').defer('photo').order_by('-created_at', '-id')


# ==================== CATEGORIES ====================

@api_view(['GET'])
def get_categories(request):
    """
    Список всех категорий.

    Returns:
        200: {success, message, category: [...]}
        500: конверт ошибки
    """
    try:
        categories = Category.objects.all()
        return Response({
            'success': True,
            'message': 'All Categories List',
            'category': CategorySerializer(categories, many=True).data,
        })
    except Exception as e:
        logger.error('Error while getting all categories: %s', e, exc_info=True)
        return error_response('Error while getting all categories', e, status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
def get_single_category(request, slug):
    """Одна категория по slug."""
    try:
        category = Category.objects.filter(slug=slug).first()
        if category is None:
            return error_response('Category not found', status_code=status.HTTP_404_NOT_FOUND)
        return Response({
            'success': True,
            'message': 'Get Single Category Successfully',
            'category': CategorySerializer(category).data,
        })
    except Exception as e:
        logger.error('Error while getting single category %s: %s', slug, e, exc_info=True)
        return error_response('Error While getting Single Category', e, status.HTTP_500_INTERNAL_SERVER_ERROR)


# ==================== PRODUCTS ====================

@api_view(['GET'])
def get_products(request):
    """
    Последние товары (не более ALL_PRODUCTS_LIMIT).

    Returns:
        200: {success, counTotal, message, products}
    """
    try:
        products = list(_product_queryset()[:ALL_PRODUCTS_LIMIT])
        return Response({
            'success': True,
            'counTotal': len(products),
            'message': 'ALlProducts ',
            'products': ProductSerializer(products, many=True).data,
        })
    except Exception as e:
        logger.error('Error in getting products: %s', e, exc_info=True)
        return error_response('Erorr in getting products', e, status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
def get_single_product(request, slug):
    """Один товар по slug."""
    try:
        product = _product_queryset().filter(slug=slug).first()
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)
        return Response({
            'success': True,
            'message': 'Single Product Fetched',
            'product': ProductSerializer(product).data,
        })
    except Exception as e:
        logger.error('Error while getting single product %s: %s', slug, e, exc_info=True)
        return error_response('Eror while getitng single product', e, status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
def product_photo(request, pk):
    """
    Фото товара как бинарный ответ.

    Returns:
        200: байты фото с его content type
        404: товара нет или у него нет фото
    """
    try:
        product = Product.objects.only('photo', 'photo_content_type').filter(pk=pk).first()
        if product is None or not product.has_photo:
            return error_response('Photo not found', status_code=status.HTTP_404_NOT_FOUND)
        return HttpResponse(
            bytes(product.photo),
            content_type=product.photo_content_type or 'application/octet-stream'
        )
    except Exception as e:
        logger.error('Error while getting photo for product %s: %s', pk, e, exc_info=True)
        return error_response('Erorr while getting photo', e, status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
def product_count(request):
    """Общее количество товаров: {success, total}."""
    try:
        return Response({'success': True, 'total': Product.objects.count()})
    except Exception as e:
        logger.error('Error in product count: %s', e, exc_info=True)
        return error_response('Error in product count', e)


@api_view(['GET'])
def product_list(request, page=1):
    """
    Постраничный список товаров для главной страницы.

    По HOME_PRODUCTS_PER_PAGE на страницу, новые первыми. Страница за
    пределами списка даёт пустой список (кнопка "Load more" скрывается).
    """
    try:
        paginator = Paginator(_product_queryset(), HOME_PRODUCTS_PER_PAGE)
        try:
            products = list(paginator.page(max(int(page), 1)).object_list)
        except EmptyPage:
            products = []
        return Response({
            'success': True,
            'products': ProductSerializer(products, many=True).data,
        })
    except Exception as e:
        logger.error('Error in per page ctrl (page %s): %s', page, e, exc_info=True)
        return error_response('error in per page ctrl', e)


@api_view(['POST'])
def product_filters(request):
    """
    Фильтрация товаров по категориям и диапазону цены.

    Request Body:
        - checked: список ID категорий
        - radio: [min, max]

    Returns:
        200: {success, products}
        400: ошибка валидации или базы
    """
    serializer = ProductFilterSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Error WHile Filtering Products', serializer.errors)

    checked = serializer.validated_data['checked']
    radio = serializer.validated_data['radio']
    try:
        queryset = _product_queryset()
        if checked:
            queryset = queryset.filter(category_id__in=checked)
        if radio:
            queryset = queryset.filter(price__gte=radio[0], price__lte=radio[1])
        return Response({
            'success': True,
            'products': ProductSerializer(list(queryset), many=True).data,
        })
    except Exception as e:
        logger.error('Error while filtering products: %s', e, exc_info=True)
        return error_response('Error WHile Filtering Products', e)


@api_view(['GET'])
def search_product(request, keyword=''):
    """
    Поиск по name/description без учёта регистра.

    Returns:
        200: массив найденных товаров
        400: {success: False, message: 'Error In Search Product API', error}
    """
    try:
        return Response(search_products(keyword))
    except Exception as e:
        search_logger.error('Search failed for keyword %r: %s', keyword, e, exc_info=True)
        return Response(search_error_envelope(e), status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def related_products(request, pid, cid):
    """Товары той же категории, кроме текущего (до RELATED_PRODUCTS_LIMIT)."""
    try:
        products = list(
            _product_queryset()
            .filter(category_id=cid)
            .exclude(pk=pid)[:RELATED_PRODUCTS_LIMIT]
        )
        return Response({
            'success': True,
            'products': ProductSerializer(products, many=True).data,
        })
    except Exception as e:
        logger.error('Error while getting related products for %s: %s', pid, e, exc_info=True)
        return error_response('error while geting related product', e)


@api_view(['GET'])
def products_by_category(request, slug):
    """Категория и все её товары."""
    try:
        category = Category.objects.filter(slug=slug).first()
        if category is None:
            return error_response('Category not found', status_code=status.HTTP_404_NOT_FOUND)
        products = list(_product_queryset().filter(category=category))
        return Response({
            'success': True,
            'category': CategorySerializer(category).data,
            'products': ProductSerializer(products, many=True).data,
        })
    except Exception as e:
        logger.error('Error while getting products of category %s: %s', slug, e, exc_info=True)
        return error_response('Error While Getting products', e)
