"""
Django REST Framework API URLs каталога (/api/v1/).

Пути без завершающего слеша: клиент обращается к ним как
`/api/v1/product/search/<keyword>`. Ключевое слово поиска забирает
остаток пути целиком, включая слеши (`/product/search/1/2` ищет "1/2").
"""

from django.urls import path

from . import views


urlpatterns = [
    # Категории
    path('category/get-category', views.get_categories, name='api_get_categories'),
    path('category/single-category/<slug:slug>', views.get_single_category, name='api_single_category'),

    # Товары
    path('product/get-product', views.get_products, name='api_get_products'),
    path('product/get-product/<slug:slug>', views.get_single_product, name='api_single_product'),
    path('product/product-photo/<int:pk>', views.product_photo, name='api_product_photo'),
    path('product/product-count', views.product_count, name='api_product_count'),
    path('product/product-list/<int:page>', views.product_list, name='api_product_list'),
    path('product/product-filters', views.product_filters, name='api_product_filters'),
    path('product/related-product/<int:pid>/<int:cid>', views.related_products, name='api_related_products'),
    path('product/product-category/<slug:slug>', views.products_by_category, name='api_products_by_category'),

    # Поиск: пустое ключевое слово тоже допустимо, слеши входят в ключевое слово
    path('product/search/', views.search_product, name='api_search_all'),
    path('product/search/<path:keyword>', views.search_product, name='api_search'),
]
