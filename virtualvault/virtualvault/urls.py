from django.urls import path, include
from django.contrib import admin

urlpatterns = [
    # Страницы корзины (сессионная корзина)
    path("", include("storefront.urls")),
    path("admin/", admin.site.urls),

    # REST API v1
    path("api/v1/auth/", include("accounts.urls")),
    path("api/v1/", include("storefront.api_urls")),
]
