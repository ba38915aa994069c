from django.urls import path
from . import views

urlpatterns = [
    # cart
    path('cart/', views.view_cart, name='cart'),
    path('cart/add/', views.add_to_cart, name='cart_add'),
    path('cart/remove/', views.remove_from_cart, name='cart_remove'),
    path('cart/clear/', views.clear_cart, name='cart_clear'),
]
