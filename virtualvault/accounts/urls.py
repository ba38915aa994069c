"""
URLs для accounts приложения (/api/v1/auth/)
"""
from django.urls import path
from . import views

urlpatterns = [
    path('register', views.register, name='auth_register'),
    path('login', views.login, name='auth_login'),
    path('forgot-password', views.forgot_password, name='auth_forgot_password'),
    path('user-auth', views.user_auth, name='auth_user_auth'),
]
