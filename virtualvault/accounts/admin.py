"""
Django admin configuration for accounts app.

Регистрация UserProfile и расширение стандартной админки User.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User

from .models import UserProfile


class UserProfileInline(admin.StackedInline):
    """Inline для отображения профиля пользователя."""
    model = UserProfile
    can_delete = False
    verbose_name_plural = 'Profile'
    fields = ('name', 'phone', 'address', 'dob', 'answer', 'role')


class UserAdmin(BaseUserAdmin):
    """Расширенная админка для пользователей."""
    inlines = (UserProfileInline,)
    list_display = ('username', 'email', 'user_name', 'user_phone', 'is_staff', 'date_joined')

    def user_name(self, obj):
        try:
            return obj.profile.name or '—'
        except UserProfile.DoesNotExist:
            return '—'
    user_name.short_description = 'Name'

    def user_phone(self, obj):
        """Отображает телефон из профиля."""
        try:
            return obj.profile.phone or '—'
        except UserProfile.DoesNotExist:
            return '—'
    user_phone.short_description = 'Phone'


# Перерегистрируем User с нашей расширенной админкой
admin.site.unregister(User)
admin.site.register(User, UserAdmin)


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'name', 'phone', 'role', 'created_at')
    list_filter = ('role',)
    search_fields = ('user__email', 'name', 'phone')
    readonly_fields = ('user',)
