from django.db import models
from django.contrib.auth.models import User


class UserProfile(models.Model):
    ROLE_CUSTOMER = 0
    ROLE_ADMIN = 1
    ROLE_CHOICES = [
        (ROLE_CUSTOMER, 'Customer'),
        (ROLE_ADMIN, 'Admin'),
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    name = models.CharField(max_length=255, verbose_name='Name')
    phone = models.CharField(max_length=64, verbose_name='Phone')
    address = models.TextField(verbose_name='Address')
    dob = models.DateField(null=True, blank=True, verbose_name='Date of birth')
    # Ответ на секретный вопрос, используется для сброса пароля
    answer = models.CharField(max_length=255, verbose_name='Security answer')
    role = models.PositiveSmallIntegerField(choices=ROLE_CHOICES, default=ROLE_CUSTOMER, verbose_name='Role')
    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Created')
    updated_at = models.DateTimeField(auto_now=True, verbose_name='Updated')

    class Meta:
        verbose_name = 'User profile'
        verbose_name_plural = 'User profiles'
        indexes = [
            models.Index(fields=['phone'], name='idx_userprofile_phone'),
        ]

    def __str__(self):
        return f'Profile for {self.user.email}'
