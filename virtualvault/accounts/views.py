"""
API views для авторизации (/api/v1/auth/).

Содержит views для:
- Регистрации (register)
- Входа с выдачей токена (login)
- Сброса пароля по секретному ответу (forgot-password)
- Проверки токена (user-auth)

Ответы в формате {success, message, ...}. Прикладные ошибки (пустое поле,
уже зарегистрирован, неверный пароль) возвращаются как success: False,
непредвиденные ошибки логируются и дают 500.
"""

import hashlib
import logging
from datetime import date

from django.contrib.auth.models import User
from django.db import transaction
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import UserProfile
from .tokens import issue_token

logger = logging.getLogger('accounts.auth')

# Обязательные поля регистрации и сообщения о них (в порядке проверки)
REGISTER_REQUIRED_FIELDS = [
    ('name', 'Name is Required'),
    ('email', 'Email is Required'),
    ('password', 'Password is Required'),
    ('phone', 'Phone no is Required'),
    ('address', 'Address is Required'),
    ('answer', 'Answer is Required'),
    ('DOB', 'DOB is Required'),
]

FORGOT_PASSWORD_REQUIRED_FIELDS = [
    ('email', 'Emai is required'),
    ('answer', 'answer is required'),
    ('newPassword', 'New Password is required'),
]

USERNAME_MAX_LENGTH = 150


def _field(request, name):
    value = request.data.get(name)
    if value is None:
        return ''
    return str(value)


def _missing_field_message(request, required_fields):
    """Сообщение для первого пустого поля или None."""
    for name, message in required_fields:
        if not _field(request, name).strip():
            return message
    return None


def username_for_email(email):
    """
    Username для django User: сам email, если он помещается в поле,
    иначе sha1 от него.
    """
    if len(email) <= USERNAME_MAX_LENGTH:
        return email
    return hashlib.sha1(email.encode('utf-8')).hexdigest()


def serialize_user(user):
    """Публичные данные пользователя для клиента."""
    profile = getattr(user, 'profile', None)
    return {
        '_id': user.pk,
        'name': profile.name if profile else user.get_full_name() or user.get_username(),
        'email': user.email,
        'phone': profile.phone if profile else '',
        'address': profile.address if profile else '',
        'role': profile.role if profile else UserProfile.ROLE_CUSTOMER,
    }


@api_view(['POST'])
def register(request):
    """
    Регистрация пользователя.

    Request Body:
        name, email, password, phone, address, DOB (YYYY-MM-DD), answer

    Returns:
        201: {success: True, message, user}
        200: {success: False, message} при пустом поле или занятом email
        500: непредвиденная ошибка
    """
    try:
        missing = _missing_field_message(request, REGISTER_REQUIRED_FIELDS)
        if missing:
            return Response({'success': False, 'message': missing})

        email = _field(request, 'email').strip()
        try:
            dob = date.fromisoformat(_field(request, 'DOB').strip())
        except ValueError:
            return Response({'success': False, 'message': 'Invalid DOB'})

        if User.objects.filter(email__iexact=email).exists():
            return Response({'success': False, 'message': 'Already Register please login'})

        with transaction.atomic():
            user = User.objects.create_user(
                username=username_for_email(email),
                email=email,
                password=_field(request, 'password'),
            )
            UserProfile.objects.create(
                user=user,
                name=_field(request, 'name'),
                phone=_field(request, 'phone'),
                address=_field(request, 'address'),
                dob=dob,
                answer=_field(request, 'answer'),
            )

        logger.info('Registered user %s', user.pk)
        return Response({
            'success': True,
            'message': 'User Register Successfully',
            'user': serialize_user(user),
        }, status=status.HTTP_201_CREATED)

    except Exception as e:
        logger.error('Error in registration: %s', e, exc_info=True)
        return Response({
            'success': False,
            'message': 'Error in Registeration',
            'error': str(e),
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['POST'])
def login(request):
    """
    Вход по email и паролю.

    Request Body:
        email, password

    Returns:
        200: {success: True, message, user, token}
        200: {success: False, message: 'Invalid Password'}
        404: пустые поля или неизвестный email
    """
    try:
        email = _field(request, 'email').strip()
        password = _field(request, 'password')
        if not email or not password:
            return Response({
                'success': False,
                'message': 'Invalid email or password',
            }, status=status.HTTP_404_NOT_FOUND)

        user = User.objects.select_related('profile').filter(email__iexact=email).first()
        if user is None:
            return Response({
                'success': False,
                'message': 'Email is not registerd',
            }, status=status.HTTP_404_NOT_FOUND)

        if not user.is_active or not user.check_password(password):
            logger.info('Failed login for user %s', user.pk)
            return Response({'success': False, 'message': 'Invalid Password'})

        return Response({
            'success': True,
            'message': 'login successfully',
            'user': serialize_user(user),
            'token': issue_token(user),
        })

    except Exception as e:
        logger.error('Error in login: %s', e, exc_info=True)
        return Response({
            'success': False,
            'message': 'Error in login',
            'error': str(e),
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['POST'])
def forgot_password(request):
    """
    Сброс пароля по email и ответу на секретный вопрос.

    Request Body:
        email, answer, newPassword

    Returns:
        200: {success: True, message: 'Password Reset Successfully'}
        400: пустое поле
        404: {success: False, message: 'Wrong Email Or Answer'}
    """
    try:
        missing = _missing_field_message(request, FORGOT_PASSWORD_REQUIRED_FIELDS)
        if missing:
            return Response({'success': False, 'message': missing}, status=status.HTTP_400_BAD_REQUEST)

        profile = (
            UserProfile.objects
            .select_related('user')
            .filter(user__email__iexact=_field(request, 'email').strip(), answer=_field(request, 'answer'))
            .first()
        )
        if profile is None:
            return Response({
                'success': False,
                'message': 'Wrong Email Or Answer',
            }, status=status.HTTP_404_NOT_FOUND)

        user = profile.user
        user.set_password(_field(request, 'newPassword'))
        user.save(update_fields=['password'])
        logger.info('Password reset for user %s', user.pk)
        return Response({'success': True, 'message': 'Password Reset Successfully'})

    except Exception as e:
        logger.error('Error in forgot password: %s', e, exc_info=True)
        return Response({
            'success': False,
            'message': 'Error in forgot password',
            'error': str(e),
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_auth(request):
    """Проверка токена: {ok: True} или 401."""
    return Response({'ok': True})
