"""
Подписанные токены авторизации для REST API.

Токен = django.core.signing.dumps({'id': <user pk>}) с меткой времени.
Срок жизни задаётся settings.AUTH_TOKEN_MAX_AGE (секунды).
"""

import logging

from django.conf import settings
from django.contrib.auth.models import User
from django.core import signing
from rest_framework import authentication

logger = logging.getLogger('accounts.auth')

TOKEN_SALT = 'accounts.auth.token'


class InvalidToken(Exception):
    """Токен подделан, повреждён или просрочен."""


def issue_token(user):
    """
    Выдаёт токен для пользователя.

    Args:
        user: django.contrib.auth.models.User

    Returns:
        str: подписанный токен
    """
    return signing.dumps({'id': user.pk}, salt=TOKEN_SALT, compress=True)


def read_token(token, max_age=None):
    """
    Проверяет токен и возвращает ID пользователя.

    Raises:
        InvalidToken: подпись неверна или токен старше max_age
    """
    if max_age is None:
        max_age = settings.AUTH_TOKEN_MAX_AGE
    try:
        payload = signing.loads(token, salt=TOKEN_SALT, max_age=max_age)
    except signing.SignatureExpired as e:
        raise InvalidToken('Token expired') from e
    except signing.BadSignature as e:
        raise InvalidToken('Invalid token') from e

    user_id = payload.get('id') if isinstance(payload, dict) else None
    if user_id is None:
        raise InvalidToken('Invalid token')
    return user_id


class SignedTokenAuthentication(authentication.BaseAuthentication):
    """
    DRF аутентификация по заголовку Authorization.

    Принимает как голый токен (`Authorization: <token>`), так и
    `Authorization: Bearer <token>`. Неверный токен не блокирует запрос:
    он обрабатывается как анонимный, и закрытые views отвечают 401.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        header = request.META.get('HTTP_AUTHORIZATION', '').strip()
        if not header:
            return None

        parts = header.split()
        if len(parts) == 2 and parts[0].lower() == self.keyword.lower():
            token = parts[1]
        elif len(parts) == 1:
            token = parts[0]
        else:
            return None

        try:
            user_id = read_token(token)
        except InvalidToken as e:
            logger.debug('Rejected auth token: %s', e)
            return None

        user = User.objects.filter(pk=user_id, is_active=True).first()
        if user is None:
            return None
        return (user, token)

    def authenticate_header(self, request):
        return self.keyword
