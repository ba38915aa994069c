"""
Toast-уведомления: единственный канал сигнализации успеха/ошибки.

Toaster: любой объект с методами success(message, **options) и error(message).
"""

import logging

from django.contrib import messages


class MessagesToaster:
    """Уведомления через Django messages framework (серверные страницы)."""

    def __init__(self, request):
        self.request = request

    def success(self, message, **options):
        messages.success(self.request, message)

    def error(self, message, **options):
        messages.error(self.request, message)


class LoggingToaster:
    """Уведомления в лог (клиент без UI)."""

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger('shopclient.toast')

    def success(self, message, **options):
        self.logger.info('toast success: %s', message)

    def error(self, message, **options):
        self.logger.warning('toast error: %s', message)
