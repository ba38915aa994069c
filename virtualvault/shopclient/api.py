"""
HTTP-клиент REST API витрины на requests.

Ответ 2xx возвращается как ApiResponse(status_code, data), где data -
разобранное JSON-тело (None для пустого тела или JSON null). Любой другой
статус поднимает ApiError. Ошибки транспорта пробрасываются как
requests.RequestException.
"""

import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger('shopclient.api')


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    data: Any


class ApiError(Exception):
    """Сервер ответил статусом вне 2xx."""

    def __init__(self, status_code, data=None, url=''):
        self.status_code = status_code
        self.data = data
        self.url = url
        super().__init__(f'{status_code} response from {url}')


class ApiClient:
    """
    Клиент /api/v1/.

    Args:
        base_url: адрес сервера, например http://localhost:8000
        auth: AuthStore; его токен уходит в заголовке Authorization
        http: requests.Session (по умолчанию создаётся новая)
        timeout: таймаут запроса в секундах (None = без таймаута)
    """

    def __init__(self, base_url, auth=None, http=None, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.auth = auth
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout

    def url(self, path):
        return f'{self.base_url}/{path.lstrip("/")}'

    def _headers(self):
        headers = {'Accept': 'application/json'}
        token = self.auth.current.get('token') if self.auth is not None else None
        if token:
            headers['Authorization'] = token
        return headers

    @staticmethod
    def _decode(response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning('Non-JSON response body from %s', response.url)
            return None

    def request(self, method, path, payload=None):
        url = self.url(path)
        kwargs = {'headers': self._headers(), 'timeout': self.timeout}
        if payload is not None:
            kwargs['json'] = payload

        logger.debug('%s %s', method, url)
        response = self.http.request(method, url, **kwargs)
        data = self._decode(response)
        if not 200 <= response.status_code < 300:
            logger.info('%s %s -> %s', method, url, response.status_code)
            raise ApiError(response.status_code, data, url)
        return ApiResponse(response.status_code, data)

    def get(self, path):
        return self.request('GET', path)

    def post(self, path, payload=None):
        return self.request('POST', path, payload if payload is not None else {})
