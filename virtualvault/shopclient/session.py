"""
Хранилище авторизации клиента.

Состояние {user, token} живёт в памяти экземпляра и гидратируется из
ключа "auth" хранилища при создании. Запись в хранилище делает только
persist(): туда кладётся весь сырой ответ логина.
"""

import json
import logging

logger = logging.getLogger('shopclient.session')

AUTH_STORAGE_KEY = 'auth'


class AuthStore:

    def __init__(self, storage, key=AUTH_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._state = {'user': None, 'token': ''}
        self._hydrate()

    def _hydrate(self):
        raw = self.storage.get_item(self.key)
        if raw is None:
            return
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning('Ignoring unreadable %r entry in storage', self.key)
            return
        if isinstance(data, dict):
            self._state.update(user=data.get('user'), token=data.get('token'))

    @property
    def current(self):
        """Копия текущего состояния."""
        return dict(self._state)

    def update(self, **fields):
        """Сливает поля в состояние как есть (None тоже записывается)."""
        self._state.update(fields)
        return self.current

    def persist(self, payload):
        self.storage.set_item(self.key, json.dumps(payload))

    def clear(self):
        """Выход: сброс состояния и удаление записи из хранилища."""
        self._state = {'user': None, 'token': ''}
        self.storage.remove_item(self.key)

    @property
    def is_authenticated(self):
        return bool(self._state.get('user')) and bool(self._state.get('token'))
