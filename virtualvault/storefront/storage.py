"""
Key/value хранилища строк с семантикой localStorage.

Интерфейс:
    get_item(key) -> str | None
    set_item(key, value)
    remove_item(key)
    clear()

Используются корзиной и хранилищем авторизации. Реализации:
- MemoryStorage: словарь в памяти (тесты, короткоживущие клиенты)
- JsonFileStorage: один JSON-объект на диске, переживает перезапуск
- SessionStorage: обёртка над Django-сессией (серверная корзина)
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger('storefront.storage')


class MemoryStorage:
    """Хранилище в памяти процесса."""

    def __init__(self, initial=None):
        self._data = {}
        for key, value in (initial or {}).items():
            self.set_item(key, value)

    def get_item(self, key):
        return self._data.get(key)

    def set_item(self, key, value):
        self._data[key] = str(value)

    def remove_item(self, key):
        self._data.pop(key, None)

    def clear(self):
        self._data.clear()

    def keys(self):
        return list(self._data)

    def __len__(self):
        return len(self._data)


class JsonFileStorage(MemoryStorage):
    """
    Хранилище, сохраняемое в JSON-файл.

    Файл целиком перезаписывается при каждом изменении. Отсутствующий файл
    означает пустое хранилище.
    """

    def __init__(self, path):
        self.path = Path(path)
        super().__init__()
        if self.path.exists():
            with self.path.open(encoding='utf-8') as fh:
                data = json.load(fh)
            if not isinstance(data, dict):
                raise ValueError(f'{self.path} does not contain a JSON object')
            self._data = {str(k): str(v) for k, v in data.items()}

    def _flush(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        with tmp_path.open('w', encoding='utf-8') as fh:
            json.dump(self._data, fh, ensure_ascii=False)
        tmp_path.replace(self.path)
        logger.debug('Storage flushed to %s (%d keys)', self.path, len(self._data))

    def set_item(self, key, value):
        super().set_item(key, value)
        self._flush()

    def remove_item(self, key):
        super().remove_item(key)
        self._flush()

    def clear(self):
        super().clear()
        self._flush()


class SessionStorage:
    """
    Обёртка над Django-сессией.

    Значения хранятся строками под префиксом, чтобы не пересекаться
    со служебными ключами сессии (`_auth_user_id` и т.п.).
    """

    PREFIX = 'storage:'

    def __init__(self, session):
        self.session = session

    def _key(self, key):
        return f'{self.PREFIX}{key}'

    def get_item(self, key):
        return self.session.get(self._key(key))

    def set_item(self, key, value):
        self.session[self._key(key)] = str(value)
        self.session.modified = True

    def remove_item(self, key):
        if self._key(key) in self.session:
            del self.session[self._key(key)]
            self.session.modified = True

    def clear(self):
        for key in [k for k in self.session.keys() if k.startswith(self.PREFIX)]:
            del self.session[key]
        self.session.modified = True
