"""
Формы входа и регистрации клиента.

Жизненный цикл формы:
    INITIAL -> INPUT_FILLED -> SUBMITTING -> SUCCESS | ERROR
    SUCCESS/ERROR -> INPUT_FILLED при следующем вводе

Ошибки отображаются только toast-уведомлениями:
- не прошла валидация полей: ничего не происходит (ни запроса, ни toast)
- success не равен true (false, отсутствует, "yes", 1): toast с message
  сервера как есть (в т.ч. None)
- ошибка транспорта, статус вне 2xx, любое исключение: "Something went wrong"
- тело ответа None: ничего не происходит
"""

import enum
import logging
from datetime import date

from django.core.exceptions import ValidationError
from django.core.validators import validate_email

logger = logging.getLogger('shopclient.auth')

LOGIN_PATH = '/api/v1/auth/login'
REGISTER_PATH = '/api/v1/auth/register'
FORGOT_PASSWORD_ROUTE = '/forgot-password'
LOGIN_ROUTE = '/login'

GENERIC_ERROR_MESSAGE = 'Something went wrong'
REGISTER_SUCCESS_MESSAGE = 'Register Successfully, please login'

LOGIN_SUCCESS_TOAST = {
    'duration': 5000,
    'icon': '🙏',
    'style': {
        'background': 'green',
        'color': 'white',
    },
}


def normalize_email(value):
    """Нормализация поля email: только обрезка пробелов по краям."""
    if value is None:
        return ''
    return str(value).strip()


class FormState(enum.Enum):
    INITIAL = 'initial'
    INPUT_FILLED = 'input_filled'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'
    ERROR = 'error'


class _Form:
    """Общее поведение форм: поля, состояние, разбор ответа сервера."""

    fields = ()

    def __init__(self, api, toaster, navigator):
        self.api = api
        self.toaster = toaster
        self.navigator = navigator
        self.values = {name: '' for name in self.fields}
        self.state = FormState.INITIAL

    def fill(self, **values):
        unknown = set(values) - set(self.fields)
        if unknown:
            raise ValueError(f'Unknown form fields: {", ".join(sorted(unknown))}')
        self.values.update(values)
        self.state = FormState.INPUT_FILLED
        return self

    def is_valid(self):
        return all(self.values[name] for name in self.fields)

    def payload(self):
        return dict(self.values)

    def on_success(self, data):
        raise NotImplementedError

    def submit(self):
        """
        Отправляет форму.

        Returns:
            dict | None: тело ответа сервера или None, если запрос не
            отправлялся или завершился ошибкой
        """
        if not self.is_valid():
            logger.debug('%s not submitted: required fields are empty', type(self).__name__)
            return None

        self.state = FormState.SUBMITTING
        try:
            data = self.api.post(self.path, self.payload()).data
            if data is None:
                self.state = FormState.INPUT_FILLED
                return None
            if data.get('success') is True:
                self.on_success(data)
                self.state = FormState.SUCCESS
            else:
                self.toaster.error(data.get('message'))
                self.state = FormState.ERROR
            return data
        except Exception as e:
            logger.error('%s submit failed: %s', type(self).__name__, e, exc_info=True)
            self.toaster.error(GENERIC_ERROR_MESSAGE)
            self.state = FormState.ERROR
            return None


class LoginForm(_Form):
    """
    Форма входа.

    После успешного входа {user, token} попадает в AuthStore, весь ответ
    сервера записывается в хранилище под ключом "auth", и клиент переходит
    на запомненную страницу (или на "/").
    """

    fields = ('email', 'password')
    path = LOGIN_PATH

    def __init__(self, api, auth, storage, toaster, navigator):
        super().__init__(api, toaster, navigator)
        self.auth = auth
        self.storage = storage

    def is_valid(self):
        return bool(normalize_email(self.values['email'])) and bool(self.values['password'])

    def payload(self):
        # пароль отправляется без изменений
        return {
            'email': normalize_email(self.values['email']),
            'password': self.values['password'],
        }

    def on_success(self, data):
        self.toaster.success(data.get('message'), **LOGIN_SUCCESS_TOAST)
        self.auth.update(user=data.get('user'), token=data.get('token'))
        self.auth.persist(data)
        self.navigator.navigate(self.navigator.consume_intended())

    def forgot_password(self):
        return self.navigator.navigate(FORGOT_PASSWORD_ROUTE)


class RegisterForm(_Form):
    """Форма регистрации. После успеха - переход на /login."""

    fields = ('name', 'email', 'password', 'phone', 'address', 'DOB', 'answer')
    path = REGISTER_PATH

    def is_valid(self):
        if not super().is_valid():
            return False
        try:
            validate_email(normalize_email(self.values['email']))
            date.fromisoformat(str(self.values['DOB']))
        except (ValidationError, ValueError):
            return False
        return True

    def payload(self):
        payload = super().payload()
        payload['email'] = normalize_email(payload['email'])
        return payload

    def on_success(self, data):
        self.toaster.success(REGISTER_SUCCESS_MESSAGE)
        self.navigator.navigate(LOGIN_ROUTE)
