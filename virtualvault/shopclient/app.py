"""
Сборка клиента: одно хранилище, одна корзина и одно хранилище авторизации
на экземпляр приложения.
"""

from storefront.cart import Cart
from storefront.notifications import LoggingToaster
from storefront.storage import JsonFileStorage, MemoryStorage

from .api import ApiClient
from .auth import LoginForm, RegisterForm
from .cart_page import CartPage
from .config import load_settings
from .home import HomePage
from .navigation import Navigator
from .search import SearchInput, SearchState
from .session import AuthStore


class ShopApp:

    def __init__(self, base_url, storage=None, toaster=None, http=None, timeout=None):
        self.storage = storage if storage is not None else MemoryStorage()
        self.toaster = toaster if toaster is not None else LoggingToaster()
        self.auth = AuthStore(self.storage)
        self.api = ApiClient(base_url, auth=self.auth, http=http, timeout=timeout)
        self.cart = Cart(self.storage, toaster=self.toaster)
        self.navigator = Navigator()
        self.search_state = SearchState()

    @classmethod
    def from_settings(cls, settings=None, **kwargs):
        settings = settings or load_settings()
        if settings.storage_path and 'storage' not in kwargs:
            kwargs['storage'] = JsonFileStorage(settings.storage_path)
        kwargs.setdefault('timeout', settings.timeout)
        return cls(settings.api_url, **kwargs)

    def login_form(self):
        return LoginForm(self.api, self.auth, self.storage, self.toaster, self.navigator)

    def register_form(self):
        return RegisterForm(self.api, self.toaster, self.navigator)

    def search_input(self):
        return SearchInput(self.api, self.search_state, self.navigator)

    def home_page(self):
        return HomePage(self.api, self.cart)

    def logout(self):
        self.auth.clear()
        self.navigator.navigate('/login')

    def cart_page(self):
        return CartPage(self.cart, self.auth, self.navigator)
