"""
Строка поиска клиента.

Ключевое слово не обрезается и не проверяется на пустоту, но кодируется
целиком (`quote(..., safe='')`), чтобы `?`, `#` и `/` доходили до сервера
как часть ключевого слова. Ошибки только логируются, состояние не меняется.
"""

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

logger = logging.getLogger('shopclient.search')

SEARCH_PATH = '/api/v1/product/search/'
SEARCH_ROUTE = '/search'


def search_path(keyword):
    return SEARCH_PATH + quote(str(keyword), safe='')


@dataclass
class SearchState:
    keyword: str = ''
    results: list = field(default_factory=list)


class SearchInput:

    def __init__(self, api, state, navigator):
        self.api = api
        self.state = state
        self.navigator = navigator

    def type(self, keyword):
        self.state.keyword = keyword
        return self

    def submit(self):
        keyword = self.state.keyword
        try:
            response = self.api.get(search_path(keyword))
            self.state.results = response.data
            self.navigator.navigate(SEARCH_ROUTE)
            return self.state.results
        except Exception as e:
            logger.error('Search for %r failed: %s', keyword, e, exc_info=True)
            return None
