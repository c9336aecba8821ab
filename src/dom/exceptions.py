"""
Ошибки поиска по DOM дереву
"""


class DomSearchError(Exception):
    """Базовый класс для ошибок поиска по DOM"""
    pass


class NotFoundError(DomSearchError):
    """Ошибка: разметка страницы не соответствует ожидаемой (элемент не найден)"""
    def __init__(self, message: str = "Элемент не найден"):
        self.message = message
        super().__init__(self.message)


class ListNotFoundError(NotFoundError):
    """Ошибка: список ингредиентов или инструкций не найден"""
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"{kind} list does not exist")


class RecipeCardNotFoundError(NotFoundError):
    """Ошибка: контейнер рецепта не найден"""
    def __init__(self, message: str = "recipe card does not exist"):
        super().__init__(message)


class MalformedMarkupError(DomSearchError):
    """Ошибка: элемент найден, но его структура не та, что ожидалась"""
    def __init__(self, message: str, node=None):
        self.message = message
        self.node = node
        super().__init__(self.message)
