"""
Поиск элементов WPRM (WP Recipe Maker) разметки в DOM дереве

Класс сравнивается как строка целиком: class="foo wprm-recipe-ingredients"
НЕ совпадает с "wprm-recipe-ingredients"

Если элемент не найден:
- базовые функции (find_first, get_element_with_class, get_text_node)
  возвращают None, как BeautifulSoup.find
- поиск частей рецепта (find_ingredient_list, find_instructions_list,
  find_recipe_card) бросает NotFoundError (ListNotFoundError / RecipeCardNotFoundError)
"""

from typing import Callable, Iterator, List, Optional

from bs4.element import PageElement

from src.dom.exceptions import ListNotFoundError, MalformedMarkupError, RecipeCardNotFoundError
from src.dom.node import attributes, first_child, is_element, is_text, iter_children, node_data, tag_name
from src.dom.traverse import traverse

INGREDIENTS_CLASS = 'wprm-recipe-ingredients'
INSTRUCTIONS_CLASS = 'wprm-recipe-instructions'
RECIPE_CONTAINER_CLASS = 'wprm-recipe-container'
INGREDIENT_NAME_CLASS = 'wprm-recipe-ingredient-name'

Predicate = Callable[[PageElement], bool]


def has_class(node: PageElement, class_name: str) -> bool:
    """Есть ли у узла атрибут class, равный class_name (точное совпадение)"""
    return any(key == 'class' and value == class_name for key, value in attributes(node))


def is_element_with_class(node: PageElement, name: str, class_name: str) -> bool:
    return is_element(node) and tag_name(node) == name and has_class(node, class_name)


def find_first(root: PageElement, predicate: Predicate) -> Optional[PageElement]:
    """
    Первый узел в прямом порядке обхода (начиная с root), для которого
    predicate истинен. После совпадения остальные узлы не просматриваются
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if predicate(node):
            return node
        stack.extend(reversed(list(iter_children(node))))
    return None


def get_element_with_class(root: PageElement, name: str, class_name: str) -> Optional[PageElement]:
    """
    Первый элемент внутри root (включая сам root) с тегом name и классом class_name

    Args:
        root: узел, с которого начинается поиск
        name: имя тега, например "ul"
        class_name: значение атрибута class как в HTML

    Returns:
        Найденный элемент или None
    """
    return find_first(root, lambda node: is_element_with_class(node, name, class_name))


def get_text_node(root: PageElement) -> Optional[PageElement]:
    """Первый текстовый узел внутри root (включая сам root) или None"""
    return find_first(root, is_text)


def find_ingredient_list(root: PageElement) -> PageElement:
    """
    Первый список ингредиентов <ul class="wprm-recipe-ingredients">

    Raises:
        ListNotFoundError: список не найден (kind="ingredients")
    """
    found = get_element_with_class(root, 'ul', INGREDIENTS_CLASS)
    if found is None:
        raise ListNotFoundError('ingredients')
    return found


def find_instructions_list(root: PageElement) -> PageElement:
    """
    Первый список шагов <ul class="wprm-recipe-instructions">

    Raises:
        ListNotFoundError: список не найден (kind="instructions")
    """
    found = get_element_with_class(root, 'ul', INSTRUCTIONS_CLASS)
    if found is None:
        raise ListNotFoundError('instructions')
    return found


def find_recipe_card(root: PageElement) -> PageElement:
    """
    Контейнер рецепта <div class="wprm-recipe-container">

    Raises:
        RecipeCardNotFoundError: контейнер не найден
    """
    found = get_element_with_class(root, 'div', RECIPE_CONTAINER_CLASS)
    if found is None:
        raise RecipeCardNotFoundError()
    return found


def find_ingredient_lists(root: PageElement) -> List[PageElement]:
    """
    Все списки ингредиентов документа в порядке обхода

    Вложенные списки внутри найденного не возвращаются
    """
    def matcher(node):
        if is_element_with_class(node, 'ul', INGREDIENTS_CLASS):
            return True, True  # без вложенных списков
        return False, False

    return traverse(root, matcher)


def get_text(root: PageElement) -> str:
    """Склеенный текст всех текстовых узлов внутри root"""
    return ''.join(str(node) for node in traverse(root, lambda node: (is_text(node), False)))


def get_ingredient_name(span: PageElement) -> str:
    """
    Название ингредиента - первый дочерний узел span, он должен быть текстом

    Raises:
        MalformedMarkupError: у span нет дочерних узлов или первый не текст
    """
    child = first_child(span)
    if child is None or not is_text(child):
        raise MalformedMarkupError(
            f"Ожидался текст внутри <{node_data(span)} class=\"{INGREDIENT_NAME_CLASS}\">", span)
    return str(child)


def iter_ingredient_names(ingredient_list: PageElement) -> Iterator[str]:
    """Названия ингредиентов из span.wprm-recipe-ingredient-name в каждом пункте списка"""
    for item in iter_children(ingredient_list):
        for child in iter_children(item):
            if is_element_with_class(child, 'span', INGREDIENT_NAME_CLASS):
                yield get_ingredient_name(child)
