"""
Поиск по DOM дереву WPRM разметки
"""

from .exceptions import (
    DomSearchError, NotFoundError, ListNotFoundError, RecipeCardNotFoundError, MalformedMarkupError)
from .node import (
    NodeType, parse_html, load_html, node_type, tag_name, attributes,
    first_child, next_sibling, iter_children)
from .traverse import traverse
from .search import (
    find_first, has_class, get_element_with_class, get_text_node, get_text,
    find_ingredient_list, find_instructions_list, find_recipe_card, find_ingredient_lists,
    get_ingredient_name, iter_ingredient_names)
from .printing import print_node, print_ingredient_list

__all__ = [
    'DomSearchError', 'NotFoundError', 'ListNotFoundError', 'RecipeCardNotFoundError', 'MalformedMarkupError',
    'NodeType', 'parse_html', 'load_html', 'node_type', 'tag_name', 'attributes',
    'first_child', 'next_sibling', 'iter_children',
    'traverse',
    'find_first', 'has_class', 'get_element_with_class', 'get_text_node', 'get_text',
    'find_ingredient_list', 'find_instructions_list', 'find_recipe_card', 'find_ingredient_lists',
    'get_ingredient_name', 'iter_ingredient_names',
    'print_node', 'print_ingredient_list',
]
