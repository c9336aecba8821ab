"""
Отладочный вывод узлов и списков ингредиентов
"""

import sys

from bs4.element import PageElement

from src.dom.node import attributes, node_data, node_type
from src.dom.search import iter_ingredient_names


def print_node(node: PageElement, file=None):
    """Печатает тип узла, его данные и атрибуты"""
    out = file if file is not None else sys.stdout
    print(f"Node Type: {node_type(node).value}", file=out)
    print("Node Data:", node_data(node), file=out)
    print("Node Attributes", file=out)
    for key, value in attributes(node):
        print(key, value, file=out)


def print_ingredient_list(ingredient_list: PageElement, file=None):
    """
    Печатает названия ингредиентов списка, по одному на строку

    Raises:
        MalformedMarkupError: span с названием не содержит текста
    """
    out = file if file is not None else sys.stdout
    for name in iter_ingredient_names(ingredient_list):
        print(name, file=out)
