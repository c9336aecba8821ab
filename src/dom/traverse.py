"""
Обход DOM дерева в глубину с функцией-матчером
"""

from typing import Callable, List, Tuple

from bs4.element import PageElement

from src.dom.node import iter_children

# matcher(node) -> (keep, stop)
Matcher = Callable[[PageElement], Tuple[bool, bool]]


def traverse(root: PageElement, matcher: Matcher) -> List[PageElement]:
    """
    Обходит дерево в прямом порядке (узел, затем его дети слева направо)
    и собирает узлы, для которых matcher вернул keep=True

    stop=True не заходит в поддерево текущего узла, обход остальных
    узлов продолжается

    Args:
        root: корневой узел
        matcher: функция node -> (keep, stop)

    Returns:
        Список подходящих узлов в порядке обхода (может быть пустым)
    """
    nodes = []
    # явный стек вместо рекурсии: глубина страницы не ограничена recursion limit
    stack = [root]
    while stack:
        node = stack.pop()
        keep, stop = matcher(node)
        if keep:
            nodes.append(node)
        if stop:
            continue
        stack.extend(reversed(list(iter_children(node))))
    return nodes
