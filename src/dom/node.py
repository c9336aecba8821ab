"""
Модель узла DOM поверх дерева BeautifulSoup

Дерево строит и владеет им BeautifulSoup, здесь только чтение:
тип узла, имя тега, атрибуты и навигация first child / next sibling
"""

from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from config.config import Config


class NodeType(Enum):
    """Тип узла дерева"""
    ELEMENT = "Element"
    TEXT = "Text"
    OTHER = "Other"


def parse_html(markup: Union[str, bytes], parser: Optional[str] = None) -> BeautifulSoup:
    """
    Разбор HTML в дерево

    class не разбивается на список, чтобы атрибут сравнивался как есть

    Args:
        markup: HTML строка или байты
        parser: имя парсера BeautifulSoup (по умолчанию из Config.HTML_PARSER)

    Returns:
        Корневой узел документа
    """
    return BeautifulSoup(markup, parser or Config.HTML_PARSER, multi_valued_attributes=None)


def load_html(html_path: Union[str, Path], parser: Optional[str] = None) -> BeautifulSoup:
    """
    Чтение и разбор HTML файла

    Файл читается байтами: кодировку определяет BeautifulSoup (UnicodeDammit),
    в том числе по <meta charset>
    """
    with open(html_path, 'rb') as f:
        return parse_html(f.read(), parser)


def node_type(node: PageElement) -> NodeType:
    """Определяет тип узла: элемент, текст или прочее (документ, комментарий, doctype...)"""
    if isinstance(node, BeautifulSoup):
        return NodeType.OTHER
    if isinstance(node, Tag):
        return NodeType.ELEMENT
    if isinstance(node, PreformattedString):
        # Comment, Doctype, CData, ProcessingInstruction, Declaration
        return NodeType.OTHER
    if isinstance(node, NavigableString):
        return NodeType.TEXT
    return NodeType.OTHER


def is_element(node: PageElement) -> bool:
    return node_type(node) is NodeType.ELEMENT


def is_text(node: PageElement) -> bool:
    return node_type(node) is NodeType.TEXT


def tag_name(node: PageElement) -> Optional[str]:
    """Имя тега, только для элементов"""
    if is_element(node):
        return node.name
    return None


def node_data(node: PageElement) -> str:
    """Имя тега для элемента, текст для строковых узлов, пусто для документа"""
    if isinstance(node, NavigableString):
        return str(node)
    if is_element(node):
        return node.name
    return ''


def attributes(node: PageElement) -> List[Tuple[str, str]]:
    """
    Атрибуты узла в порядке разметки в виде пар (ключ, значение)

    Если дерево разобрано с multi_valued_attributes, значения-списки
    склеиваются через пробел
    """
    if not isinstance(node, Tag):
        return []
    pairs = []
    for key, value in node.attrs.items():
        if isinstance(value, (list, tuple)):
            value = ' '.join(value)
        pairs.append((key, value))
    return pairs


def first_child(node: PageElement) -> Optional[PageElement]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None


def next_sibling(node: PageElement) -> Optional[PageElement]:
    return node.next_sibling


def iter_children(node: PageElement) -> Iterator[PageElement]:
    """Дочерние узлы слева направо"""
    child = first_child(node)
    while child is not None:
        yield child
        child = next_sibling(child)
