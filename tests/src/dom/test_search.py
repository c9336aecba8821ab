"""
Тесты поиска WPRM элементов в DOM дереве
"""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from src.dom import (
    ListNotFoundError, MalformedMarkupError, NotFoundError, RecipeCardNotFoundError,
    find_first, find_ingredient_list, find_ingredient_lists, find_instructions_list,
    find_recipe_card, get_element_with_class, get_ingredient_name, get_text, get_text_node,
    has_class, iter_ingredient_names, parse_html)

CARD_HTML = (
    '<div class="wprm-recipe-container">'
    '<ul class="wprm-recipe-ingredients">'
    '<li><span class="wprm-recipe-ingredient-name">Flour</span></li>'
    '</ul>'
    '</div>'
)

NESTED_HTML = (
    '<div>'
    '<ul class="wprm-recipe-ingredients" id="outer1">'
    '<li><ul class="wprm-recipe-ingredients" id="inner"><li>x</li></ul></li>'
    '</ul>'
    '<section><ul class="wprm-recipe-ingredients" id="outer2"></ul></section>'
    '</div>'
)


class TestRecipeCardScenario(unittest.TestCase):
    """Тест на примере карточки рецепта с одним ингредиентом"""

    def setUp(self):
        self.soup = parse_html(CARD_HTML)

    def test_find_recipe_card(self):
        self.assertIs(find_recipe_card(self.soup), self.soup.find('div'))

    def test_find_ingredient_list(self):
        self.assertIs(find_ingredient_list(self.soup), self.soup.find('ul'))

    def test_ingredient_names(self):
        ingredient_list = find_ingredient_list(self.soup)

        self.assertEqual(list(iter_ingredient_names(ingredient_list)), ['Flour'])

    def test_name_via_text_node(self):
        span = get_element_with_class(self.soup, 'span', 'wprm-recipe-ingredient-name')

        self.assertEqual(str(get_text_node(span)), 'Flour')

    def test_search_starts_at_root(self):
        """Тест: сам корень тоже проверяется"""
        ul = self.soup.find('ul')

        self.assertIs(find_ingredient_list(ul), ul)
        self.assertIs(get_element_with_class(ul, 'ul', 'wprm-recipe-ingredients'), ul)


class TestNotFound(unittest.TestCase):
    """Тесты для страниц без нужной разметки"""

    def test_empty_document(self):
        soup = parse_html('')

        with self.assertRaises(ListNotFoundError) as ctx:
            find_ingredient_list(soup)
        self.assertEqual(ctx.exception.kind, 'ingredients')

        with self.assertRaises(ListNotFoundError) as ctx:
            find_instructions_list(soup)
        self.assertEqual(ctx.exception.kind, 'instructions')

        with self.assertRaises(RecipeCardNotFoundError):
            find_recipe_card(soup)

        self.assertIsNone(get_element_with_class(soup, 'ul', 'wprm-recipe-ingredients'))
        self.assertIsNone(get_text_node(soup))
        self.assertEqual(find_ingredient_lists(soup), [])

    def test_no_matching_class(self):
        soup = parse_html('<div class="recipe"><ul class="ingredients"><li>salt</li></ul></div>')

        self.assertRaises(NotFoundError, find_ingredient_list, soup)
        self.assertRaises(NotFoundError, find_instructions_list, soup)
        self.assertRaises(NotFoundError, find_recipe_card, soup)
        self.assertEqual(find_ingredient_lists(soup), [])

    def test_error_kinds_are_distinguishable(self):
        soup = parse_html('<ul class="wprm-recipe-ingredients"></ul>')

        find_ingredient_list(soup)
        with self.assertRaises(ListNotFoundError) as ctx:
            find_instructions_list(soup)
        self.assertIn('instructions', str(ctx.exception))

    def test_class_must_match_exactly(self):
        """Тест: class из нескольких токенов не совпадает"""
        soup = parse_html('<ul class="foo wprm-recipe-ingredients bar"></ul>')

        self.assertRaises(ListNotFoundError, find_ingredient_list, soup)
        self.assertFalse(has_class(soup.find('ul'), 'wprm-recipe-ingredients'))

    def test_tag_must_match(self):
        soup = parse_html('<ol class="wprm-recipe-instructions"></ol>')

        self.assertRaises(ListNotFoundError, find_instructions_list, soup)
        self.assertIs(get_element_with_class(soup, 'ol', 'wprm-recipe-instructions'), soup.find('ol'))


class TestOrdering(unittest.TestCase):
    """Тесты порядка результатов"""

    def test_singular_finder_returns_first_in_preorder(self):
        soup = parse_html(NESTED_HTML)

        self.assertEqual(find_ingredient_list(soup)['id'], 'outer1')

    def test_multi_finder_skips_nested_lists(self):
        soup = parse_html(NESTED_HTML)

        lists = find_ingredient_lists(soup)

        self.assertEqual([node['id'] for node in lists], ['outer1', 'outer2'])

    def test_first_text_node(self):
        soup = parse_html('<div><p><b>first</b>second</p>third</div>')

        self.assertEqual(str(get_text_node(soup)), 'first')
        self.assertEqual(get_text(soup.find('p')), 'firstsecond')

    def test_text_root_is_returned(self):
        soup = parse_html('<p>only</p>')
        text = soup.find('p').contents[0]

        self.assertIs(get_text_node(text), text)

    def test_find_first_short_circuits(self):
        soup = parse_html('<div><p id="a"></p><p id="b"></p></div>')
        seen = []

        def predicate(node):
            seen.append(node)
            return getattr(node, 'name', None) == 'p'

        found = find_first(soup, predicate)

        self.assertEqual(found['id'], 'a')
        self.assertNotIn(soup.find(id='b'), seen)


class TestIngredientName(unittest.TestCase):
    """Тесты для названия ингредиента из span"""

    def test_empty_span_is_malformed(self):
        soup = parse_html(
            '<ul class="wprm-recipe-ingredients"><li><span class="wprm-recipe-ingredient-name"></span></li></ul>')

        with self.assertRaises(MalformedMarkupError) as ctx:
            list(iter_ingredient_names(find_ingredient_list(soup)))
        self.assertIs(ctx.exception.node, soup.find('span'))

    def test_element_first_child_is_malformed(self):
        soup = parse_html('<span class="wprm-recipe-ingredient-name"><a href="#">salt</a></span>')

        self.assertRaises(MalformedMarkupError, get_ingredient_name, soup.find('span'))

    def test_other_spans_are_ignored(self):
        soup = parse_html(
            '<ul class="wprm-recipe-ingredients"><li>'
            '<span class="wprm-recipe-ingredient-amount">2</span>'
            '<span class="wprm-recipe-ingredient-name">eggs</span>'
            '</li><li><span class="wprm-recipe-ingredient-name">milk</span></li></ul>')

        self.assertEqual(list(iter_ingredient_names(find_ingredient_list(soup))), ['eggs', 'milk'])


if __name__ == '__main__':
    unittest.main()
