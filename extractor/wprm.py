"""
Экстрактор данных рецептов для сайтов на плагине WP Recipe Maker (WPRM)
"""

import sys
import logging
from pathlib import Path
from typing import Optional

from bs4.element import PageElement

sys.path.insert(0, str(Path(__file__).parent.parent))
from extractor.base import BaseRecipeExtractor, process_directory
from src.dom import (
    ListNotFoundError, MalformedMarkupError, RecipeCardNotFoundError,
    find_ingredient_lists, find_instructions_list, find_recipe_card,
    get_element_with_class, get_text, get_text_node, traverse)
from src.dom.search import INGREDIENT_NAME_CLASS, is_element_with_class
from src.models.wprm import Ingredient, WprmRecipe

logger = logging.getLogger(__name__)


def _items_with_class(root: PageElement, class_name: str) -> list:
    """Все li с классом class_name под root, без вложенных"""
    def matcher(node):
        if is_element_with_class(node, 'li', class_name):
            return True, True
        return False, False
    return traverse(root, matcher)


class WprmRecipeExtractor(BaseRecipeExtractor):
    """Экстрактор для WPRM разметки (wprm-recipe-container, wprm-recipe-ingredients...)"""

    def _span_text(self, item: PageElement, class_name: str) -> Optional[str]:
        span = get_element_with_class(item, 'span', class_name)
        if span is None:
            return None
        return self.clean_text(get_text(span)) or None

    def extract_dish_name(self, root: Optional[PageElement] = None) -> Optional[str]:
        """Извлечение названия блюда из заголовка карточки рецепта"""
        if root is None:
            try:
                root = find_recipe_card(self.soup)
            except RecipeCardNotFoundError:
                return None

        for heading in ('h2', 'h1', 'h3'):
            name_elem = get_element_with_class(root, heading, 'wprm-recipe-name')
            if name_elem is not None:
                return self.clean_text(get_text(name_elem)) or None
        return None

    def parse_ingredient(self, item: PageElement) -> Optional[Ingredient]:
        """
        Разбор пункта li.wprm-recipe-ingredient

        Returns:
            Ingredient или None, если в пункте нет span с названием (подзаголовок группы)

        Raises:
            MalformedMarkupError: span с названием есть, но в нем нет текста
        """
        name_elem = get_element_with_class(item, 'span', INGREDIENT_NAME_CLASS)
        if name_elem is None:
            return None

        text_node = get_text_node(name_elem)
        name = self.clean_text(str(text_node)) if text_node is not None else ''
        if not name:
            raise MalformedMarkupError(
                f"Пустое название ингредиента в {self.html_path}", name_elem)

        return Ingredient(
            name=name,
            amount=self._span_text(item, 'wprm-recipe-ingredient-amount'),
            unit=self._span_text(item, 'wprm-recipe-ingredient-unit'),
            notes=self._span_text(item, 'wprm-recipe-ingredient-notes'),
        )

    def extract_ingredients(self, root: Optional[PageElement] = None) -> list[Ingredient]:
        """Ингредиенты из всех списков wprm-recipe-ingredients"""
        ingredients = []
        for ingredient_list in find_ingredient_lists(root if root is not None else self.soup):
            for item in _items_with_class(ingredient_list, 'wprm-recipe-ingredient'):
                ingredient = self.parse_ingredient(item)
                if ingredient is not None:
                    ingredients.append(ingredient)
        return ingredients

    def extract_instructions(self, root: Optional[PageElement] = None) -> list[str]:
        """Шаги приготовления из первого списка wprm-recipe-instructions"""
        try:
            instructions_list = find_instructions_list(root if root is not None else self.soup)
        except ListNotFoundError as e:
            logger.debug(f"{self.html_path}: {e}")
            return []

        steps = []
        for item in _items_with_class(instructions_list, 'wprm-recipe-instruction'):
            text_elem = get_element_with_class(item, 'div', 'wprm-recipe-instruction-text')
            step_text = self.clean_text(get_text(text_elem if text_elem is not None else item))
            if step_text:
                steps.append(step_text)
        return steps

    def extract_recipe(self) -> WprmRecipe:
        """
        Извлечение рецепта из карточки wprm-recipe-container

        Raises:
            RecipeCardNotFoundError: на странице нет карточки рецепта
            MalformedMarkupError: у ингредиента пустое название
        """
        card = find_recipe_card(self.soup)
        return WprmRecipe(
            dish_name=self.extract_dish_name(card),
            ingredients=self.extract_ingredients(card),
            instructions=self.extract_instructions(card),
        )

    def extract_all(self) -> dict:
        """
        Извлечение всех данных рецепта

        Returns:
            Словарь с данными рецепта
        """
        return self.extract_recipe().to_json()


def main():
    """Обработка примеров из preprocessed/wprm"""
    import os

    preprocessed_dir = os.path.join("preprocessed", "wprm")

    if os.path.exists(preprocessed_dir) and os.path.isdir(preprocessed_dir):
        process_directory(WprmRecipeExtractor, str(preprocessed_dir))
        return

    print(f"Директория не найдена: {preprocessed_dir}")
    print("Использование: python wprm.py")


if __name__ == "__main__":
    main()
