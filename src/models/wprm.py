"""
Pydantic модели рецепта, извлеченного из WPRM разметки
"""

from typing import Optional
from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    """Ингредиент из пункта li.wprm-recipe-ingredient"""
    name: str
    amount: Optional[str] = None  # как на странице: "1 ½", "200"
    unit: Optional[str] = None
    notes: Optional[str] = None


class WprmRecipe(BaseModel):
    """Рецепт из контейнера div.wprm-recipe-container"""
    dish_name: Optional[str] = None
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)

    def to_json(self) -> dict:
        """Преобразование модели в JSON-совместимый словарь"""
        return self.model_dump(mode='json')
