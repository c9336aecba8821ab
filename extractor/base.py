"""
базовый класс экстрактора данных рецептов
Все классы должны наследоваться от этого класса и реализовывать метод extract_all
"""

import html
import json
import logging
import os
import sys
from pathlib import Path
import re
from bs4 import BeautifulSoup
from typing import Optional, Type
from abc import ABC, abstractmethod

# Добавление корневой директории в PYTHONPATH
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import Config
from src.dom import DomSearchError, load_html, parse_html

logger = logging.getLogger(__name__)


class BaseRecipeExtractor(ABC):
    """базовый экстрактор данных рецептов"""

    def __init__(self, html_path: str, soup: Optional[BeautifulSoup] = None):
        """
        Args:
            html_path: Путь к HTML файлу
            soup: уже разобранный документ (тогда файл не читается)
        """
        self.html_path = html_path
        self.soup = soup if soup is not None else load_html(html_path)

    @classmethod
    def from_html(cls, markup: str, html_path: str = '<string>') -> 'BaseRecipeExtractor':
        """Экстрактор для HTML строки"""
        return cls(html_path, soup=parse_html(markup))

    @staticmethod
    def clean_text(text: str) -> str:
        """Очистка текста от нечитаемых символов и нормализация"""
        if not text:
            return text

        # &#039; -> ', &quot; -> "
        text = html.unescape(text)
        # маркеры чекбоксов из шаблонов WPRM
        text = re.sub(r'[▢□✓✔▪▫●○■]', '', text)
        text = re.sub(r'\s+', ' ', text)
        return text.strip()

    @abstractmethod
    def extract_all(self) -> dict:
        """Извлечение всех данных рецепта из HTML"""
        raise NotImplementedError("Метод extract_all должен быть реализован в подклассе")


def _default_output_path(html_path: str) -> str:
    filename = f"{Path(html_path).stem}_extracted.json"
    if Config.EXTRACT_OUTPUT_DIR:
        os.makedirs(Config.EXTRACT_OUTPUT_DIR, exist_ok=True)
        return os.path.join(Config.EXTRACT_OUTPUT_DIR, filename)
    return str(Path(html_path).with_name(filename))


def process_html_file(extractor_class: Type[BaseRecipeExtractor],
                      html_path: str,
                      output_path: Optional[str] = None) -> dict:
    """
    Обработка одного HTML файла

    Args:
        html_path: Путь к HTML файлу
        output_path: Путь для сохранения JSON (если None, то рядом с HTML
            или в Config.EXTRACT_OUTPUT_DIR)

    Returns:
        Извлеченные данные
    """
    extractor = extractor_class(html_path)
    data = extractor.extract_all()

    if output_path is None:
        output_path = _default_output_path(html_path)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=4)

    logger.info(f"Обработан: {html_path} -> {output_path}")
    return data


def process_directory(extractor_class: Type[BaseRecipeExtractor], directory_path: str) -> int:
    """
    Обработка всех HTML файлов в директории

    Файлы без рецепта и нечитаемые файлы пропускаются с предупреждением

    Args:
        directory_path: Путь к директории с HTML файлами

    Returns:
        Количество успешно обработанных файлов
    """
    html_files = sorted(Path(directory_path).glob('*.html'))
    logger.info(f"Найдено {len(html_files)} HTML файлов в {directory_path}")

    processed = 0
    for html_file in html_files:
        try:
            process_html_file(extractor_class, str(html_file))
        except (DomSearchError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Пропущен {html_file.name}: {e}")
            continue
        processed += 1

    logger.info(f"Обработка завершена: {processed} из {len(html_files)}")
    return processed
