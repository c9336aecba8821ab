"""
Скрипт для извлечения данных WPRM рецептов из HTML файла или директории
"""

import sys
import logging
import argparse
from pathlib import Path

# Добавляем корневую директорию в путь
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import Config
from extractor.base import process_directory, process_html_file
from extractor.wprm import WprmRecipeExtractor
from src.dom import DomSearchError, find_ingredient_lists, load_html, print_ingredient_list

logger = logging.getLogger(__name__)


def print_ingredients(html_path: str) -> int:
    """Печатает названия ингредиентов всех списков страницы"""
    soup = load_html(html_path)
    lists = find_ingredient_lists(soup)
    if not lists:
        logger.warning(f"{html_path}: ingredients list does not exist")
        return 1
    for ingredient_list in lists:
        print_ingredient_list(ingredient_list)
    return 0


def main(argv=None) -> int:
    """Основная функция"""
    parser = argparse.ArgumentParser(description="Извлечение рецептов из WPRM разметки")
    parser.add_argument('path', help="HTML файл или директория с HTML файлами")
    parser.add_argument('--output', '-o', default=None, help="JSON файл для результата (только для одного файла)")
    parser.add_argument('--print-ingredients', action='store_true',
                        help="Напечатать названия ингредиентов вместо сохранения JSON")
    parser.add_argument('--log-level', default=Config.LOG_LEVEL, type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    path = Path(args.path)
    if path.is_dir() and not args.print_ingredients:
        process_directory(WprmRecipeExtractor, str(path))
        return 0

    html_files = sorted(path.glob('*.html')) if path.is_dir() else [path]
    exit_code = 0
    for html_file in html_files:
        try:
            if args.print_ingredients:
                exit_code = max(exit_code, print_ingredients(str(html_file)))
            else:
                process_html_file(WprmRecipeExtractor, str(html_file), args.output)
        except (DomSearchError, OSError, UnicodeDecodeError) as e:
            logger.error(f"{html_file}: {e}")
            exit_code = 1
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
