"""
Конфигурация экстрактора и скриптов
"""
import os
from typing import Optional
from dotenv import load_dotenv

# Загружаем переменные из .env файла
load_dotenv()

class Config:
    """Централизованная конфигурация приложения из переменных окружения"""

    # Парсер для BeautifulSoup (lxml, html.parser, html5lib)
    HTML_PARSER: str = os.getenv('HTML_PARSER', 'lxml')

    # Куда сохранять JSON с извлеченными данными (None - рядом с HTML)
    EXTRACT_OUTPUT_DIR: Optional[str] = os.getenv('EXTRACT_OUTPUT_DIR')

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()
