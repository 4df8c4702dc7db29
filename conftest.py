"""
Глобальная конфигурация pytest для проекта.

Содержит:
- Настройку PYTHONPATH
- Переменные окружения для тестовой конфигурации Django
"""

import os
import sys

# Приложения Django лежат в каталоге shop/
root_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(root_dir, "shop"))

# В тестах настройки берутся из окружения, а не из .env файлов
os.environ.setdefault("DJANGO_ENV", "ci")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DEBUG", "True")
os.environ.setdefault("ALLOWED_HOSTS", "testserver,localhost,127.0.0.1")
os.environ.setdefault("DB_ENGINE", "django.db.backends.sqlite3")
os.environ.setdefault("DB_NAME", ":memory:")
os.environ.setdefault("LANGUAGE_CODE", "en")
