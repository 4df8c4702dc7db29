"""Настройки проекта SHOP.

Этот модуль содержит все настройки Django проекта, включая:
- Базовые настройки Django
- Настройки безопасности
- Настройки базы данных
- Настройки доставки и пунктов выдачи
- Настройки логирования
"""

import os
from pathlib import Path
import sys

from dotenv import load_dotenv

# -----------------------------------------------------------------------------
# Базовые настройки
# -----------------------------------------------------------------------------

BASE_DIR = Path(__file__).resolve().parent.parent

# Загрузка переменных окружения
if not os.environ.get("SETTINGS_LOADED"):
    # Проверяем CI окружение
    if os.getenv("DJANGO_ENV") == "ci":
        # В CI используем переменные окружения напрямую
        os.environ["SETTINGS_LOADED"] = "True"
    else:
        env_dev = BASE_DIR / ".env.dev"
        env_prod = BASE_DIR / ".env.prod"

        if env_dev.exists():
            env_file = env_dev
        elif env_prod.exists():
            env_file = env_prod
        else:
            raise FileNotFoundError(
                "Не найдены файлы настроек. Необходим .env.dev или .env.prod. "
                "Пожалуйста, создайте один из файлов на основе .env.example"
            )

        load_dotenv(env_file)
        os.environ["SETTINGS_LOADED"] = "True"

# -----------------------------------------------------------------------------
# Проверка обязательных переменных
# -----------------------------------------------------------------------------

required_env_vars = [
    "SECRET_KEY",
    "DEBUG",
    "ALLOWED_HOSTS",
    "DB_ENGINE",
    "DB_NAME",
]

missing_env_vars = [var for var in required_env_vars if not os.getenv(var)]

if missing_env_vars:
    raise ValueError(
        f"Отсутствуют обязательные переменные окружения: {', '.join(missing_env_vars)}"
    )

# -----------------------------------------------------------------------------
# Основные настройки Django
# -----------------------------------------------------------------------------

SECRET_KEY = os.getenv("SECRET_KEY")
DEBUG = os.getenv("DEBUG") == "True"
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS").split(",")

# -----------------------------------------------------------------------------
# Приложения
# -----------------------------------------------------------------------------

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Приложения
    "addressing.apps.AddressingConfig",
    "shipping.apps.ShippingConfig",
    "checkout.apps.CheckoutConfig",
    "pickup.apps.PickupConfig",
]

# -----------------------------------------------------------------------------
# Middleware
# -----------------------------------------------------------------------------

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.locale.LocaleMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# -----------------------------------------------------------------------------
# Основные настройки URL и шаблонов
# -----------------------------------------------------------------------------

ROOT_URLCONF = "shop.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [
            BASE_DIR / "templates",
        ],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "shop.wsgi.application"

# -----------------------------------------------------------------------------
# База данных
# -----------------------------------------------------------------------------

DATABASES = {
    "default": {
        "ENGINE": os.getenv("DB_ENGINE"),
        "NAME": os.getenv("DB_NAME"),
        "USER": os.getenv("DB_USER", ""),
        "PASSWORD": os.getenv("DB_PASSWORD", ""),
        "HOST": os.getenv("DB_HOST", ""),
        "PORT": os.getenv("DB_PORT", ""),
    }
}

# -----------------------------------------------------------------------------
# Интернационализация
# -----------------------------------------------------------------------------

LANGUAGE_CODE = os.getenv("LANGUAGE_CODE", "en")
TIME_ZONE = os.getenv("TIME_ZONE", "Europe/Paris")
USE_I18N = True
USE_TZ = True

# -----------------------------------------------------------------------------
# Статические файлы
# -----------------------------------------------------------------------------

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# -----------------------------------------------------------------------------
# Прочие настройки Django
# -----------------------------------------------------------------------------

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
API_VERSION = os.getenv("API_VERSION", "v1")

# -----------------------------------------------------------------------------
# Настройки безопасности
# -----------------------------------------------------------------------------

if not DEBUG:
    SECURE_SSL_REDIRECT = os.getenv("SECURE_SSL_REDIRECT", "True") == "True"
    SECURE_HSTS_SECONDS = int(os.getenv("SECURE_HSTS_SECONDS", "31536000"))
    SECURE_HSTS_INCLUDE_SUBDOMAINS = (
        os.getenv("SECURE_HSTS_INCLUDE_SUBDOMAINS", "True") == "True"
    )
    SECURE_HSTS_PRELOAD = os.getenv("SECURE_HSTS_PRELOAD", "True") == "True"

    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "True") == "True"
    CSRF_COOKIE_SECURE = os.getenv("CSRF_COOKIE_SECURE", "True") == "True"
else:
    SECURE_SSL_REDIRECT = False
    SESSION_COOKIE_SECURE = False
    CSRF_COOKIE_SECURE = False

CSRF_TRUSTED_ORIGINS = [
    origin for origin in os.getenv("CSRF_TRUSTED_ORIGINS", "").split(",") if origin
]

# -----------------------------------------------------------------------------
# Доставка и пункты выдачи
# -----------------------------------------------------------------------------

# Калькуляторы стоимости доставки: {имя_в_реестре: путь_к_классу}
SHIPPING_CALCULATORS = {
    "flat_rate": "shipping.services.calculator_strategies.FlatRateCalculator",
    "store_pickup": "shipping.services.calculator_strategies.StorePickupCalculator",
}

PICKUP_DEFAULT_TEMPLATE = "pickup/checkout/select_shipping/pickup/list.html"
PICKUP_LIST_LIMIT = int(os.getenv("PICKUP_LIST_LIMIT", "10"))

# Ключ сессии, в котором хранится идентификатор текущей корзины
CART_SESSION_KEY = os.getenv("CART_SESSION_KEY", "cart_id")

# -----------------------------------------------------------------------------
# Настройки для тестов
# -----------------------------------------------------------------------------

if "pytest" in sys.argv[0]:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }
    STORAGES["staticfiles"] = {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    }

# -----------------------------------------------------------------------------
# Настройки логирования
# -----------------------------------------------------------------------------

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "pickup": {
            "handlers": ["console"],
            "level": os.getenv("PICKUP_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
        "shipping": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": True,
        },
        "addressing": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": True,
        },
    },
}
