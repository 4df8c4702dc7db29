"""
Названия стран для формы адреса.

Основные функции:
    - get_country_names: Полная таблица {код_страны: название} для локали
    - get_available_countries: Та же таблица, ограниченная странами магазина

Названия берутся из данных CLDR (Babel) для активного языка Django.
Псевдорегионы (EU, UN, ZZ и т.п.) в таблицу не попадают.

Примеры использования:
    names = get_country_names("fr")          # {"DE": "Allemagne", ...}
    countries = get_available_countries()    # {"FR": "France"} для магазина с FR
"""

import logging
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from django.conf import settings
from django.utils import translation

from addressing.models import Country

logger = logging.getLogger(__name__)

# Коды CLDR, которые не являются странами
NON_COUNTRY_CODES = frozenset(
    {"AC", "CP", "CQ", "DG", "EA", "EU", "EZ", "IC", "QO", "TA", "UN", "XA", "XB", "ZZ"}
)


def _resolve_locale(locale=None) -> Locale:
    """Возвращает локаль Babel для кода языка или активного языка Django."""
    candidates = [
        locale,
        translation.get_language(),
        settings.LANGUAGE_CODE,
        "en",
    ]
    for candidate in candidates:
        if not candidate:
            continue
        try:
            return Locale.parse(translation.to_locale(candidate))
        except (UnknownLocaleError, ValueError):
            logger.warning("Неизвестная локаль %s для списка стран", candidate)
    return Locale("en")


@lru_cache(maxsize=32)
def _country_names_for(locale_id: str) -> dict[str, str]:
    territories = Locale.parse(locale_id).territories
    names = {
        code: name
        for code, name in territories.items()
        if len(code) == 2 and code.isalpha() and code not in NON_COUNTRY_CODES
    }
    return dict(sorted(names.items(), key=lambda item: item[1].casefold()))


def get_country_names(locale=None) -> dict[str, str]:
    """
    Получить полную таблицу названий стран.

    Args:
        locale: Код языка (опционально, по умолчанию активный язык)

    Returns:
        dict: Словарь {код_страны: название}, отсортированный по названию
    """
    return dict(_country_names_for(str(_resolve_locale(locale))))


def get_available_countries(locale=None) -> dict[str, str]:
    """
    Получить страны, настроенные в магазине.

    Результат всегда является подмножеством get_country_names с теми же ключами.
    Коды, которых нет в таблице локали, пропускаются.

    Args:
        locale: Код языка (опционально)

    Returns:
        dict: Словарь {код_страны: название}
    """
    names = get_country_names(locale)
    defined_codes = set(Country.objects.enabled().values_list("code", flat=True))

    unknown_codes = sorted(defined_codes - names.keys())
    if unknown_codes:
        logger.warning(
            "Коды стран отсутствуют в таблице локали и пропущены: %s",
            ", ".join(unknown_codes),
        )

    return {code: name for code, name in names.items() if code in defined_codes}
