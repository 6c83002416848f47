import re
from typing import Iterable, Mapping, Optional, Union

import structlog

from app.core.config import settings
from app.schemas.category import Category
from app.schemas.localization import Direction, LocalizedString

logger = structlog.get_logger()

_SUBTAG_SEPARATOR = re.compile(r"[-_]")


def language_of(locale: Optional[str]) -> str:
    """Primary language subtag: ``"en-US"`` -> ``"en"``, ``"he_IL"`` -> ``"he"``."""
    if not locale:
        return ""
    return _SUBTAG_SEPARATOR.split(locale.strip(), maxsplit=1)[0].lower()


def resolve(
    content: Optional[Mapping[str, str]],
    locale: Optional[str],
    fallback_locale: str = settings.DEFAULT_LOCALE,
) -> str:
    """Best translation for ``locale``; never raises, worst case ``""``.

    Lookup order, first non-empty hit wins:

    1. exact key ``content[locale]``
    2. any key starting with the language subtag of ``locale``
    3. ``content[fallback_locale]``
    4. the first entry in insertion order
    """
    if not content:
        return ""

    if locale:
        value = content.get(locale)
        if value:
            return value

    language = language_of(locale)
    if language:
        for key, value in content.items():
            if key.lower().startswith(language) and value:
                return value

    value = content.get(fallback_locale)
    if value:
        logger.debug("translation_fallback_used", locale=locale, fallback_locale=fallback_locale)
        return value

    logger.debug("translation_fallback_used", locale=locale, fallback_locale=None)
    return next(iter(content.values()), "") or ""


def localize(
    value: Union[str, Mapping[str, str], None],
    locale: Optional[str],
    fallback_locale: str = settings.DEFAULT_LOCALE,
) -> str:
    """Resolve a field that may be plain text or a ``LocalizedString``."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return resolve(value, locale, fallback_locale)


def _category_content(category: Category, field: str, fallback_locale: str) -> LocalizedString:
    base = getattr(category, field)
    content: LocalizedString = {}
    if isinstance(base, str):
        content[fallback_locale] = base
    elif base:
        content.update(base)
    for code, translation in category.translations.items():
        text = getattr(translation, field)
        if text:
            content[code] = text
    return content


def category_name(
    category: Category,
    locale: Optional[str],
    fallback_locale: str = settings.DEFAULT_LOCALE,
) -> str:
    return resolve(_category_content(category, "name", fallback_locale), locale, fallback_locale)


def category_description(
    category: Category,
    locale: Optional[str],
    fallback_locale: str = settings.DEFAULT_LOCALE,
) -> Optional[str]:
    content = _category_content(category, "description", fallback_locale)
    if not content:
        return None
    return resolve(content, locale, fallback_locale)


def get_locale_direction(locale: Optional[str], rtl_languages: Optional[Iterable[str]] = None) -> Direction:
    """``rtl`` for Hebrew, Arabic, Persian and Urdu locales, ``ltr`` otherwise."""
    languages = settings.rtl_languages if rtl_languages is None else [code.lower() for code in rtl_languages]
    return Direction.RTL if language_of(locale) in languages else Direction.LTR


def is_rtl_locale(locale: Optional[str]) -> bool:
    return get_locale_direction(locale) is Direction.RTL


def negotiate_locale(
    requested: Optional[str],
    supported: Optional[Iterable[str]] = None,
    default: Optional[str] = None,
) -> str:
    """Pick the supported locale that serves a request for ``requested``."""
    supported = list(settings.SUPPORTED_LOCALES if supported is None else supported)
    default = default or settings.DEFAULT_LOCALE

    if requested:
        requested = requested.strip()
        if requested in supported:
            return requested
        language = language_of(requested)
        for code in supported:
            if language_of(code) == language:
                return code
    return default
