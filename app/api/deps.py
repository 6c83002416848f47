from typing import Optional
from fastapi import Query

from app.core.config import settings
from app.schemas.localization import Direction
from app.services.category_tree import CategoryTree, get_category_tree
from app.services.localization_service import get_locale_direction, negotiate_locale


class LocaleContext:
    """Locale snapshot taken once per request."""

    def __init__(self, requested: str):
        self.requested = requested
        self.locale = negotiate_locale(requested)
        self.direction: Direction = get_locale_direction(requested)

    def as_meta(self) -> dict:
        return {
            "locale": self.locale,
            "requested_locale": self.requested,
            "direction": self.direction.value,
        }


def get_tree() -> CategoryTree:
    return get_category_tree()


def get_locale_context(
    locale: Optional[str] = Query(None, max_length=35),
) -> LocaleContext:
    requested = (locale or "").strip() or settings.DEFAULT_LOCALE
    return LocaleContext(requested)
