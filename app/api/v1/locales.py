from fastapi import APIRouter, Request

from app.core.config import settings
from app.core.rate_limiter import limiter
from app.schemas.localization import LocaleInfoResponse, SupportedLocalesResponse
from app.services.direction_service import DirectionalStyleResolver
from app.services.localization_service import language_of, negotiate_locale
from app.utils.response import success

router = APIRouter()


def _locale_info(locale: str) -> LocaleInfoResponse:
    resolver = DirectionalStyleResolver.for_locale(locale)
    return LocaleInfoResponse(
        locale=locale,
        language=language_of(locale),
        direction=resolver.direction,
        is_rtl=resolver.is_rtl,
        supported=locale in settings.SUPPORTED_LOCALES,
        negotiated_locale=negotiate_locale(locale),
        css_variables=resolver.css_variables(),
    )


@router.get("", response_model=dict)
@router.get("/", response_model=dict)
@limiter.limit("100/minute")
def get_supported_locales(request: Request):
    data = SupportedLocalesResponse(
        default_locale=settings.DEFAULT_LOCALE,
        locales=[_locale_info(code) for code in settings.SUPPORTED_LOCALES],
    )
    return success(data=data, message="Locales retrieved")


@router.get("/{locale}", response_model=dict)
@limiter.limit("100/minute")
def get_locale(request: Request, locale: str):
    """Public: Writing direction and layout variables for a locale."""
    return success(data=_locale_info(locale), message="Locale retrieved")
