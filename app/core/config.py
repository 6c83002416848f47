from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator, model_validator
from typing import Annotated, List
import json


class Settings(BaseSettings):
    # Project Info
    PROJECT_NAME: str = "Luma Catalog API"
    API_V1_STR: str = "/api/v1"

    # Localization
    DEFAULT_LOCALE: str = "en"
    SUPPORTED_LOCALES: Annotated[List[str], NoDecode] = ["en", "he"]
    RTL_LANGUAGES: Annotated[List[str], NoDecode] = ["he", "ar", "fa", "ur"]

    # Catalog
    CATEGORY_MAX_DEPTH: int = 3

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
    ]

    # Environment
    ENVIRONMENT: str = "development"

    DEBUG: bool = False

    # Monitoring (Optional - Add to .env for production)
    SENTRY_DSN: str = ""  # Optional: Sentry error tracking DSN

    @field_validator("ENVIRONMENT")
    @classmethod
    def normalize_environment(cls, value: str) -> str:
        return value.lower().strip()

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def normalize_default_locale(cls, value: str) -> str:
        return value.strip()

    @field_validator("SUPPORTED_LOCALES", "RTL_LANGUAGES", mode="before")
    @classmethod
    def parse_locale_list(cls, value) -> List[str]:
        if isinstance(value, str):
            raw = value.strip()
            if not raw:
                return []
            if raw.startswith("["):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError as exc:
                    raise ValueError("Locale lists must be valid JSON or comma-separated codes") from exc
                if isinstance(parsed, list):
                    return [str(code).strip() for code in parsed if str(code).strip()]
            return [code.strip() for code in raw.split(",") if code.strip()]
        return value

    @field_validator("CATEGORY_MAX_DEPTH")
    @classmethod
    def validate_max_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("CATEGORY_MAX_DEPTH must be at least 1")
        return value

    @model_validator(mode="after")
    def validate_default_locale_supported(self):
        if self.DEFAULT_LOCALE not in self.SUPPORTED_LOCALES:
            raise ValueError(
                f"DEFAULT_LOCALE '{self.DEFAULT_LOCALE}' must be one of SUPPORTED_LOCALES"
            )
        return self

    @property
    def rtl_languages(self) -> List[str]:
        return [code.lower() for code in self.RTL_LANGUAGES]

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()
