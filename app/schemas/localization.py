from enum import Enum
from typing import Dict, List, Union

from pydantic import BaseModel


# Locale code -> translated text. Dicts keep insertion order, which is the
# order used by the last-resort fallback.
LocalizedString = Dict[str, str]

LocalizedText = Union[str, LocalizedString]


class Direction(str, Enum):
    LTR = "ltr"
    RTL = "rtl"

    @property
    def is_rtl(self) -> bool:
        return self is Direction.RTL

    def toggled(self) -> "Direction":
        return Direction.LTR if self is Direction.RTL else Direction.RTL


class LocaleInfoResponse(BaseModel):
    locale: str
    language: str
    direction: Direction
    is_rtl: bool
    supported: bool
    negotiated_locale: str
    css_variables: Dict[str, str]


class SupportedLocalesResponse(BaseModel):
    default_locale: str
    locales: List[LocaleInfoResponse]
