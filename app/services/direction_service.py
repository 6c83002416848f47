import re
from typing import Any, Dict, Mapping, Optional, Sequence, TypeVar, Union

from app.schemas.localization import Direction
from app.services.localization_service import get_locale_direction

T = TypeVar("T")

# Physical property -> logical property. camelCase keys are style-object
# names, hyphenated keys are CSS names; each maps within its own naming.
PHYSICAL_TO_LOGICAL: Dict[str, str] = {
    "marginLeft": "marginInlineStart",
    "marginRight": "marginInlineEnd",
    "paddingLeft": "paddingInlineStart",
    "paddingRight": "paddingInlineEnd",
    "borderLeft": "borderInlineStart",
    "borderRight": "borderInlineEnd",
    "borderLeftWidth": "borderInlineStartWidth",
    "borderRightWidth": "borderInlineEndWidth",
    "borderLeftColor": "borderInlineStartColor",
    "borderRightColor": "borderInlineEndColor",
    "borderLeftStyle": "borderInlineStartStyle",
    "borderRightStyle": "borderInlineEndStyle",
    "borderTopLeftRadius": "borderStartStartRadius",
    "borderTopRightRadius": "borderStartEndRadius",
    "borderBottomLeftRadius": "borderEndStartRadius",
    "borderBottomRightRadius": "borderEndEndRadius",
    "margin-left": "margin-inline-start",
    "margin-right": "margin-inline-end",
    "padding-left": "padding-inline-start",
    "padding-right": "padding-inline-end",
    "border-left": "border-inline-start",
    "border-right": "border-inline-end",
    "border-left-width": "border-inline-start-width",
    "border-right-width": "border-inline-end-width",
    "border-left-color": "border-inline-start-color",
    "border-right-color": "border-inline-end-color",
    "border-left-style": "border-inline-start-style",
    "border-right-style": "border-inline-end-style",
    "border-top-left-radius": "border-start-start-radius",
    "border-top-right-radius": "border-start-end-radius",
    "border-bottom-left-radius": "border-end-start-radius",
    "border-bottom-right-radius": "border-end-end-radius",
    "left": "inset-inline-start",
    "right": "inset-inline-end",
}

# Properties whose values carry a side.
DIRECTIONAL_VALUES: Dict[str, Dict[str, str]] = {
    "textAlign": {"left": "start", "right": "end"},
    "text-align": {"left": "start", "right": "end"},
    "float": {"left": "inline-start", "right": "inline-end"},
    "clear": {"left": "inline-start", "right": "inline-end"},
}

# Shorthand logical names used by older style helpers.
_LOGICAL_ALIASES: Dict[str, str] = {
    "marginStart": "marginInlineStart",
    "marginEnd": "marginInlineEnd",
    "paddingStart": "paddingInlineStart",
    "paddingEnd": "paddingInlineEnd",
    "borderStart": "borderInlineStart",
    "borderEnd": "borderInlineEnd",
    "insetStart": "inset-inline-start",
    "insetEnd": "inset-inline-end",
    "insetInlineStart": "inset-inline-start",
    "insetInlineEnd": "inset-inline-end",
}

_LOGICAL_TO_PHYSICAL: Dict[str, str] = {logical: physical for physical, logical in PHYSICAL_TO_LOGICAL.items()}

_SIDE_SWAP = re.compile(r"left|right|Left|Right")
_SWAPPED_SIDES = {"left": "right", "right": "left", "Left": "Right", "Right": "Left"}


class DirectionalStyleResolver:
    """Direction-aware styling primitives for one writing direction.

    The property and value tables do not depend on the direction; the
    browser resolves logical properties. The selection helpers (``flip``,
    ``mirror_number``, ``swap``) and ``physical_property`` do.
    Unknown properties and values pass through unchanged.
    """

    def __init__(self, direction: Union[Direction, str] = Direction.LTR):
        self.direction = Direction(direction)

    @classmethod
    def for_locale(cls, locale: Optional[str]) -> "DirectionalStyleResolver":
        return cls(get_locale_direction(locale))

    @property
    def is_rtl(self) -> bool:
        return self.direction is Direction.RTL

    def map_property(self, physical_property: str) -> str:
        return PHYSICAL_TO_LOGICAL.get(physical_property, physical_property)

    def map_value(self, property_name: str, physical_value: Any) -> Any:
        mapping = DIRECTIONAL_VALUES.get(property_name)
        if mapping is None or not isinstance(physical_value, str):
            return physical_value
        return mapping.get(physical_value.strip().lower(), physical_value)

    def map_style(self, style: Mapping[str, Any]) -> Dict[str, Any]:
        """Rewrite a style mapping to logical properties and values, keeping key order."""
        return {
            self.map_property(name): self.map_value(name, value)
            for name, value in style.items()
        }

    def physical_property(self, logical_property: str) -> str:
        """Physical side a logical property lands on for this direction."""
        logical = _LOGICAL_ALIASES.get(logical_property, logical_property)
        physical = _LOGICAL_TO_PHYSICAL.get(logical)
        if physical is None:
            return logical_property
        if self.is_rtl:
            return _SIDE_SWAP.sub(lambda match: _SWAPPED_SIDES[match.group(0)], physical)
        return physical

    def flip(self, ltr_value: T, rtl_value: T) -> T:
        return rtl_value if self.is_rtl else ltr_value

    def mirror_number(self, value: Union[int, float]) -> Union[int, float]:
        return -value if self.is_rtl else value

    def swap(self, pair: Sequence[T]) -> T:
        first, second = pair
        return self.flip(first, second)

    def css_variables(self) -> Dict[str, str]:
        start = self.flip("left", "right")
        end = self.flip("right", "left")
        return {
            "--start": start,
            "--end": end,
            "--text-align": start,
            "--float": start,
        }
