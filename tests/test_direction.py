import pytest

from app.schemas.localization import Direction
from app.services.direction_service import DirectionalStyleResolver

ltr = DirectionalStyleResolver(Direction.LTR)
rtl = DirectionalStyleResolver(Direction.RTL)


@pytest.mark.parametrize("resolver", [ltr, rtl])
def test_property_mapping_ignores_direction(resolver):
    assert resolver.map_property("marginLeft") == "marginInlineStart"
    assert resolver.map_property("paddingRight") == "paddingInlineEnd"
    assert resolver.map_property("left") == "inset-inline-start"
    assert resolver.map_property("right") == "inset-inline-end"
    assert resolver.map_property("margin-left") == "margin-inline-start"
    assert resolver.map_property("borderTopLeftRadius") == "borderStartStartRadius"


def test_unknown_property_passes_through():
    assert ltr.map_property("color") == "color"
    assert rtl.map_property("marginTop") == "marginTop"
    assert rtl.map_property("not-a-property") == "not-a-property"


def test_value_mapping():
    assert ltr.map_value("textAlign", "left") == "start"
    assert rtl.map_value("textAlign", "right") == "end"
    assert rtl.map_value("text-align", "Left") == "start"
    assert ltr.map_value("float", "left") == "inline-start"
    assert ltr.map_value("float", "right") == "inline-end"
    assert ltr.map_value("clear", "right") == "inline-end"


def test_unknown_values_pass_through():
    assert ltr.map_value("textAlign", "center") == "center"
    assert ltr.map_value("float", "none") == "none"
    assert ltr.map_value("color", "left") == "left"
    assert ltr.map_value("textAlign", 4) == 4


def test_map_style_keeps_order():
    style = {"marginLeft": 8, "textAlign": "left", "color": "red", "float": "right"}
    assert list(rtl.map_style(style).items()) == [
        ("marginInlineStart", 8),
        ("textAlign", "start"),
        ("color", "red"),
        ("float", "inline-end"),
    ]


def test_flip():
    assert ltr.flip("a", "b") == "a"
    assert rtl.flip("a", "b") == "b"


def test_mirror_number():
    assert ltr.mirror_number(5) == 5
    assert rtl.mirror_number(5) == -5
    assert rtl.mirror_number(-2.5) == 2.5


def test_swap():
    assert ltr.swap(("icon", "label")) == "icon"
    assert rtl.swap(["icon", "label"]) == "label"


def test_physical_property():
    assert ltr.physical_property("marginInlineStart") == "marginLeft"
    assert rtl.physical_property("marginInlineStart") == "marginRight"
    assert rtl.physical_property("marginStart") == "marginRight"
    assert rtl.physical_property("paddingEnd") == "paddingLeft"
    assert ltr.physical_property("insetStart") == "left"
    assert rtl.physical_property("inset-inline-end") == "left"
    assert rtl.physical_property("borderStartStartRadius") == "borderTopRightRadius"
    assert rtl.physical_property("color") == "color"


def test_css_variables():
    assert ltr.css_variables() == {
        "--start": "left",
        "--end": "right",
        "--text-align": "left",
        "--float": "left",
    }
    assert rtl.css_variables()["--start"] == "right"
    assert rtl.css_variables()["--end"] == "left"


def test_for_locale():
    assert DirectionalStyleResolver.for_locale("he-IL").is_rtl
    assert not DirectionalStyleResolver.for_locale("en").is_rtl
    assert DirectionalStyleResolver("rtl").direction is Direction.RTL


def test_default_direction_is_ltr():
    assert DirectionalStyleResolver().flip("a", "b") == "a"
