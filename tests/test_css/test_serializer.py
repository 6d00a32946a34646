from __future__ import annotations

from stylecascade.config import CascadeConfig
from stylecascade.css import format_number, gradient_to_css, to_css_properties
from stylecascade.schema import (
    DEFAULT_STYLING,
    UNSET,
    BackdropFilterSettings,
    BackgroundImageSettings,
    BackgroundSettings,
    BorderRadius,
    BorderSettings,
    BorderSide,
    BoxShadow,
    DimensionsSettings,
    FilterSettings,
    FlexItemSettings,
    FlexSettings,
    GradientSettings,
    GradientStop,
    LayoutSettings,
    PositionSettings,
    SpacingValue,
    StyleBundle,
    TextShadow,
    TransformSettings,
    TransitionSettings,
    TypographySettings,
)


class TestFormatNumber:
    def test_integral_float(self) -> None:
        assert format_number(1.0) == "1"
        assert format_number(300.0) == "300"

    def test_fraction(self) -> None:
        assert format_number(1.5) == "1.5"

    def test_int(self) -> None:
        assert format_number(-4) == "-4"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestLayout:
    def test_default_bundle(self) -> None:
        assert to_css_properties(DEFAULT_STYLING) == {
            "display": "block",
            "position": "static",
            "margin": "0 0 0 0",
            "padding": "0 0 0 0",
            "overflow": "visible",
            "border-radius": "0",
        }

    def test_position_offsets_only_when_set(self) -> None:
        css = to_css_properties(StyleBundle(layout=LayoutSettings(
            position=PositionSettings(position="absolute", top="0", left="10px", z_index=0),
        )))
        assert css == {"position": "absolute", "top": "0", "left": "10px", "z-index": "0"}

    def test_auto_dimensions_omitted(self) -> None:
        css = to_css_properties(StyleBundle(layout=LayoutSettings(
            dimensions=DimensionsSettings(width="auto", height="50vh", min_width="", max_width="960px"),
        )))
        assert css == {"height": "50vh", "max-width": "960px"}

    def test_missing_spacing_sides_are_zero(self) -> None:
        css = to_css_properties(StyleBundle(layout=LayoutSettings(padding=SpacingValue(left="4px"))))
        assert css == {"padding": "0 0 0 4px"}

    def test_flex_container_only_for_flex(self) -> None:
        flex = FlexSettings(direction="column", gap="8px")
        block = to_css_properties(StyleBundle(layout=LayoutSettings(display="block", flex=flex)))
        assert "flex-direction" not in block
        inline = to_css_properties(StyleBundle(layout=LayoutSettings(display="inline-flex", flex=flex)))
        assert inline == {"display": "inline-flex", "flex-direction": "column", "gap": "8px"}

    def test_flex_item_neutrals_omitted(self) -> None:
        css = to_css_properties(StyleBundle(layout=LayoutSettings(flex_item=FlexItemSettings(
            order=0, flex_grow=1, flex_shrink=1, flex_basis="auto", align_self="center",
        ))))
        assert css == {"flex-grow": "1", "align-self": "center"}

    def test_overflow_axes_independent(self) -> None:
        css = to_css_properties(StyleBundle(layout=LayoutSettings(overflow_y="scroll")))
        assert css == {"overflow-y": "scroll"}


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------


class TestBackground:
    def test_color(self) -> None:
        css = to_css_properties(StyleBundle(background=BackgroundSettings(type="color", color="#fafafa")))
        assert css == {"background-color": "#fafafa"}

    def test_none_type_emits_nothing(self) -> None:
        css = to_css_properties(StyleBundle(background=BackgroundSettings(type="none", color="#fff")))
        assert css == {}

    def test_gradient_stops_sorted(self) -> None:
        gradient = GradientSettings(
            type="linear",
            stops=(GradientStop(color="#fff", position=80), GradientStop(color="#000", position=0)),
        )
        assert gradient_to_css(gradient) == "linear-gradient(180deg, #000 0%, #fff 80%)"
        css = to_css_properties(StyleBundle(background=BackgroundSettings(type="gradient", gradient=gradient)))
        assert css == {"background-image": "linear-gradient(180deg, #000 0%, #fff 80%)"}

    def test_radial_gradient_default_shape(self) -> None:
        gradient = GradientSettings(
            type="radial",
            stops=(GradientStop(color="red", position=0), GradientStop(color="blue", position=100)),
        )
        assert gradient_to_css(gradient) == "radial-gradient(circle, red 0%, blue 100%)"

    def test_linear_angle(self) -> None:
        gradient = GradientSettings(type="linear", angle=45, stops=(GradientStop(color="red", position=0),))
        assert gradient_to_css(gradient) == "linear-gradient(45deg, red 0%)"

    def test_image_presets(self) -> None:
        css = to_css_properties(StyleBundle(background=BackgroundSettings(
            type="image",
            image=BackgroundImageSettings(
                url="/img/hero.jpg", size="cover", position="top-left",
                repeat="no-repeat", attachment="fixed",
            ),
        )))
        assert css == {
            "background-image": "url(/img/hero.jpg)",
            "background-size": "cover",
            "background-position": "top left",
            "background-repeat": "no-repeat",
            "background-attachment": "fixed",
        }

    def test_image_custom_fallbacks(self) -> None:
        css = to_css_properties(StyleBundle(background=BackgroundSettings(
            type="image",
            image=BackgroundImageSettings(
                url="a.png", size="custom", custom_width="100px", position="custom", custom_y="10%",
            ),
        )))
        assert css["background-size"] == "100px auto"
        assert css["background-position"] == "50% 10%"


# ---------------------------------------------------------------------------
# Border / typography
# ---------------------------------------------------------------------------


class TestBorder:
    def test_side_with_style(self) -> None:
        css = to_css_properties(StyleBundle(border=BorderSettings(
            top=BorderSide(width=2, style="solid", color="#ccc"),
            bottom=BorderSide(width=1, style="none", color="#ccc"),
        )))
        assert css == {"border-top": "2px solid #ccc"}

    def test_missing_width_and_color_fall_back(self) -> None:
        css = to_css_properties(StyleBundle(border=BorderSettings(left=BorderSide(style="dashed"))))
        assert css == {"border-left": "0px dashed #000000"}

    def test_radius_linked(self) -> None:
        css = to_css_properties(StyleBundle(border=BorderSettings(
            radius=BorderRadius(top_left="8px", top_right="2px", linked=True),
        )))
        assert css == {"border-radius": "8px"}

    def test_radius_unlinked(self) -> None:
        css = to_css_properties(StyleBundle(border=BorderSettings(
            radius=BorderRadius(top_left="8px", top_right="4px", bottom_right="2px", linked=False),
        )))
        assert css == {"border-radius": "8px 4px 2px 0"}


class TestTypography:
    def test_scalars(self) -> None:
        css = to_css_properties(StyleBundle(typography=TypographySettings(
            font_family="Inter, sans-serif", font_size="18px", font_weight=600, color="#111",
        )))
        assert css == {
            "font-family": "Inter, sans-serif",
            "font-size": "18px",
            "font-weight": "600",
            "color": "#111",
        }

    def test_text_decoration_composed(self) -> None:
        css = to_css_properties(StyleBundle(typography=TypographySettings(
            text_decoration="underline", text_decoration_style="wavy", text_decoration_color="red",
        )))
        assert css == {"text-decoration": "underline wavy red"}

    def test_text_decoration_none_omitted(self) -> None:
        css = to_css_properties(StyleBundle(typography=TypographySettings(
            text_decoration="none", text_decoration_style="wavy",
        )))
        assert css == {}

    def test_text_shadow(self) -> None:
        css = to_css_properties(StyleBundle(typography=TypographySettings(text_shadow=(
            TextShadow(x=1, y=1, blur=2, color="#000"),
            TextShadow(x=0, y=0, blur=8, color="rgba(0,0,0,.5)"),
        ))))
        assert css == {"text-shadow": "1px 1px 2px #000, 0px 0px 8px rgba(0,0,0,.5)"}


# ---------------------------------------------------------------------------
# Transform / transition
# ---------------------------------------------------------------------------


class TestTransform:
    def test_function_order_and_neutrals(self) -> None:
        css = to_css_properties(StyleBundle(transform=TransformSettings(
            scale_x=1.5, rotate_z=45, translate_x="10px", translate_y="0", scale_y=1, skew_x=0,
        )))
        assert css == {"transform": "translateX(10px) rotateZ(45deg) scaleX(1.5)"}

    def test_perspective_and_origin(self) -> None:
        css = to_css_properties(StyleBundle(transform=TransformSettings(
            perspective="800px", origin_x="left", origin_y="center",
        )))
        assert css == {"perspective": "800px", "transform-origin": "left center"}

    def test_custom_origin(self) -> None:
        css = to_css_properties(StyleBundle(transform=TransformSettings(
            origin_x="custom", origin_x_custom="25%", origin_y="custom",
        )))
        assert css == {"transform-origin": "25% center"}

    def test_all_neutral_emits_nothing(self) -> None:
        assert to_css_properties(StyleBundle(transform=DEFAULT_STYLING.transform)) == {}


class TestTransition:
    def test_disabled(self) -> None:
        css = to_css_properties(StyleBundle(transition=TransitionSettings(enabled=False, duration=200)))
        assert css == {}

    def test_defaults(self) -> None:
        css = to_css_properties(StyleBundle(transition=TransitionSettings(enabled=True)))
        assert css == {"transition": "all 300ms ease 0ms"}

    def test_custom_property_and_bezier(self) -> None:
        css = to_css_properties(StyleBundle(transition=TransitionSettings(
            enabled=True,
            property="custom",
            custom_property="color",
            duration=150,
            timing_function="cubic-bezier",
            cubic_bezier=(0.4, 0, 0.2, 1),
            delay=50,
        )))
        assert css == {"transition": "color 150ms cubic-bezier(0.4, 0, 0.2, 1) 50ms"}

    def test_zero_duration_kept(self) -> None:
        css = to_css_properties(StyleBundle(transition=TransitionSettings(enabled=True, duration=0)))
        assert css == {"transition": "all 0ms ease 0ms"}


# ---------------------------------------------------------------------------
# Filters / shadows
# ---------------------------------------------------------------------------


class TestFilters:
    def test_neutral_values_omitted(self) -> None:
        css = to_css_properties(StyleBundle(filter=FilterSettings(
            brightness=120, contrast=100, blur=0, opacity=100,
        )))
        assert css == {"filter": "brightness(120%)"}

    def test_chain_order(self) -> None:
        css = to_css_properties(StyleBundle(filter=FilterSettings(
            opacity=50, hue_rotate=90, blur=2,
        )))
        assert css == {"filter": "blur(2px) hue-rotate(90deg) opacity(50%)"}

    def test_backdrop_requires_enabled(self) -> None:
        settings = BackdropFilterSettings(blur=10)
        assert to_css_properties(StyleBundle(backdrop_filter=settings)) == {}

    def test_backdrop_vendor_duplicate(self) -> None:
        css = to_css_properties(StyleBundle(backdrop_filter=BackdropFilterSettings(enabled=True, blur=10)))
        assert css == {"backdrop-filter": "blur(10px)", "-webkit-backdrop-filter": "blur(10px)"}

    def test_backdrop_vendor_property_configurable(self) -> None:
        config = CascadeConfig(backdrop_vendor_property="-moz-backdrop-filter")
        css = to_css_properties(
            StyleBundle(backdrop_filter=BackdropFilterSettings(enabled=True, saturate=150)), config
        )
        assert css == {"backdrop-filter": "saturate(150%)", "-moz-backdrop-filter": "saturate(150%)"}


class TestBoxShadow:
    def test_inset_shadow(self) -> None:
        css = to_css_properties(StyleBundle(box_shadow=(
            BoxShadow(inset=True, x=0, y=2, blur=4, spread=0, color="rgba(0,0,0,.1)"),
        )))
        assert css == {"box-shadow": "inset 0px 2px 4px 0px rgba(0,0,0,.1)"}

    def test_multiple_joined(self) -> None:
        css = to_css_properties(StyleBundle(box_shadow=(
            BoxShadow(x=1, y=1, color="#000"), BoxShadow(y=4, blur=8, spread=-2, color="#111"),
        )))
        assert css["box-shadow"] == "1px 1px 0px 0px #000, 0px 4px 8px -2px #111"

    def test_empty_list(self) -> None:
        assert to_css_properties(StyleBundle(box_shadow=())) == {}


# ---------------------------------------------------------------------------
# Bundle-level properties
# ---------------------------------------------------------------------------


class TestBundle:
    def test_category_order(self) -> None:
        bundle = StyleBundle(
            box_shadow=(BoxShadow(y=1, color="#000"),),
            typography=TypographySettings(color="red"),
            layout=LayoutSettings(display="flex"),
            filter=FilterSettings(blur=1),
        )
        assert list(to_css_properties(bundle)) == ["display", "color", "filter", "box-shadow"]

    def test_unset_treated_as_absent(self) -> None:
        bundle = StyleBundle(
            layout=LayoutSettings(display=UNSET, margin=UNSET),
            typography=UNSET,
            box_shadow=UNSET,
        )
        assert to_css_properties(bundle) == {}

    def test_equal_bundles_serialize_identically(self) -> None:
        a = StyleBundle(layout=LayoutSettings(display="grid"), transform=TransformSettings(rotate_x=10))
        b = StyleBundle(transform=TransformSettings(rotate_x=10), layout=LayoutSettings(display="grid"))
        assert to_css_properties(a) == to_css_properties(b)
        assert list(to_css_properties(a)) == list(to_css_properties(b))
