"""Tests for style models, derived options, and the options assembler."""

from __future__ import annotations

import pytest

from netd3.domain.errors import InvalidInputError
from netd3.domain.options import (
    CLICK_TEXT_MULTIPLIER,
    LINK_OPACITY_FRACTION,
    ForceStyle,
    SankeyStyle,
    SimpleStyle,
    TreeStyle,
    assemble_options,
    build_style,
    click_text_size,
    link_opacity,
)


class TestDerivedValues:
    """Tests for clickTextSize and linkOpacity."""

    def test_constants(self) -> None:
        assert CLICK_TEXT_MULTIPLIER == 2.5
        assert LINK_OPACITY_FRACTION == 0.5

    def test_click_text_size(self) -> None:
        assert click_text_size(7) == 17.5

    def test_link_opacity(self) -> None:
        assert link_opacity(0.6) == pytest.approx(0.3)

    @pytest.mark.parametrize("style_cls", [SimpleStyle, ForceStyle, TreeStyle])
    def test_assembled_variants_carry_derived_values(self, style_cls: type) -> None:
        style = build_style(style_cls, overrides={"fontsize": 12, "opacity": 0.8})
        options = assemble_options(style)
        assert options["clickTextSize"] == 30
        assert options["linkOpacity"] == pytest.approx(0.4)

    def test_sankey_has_no_derived_values(self) -> None:
        options = assemble_options(SankeyStyle())
        assert "clickTextSize" not in options
        assert "linkOpacity" not in options


class TestDefaults:
    """Tests for per-variant style defaults."""

    def test_force_defaults(self) -> None:
        options = assemble_options(ForceStyle())
        assert options["colourScale"] == "d3.scale.category20()"
        assert options["fontsize"] == 7
        assert options["clickTextSize"] == 17.5
        assert options["linkDistance"] == 50
        assert options["linkWidth"] == "function(d) { return Math.sqrt(d.value); }"
        assert options["radiusCalculation"] == " Math.sqrt(d.nodesize)+6"
        assert options["charge"] == -120
        assert options["linkColour"] == "#666"
        assert options["opacity"] == 0.6
        assert options["zoom"] is False
        assert options["legend"] is False
        assert options["bounded"] is False

    def test_tree_defaults(self) -> None:
        options = assemble_options(TreeStyle())
        assert options["fontsize"] == 10
        assert options["linkColour"] == "#ccc"
        assert options["nodeColour"] == "#3182bd"
        assert options["diameter"] == 980
        assert options["linkOpacity"] == pytest.approx(0.45)

    def test_simple_defaults(self) -> None:
        options = assemble_options(SimpleStyle())
        assert options["charge"] == -200
        assert options["nodeClickColour"] == "#E34A33"

    def test_sankey_defaults(self) -> None:
        options = assemble_options(SankeyStyle())
        assert options["nodeWidth"] == 15
        assert options["nodePadding"] == 10
        assert options["sinksRight"] is True


class TestBuildStyle:
    """Tests for build_style() layering."""

    def test_wire_and_python_names(self) -> None:
        a = build_style(ForceStyle, overrides={"linkColour": "#000"})
        b = build_style(ForceStyle, overrides={"link_colour": "#000"})
        assert a == b
        assert a.link_colour == "#000"

    def test_configured_defaults_layer_under_overrides(self) -> None:
        configured = ForceStyle(opacity=0.4, legend=True)
        style = build_style(ForceStyle, configured, {"opacity": 0.9})
        assert style.opacity == 0.9
        assert style.legend is True

    def test_expression_strings_pass_through(self) -> None:
        expr = "function(d){return d.value * 10}"
        overrides = {"linkDistance": expr, "radiusCalculation": "d.nodesize"}
        style = build_style(ForceStyle, overrides=overrides)
        options = assemble_options(style)
        assert options["linkDistance"] == expr
        assert options["radiusCalculation"] == "d.nodesize"

    def test_broken_expression_is_not_checked(self) -> None:
        style = build_style(ForceStyle, overrides={"linkWidth": "function(d { return"})
        assert style.link_width == "function(d { return"

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="ForceStyle"):
            build_style(ForceStyle, overrides={"linkColor": "#000"})

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            build_style(TreeStyle, overrides={"diameter": "huge"})
        assert exc_info.value.detail["errors"]


class TestAssembleOptions:
    """Tests for assemble_options()."""

    def test_structural_keys_merged(self) -> None:
        options = assemble_options(ForceStyle(), NodeID="name", Group="group", nodesize=False)
        assert options["NodeID"] == "name"
        assert options["Group"] == "group"
        assert options["nodesize"] is False

    def test_options_are_flat_primitives(self) -> None:
        options = assemble_options(ForceStyle(), NodeID="name", Group="group", nodesize=True)
        for value in options.values():
            assert isinstance(value, (str, int, float, bool))
