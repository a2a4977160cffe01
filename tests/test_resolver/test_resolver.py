"""Tests for the token resolver."""

import logging

import pytest

import tachyons
from tachyons.model.element import create_element
from tachyons.resolver import accepts_element, split_call, to_class_string
from tachyons.util import tint


@pytest.fixture
def compiled():
    tachyons.build({"rem": 16, "colors": {"red": "#ff0000", "blue": "#0000ff"}})
    return tachyons.styles


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestSplitCall:
    def test_single_argument(self):
        assert split_call("tint_ff0000") == ("tint", ["ff0000"])

    def test_multiple_arguments(self):
        assert split_call("shadow_2_black") == ("shadow", ["2", "black"])

    def test_double_underscore_stays_in_name(self):
        assert split_call("b__red") == ("b_", ["red"])

    def test_no_underscore(self):
        assert split_call("plain") == ("plain", [])


class TestToClassString:
    def test_string_passthrough(self):
        assert to_class_string("pa2 bg-red") == "pa2 bg-red"

    def test_list(self):
        assert to_class_string(["pa2", None, "", ["bg-red"]]) == "pa2 bg-red"

    def test_mapping_keeps_truthy_keys(self):
        assert to_class_string({"pa2": True, "bg-red": False, "f5": 1}) == "pa2 f5"


# ---------------------------------------------------------------------------
# transform_style
# ---------------------------------------------------------------------------


class TestTransformStyle:
    def test_order_preserved(self, compiled):
        result = tachyons.transform_style(None, None, "pa2 red lh-title")
        assert result == [compiled["pa2"], compiled["red"], compiled["lh_title"]]

    def test_returns_stylesheet_objects(self, compiled):
        result = tachyons.transform_style(None, None, "pa2")
        assert result[0] is compiled["pa2"]

    def test_appends_after_existing_mapping(self, compiled):
        existing = {"margin": 3}
        result = tachyons.transform_style(None, existing, "pa2 red")
        assert result == [existing, compiled["pa2"], compiled["red"]]

    def test_appends_after_existing_list(self, compiled):
        existing = [{"margin": 3}, {"opacity": 0.5}]
        result = tachyons.transform_style(None, existing, "red")
        assert result == [*existing, compiled["red"]]
        assert existing == [{"margin": 3}, {"opacity": 0.5}]

    def test_no_token_source(self, compiled):
        assert tachyons.transform_style(None, {"margin": 3}, None) is None

    def test_empty_token_string(self, compiled):
        assert tachyons.transform_style(None, {"margin": 3}, "   ") is None

    def test_hyphen_and_underscore_forms_match(self, compiled):
        hyphen = tachyons.transform_style(None, None, "bg-red")
        underscore = tachyons.transform_style(None, None, "bg_red")
        assert hyphen == underscore == [compiled["bg_red"]]
        assert hyphen[0] is underscore[0]

    def test_repeated_resolution_identical(self, compiled):
        first = tachyons.transform_style(None, None, "pa2 bg-blue tint_00ff00")
        second = tachyons.transform_style(None, None, "pa2 bg-blue tint_00ff00")
        assert first == second

    def test_list_source(self, compiled):
        result = tachyons.transform_style(None, None, ["pa2", {"red": True, "blue": False}])
        assert result == [compiled["pa2"], compiled["red"]]

    def test_mapping_source(self, compiled):
        result = tachyons.transform_style(None, None, {"pa2": True, "red": False})
        assert result == [compiled["pa2"]]

    def test_extra_whitespace_ignored(self, compiled):
        result = tachyons.transform_style(None, None, "  pa2 \n  red\t")
        assert result == [compiled["pa2"], compiled["red"]]


class TestFunctionTokens:
    def test_builtin_tint(self, compiled):
        assert tachyons.transform_style(None, None, "tint_ff0000") == [{"tintColor": "#ff0000"}]

    def test_builtin_bg_with_named_color(self, compiled):
        assert tachyons.transform_style(None, None, "bg_green") == [{"backgroundColor": "green"}]

    def test_builtin_border_color_from_hyphens(self, compiled):
        assert tachyons.transform_style(None, None, "b--00ff00") == [{"borderColor": "#00ff00"}]

    def test_custom_function_receives_args_and_element(self):
        calls = []

        def shadow(depth, color, element=None):
            calls.append((depth, color, element))
            return {"elevation": int(depth), "shadowColor": color}

        tachyons.build({"fn": {"shadow": shadow}})
        node = create_element("View")
        result = tachyons.transform_style(node, None, "shadow-4-black")
        assert result == [{"elevation": 4, "shadowColor": "black"}]
        assert calls == [("4", "black", node)]

    def test_function_without_element_parameter(self):
        tachyons.build({"fn": {"shade": lambda level: {"opacity": int(level) / 10}}})
        assert tachyons.transform_style(None, None, "shade_5") == [{"opacity": 0.5}]

    def test_function_with_var_keywords_gets_element(self):
        seen = []

        def record(*args, **kwargs):
            seen.append(kwargs)
            return {}

        tachyons.build({"fn": {"spy": record}})
        node = create_element("View")
        tachyons.transform_style(node, None, "spy_1")
        assert seen == [{"element": node}]

    def test_stylesheet_entry_wins_over_function(self):
        tachyons.build(
            {
                "custom_styles": {"tint-brand": {"tintColor": "purple"}},
                "fn": {"tint": lambda *args, element=None: {"tintColor": "never"}},
            }
        )
        assert tachyons.transform_style(None, None, "tint-brand") == [{"tintColor": "purple"}]


class TestUnresolvedTokens:
    def test_skipped_with_one_warning(self, compiled, caplog):
        with caplog.at_level(logging.WARNING, logger="tachyons"):
            result = tachyons.transform_style(None, None, "pa2 unknown_xyz red")
        assert result == [compiled["pa2"], compiled["red"]]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "unknown_xyz" in warnings[0].getMessage()

    def test_all_unresolved_gives_empty_list(self, compiled, caplog):
        with caplog.at_level(logging.WARNING, logger="tachyons"):
            result = tachyons.transform_style(None, None, "nope")
        assert result == []

    def test_all_unresolved_keeps_existing(self, compiled):
        existing = {"margin": 3}
        assert tachyons.transform_style(None, existing, "nope") == [existing]

    def test_before_build_everything_unresolved(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tachyons"):
            result = tachyons.transform_style(None, None, "pa2")
        assert result == []
        assert "pa2" in caplog.text


class TestAcceptsElement:
    def test_keyword_parameter(self):
        assert accepts_element(lambda color, element=None: {})

    def test_var_keywords(self):
        assert accepts_element(lambda *args, **kwargs: {})

    def test_strings_only(self):
        assert not accepts_element(lambda level: {})

    def test_builtins(self):
        assert accepts_element(tint)
