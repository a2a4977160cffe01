"""Tests for the shared helpers."""

from tachyons.util import b_, bg, class_names, hyphens_to_underscores, map_value, merge, tint


class TestClassNames:
    def test_strings(self):
        assert class_names("a", "", "b") == "a b"

    def test_numbers(self):
        assert class_names(1, 0, 2.5) == "1 2.5"

    def test_none_and_booleans_skipped(self):
        assert class_names(None, True, False, "a") == "a"

    def test_nested_sequences(self):
        assert class_names(["a", ("b", ["c"])], []) == "a b c"

    def test_mapping(self):
        assert class_names({"a": True, "b": 0, "c": "yes"}) == "a c"

    def test_other_objects_stringified(self):
        class Token:
            def __str__(self):
                return "tok"

        assert class_names(Token()) == "tok"


class TestMerge:
    def test_nested_merge(self):
        target = {"colors": {"red": "#f00"}, "rem": 16}
        merge(target, {"colors": {"blue": "#00f"}, "rem": 10})
        assert target == {"colors": {"red": "#f00", "blue": "#00f"}, "rem": 10}

    def test_source_mappings_copied(self):
        source = {"colors": {"red": "#f00"}}
        target = merge({}, source)
        target["colors"]["blue"] = "#00f"
        assert source == {"colors": {"red": "#f00"}}

    def test_mapping_replaces_scalar(self):
        assert merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}


class TestTableHelpers:
    def test_hyphens_to_underscores(self):
        assert hyphens_to_underscores({"b--red": 1, "pa2": 2}) == {"b__red": 1, "pa2": 2}

    def test_map_value(self):
        assert map_value({"lh-solid": 1}, lambda v: {"lineHeight": v}) == {"lh-solid": {"lineHeight": 1}}


class TestColorFunctions:
    def test_hex_arguments_get_hash(self):
        assert bg("ff0000") == {"backgroundColor": "#ff0000"}
        assert b_("fff") == {"borderColor": "#fff"}
        assert tint("ff000080") == {"tintColor": "#ff000080"}

    def test_named_and_prefixed_colors_unchanged(self):
        assert bg("red") == {"backgroundColor": "red"}
        assert tint("#abc") == {"tintColor": "#abc"}
        assert b_("rgba(0,0,0,0.5)") == {"borderColor": "rgba(0,0,0,0.5)"}

    def test_element_argument_accepted(self):
        assert bg("red", element=object()) == {"backgroundColor": "red"}
