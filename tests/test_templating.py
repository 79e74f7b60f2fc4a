"""
Unit tests for placeholder rendering and XML escaping.
"""

import json

import pytest

from apim_flow.templating import escape_xml, render_template


class TestRenderTemplate:
    """Test cases for render_template."""

    def test_substitutes_trimmed_keys(self):
        assert render_template('<a n="{{ name }}" c="{{count}}"/>', {"name": "orders", "count": 3}) == '<a n="orders" c="3"/>'

    def test_missing_and_null_values_render_empty(self):
        assert render_template("[{{missing}}][{{none}}]", {"none": None}) == "[][]"

    def test_booleans_render_lowercase(self):
        assert render_template("{{a}}/{{b}}", {"a": True, "b": False}) == "true/false"

    def test_zero_is_not_treated_as_missing(self):
        assert render_template("{{n}}", {"n": 0}) == "0"

    def test_attribute_injection_is_escaped(self):
        rendered = render_template('<a b="{{v}}"/>', {"v": 'x" onload="y'})

        assert rendered == '<a b="x&quot; onload=&quot;y"/>'
        assert rendered.count('"') == 2

    @pytest.mark.parametrize("value", ["<script>", "a & b", "it's", '"quoted"', "</set-header><x>", "&amp;"])
    def test_single_placeholder_output_has_no_raw_reserved_characters(self, value):
        rendered = render_template("{{v}}", {"v": value})

        assert not any(ch in rendered for ch in "<>\"'")
        assert rendered.replace("&amp;", "").replace("&lt;", "").replace("&gt;", "") \
            .replace("&quot;", "").replace("&apos;", "").count("&") == 0

    def test_text_without_placeholders_is_a_fixed_point(self):
        text = "plain text with no reserved characters"

        once = render_template(text, {})

        assert once == text
        assert render_template(once, {}) == once

    def test_rendered_output_is_not_escaped_again(self):
        once = render_template("{{v}}", {"v": "a<b"})

        assert render_template(once, {"v": "ignored"}) == "a&lt;b"

    def test_integral_floats_render_without_fraction(self):
        values = json.loads('{"timeout": 30.0, "ratio": 0.5, "calls": 30}')

        assert render_template("{{timeout}}/{{ratio}}/{{calls}}", values) == "30/0.5/30"

    def test_lists_render_comma_separated(self):
        assert render_template("{{v}}", {"v": ["GET", "POST", True]}) == "GET,POST,true"

    def test_single_braces_are_left_alone(self):
        assert render_template("{tenant-id}", {"tenant-id": "x"}) == "{tenant-id}"


class TestEscapeXml:
    """Test cases for escape_xml."""

    def test_escapes_all_five_reserved_characters(self):
        assert escape_xml("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"

    def test_ampersand_is_escaped_first(self):
        assert escape_xml("&lt;") == "&amp;lt;"
