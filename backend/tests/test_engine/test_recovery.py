"""Tests for balanced-object recovery and input cleaning."""

from __future__ import annotations

import pytest

from sketchpage.engine.recovery import clean_raw_text, extract_balanced_object
from sketchpage.errors import NoObjectStart, UnbalancedObject


class TestExtractBalancedObject:
    def test_brace_inside_string_is_ignored(self):
        assert extract_balanced_object('prefix {"a":"}"} suffix') == '{"a":"}"}'

    def test_nested_objects(self):
        text = 'log: {"a": {"b": {"c": 1}}, "d": 2} trailing {"x": 1}'
        assert extract_balanced_object(text) == '{"a": {"b": {"c": 1}}, "d": 2}'

    def test_single_quoted_strings_are_opaque(self):
        assert extract_balanced_object("{a: '{{{', b: 1}") == "{a: '{{{', b: 1}"

    def test_other_quote_inside_string(self):
        text = """{"a": "it's {"} rest"""
        assert extract_balanced_object(text) == """{"a": "it's {"}"""

    def test_escaped_quote_does_not_close_string(self):
        text = r'{"a": "say \"}\" now"} junk'
        assert extract_balanced_object(text) == r'{"a": "say \"}\" now"}'

    def test_escaped_backslash_before_quote(self):
        text = r'{"path": "C:\\"} tail'
        assert extract_balanced_object(text) == r'{"path": "C:\\"}'

    def test_no_brace(self):
        with pytest.raises(NoObjectStart):
            extract_balanced_object("no braces here")

    def test_empty_input(self):
        with pytest.raises(NoObjectStart):
            extract_balanced_object("")

    def test_missing_final_brace(self):
        with pytest.raises(UnbalancedObject):
            extract_balanced_object('{"a": {"b": 1}')

    def test_unterminated_string(self):
        with pytest.raises(UnbalancedObject):
            extract_balanced_object('{"a": "never closed}')

    def test_error_carries_code_and_message(self):
        with pytest.raises(UnbalancedObject) as info:
            extract_balanced_object("{")
        assert info.value.code == "UnbalancedObject"
        assert "Unbalanced" in info.value.message


class TestCleanRawText:
    def test_strips_bom_and_nulls(self):
        assert clean_raw_text('\ufeff{"a":\x001}') == '{"a":1}'

    def test_decodes_bytes(self):
        raw = '\ufeff{"t": "héllo"}'.encode("utf-8")
        assert clean_raw_text(raw) == '{"t": "héllo"}'

    def test_bom_only_stripped_at_start(self):
        assert clean_raw_text('{"a": "\ufeff"}') == '{"a": "\ufeff"}'

    def test_recovery_after_cleaning(self):
        raw = b'\xef\xbb\xbf\x00garbage {"elements": []}\x00\n'
        assert extract_balanced_object(clean_raw_text(raw)) == '{"elements": []}'
