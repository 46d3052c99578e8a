"""Tests for the canonical focused-call shapes."""

from __future__ import annotations

from nofocus.models import ArgumentKind as K
from nofocus.shapes import (
    is_bare_focused_call,
    is_described_focused_call,
    is_tabular_focused_call,
)

BARE = ("fdescribe", "fit")
DESCRIBED = ("describe.only", "it.only")
TABULAR = ("describe.only.each",)


class TestBareFocusedCall:
    def test_matches_single_function_argument(self, make_call):
        assert is_bare_focused_call(make_call("fdescribe", K.FUNCTION_LITERAL), BARE)
        assert is_bare_focused_call(make_call("fit", K.FUNCTION_LITERAL), BARE)

    def test_unknown_identifier(self, make_call):
        assert not is_bare_focused_call(make_call("describe", K.FUNCTION_LITERAL), BARE)

    def test_extra_description_argument(self, make_call):
        call = make_call("fit", K.STRING_LITERAL, K.FUNCTION_LITERAL)
        assert not is_bare_focused_call(call, BARE)

    def test_no_arguments(self, make_call):
        assert not is_bare_focused_call(make_call("fit"), BARE)

    def test_non_function_argument(self, make_call):
        assert not is_bare_focused_call(make_call("fit", K.IDENTIFIER), BARE)

    def test_property_path_with_marker_text(self, make_call):
        call = make_call("fit", K.FUNCTION_LITERAL, callee_kind=K.PROPERTY_PATH)
        assert not is_bare_focused_call(call, BARE)


class TestDescribedFocusedCall:
    def test_string_description(self, make_call):
        call = make_call("describe.only", K.STRING_LITERAL, K.FUNCTION_LITERAL)
        assert is_described_focused_call(call, DESCRIBED)

    def test_template_description(self, make_call):
        call = make_call("it.only", K.TEMPLATE_LITERAL, K.FUNCTION_LITERAL)
        assert is_described_focused_call(call, DESCRIBED)

    def test_missing_description(self, make_call):
        call = make_call("describe.only", K.FUNCTION_LITERAL)
        assert not is_described_focused_call(call, DESCRIBED)

    def test_dynamic_description(self, make_call):
        call = make_call("describe.only", K.IDENTIFIER, K.FUNCTION_LITERAL)
        assert not is_described_focused_call(call, DESCRIBED)

    def test_non_function_body(self, make_call):
        call = make_call("describe.only", K.STRING_LITERAL, K.IDENTIFIER)
        assert not is_described_focused_call(call, DESCRIBED)

    def test_three_arguments(self, make_call):
        call = make_call("it.only", K.STRING_LITERAL, K.FUNCTION_LITERAL, K.OTHER)
        assert not is_described_focused_call(call, DESCRIBED)

    def test_marker_not_declared(self, make_call):
        call = make_call("test.only", K.STRING_LITERAL, K.FUNCTION_LITERAL)
        assert not is_described_focused_call(call, DESCRIBED)

    def test_identifier_callee(self, make_call):
        call = make_call("describe.only", K.STRING_LITERAL, K.FUNCTION_LITERAL, callee_kind=K.IDENTIFIER)
        assert not is_described_focused_call(call, DESCRIBED)


class TestTabularFocusedCall:
    def test_array_table(self, make_call):
        assert is_tabular_focused_call(make_call("describe.only.each", K.ARRAY_LITERAL), TABULAR)

    def test_non_array_table(self, make_call):
        assert not is_tabular_focused_call(make_call("describe.only.each", K.IDENTIFIER), TABULAR)

    def test_two_arguments(self, make_call):
        call = make_call("describe.only.each", K.ARRAY_LITERAL, K.FUNCTION_LITERAL)
        assert not is_tabular_focused_call(call, TABULAR)

    def test_marker_not_declared(self, make_call):
        assert not is_tabular_focused_call(make_call("it.only.each", K.ARRAY_LITERAL), TABULAR)
