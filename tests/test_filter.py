"""Tests for globfind.filter."""

import pytest

from globfind import filter as filter_mod
from globfind.filter import compile_pattern, compile_patterns, matches_any


class TestCompilePattern:
    @pytest.mark.parametrize(
        ("pattern", "text", "expected"),
        [
            ("*.txt", "notes.txt", True),
            ("*.txt", "notes.txt.bak", False),
            ("*.txt", "notestxt", False),
            ("test_*", "test_foo.py", True),
            ("test_*", "foo_test.py", False),
            ("*foo*", "a foo b", True),
            ("*", "", True),
            ("*", "anything at all", True),
            ("README", "README", True),
            ("README", "README.md", False),
            ("README", "xREADME", False),
            ("a*b*c", "aXbYc", True),
            ("a*b*c", "aXcYb", False),
        ],
    )
    def test_anchored_wildcard_matching(self, pattern: str, text: str, expected: bool) -> None:
        matcher = compile_pattern(pattern)
        assert matcher is not None
        assert matcher.matches(text) is expected

    @pytest.mark.parametrize(
        ("pattern", "literal", "other"),
        [
            ("a+b", "a+b", "aab"),
            ("(x)", "(x)", "x"),
            ("file?.md", "file?.md", "file1.md"),
            ("[ab].txt", "[ab].txt", "a.txt"),
            ("back\\slash", "back\\slash", "backslash"),
        ],
    )
    def test_non_star_characters_are_literal(
        self, pattern: str, literal: str, other: str
    ) -> None:
        matcher = compile_pattern(pattern)
        assert matcher is not None
        assert matcher.matches(literal) is True
        assert matcher.matches(other) is False

    def test_empty_pattern_matches_only_empty_string(self) -> None:
        matcher = compile_pattern("")
        assert matcher is not None
        assert matcher.matches("") is True
        assert matcher.matches("x") is False

    def test_keeps_original_pattern(self) -> None:
        matcher = compile_pattern("*.py")
        assert matcher is not None
        assert matcher.pattern == "*.py"

    def test_uncompilable_pattern_returns_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(filter_mod, "_translate", lambda pattern: "(")
        assert compile_pattern("anything") is None


class TestCompilePatterns:
    def test_preserves_order(self) -> None:
        matchers = compile_patterns(["*.md", "*.txt"])
        assert [m.pattern for m in matchers] == ["*.md", "*.txt"]

    def test_drops_uncompilable_patterns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        real_translate = filter_mod._translate

        def translate(pattern: str) -> str:
            return "(" if pattern == "bad" else real_translate(pattern)

        monkeypatch.setattr(filter_mod, "_translate", translate)
        matchers = compile_patterns(["*.md", "bad", "*.txt"])
        assert [m.pattern for m in matchers] == ["*.md", "*.txt"]

    def test_empty_input(self) -> None:
        assert compile_patterns([]) == ()


class TestMatchesAny:
    def test_any_matcher_is_enough(self) -> None:
        matchers = compile_patterns(["*.md", "*.txt"])
        assert matches_any(matchers, "a.txt") is True
        assert matches_any(matchers, "a.md") is True
        assert matches_any(matchers, "a.py") is False

    def test_empty_set_matches_nothing(self) -> None:
        assert matches_any((), "a.txt") is False
