"""Tests for the range rewrite table and its single pass translation."""

from lightning_dev.transforms import RangeRewrite, rewrite_ranges, translate


class TestRewriteRanges:
    """Test translation table construction."""

    def test_one_entry_per_distinct_range(self):
        rewrites = rewrite_ranges(["^1.0", "^2.0", "^1.0"], lambda r: r[1:])
        assert rewrites == [RangeRewrite("^1.0", "1.0"), RangeRewrite("^2.0", "2.0")]

    def test_accepts_generator(self):
        rewrites = rewrite_ranges((r for r in ["a", "b"]), str.upper)
        assert rewrites == [RangeRewrite("a", "A"), RangeRewrite("b", "B")]

    def test_empty(self):
        assert rewrite_ranges([], str.upper) == []


class TestTranslate:
    """Test translation table semantics."""

    def test_empty_table_returns_text(self):
        assert translate("^1.0 || ^2.0", []) == "^1.0 || ^2.0"

    def test_longest_key_wins(self):
        """At a given position the longer key is preferred."""
        rewrites = [RangeRewrite("8.5", "short"), RangeRewrite("8.5.3", "long")]
        assert translate("8.5.3 || 8.5", rewrites) == "long || short"

    def test_no_cascading(self):
        """Replacement text is never translated again."""
        rewrites = [RangeRewrite("a", "b"), RangeRewrite("b", "c")]
        assert translate("ab", rewrites) == "bc"

    def test_all_occurrences_replaced(self):
        rewrites = [RangeRewrite("^1.0", "1.x-dev")]
        assert translate("^1.0 || ^1.0", rewrites) == "1.x-dev || 1.x-dev"

    def test_regex_characters_are_literal(self):
        """Keys like '8.*' are matched as plain text."""
        rewrites = [RangeRewrite("8.*", "8.x-dev")]
        assert translate("8.* || 8.5", rewrites) == "8.x-dev || 8.5"

    def test_empty_key_ignored(self):
        rewrites = [RangeRewrite("", "x"), RangeRewrite("1", "2")]
        assert translate("1 1", rewrites) == "2 2"
