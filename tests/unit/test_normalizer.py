"""
Unit tests for the result normaliser / deduplicator.
"""
from contact_extractor.extraction.normalizer import dedup_sorted, merge_results, normalize_results


class TestDedupSorted:

    def test_removes_adjacent_duplicates(self):
        assert dedup_sorted(["a", "a", "b", "c", "c", "c"]) == ["a", "b", "c"]

    def test_only_adjacent_duplicates_removed(self):
        assert dedup_sorted(["a", "b", "a"]) == ["a", "b", "a"]

    def test_empty(self):
        assert dedup_sorted([]) == []


class TestMergeResults:

    def test_concatenates_in_order(self):
        assert merge_results(["b", "a"], [], ["c"]) == ["b", "a", "c"]


class TestNormalizeResults:

    def test_sorted_and_unique(self):
        assert normalize_results(["b", "a", "b"]) == ["a", "b"]

    def test_case_kept_without_lowercase(self):
        assert normalize_results(["B", "b"]) == ["B", "b"]

    def test_lowercase_merges_case_variants(self):
        assert normalize_results(["EXAMPLE@EXAMPLE.COM", "example@example.com"], lowercase=True) == [
            "example@example.com"
        ]

    def test_accepts_generators(self):
        assert normalize_results(v for v in ["z", "y", "z"]) == ["y", "z"]

    def test_idempotent(self):
        once = normalize_results(["C", "a", "B", "a"], lowercase=True)
        assert normalize_results(once, lowercase=True) == once
