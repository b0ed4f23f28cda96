"""
Result normaliser and deduplicator.

Turns the candidate collections of one extraction call into a Result Set:
an ascending, duplicate-free list of strings.

Transformations (in order):
  1. Optional lowercasing (emails only; phone numbers have no case)
  2. Ascending sort
  3. Removal of adjacent duplicates, which is complete because of step 2
"""
from __future__ import annotations

from typing import Iterable, List, Sequence


def dedup_sorted(values: Sequence[str]) -> List[str]:
    """Drop adjacent duplicates from an already sorted sequence."""
    result: List[str] = []
    for value in values:
        if not result or result[-1] != value:
            result.append(value)
    return result


def merge_results(*collections: Iterable[str]) -> List[str]:
    """Concatenate several candidate collections, preserving their order."""
    merged: List[str] = []
    for collection in collections:
        merged.extend(collection)
    return merged


def normalize_results(values: Iterable[str], lowercase: bool = False) -> List[str]:
    """
    Build a Result Set from raw candidate strings.

    Args:
        values: Candidate strings in any order, possibly repeated.
        lowercase: Fold every value to lowercase before sorting, so values
                   differing only in case collapse into one.

    Returns:
        Sorted list with no two equal elements.
    """
    current = [v.lower() for v in values] if lowercase else list(values)
    current.sort()
    return dedup_sorted(current)
