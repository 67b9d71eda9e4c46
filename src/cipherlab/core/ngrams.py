from __future__ import annotations

from collections import defaultdict

from cipherlab.core.utils import normalize_az


def build_ngram_index(text: str, n: int = 3) -> dict[str, list[int]]:
    """
    Map every length-n window of the letters-only, uppercased text to the
    positions where it starts (sliding window, step 1).

    Keys keep first-occurrence order; position lists are ascending.
    """
    az = normalize_az(text)
    index: dict[str, list[int]] = defaultdict(list)
    for i in range(len(az) - n + 1):
        index[az[i : i + n]].append(i)
    return dict(index)


def repeated_ngrams(index: dict[str, list[int]]) -> dict[str, list[int]]:
    """Only the n-grams seen at two or more positions."""
    return {gram: positions for gram, positions in index.items() if len(positions) > 1}


def consecutive_distances(positions: list[int]) -> list[int]:
    """Gaps between successive occurrences (not all pairwise gaps)."""
    return [b - a for a, b in zip(positions, positions[1:])]
