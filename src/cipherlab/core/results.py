from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class FrequencyEntry:
    letter: str
    count: int
    frequency_percent: float  # rounded to 2 places

    def to_dict(self) -> dict[str, Any]:
        return {
            "letter": self.letter,
            "count": self.count,
            "frequencyPercent": self.frequency_percent,
        }


@dataclass(frozen=True)
class FrequencyTable:
    # Sorted by count descending, ties by letter (A before B).
    entries: tuple[FrequencyEntry, ...]
    total_letters: int

    def percentages(self) -> dict[str, float]:
        return {e.letter: e.frequency_percent for e in self.entries}

    def to_dict(self) -> dict[str, Any]:
        return {
            "entries": [e.to_dict() for e in self.entries],
            "totalLetters": self.total_letters,
        }


@dataclass(frozen=True)
class RepeatedSequence:
    sequence: str
    positions: tuple[int, ...]
    distances: tuple[int, ...]  # consecutive gaps, in position order

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "positions": list(self.positions),
            "distances": list(self.distances),
        }


@dataclass(frozen=True)
class KasiskiResult:
    repeated_sequences: tuple[RepeatedSequence, ...]
    all_distances: tuple[int, ...]
    candidate_key_lengths: tuple[int, ...]
    suggested_key_length: Optional[int]
    gcd: Optional[int] = None
    display_limit: int = 10

    @property
    def displayed_sequences(self) -> tuple[RepeatedSequence, ...]:
        """Bounded view of repeated_sequences; the analysis itself always uses all of them."""
        return self.repeated_sequences[: self.display_limit]

    @property
    def has_suggestion(self) -> bool:
        return self.suggested_key_length is not None

    def to_dict(self, *, full: bool = False) -> dict[str, Any]:
        seqs = self.repeated_sequences if full else self.displayed_sequences
        return {
            "repeatedSequences": [s.to_dict() for s in seqs],
            "allDistances": list(self.all_distances),
            "candidateKeyLengths": list(self.candidate_key_lengths),
            "suggestedKeyLength": self.suggested_key_length,
        }


@dataclass(frozen=True)
class BruteForceResult:
    shift: int
    text: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"shift": self.shift, "text": self.text, "score": self.score}


@dataclass(frozen=True)
class SolveResult:
    cipher_name: str
    plaintext: str
    key: Optional[str] = None

    # Higher is better
    score: float = 0.0

    # For transparency / debugging (why this was chosen)
    notes: str = ""

    meta: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "plaintext": self.plaintext,
            "key": self.key,
            "score": self.score,
            "notes": self.notes,
            "meta": dict(self.meta),
        }


@dataclass(frozen=True)
class TextFeatures:
    length: int
    letters: int
    unique_letters: int
    alpha_ratio: float
    entropy: float
    ioc: float  # index of coincidence for A-Z only (0 if not applicable)

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "letters": self.letters,
            "unique_letters": self.unique_letters,
            "alpha_ratio": self.alpha_ratio,
            "entropy": self.entropy,
            "ioc": self.ioc,
        }
