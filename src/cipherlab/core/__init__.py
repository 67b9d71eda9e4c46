from .results import (
    BruteForceResult,
    FrequencyEntry,
    FrequencyTable,
    KasiskiResult,
    RepeatedSequence,
    SolveResult,
    TextFeatures,
)
from .features import analyze_text, frequency_analysis, index_of_coincidence, ioc_scan
from .kasiski import kasiski_examination
from .registry import register_plugin, encrypt_known, decrypt_known, crack_unknown

__all__ = [
    "BruteForceResult",
    "FrequencyEntry",
    "FrequencyTable",
    "KasiskiResult",
    "RepeatedSequence",
    "SolveResult",
    "TextFeatures",
    "analyze_text",
    "frequency_analysis",
    "index_of_coincidence",
    "ioc_scan",
    "kasiski_examination",
    "register_plugin",
    "encrypt_known",
    "decrypt_known",
    "crack_unknown",
]
