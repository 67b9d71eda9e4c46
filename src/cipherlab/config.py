"""
Analysis settings.

Defaults reproduce the classic tool exactly; a TOML file can override them::

    [cipherlab]
    max_key_length = 16
    display_limit = 5
    common_words = ["THE", "AND", "OF"]
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

ENV_VAR = "CIPHERLAB_CONFIG"
SECTION = "cipherlab"

COMMON_WORDS: tuple[str, ...] = (
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL",
    "CAN", "HER", "WAS", "ONE", "OUR", "HAD", "DAY",
)


class ConfigError(ValueError):
    """Raised for malformed or out-of-range configuration."""


@dataclass(frozen=True)
class AnalysisConfig:
    ngram_length: int = 3
    max_key_length: int = 20
    display_limit: int = 10
    common_words: tuple[str, ...] = COMMON_WORDS
    letter_bonus: float = 0.5
    bonus_letters: str = "ET"

    def __post_init__(self) -> None:
        for name in ("ngram_length", "max_key_length", "display_limit"):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}.")
        if isinstance(self.letter_bonus, bool) or not isinstance(self.letter_bonus, (int, float)):
            raise ConfigError(f"letter_bonus must be a number, got {self.letter_bonus!r}.")
        if not isinstance(self.bonus_letters, str):
            raise ConfigError("bonus_letters must be a string.")
        if self.ngram_length < 2:
            raise ConfigError("ngram_length must be >= 2.")
        if self.max_key_length < 2:
            raise ConfigError("max_key_length must be >= 2.")
        if self.display_limit < 0:
            raise ConfigError("display_limit must be >= 0.")
        if not self.common_words:
            raise ConfigError("common_words must not be empty.")
        words = tuple(str(w).strip().upper() for w in self.common_words)
        bad = [w for w in words if not (w.isascii() and w.isalpha())]
        if bad:
            raise ConfigError(f"common_words must be alphabetic: {', '.join(bad)}")
        letters = str(self.bonus_letters).upper()
        if not (letters.isascii() and letters.isalpha()):
            raise ConfigError("bonus_letters must contain only A-Z.")
        object.__setattr__(self, "common_words", words)
        object.__setattr__(self, "bonus_letters", letters)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "AnalysisConfig":
        """Build from a plain mapping, ignoring keys this version doesn't know."""
        valid = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid}
        if "common_words" in filtered:
            cw = filtered["common_words"]
            if isinstance(cw, str) or not isinstance(cw, (list, tuple)):
                raise ConfigError("common_words must be a list of words.")
            filtered["common_words"] = tuple(cw)
        try:
            return cls(**filtered)
        except TypeError as e:
            raise ConfigError(str(e)) from e

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["common_words"] = list(self.common_words)
        return d


DEFAULT_CONFIG = AnalysisConfig()


def load_config(path: str | Path | None = None) -> AnalysisConfig:
    """
    Load the [cipherlab] table of a TOML file.

    With no path, $CIPHERLAB_CONFIG is consulted; with neither, defaults are returned.
    An explicitly requested file that doesn't exist raises FileNotFoundError.
    """
    if path is None:
        env = os.environ.get(ENV_VAR, "").strip()
        if not env:
            return DEFAULT_CONFIG
        path = env

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    section = raw.get(SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{SECTION}] must be a table.")
    return AnalysisConfig.from_mapping(section)
