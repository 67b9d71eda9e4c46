from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from cipherlab.config import AnalysisConfig
from cipherlab.core.utils import normalize_az

from .results import SolveResult

log = logging.getLogger(__name__)


class CipherPlugin(Protocol):
    name: str

    def encrypt(self, plaintext: str, key: str) -> str:
        ...

    def decrypt(self, ciphertext: str, key: str) -> str:
        ...

    def crack(self, ciphertext: str, config: Optional[AnalysisConfig] = None) -> list[SolveResult]:
        ...


@dataclass
class _PluginEntry:
    plugin: CipherPlugin
    should_try: Optional[Callable[[str], bool]] = None


_PLUGINS: dict[str, _PluginEntry] = {}


def register_plugin(plugin: CipherPlugin, *, should_try: Optional[Callable[[str], bool]] = None) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    _PLUGINS[key] = _PluginEntry(plugin=plugin, should_try=should_try)


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = cipher_name.lower().strip()
    if name not in _PLUGINS:
        raise ValueError(f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[name].plugin


def encrypt_known(cipher_name: str, plaintext: str, key: Optional[str]) -> str:
    if key is None:
        raise ValueError("This encrypt operation requires --key.")
    return get_plugin(cipher_name).encrypt(plaintext, key)


def decrypt_known(cipher_name: str, ciphertext: str, key: Optional[str]) -> str:
    if key is None:
        raise ValueError("This decrypt operation requires --key.")
    return get_plugin(cipher_name).decrypt(ciphertext, key)


def _dedupe_by_plaintext(results: list[SolveResult]) -> list[SolveResult]:
    """
    Keep one candidate per plaintext (A-Z normalized), the best scoring one.
    The earlier candidate wins a tie.
    """
    best: dict[str, SolveResult] = {}
    for r in results:
        fp = normalize_az(r.plaintext or "")
        if not fp:
            continue
        cur = best.get(fp)
        if cur is None or r.score > cur.score:
            best[fp] = r
    return list(best.values())


def crack_unknown(
    ciphertext: str,
    *,
    top_n: int = 10,
    include: set[str] | None = None,
    config: Optional[AnalysisConfig] = None,
) -> list[SolveResult]:
    """
    Ask registered plugins to attempt cracking, then rank everything by score.

    In auto mode (include is None) plugins whose should_try() rejects the text
    are skipped; an explicitly requested plugin always runs.
    """
    results: list[SolveResult] = []

    for name, entry in sorted(_PLUGINS.items()):
        if include is not None and name not in include:
            continue

        if include is None and entry.should_try is not None and not entry.should_try(ciphertext):
            log.debug("crack_unknown: skipping %s", name)
            continue

        produced = entry.plugin.crack(ciphertext, config)
        log.debug("crack_unknown: %s produced %d candidates", name, len(produced))
        results.extend(produced)

    ranked = _dedupe_by_plaintext(results)
    # stable: equal scores keep plugin order, then the plugin's own order
    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked[:top_n]
