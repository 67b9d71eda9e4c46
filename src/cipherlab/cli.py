from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from cipherlab.classical import register_all
from cipherlab.classical.monoalphabetic.caesar import brute_force_caesar
from cipherlab.config import DEFAULT_CONFIG, AnalysisConfig, load_config
from cipherlab.core import explain
from cipherlab.core.features import (
    ENGLISH_IOC,
    RANDOM_IOC,
    analyze_text,
    frequency_analysis,
    index_of_coincidence,
    ioc_scan,
)
from cipherlab.core.kasiski import kasiski_examination
from cipherlab.core.registry import crack_unknown, decrypt_known, encrypt_known, list_plugins
from cipherlab.core.scoring import compare_to_english
from cipherlab.core.utils import normalize_az
from cipherlab.log import configure_logging

app = typer.Typer(help="CipherLab CLI: Caesar / Vigenère ciphers and the attacks that break them.")

_state: dict[str, AnalysisConfig] = {"config": DEFAULT_CONFIG}


def _config() -> AnalysisConfig:
    return _state["config"]


@app.callback()
def _init(
    config: Optional[Path] = typer.Option(None, "--config", help="TOML file with a [cipherlab] table."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level when not --verbose."),
):
    # Register plugins exactly once per CLI run
    register_all()
    configure_logging("DEBUG" if verbose else log_level)
    try:
        _state["config"] = load_config(config)
    except (OSError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")


@app.command()
def plugins():
    """List all registered cipher plugins."""
    for name in list_plugins():
        typer.echo(name)


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher plugin name (caesar, vigenere)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Shift for Caesar, keyword for Vigenère."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
):
    """Encrypt with a known cipher and key."""
    try:
        ct = encrypt_known(cipher, text, key)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(ct)


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher plugin name (caesar, vigenere)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Shift for Caesar, keyword for Vigenère."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
):
    """Decrypt when you already know the cipher type and have the key."""
    try:
        pt = decrypt_known(cipher, text, key)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(pt)


@app.command()
def bruteforce(
    text: str = typer.Argument(..., help="Caesar ciphertext."),
    top: int = typer.Option(10, "--top", "-t", min=1, help="How many candidates to show."),
):
    """Try every Caesar shift and rank the results."""
    results = brute_force_caesar(text, _config())
    for i, r in enumerate(results[:top]):
        line = f"shift={r.shift:2d}  score={r.score:6.1f}  {r.text}"
        if i == 0:
            line += "  <- most likely plaintext"
        typer.echo(line)


@app.command()
def freq(
    text: str = typer.Argument(...),
    all_letters: bool = typer.Option(False, "--all", help="Include letters that never occur."),
    compare: bool = typer.Option(False, "--compare", help="Show expected English frequencies alongside."),
):
    """Letter frequency table."""
    table = frequency_analysis(text, include_all=all_letters)
    if table.total_letters == 0:
        typer.echo("No letters to analyze.")
        raise typer.Exit(code=0)

    typer.echo(f"Total letters: {table.total_letters}")
    if compare:
        for row in compare_to_english(table):
            typer.echo(
                f"  {row['letter']}  {row['observed']:6.2f}%  english={row['expected']:6.2f}%  diff={row['difference']:+.2f}"
            )
        return

    for e in table.entries:
        typer.echo(f"  {e.letter}  {e.count:5d}  {e.frequency_percent:6.2f}%")


@app.command()
def kasiski(
    text: str = typer.Argument(..., help="Vigenère ciphertext."),
    show_all: bool = typer.Option(False, "--all", help="List every repeated sequence, not just the first few."),
):
    """Kasiski examination: repeated trigrams, distances and likely key lengths."""
    result = kasiski_examination(text, _config())

    if not result.repeated_sequences:
        typer.echo("No repeated sequences found; text may be too short.")
    else:
        typer.echo("Repeated sequences:")
        seqs = result.repeated_sequences if show_all else result.displayed_sequences
        for seq in seqs:
            positions = ", ".join(str(p) for p in seq.positions)
            distances = ", ".join(str(d) for d in seq.distances)
            typer.echo(f"  {seq.sequence}  positions: {positions}  distances: {distances}")
        hidden = len(result.repeated_sequences) - len(seqs)
        if hidden > 0:
            typer.echo(f"  ... {hidden} more (use --all)")

    if result.has_suggestion:
        typer.echo(f"Suggested key lengths: {', '.join(str(k) for k in result.candidate_key_lengths)}")
        typer.echo(f"Most likely key length: {result.suggested_key_length}")
    else:
        typer.echo("No key length suggestion (insufficient data).")

    ic = index_of_coincidence(text)
    typer.echo(f"Index of Coincidence: {ic:.4f} (English ≈ {ENGLISH_IOC}, Random ≈ {RANDOM_IOC})")


@app.command()
def ioc(
    text: str = typer.Argument(...),
    scan: int = typer.Option(0, "--scan", help="If >0, show average column IoC per period up to this length."),
):
    """Index of Coincidence."""
    typer.echo(f"{index_of_coincidence(text):.5f}")
    if scan > 0:
        typer.echo("\nTop IoC candidates:")
        for klen, val in ioc_scan(text, max_len=scan)[:10]:
            typer.echo(f"  k={klen:2d}  avg_ioc={val:.5f}")


@app.command()
def analyze(text: str):
    """Summary statistics of a text."""
    info = analyze_text(text)
    for k, v in info.items():
        typer.echo(f"{k}: {v}")


@app.command(name="explain")
def explain_cmd(
    cipher: str = typer.Option(..., "--cipher", "-c", help="caesar or vigenere"),
    key: str = typer.Option(..., "--key", "-k"),
    text: str = typer.Argument(...),
    decrypt_mode: bool = typer.Option(False, "--decrypt", help="Explain decryption instead of encryption."),
):
    """Formula, key space and a worked example."""
    name = cipher.lower().strip()
    try:
        space = explain.key_space(name, key)
        if name == "caesar":
            formula = explain.caesar_formula(key, decrypt_mode)
            example = explain.letter_example(text, key, decrypt_mode)
        else:
            formula = explain.vigenere_formula(decrypt_mode)
            example = ""
    except ValueError as e:
        raise typer.BadParameter(str(e))

    typer.echo(f"Formula: {formula}")
    typer.echo(f"Key space: {space:,} possible keys")
    if example:
        typer.echo(f"Example: {example}")

    if name == "vigenere":
        steps = explain.vigenere_steps(text, key, decrypt_mode)
        if not steps:
            typer.echo("Enter text and a key with letters to see the steps.")
        for step in steps:
            typer.echo(f"  {step}")
        if len(normalize_az(text)) > len(steps) > 0:
            typer.echo("  ... and so on for the remaining letters")


@app.command()
def crack(
    text: str = typer.Argument(...),
    top: int = typer.Option(5, "--top", "-t", min=1, help="How many candidates to show."),
    cipher: Optional[List[str]] = typer.Option(
        None,
        "--cipher",
        "-c",
        help="Limit to specific plugin(s). Can repeat: -c caesar -c vigenere",
    ),
):
    """Try every registered attack and rank the candidates."""
    include = None if not cipher else {c.lower().strip() for c in cipher}

    # Validate filter names so it can't silently run the wrong thing
    if include is not None:
        available = set(list_plugins())
        unknown = sorted(include - available)
        if unknown:
            raise typer.BadParameter(
                f"Unknown cipher(s): {', '.join(unknown)}. Available: {', '.join(sorted(available))}"
            )

    results = crack_unknown(text, top_n=top, include=include, config=_config())
    if not results:
        typer.echo("No candidates produced. Input may be too short.")
        raise typer.Exit(code=0)

    for i, r in enumerate(results, start=1):
        typer.echo(f"#{i}  cipher={r.cipher_name}  score={r.score:.2f}  key={r.key}")
        if r.notes:
            typer.echo(f"    notes: {r.notes}")
        typer.echo(r.plaintext)
        typer.echo("-" * 60)


def main():
    app()


if __name__ == "__main__":
    main()
