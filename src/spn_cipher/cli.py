"""Command-line interface for the SPN cipher engines."""

from __future__ import annotations

import logging
import random
import secrets
import sys
from typing import TextIO

import click

from . import __version__
from . import rijndael, text_cipher
from .algebras import list_algebras
from .errors import CipherError
from .golden import FIPS_197_TEST_VECTORS, golden_decrypt, validate_against_golden
from .interfaces import CipherConfig
from .sbox_tools import format_bigram_grid, format_table, generate_bigram_sbox
from .trace import TraceRecorder, format_header, format_result
from .utils import hex_to_bytes, symbol_letter, to_hex

logger = logging.getLogger(__name__)


def _parse_hex(value: str, what: str) -> bytes:
    try:
        return hex_to_bytes(value)
    except ValueError as e:
        raise click.BadParameter(f"Invalid {what} hex: {e}") from e


def _open_trace(path: str | None) -> TextIO | None:
    if not path:
        return None
    try:
        return open(path, "w")
    except OSError as e:
        raise click.ClickException(f"Cannot open trace file: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="spn-cipher")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level (default: WARNING)",
)
def main(log_level: str) -> None:
    """Rijndael-structured block ciphers over bytes and over A-Z text.

    Reference implementation only: no side-channel protection.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _byte_options(func):
    func = click.option("--trace", metavar="FILE", help="Write a JSON Lines trace to FILE")(func)
    func = click.option("--verbose", "-v", is_flag=True, help="Print every round step")(func)
    func = click.option("--lower", is_flag=True, help="Print lowercase hex")(func)
    func = click.option(
        "--rounds",
        type=int,
        default=None,
        help="Round count (default: Nk + 6)",
    )(func)
    func = click.option("--data", required=True, help="Input as hex, a multiple of 16 bytes")(func)
    func = click.option("--key", required=True, help="Key as hex, a multiple of 4 bytes")(func)
    return func


# config.engine -> module exposing encrypt_ecb / decrypt_ecb(data, key, rounds, tracer)
ENGINE_MODULES = {
    "rijndael": rijndael,
    "text": text_cipher,
}


def _run_ecb(
    config: CipherConfig,
    direction: str,
    data,
    key,
    tracer: TraceRecorder | None = None,
):
    """Run ECB on the engine named by config, mapping cipher errors to click."""
    engine = ENGINE_MODULES[config.engine]
    fn = engine.encrypt_ecb if direction == "encrypt" else engine.decrypt_ecb
    logger.debug(
        "%s: engine=%s rounds=%d", direction, config.engine, config.effective_rounds
    )
    try:
        return fn(data, key, config.effective_rounds, tracer)
    except CipherError as e:
        raise click.ClickException(str(e)) from e


def _run_bytes(
    direction: str,
    key_hex: str,
    data_hex: str,
    rounds: int | None,
    lower: bool,
    verbose: bool,
    trace: str | None,
) -> None:
    key = _parse_hex(key_hex, "key")
    data = _parse_hex(data_hex, "data")
    if not key or len(key) % 4:
        raise click.BadParameter(f"Key must be a multiple of 4 bytes, got {len(key)}")

    try:
        config = CipherConfig(engine="rijndael", key_bits=len(key) * 8, rounds=rounds)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    trace_file = _open_trace(trace)
    tracer = None
    if verbose or trace_file:
        tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)

    try:
        result = _run_ecb(config, direction, data, key, tracer)
    finally:
        if trace_file:
            trace_file.close()

    click.echo(to_hex(result, uppercase=not lower))


def _text_config(rounds: int | None) -> CipherConfig:
    try:
        return CipherConfig.for_text_key(rounds=rounds)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@main.command(name="list")
def list_cmd() -> None:
    """List available engines."""
    click.echo("Available engines:")
    click.echo("")
    for algebra in list_algebras():
        click.echo(f"  {algebra['name']}")
        click.echo(f"    {algebra['description']}")
        click.echo("")


@main.command()
@_byte_options
def encrypt(key, data, rounds, lower, verbose, trace) -> None:
    """Encrypt hex data with the byte engine (ECB, no padding)."""
    _run_bytes("encrypt", key, data, rounds, lower, verbose, trace)


@main.command()
@_byte_options
def decrypt(key, data, rounds, lower, verbose, trace) -> None:
    """Decrypt hex data with the byte engine (ECB)."""
    _run_bytes("decrypt", key, data, rounds, lower, verbose, trace)


@main.command(name="text-encrypt")
@click.option("--key", required=True, help="16-letter key (A-Z)")
@click.option("--rounds", type=int, default=None, help="Round count (default: 10)")
@click.option("--verbose", "-v", is_flag=True, help="Print every round step")
@click.argument("text")
def text_encrypt(key: str, rounds: int | None, verbose: bool, text: str) -> None:
    """Encrypt A-Z TEXT with the text engine (ECB, 'X' padding)."""
    config = _text_config(rounds)
    tracer = TraceRecorder(verbose=True, formatter=symbol_letter) if verbose else None
    click.echo(_run_ecb(config, "encrypt", text, key, tracer))


@main.command(name="text-decrypt")
@click.option("--key", required=True, help="16-letter key (A-Z)")
@click.option("--rounds", type=int, default=None, help="Round count (default: 10)")
@click.argument("text")
def text_decrypt(key: str, rounds: int | None, text: str) -> None:
    """Decrypt A-Z TEXT with the text engine (ECB; filler is kept)."""
    click.echo(_run_ecb(_text_config(rounds), "decrypt", text, key))


@main.command()
@click.option("--length", type=int, default=16, help="Key length in letters (default: 16)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
def keygen(length: int, seed: int | None) -> None:
    """Print a random A-Z key."""
    rng = random.Random(seed) if seed is not None else None
    try:
        click.echo(text_cipher.generate_random_key(length, rng))
    except CipherError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.option(
    "--n",
    "num_tests",
    type=int,
    default=100,
    help="Number of random tests per key size (default: 100)",
)
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Validate both engines against FIPS-197 and random round trips."""
    if seed is not None:
        rng = random.Random(seed)
        random_bytes = lambda n: bytes(rng.randint(0, 255) for _ in range(n))
    else:
        rng = None
        random_bytes = secrets.token_bytes

    failures = 0

    # FIPS-197 tests
    click.echo(format_header("FIPS-197 known-answer tests"))
    for i, vec in enumerate(FIPS_197_TEST_VECTORS):
        rounds = rijndael.standard_rounds(vec["key"])
        ct = rijndael.encrypt(vec["plaintext"], vec["key"], rounds)
        pt = rijndael.decrypt(ct, vec["key"], rounds)
        passed = ct == vec["ciphertext"] and pt == vec["plaintext"]
        if not passed:
            failures += 1
        if verbose or not passed:
            click.echo(format_result(f"  vector {i + 1}", to_hex(ct), passed))
    click.echo(f"FIPS-197 tests: {len(FIPS_197_TEST_VECTORS)} run")

    # Random tests against PyCryptodome
    click.echo(format_header(f"{num_tests} random blocks per key size"))
    for bits, (nk, rounds) in rijndael.KEY_SIZES.items():
        passed_count = 0
        for _ in range(num_tests):
            key = random_bytes(nk * 4)
            pt = random_bytes(16)
            ct = rijndael.encrypt(pt, key, rounds)
            ok, error_detail = validate_against_golden(key, pt, ct)
            if ok and not (
                rijndael.decrypt(ct, key, rounds) == pt == golden_decrypt(key, ct)
            ):
                ok, error_detail = False, "decryption does not invert encryption"
            if ok:
                passed_count += 1
            else:
                failures += 1
                if verbose:
                    click.echo(
                        f"  AES-{bits} FAIL key={key.hex()} pt={pt.hex()}: {error_detail}"
                    )
        click.echo(f"AES-{bits}: {passed_count}/{num_tests} passed")

    # Text engine round trips
    passed_count = 0
    for _ in range(num_tests):
        key = text_cipher.generate_random_key(rng=rng)
        block = text_cipher.generate_random_key(rng=rng)
        ct = text_cipher.encrypt_block(block, key)
        if text_cipher.decrypt_block(ct, key) == block:
            passed_count += 1
        else:
            failures += 1
            if verbose:
                click.echo(f"  text FAIL key={key} block={block}")
    click.echo(f"Text engine round trips: {passed_count}/{num_tests} passed")

    click.echo("")
    if failures == 0:
        click.echo("VALIDATION PASSED")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {failures} failures")
        sys.exit(1)


@main.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--grid", is_flag=True, help="Show the forward table as letter pairs")
def sbox(seed: int | None, grid: bool) -> None:
    """Generate a fresh bigram S-box and its inverse (offline tooling)."""
    forward, inverse = generate_bigram_sbox(seed)
    if grid:
        click.echo(format_bigram_grid(forward))
        return
    click.echo("S-Box:")
    click.echo(format_table(forward))
    click.echo("S-Box inverse:")
    click.echo(format_table(inverse))


if __name__ == "__main__":
    main()
