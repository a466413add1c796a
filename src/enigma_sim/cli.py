"""enigma_sim.cli.

Command-line interface for **enigma-sim**.

This module exposes a small Typer-based CLI that can:

- Encrypt or decrypt text with a configured Enigma machine. The same command
  does both: feeding the ciphertext back with the same settings restores the
  plaintext.
- List the available rotor and reflector models.

Design notes
- Validation errors are raised as :class:`~enigma_sim.errors.EnigmaError` and converted to non-zero exit codes.
- Options are defined as module-level constants to keep defaults static and formatter/linter-friendly.
- Every machine option can also be supplied through an ``ENIGMA_*`` environment variable.
- Characters outside A-Z (spaces, digits, punctuation, newlines) are skipped and never reach the rotors.

Commands
- `crypt`: Transform `--text`, or standard input line by line until EOF.
- `models`: Show rotor wirings/notches and reflector wirings.

"""

from __future__ import annotations

import sys

import structlog
import typer
from rich.console import Console
from rich.panel import Panel

from .config import DEFAULT_REFLECTOR, DEFAULT_ROTORS, MachineConfig, build_device
from .device import Device
from .errors import EnigmaError, InvalidCharacterError
from .logconfig import configure_logging
from .tables import REFLECTOR_MODELS, ROTOR_MODELS

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()
logger = structlog.get_logger(__name__)


# Typer Option infos (avoid function-calls in defaults; keep Ruff happy)
PLUG_PAIRS_OPT = typer.Option(
    "", "--plug-pairs", "-p", envvar="ENIGMA_PLUG_PAIRS", help='Plug pairs, like "ABCD".'
)
REFLECTOR_OPT = typer.Option(
    DEFAULT_REFLECTOR, "--reflector", "-f", envvar="ENIGMA_REFLECTOR", help="Reflector (A-C)."
)
ROTOR_OPT = typer.Option(
    ",".join(DEFAULT_ROTORS),
    "--rotor",
    "-r",
    envvar="ENIGMA_ROTORS",
    help="Comma-separated rotors, left to right (I-VIII).",
)
SEGMENTS_OPT = typer.Option(
    "", "--segments", "-s", envvar="ENIGMA_SEGMENTS", help='Rotor positions, like "ABC".'
)
RING_OFFSETS_OPT = typer.Option(
    "", "--ring-offsets", "-o", envvar="ENIGMA_RING_OFFSETS", help='Ring offsets, like "ABC".'
)
TEXT_OPT = typer.Option(None, "--text", "-t", help="Text to transform (default: read stdin).")
VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Log configuration details to stderr.")


def crypt_text(device: Device, text: str) -> str:
    """Run every character of `text` through `device`.

    Characters the machine rejects as invalid are dropped; the rotors only
    step for letters that are actually encrypted.

    Args:
        device: Configured device; its rotor positions advance.
        text: Arbitrary input text.

    Returns:
        Uppercase A-Z output.

    """
    out: list[str] = []
    for ch in text:
        try:
            out.append(device.crypt(ch))
        except InvalidCharacterError:
            continue
    return "".join(out)


@app.command("crypt")
def crypt(
    plug_pairs: str = PLUG_PAIRS_OPT,
    reflector: str = REFLECTOR_OPT,
    rotor: str = ROTOR_OPT,
    segments: str = SEGMENTS_OPT,
    ring_offsets: str = RING_OFFSETS_OPT,
    text: str | None = TEXT_OPT,
    verbose: bool = VERBOSE_OPT,
) -> None:
    """Encrypt or decrypt text.

    Input sources:
    - `--text`: Transforms the given string.
    - Otherwise: Reads standard input line by line until EOF.

    Output is the transformed letters only, followed by a single newline.

    Raises:
        typer.Exit: Exit code 1 on configuration errors, after printing a message.

    """
    configure_logging("DEBUG" if verbose else "WARNING")

    try:
        cfg = MachineConfig.from_strings(
            reflector=reflector,
            rotors=rotor,
            plug_pairs=plug_pairs,
            segments=segments,
            ring_offsets=ring_offsets,
        )
        device = build_device(cfg)
    except EnigmaError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    if text is not None:
        typer.echo(crypt_text(device, text), nl=False)
    else:
        for line in sys.stdin:
            typer.echo(crypt_text(device, line), nl=False)
    typer.echo("")

    logger.debug("crypt_done", segments=device.segments())


@app.command("models")
def models() -> None:
    """Show the available rotor and reflector models."""
    rotor_lines = [
        f"{name:<5} {wiring}  notch {notches}"
        for name, (wiring, notches) in ROTOR_MODELS.items()
    ]
    reflector_lines = [f"{name:<5} {wiring}" for name, wiring in REFLECTOR_MODELS.items()]

    console.print(Panel.fit("\n".join(rotor_lines), title="rotors"))
    console.print(Panel.fit("\n".join(reflector_lines), title="reflectors"))
