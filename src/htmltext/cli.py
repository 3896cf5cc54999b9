"""Typer-based command line interface for HTML to text conversion.

The ``convert`` command reads an HTML file, converts it with
:func:`htmltext.scan.scanner.convert` and writes the text to a ``.txt`` file
or to stdout.  ``--show-html`` prints the source markup ahead of the result.

Exit codes
----------
0 success
3 I/O error (missing file, unsupported extension, filesystem issues)
4 configuration error
5 conversion error (unexpected exception while converting)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .io import read_document, write_output
from .scan.scanner import HtmlToText
from .utils.errors import UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="htmltext",
    help="Convert HTML documents to readable plain text. Use 'htmltext convert' to run.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    newline: str | None,
    raw_entities: bool,
    encoding_in: str | None,
    encoding_out: str | None,
) -> ConfigModel:
    """Return a validated copy of ``cfg`` with CLI overrides applied."""

    data = cfg.model_dump()
    if newline is not None:
        data["output"]["newline"] = newline
    if raw_entities:
        data["output"]["decode_entities"] = False
    if encoding_in is not None:
        data["io"]["encoding_in"] = encoding_in
    if encoding_out is not None:
        data["io"]["encoding_out"] = encoding_out
    return ConfigModel.model_validate(data)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the htmltext command group."""
    pass


@app.command()
def convert(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input HTML file (.html, .htm or .txt)"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file (.txt); prints to stdout when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    encoding_in: Optional[str] = typer.Option(  # noqa: B008
        None, help="Input file encoding (default from config)"
    ),
    encoding_out: Optional[str] = typer.Option(  # noqa: B008
        None, help="Output file encoding (default from config)"
    ),
    newline: Optional[str] = typer.Option(  # noqa: B008
        None, "--newline", help="Line terminator of the output [platform|lf|crlf]"
    ),
    raw_entities: bool = typer.Option(  # noqa: B008
        False, "--raw-entities", help="Leave HTML entities such as &amp; undecoded"
    ),
    show_html: bool = typer.Option(  # noqa: B008
        False, "--show-html", help="Print the source HTML before the converted text"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages and debug logs to stderr"
    ),
) -> None:
    """Convert the HTML document at ``in_path`` to plain text."""

    configure_logging(verbose)

    # Load configuration
    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(
            cfg,
            newline=newline,
            raw_entities=raw_entities,
            encoding_in=encoding_in,
            encoding_out=encoding_out,
        )
    except (ValidationError, Exception) as exc:  # pragma: no cover - diverse
        _safe_exit(4, str(exc).splitlines()[0])
    if verbose:
        typer.echo("Loaded config", err=True)

    # Read input
    try:
        doc = read_document(in_path, encoding=cfg.io.encoding_in)
    except (UnsupportedFormatError, UnicodeDecodeError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Read {len(doc.text)} chars of {doc.kind} ({doc.encoding})", err=True)

    converter = HtmlToText(
        newline=cfg.output.line_terminator,
        decode_entities=cfg.output.decode_entities,
    )
    try:
        with Timing() as t_conv:
            text = converter.convert(doc.text)
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)
    if verbose:
        typer.echo(f"Converted to {len(text)} chars in {t_conv.ms:.1f} ms", err=True)

    if show_html:
        typer.echo("HTML:")
        typer.echo(doc.text)
        typer.echo()
        typer.echo("TEXT:")

    if out_path is None:
        typer.echo(text, nl=False)
        return

    try:
        write_output(out_path, text, encoding=cfg.io.encoding_out)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {out_path}", err=True)
