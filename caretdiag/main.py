#!/usr/bin/env python3
"""caretdiag/main.py — CLI entry-point for the caretdiag renderer.

Usage examples
--------------
    # Underline bytes 15..18 of a source file as an error
    caretdiag render prog.src --start 15 --end 18 --message "unknown name"

    # Same, as a warning, forced colour, written to a file
    caretdiag render prog.src --start 15 --end 18 --level warning \\
        --message "shadowed name" --color always -o out.txt

    # Render a diagnostic document produced by DiagnosticInfo.to_dict()
    caretdiag render --json diag.json

    # Resolve a byte offset to a 1-indexed line:column
    caretdiag position prog.src 15

    # Show version and exit
    caretdiag --version

Exit codes
----------
    0   Success.
    1   Invalid diagnostic input (bad offset, range or severity).
    2   Infrastructure failure (missing file, unreadable JSON, etc.).

The module doubles as ``python -m caretdiag`` via the companion
``caretdiag/__main__.py`` which simply calls :func:`main`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import textwrap
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, TextIO

from caretdiag import __version__
from caretdiag.config import BACKENDS, ColourMode, RenderConfig
from caretdiag.errors import CaretDiagError
from caretdiag.info import ByteRange, DiagnosticInfo
from caretdiag.position import position
from caretdiag.render import render, select_backend
from caretdiag.severity import Severity

_log = logging.getLogger("caretdiag")
_handler: Optional[logging.Handler] = None

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_INFRA: int = 2


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``caretdiag`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    global _handler

    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    root = logging.getLogger("caretdiag")
    root.setLevel(level)
    # main() may run more than once per process; keep a single handler
    # bound to the current stderr.
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(_handler)


def _resolve_path(raw: str, label: str = "file") -> Path:
    """Resolve *raw* to an absolute ``Path``, raising on missing files."""
    p = Path(raw).expanduser().resolve()
    if not p.is_file():
        _log.error("%s not found: %s", label, p)
        raise SystemExit(EXIT_INFRA)
    return p


def _read_source(raw: str) -> str:
    """Read a source file as UTF-8 without newline translation.

    Byte offsets on the command line index the file as stored, so
    ``\\r\\n`` must survive the read.
    """
    return _resolve_path(raw, "source file").read_bytes().decode("utf-8")


def _open_output(dest: Optional[str]) -> TextIO:
    """Return a writable text stream.

    *dest* ``None`` or ``"-"`` → ``sys.stdout``; otherwise open the path
    for writing (creating parent directories as needed).
    """
    if dest is None or dest == "-":
        return sys.stdout
    p = Path(dest).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    return open(p, "w", encoding="utf-8")


def _load_document(raw: str) -> Dict[str, Any]:
    """Read a JSON diagnostic document from *raw* (``-`` for stdin)."""
    if raw == "-":
        text = sys.stdin.read()
    else:
        text = _resolve_path(raw, "diagnostic document").read_text(encoding="utf-8")
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        _log.error("Malformed JSON in %s: %s", raw, exc)
        raise SystemExit(EXIT_INFRA)
    if not isinstance(doc, dict):
        _log.error("Diagnostic document must be a JSON object: %s", raw)
        raise SystemExit(EXIT_INFRA)
    return doc


def _config_from_args(args: argparse.Namespace) -> RenderConfig:
    """Environment settings, overridden by any flags given."""
    config = RenderConfig.from_env()
    colour = ColourMode.parse(args.color) if args.color else config.colour
    backend = args.format or config.backend
    return RenderConfig(colour=colour, backend=backend)


# ===========================================================================
# Sub-command implementations
# ===========================================================================

# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

def _info_from_args(args: argparse.Namespace) -> DiagnosticInfo:
    if args.json:
        return DiagnosticInfo.from_dict(_load_document(args.json))

    if not args.source_file:
        _log.error("render needs a SOURCE_FILE or --json.")
        raise SystemExit(EXIT_INFRA)
    if args.message is None:
        _log.error("render needs --message.")
        raise SystemExit(EXIT_INFRA)
    if (args.start is None) != (args.end is None):
        _log.error("--start and --end must be given together.")
        raise SystemExit(EXIT_INFRA)

    source = _read_source(args.source_file)
    span = None
    if args.start is not None:
        span = ByteRange(args.start, args.end)

    return DiagnosticInfo(
        level=Severity.from_string(args.level),
        filename=args.filename or args.source_file,
        message=args.message,
        position=span,
        source=source,
    )


def cmd_render(args: argparse.Namespace) -> int:
    """Render one diagnostic to the output stream."""
    config = _config_from_args(args)
    info = _info_from_args(args)

    # Files are never terminals; only stdout needs the tty check.
    to_stdout = args.output is None or args.output == "-"
    backend = select_backend(config, sys.stdout if to_stdout else None)
    _log.info("Rendering %s for %s", info.level, info.filename)
    text = render(info, backend)

    out = _open_output(args.output)
    try:
        out.write(text + "\n")
    finally:
        if out is not sys.stdout:
            out.close()
    return EXIT_OK


# ---------------------------------------------------------------------------
# position
# ---------------------------------------------------------------------------

def cmd_position(args: argparse.Namespace) -> int:
    """Print the 1-indexed ``line:column`` of a byte offset."""
    source = _read_source(args.source_file)
    line_idx, column_idx = position(source, args.offset)
    sys.stdout.write(f"{line_idx + 1}:{column_idx + 1}\n")
    return EXIT_OK


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct the full CLI argument parser with subcommands."""

    parser = argparse.ArgumentParser(
        prog="caretdiag",
        description=(
            "caretdiag — render compiler-style diagnostics with a source\n"
            "excerpt and a caret underline."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              caretdiag render prog.src --start 15 --end 18 -m 'unknown name'
              caretdiag render --json diag.json --color never
              caretdiag position prog.src 15
        """),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug).",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # --- render ------------------------------------------------------------
    p_render = subparsers.add_parser(
        "render",
        help="Render a diagnostic for a span of a source file.",
        description=(
            "Build a diagnostic from flags (or a JSON document) and print "
            "it with the offending line and a caret underline."
        ),
    )
    p_render.add_argument(
        "source_file",
        nargs="?",
        default=None,
        help="Source text the byte offsets index into.",
    )
    p_render.add_argument(
        "-m", "--message",
        default=None,
        help="Diagnostic message text.",
    )
    p_render.add_argument(
        "-l", "--level",
        type=str.lower,
        choices=[s.name_text for s in Severity],
        default="error",
        help="Severity (default: error).",
    )
    p_render.add_argument(
        "--start",
        type=int,
        default=None,
        metavar="N",
        help="Byte offset where the span starts.",
    )
    p_render.add_argument(
        "--end",
        type=int,
        default=None,
        metavar="N",
        help="Byte offset one past the span's last byte.",
    )
    p_render.add_argument(
        "--filename",
        default=None,
        metavar="LABEL",
        help="Label shown in the header (default: SOURCE_FILE as given).",
    )
    p_render.add_argument(
        "--json",
        default=None,
        metavar="FILE",
        help='Read the diagnostic from a JSON document ("-" for stdin).',
    )
    p_render.add_argument(
        "--color", "--colour",
        dest="color",
        choices=[m.value for m in ColourMode],
        default=None,
        help="Colour mode (default: $CARETDIAG_COLOR or auto).",
    )
    p_render.add_argument(
        "-f", "--format",
        choices=list(BACKENDS),
        default=None,
        help="Output backend (default: $CARETDIAG_BACKEND or terminal).",
    )
    p_render.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help='Output file ("-" or omit for stdout).',
    )
    p_render.set_defaults(func=cmd_render)

    # --- position ----------------------------------------------------------
    p_position = subparsers.add_parser(
        "position",
        help="Resolve a byte offset to line:column.",
    )
    p_position.add_argument("source_file", help="Source file.")
    p_position.add_argument("offset", type=int, help="Byte offset.")
    p_position.set_defaults(func=cmd_position)

    return parser


# ===========================================================================
# Main
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the caretdiag CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    # No subcommand given → print help.
    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return EXIT_INFRA

    try:
        return args.func(args)
    except CaretDiagError as exc:
        _log.error("%s", exc)
        return EXIT_ERROR
    except (OSError, UnicodeDecodeError) as exc:
        _log.error("I/O error: %s", exc)
        return EXIT_INFRA
    except KeyboardInterrupt:
        _log.info("Interrupted by user.")
        return 130
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else EXIT_INFRA


if __name__ == "__main__":
    raise SystemExit(main())
