"""OMapRepl — interactive shell for parsing and inspecting maps.

Also provides the ``omap-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from .errors import ParseError
from .getter import lookup
from .model import Nested, OrderedMap, Value, _EmptyType
from .reader import parse
from .writer import serialize

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# OMapRepl class (programmatic use)
# ---------------------------------------------------------------------------

class OMapRepl:
    """Stateful shell that remembers the most recently parsed map.

    Usage::

        repl = OMapRepl()
        repl.eval('{"user":{"name":"Bob"}}')
        repl.last            # → OrderedMap
        repl.reset()         # forget it
    """

    def __init__(self) -> None:
        self.last: OrderedMap | None = None
        # batch files currently being read, innermost last
        self.batch_files: list[str] = []

    def eval(self, text: str) -> OrderedMap:
        """Parse *text*, remember the result and return it."""
        logger.debug("eval %r", text)
        self.last = parse(text)
        return self.last

    def reset(self) -> None:
        self.last = None


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_value(value: Value | _EmptyType) -> str:
    """Format a value for one-line display."""
    if isinstance(value, Nested):
        return serialize(value.map)
    if isinstance(value, _EmptyType):
        return repr(value)
    return f'"{value.text}"'


def _fmt_inspect(omap: OrderedMap, indent: int = 0) -> str:
    """Pretty-print *omap* as an indented tree."""
    pad = "  " * indent
    if not omap.size():
        return "{}"
    width = max(len(k) for k in omap.keys())
    lines = ["{"]
    for key, value in omap.iterate():
        if isinstance(value, Nested):
            shown = _fmt_inspect(value.map, indent + 1)
        else:
            shown = f'"{value.text}"'
        lines.append(f"{pad}  {key:<{width}} : {shown}")
    lines.append(pad + "}")
    return "\n".join(lines)


def _report(exc: ParseError) -> None:
    logger.debug("parse failed (%s)", exc.kind.value, exc_info=True)
    print(f"Error: {exc}", file=sys.stderr)


def _process_line(repl: OMapRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":reset":
        repl.reset()
        return True

    if line == ":last":
        if repl.last is None:
            print("  (nothing parsed yet)", file=dest)
        else:
            print(serialize(repl.last), file=dest)
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            text = line[len(prefix):-1].strip()
            try:
                print(_fmt_inspect(repl.eval(text)), file=dest)
            except ParseError as exc:
                _report(exc)
            return True

    # ── ? path ────────────────────────────────────────────────────────────
    if line == "?" or line.startswith("? "):
        if repl.last is None:
            print("  (nothing parsed yet)", file=dest)
        else:
            print(_fmt_value(lookup(repl.last, line[1:].strip())), file=dest)
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        filepath = line[4:].strip()
        resolved = os.path.realpath(filepath)
        if resolved in repl.batch_files:
            print(f"Error reading '{filepath}': already being read", file=sys.stderr)
            return True
        repl.batch_files.append(resolved)
        try:
            with open(filepath, encoding="utf-8") as fh:
                for file_line in fh:
                    if not _process_line(repl, file_line.rstrip("\n"), dest):
                        return False
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        finally:
            repl.batch_files.pop()
        return True

    # ── Regular input ─────────────────────────────────────────────────────
    try:
        repl.eval(line)
    except ParseError as exc:
        _report(exc)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Interactive shell (``omap-repl`` / ``python -m omap_core.repl``)."""
    repl = OMapRepl()
    dest: IO[str] = sys.stdout

    print("OMap REPL  (:q to quit  |  :last  :reset  |  ? <path>  inspect(<text>))")

    while True:
        try:
            line = input("OMAP> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, dest):
            break


if __name__ == "__main__":
    main()
