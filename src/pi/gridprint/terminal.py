"""Terminal abstraction for grid output and geometry queries.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that writes to ``sys.stdout``, reads the terminal size via
:func:`os.get_terminal_size`, and asks the terminal for the cursor position
with a ``CSI 6n`` device status report.
"""

from __future__ import annotations

import logging
import os
import re
import select
import sys
import termios
import time
import tty
from typing import Protocol

from pi.gridprint.errors import CursorPositionError, OutputError, TerminalSizeError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CURSOR_REPORT_QUERY = "\x1b[6n"

_CURSOR_REPORT_RE = re.compile(r"\x1b\[(\d+);(\d+)R")

_DEFAULT_CURSOR_TIMEOUT = 1.0


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal output and geometry queries."""

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    def terminal_size(self) -> tuple[int, int]:
        """Return ``(columns, rows)``."""
        ...

    def cursor_position(self) -> tuple[int, int]:
        """Return the 1-based ``(column, row)`` of the cursor."""
        ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Output is buffered by ``sys.stdout`` until :meth:`flush`.  The cursor
    query temporarily switches stdin to cbreak mode and always restores the
    previous terminal attributes.
    """

    def __init__(self, cursor_timeout: float | None = None) -> None:
        self._write_log_path: str = os.environ.get("PI_GRIDPRINT_WRITE_LOG", "")
        if cursor_timeout is None:
            cursor_timeout = float(
                os.environ.get("PI_GRIDPRINT_CURSOR_TIMEOUT", _DEFAULT_CURSOR_TIMEOUT)
            )
        self._cursor_timeout: float = cursor_timeout

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        try:
            sys.stdout.write(data)
        except (OSError, ValueError) as exc:
            raise OutputError(f"Failed to write to terminal: {exc}") from exc

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError as exc:
                logger.warning("Could not append to write log %s: %s", self._write_log_path, exc)

    def flush(self) -> None:
        try:
            sys.stdout.flush()
        except OSError as exc:
            raise OutputError(f"Failed to flush terminal: {exc}") from exc

    # -- geometry -----------------------------------------------------------

    def terminal_size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(sys.stdout.fileno())
        except (ValueError, OSError) as exc:
            raise TerminalSizeError(f"Failed to get terminal dimensions: {exc}") from exc
        return size.columns, size.lines

    def cursor_position(self) -> tuple[int, int]:
        """Query the terminal for the cursor position.

        Raises:
            CursorPositionError: if stdin is not a terminal, the query cannot
                be written, or no report arrives within the timeout.
        """
        try:
            fd = sys.stdin.fileno()
            original = termios.tcgetattr(fd)
        except (ValueError, OSError, termios.error) as exc:
            raise CursorPositionError(f"Failed to read cursor position: {exc}") from exc

        try:
            tty.setcbreak(fd)
            sys.stdout.write(_CURSOR_REPORT_QUERY)
            sys.stdout.flush()
            response = self._read_cursor_report(fd)
        except (OSError, termios.error) as exc:
            raise CursorPositionError(f"Failed to read cursor position: {exc}") from exc
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, original)

        position = parse_cursor_report(response)
        if position is None:
            raise CursorPositionError(
                "Terminal did not report the cursor position",
                {"response": response, "timeout": self._cursor_timeout},
            )
        logger.debug("Cursor reported at %s", position)
        return position

    # -- private ------------------------------------------------------------

    def _read_cursor_report(self, fd: int) -> str:
        """Read from *fd* until a cursor report arrives or the timeout ends."""
        buf = ""
        deadline = time.monotonic() + self._cursor_timeout
        while time.monotonic() < deadline:
            ready, _, _ = select.select([fd], [], [], 0.05)
            if not ready:
                continue
            chunk = os.read(fd, 64)
            if not chunk:
                break
            buf += chunk.decode("utf-8", errors="replace")
            if _CURSOR_REPORT_RE.search(buf):
                break
        return buf


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_cursor_report(data: str) -> tuple[int, int] | None:
    """Extract ``(column, row)`` from a ``CSI row ; col R`` report in *data*.

    Returns ``None`` if *data* holds no report.
    """
    match = _CURSOR_REPORT_RE.search(data)
    if match is None:
        return None
    row = int(match.group(1))
    col = int(match.group(2))
    return col, row
