"""
Buffered line reader used by the SDP parser.

The cursor keeps exactly one line of lookahead so the parser can ask
whether the next line carries a given field tag before committing to it.
"""

from __future__ import annotations

import io
from typing import Optional

from ._types import ParserConfig, SDPSyntaxError, Source


class LineCursor:
    """
    Single-pass reader over SDP text.

    Accepts a string, bytes, or a readable text/binary stream. Lines may be
    terminated by CRLF or LF; the terminator is stripped on consumption.
    """

    def __init__(self, source: Source, config: Optional[ParserConfig] = None) -> None:
        self._config = config or ParserConfig()
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        self._stream = source
        self._pending: Optional[str] = None
        self._eof = False
        self.line_number = 0

    def _read(self) -> Optional[str]:
        limit = self._config.max_line_length
        raw = self._stream.readline(limit + 1)
        if not raw:
            return None
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(self._config.encoding, self._config.errors)
            except UnicodeDecodeError as exc:
                raise SDPSyntaxError(
                    f"cannot decode line: {exc.reason}",
                    line_number=self.line_number + 1,
                ) from exc
        if len(raw) > limit:
            raise SDPSyntaxError(
                f"line longer than {limit} characters",
                line_number=self.line_number + 1,
            )
        return raw

    def _fill(self) -> Optional[str]:
        if self._pending is None and not self._eof:
            self._pending = self._read()
            if self._pending is None:
                self._eof = True
        return self._pending

    def peek(self) -> Optional[str]:
        """Return the next line without its terminator, or None at end of input."""
        line = self._fill()
        if line is None:
            return None
        return line.rstrip("\r\n")

    def peek_prefix(self, tag: str) -> bool:
        """Check, without consuming, whether the next line is a `tag=` line."""
        line = self._fill()
        return line is not None and line.startswith(tag + "=")

    def consume_line(self, tag: str) -> str:
        """
        Consume the next line and return its value.

        Raises:
            SDPSyntaxError: input is exhausted or the line is not a `tag=` line.
        """
        line = self._fill()
        if line is None:
            raise SDPSyntaxError(
                f"unexpected end of input, expected {tag}= line",
                line_number=self.line_number,
            )
        self._pending = None
        self.line_number += 1
        line = line.rstrip("\r\n")
        prefix = tag + "="
        if not line.startswith(prefix):
            raise SDPSyntaxError(
                f"missing prefix {prefix} in {line!r}", line_number=self.line_number
            )
        return line[len(prefix) :]

    def at_end(self) -> bool:
        """True when nothing but blank lines remains."""
        while True:
            line = self.peek()
            if line is None:
                return True
            if line.strip():
                return False
            self._pending = None
            self.line_number += 1


__all__ = ["LineCursor"]
