"""
SDP parser.

SDP is a field-order grammar: a description is valid only when its lines
appear in the sequence fixed by RFC 4566. The parser is therefore an
ordered table of (tag, handler) pairs walked once from top to bottom.
Each handler consumes the lines it owns from a LineCursor:

- required: exactly one line, an error when absent
- optional: zero or one line
- repeated: zero or more lines, while the next line carries its tag
- skipped:  zero or more lines that are recognized and discarded

The table never rewinds. A line whose slot has already been passed is left
for the next handler to reject, and anything left once the session table is
exhausted is a syntax error.

Session table:
    v o s i u e* p* c b* t* (r*) z k a* r* z m*

Media table, run for every m= line:
    i c b* k a*
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple, TypeVar

from ._cursor import LineCursor
from ._grammar import (
    parse_attribute,
    parse_bandwidth,
    parse_connection,
    parse_int,
    parse_interval,
    parse_media_line,
    parse_origin,
    split,
)
from ._models import File, MediaInfo
from ._types import ParserConfig, SDPError, SDPInvalidError, SDPSyntaxError, Source
from ._utils import TAGS, VERSION, logger

T = TypeVar("T")

Handler = Callable[[T, LineCursor], None]
Apply = Callable[[T, str], None]


# ============================================================================
# Handler builders
# ============================================================================


def _required(tag: str, apply: Apply) -> Handler:
    def handler(target, cursor: LineCursor) -> None:
        apply(target, cursor.consume_line(tag))

    return handler


def _optional(tag: str, apply: Apply) -> Handler:
    def handler(target, cursor: LineCursor) -> None:
        if cursor.peek_prefix(tag):
            apply(target, cursor.consume_line(tag))

    return handler


def _repeated(tag: str, apply: Apply) -> Handler:
    def handler(target, cursor: LineCursor) -> None:
        while cursor.peek_prefix(tag):
            apply(target, cursor.consume_line(tag))

    return handler


def _skipped(tag: str) -> Handler:
    def handler(target, cursor: LineCursor) -> None:
        while cursor.peek_prefix(tag):
            value = cursor.consume_line(tag)
            logger.debug(
                "line %d: discarding %s %r", cursor.line_number, TAGS[tag], value
            )

    return handler


def _run(fields: Tuple[Tuple[str, Handler], ...], target, cursor: LineCursor) -> None:
    for _tag, handler in fields:
        handler(target, cursor)


# ============================================================================
# Session scope
# ============================================================================


def _set_version(file: File, value: str) -> None:
    file.version = parse_int(value, "version")
    if file.version != VERSION:
        raise SDPInvalidError(f"unsupported version {file.version}")


def _set_origin(file: File, value: str) -> None:
    file.session = parse_origin(value)


def _set_name(file: File, value: str) -> None:
    if not value:
        raise SDPSyntaxError("empty session name")
    file.session.name = value


def _set_info(file: File, value: str) -> None:
    file.session.info = value


def _set_uri(file: File, value: str) -> None:
    file.session.uri = value


def _add_email(file: File, value: str) -> None:
    file.email.append(value)


def _add_phone(file: File, value: str) -> None:
    file.phone.append(value)


def _set_connection(file: File, value: str) -> None:
    file.connection = parse_connection(split(value))


def _add_bandwidth(file: File, value: str) -> None:
    file.bandwidth.append(parse_bandwidth(value))


def _add_attribute(file: File, value: str) -> None:
    file.attributes.append(parse_attribute(value))


_skip_repeats = _skipped("r")


def _parse_timing(file: File, cursor: LineCursor) -> None:
    # Repeat times (r=) belong to the t= line they follow
    while cursor.peek_prefix("t"):
        file.intervals.append(parse_interval(cursor.consume_line("t")))
        _skip_repeats(file, cursor)


def _parse_medias(file: File, cursor: LineCursor) -> None:
    while cursor.peek_prefix("m"):
        media = parse_media_line(cursor.consume_line("m"))
        file.medias.append(media)
        logger.debug(
            "line %d: media block %d (%s)",
            cursor.line_number,
            len(file.medias),
            media.media,
        )
        _run(MEDIA_FIELDS, media, cursor)


# ============================================================================
# Media scope
# ============================================================================


def _set_media_info(media: MediaInfo, value: str) -> None:
    media.info = value


def _set_media_connection(media: MediaInfo, value: str) -> None:
    media.connection = parse_connection(split(value))


def _add_media_bandwidth(media: MediaInfo, value: str) -> None:
    media.bandwidth.append(parse_bandwidth(value))


def _add_media_attribute(media: MediaInfo, value: str) -> None:
    media.attributes.append(parse_attribute(value))


# ============================================================================
# Field tables
# ============================================================================

SESSION_FIELDS: Tuple[Tuple[str, Handler], ...] = (
    ("v", _required("v", _set_version)),
    ("o", _required("o", _set_origin)),
    ("s", _required("s", _set_name)),
    ("i", _optional("i", _set_info)),
    ("u", _optional("u", _set_uri)),
    ("e", _repeated("e", _add_email)),
    ("p", _repeated("p", _add_phone)),
    ("c", _optional("c", _set_connection)),
    ("b", _repeated("b", _add_bandwidth)),
    ("t", _parse_timing),
    ("z", _skipped("z")),
    ("k", _skipped("k")),
    ("a", _repeated("a", _add_attribute)),
    ("r", _skip_repeats),
    ("z", _skipped("z")),
    ("m", _parse_medias),
)

MEDIA_FIELDS: Tuple[Tuple[str, Handler], ...] = (
    ("i", _optional("i", _set_media_info)),
    ("c", _optional("c", _set_media_connection)),
    ("b", _repeated("b", _add_media_bandwidth)),
    ("k", _skipped("k")),
    ("a", _repeated("a", _add_media_attribute)),
)


# ============================================================================
# Entry point
# ============================================================================


def parse(source: Source, config: Optional[ParserConfig] = None) -> File:
    """
    Parse an SDP description.

    Args:
        source: SDP text as str or bytes, or a readable text/binary stream
        config: Parser configuration (encoding, line length limit)

    Returns:
        The parsed File

    Raises:
        SDPSyntaxError: the description is structurally invalid
        SDPInvalidError: a field carries a value SDP does not allow

        The partially parsed File is attached to the exception as
        `document`; it is for diagnostics only and must not be used
        as a valid description.

    Example:
        >>> sdp = parse("v=0\\r\\no=- 1 1 IN IP4 127.0.0.1\\r\\ns=test\\r\\n")
        >>> sdp.session.name
        'test'
    """
    cursor = LineCursor(source, config)
    document = File()
    try:
        _run(SESSION_FIELDS, document, cursor)
        if not cursor.at_end():
            raise SDPSyntaxError(
                f"unexpected line {cursor.peek()!r}",
                line_number=cursor.line_number + 1,
            )
    except SDPError as exc:
        if exc.line_number is None:
            exc.line_number = cursor.line_number
        exc.document = document
        raise
    logger.debug(
        "parsed SDP session %r: %d line(s), %d media",
        document.session.name,
        cursor.line_number,
        len(document.medias),
    )
    return document


__all__ = ["parse", "SESSION_FIELDS", "MEDIA_FIELDS"]
