"""
SDP serializer.

Walks a File and emits its lines in the RFC 4566 order, whatever order
the caller filled the model in. Empty optional fields produce no line.
"""

from __future__ import annotations

from typing import List, TextIO

from ._grammar import datetime_to_ntp
from ._models import Attribute, Bandwidth, ConnInfo, File, Interval, MediaInfo, Session
from ._utils import EOL


def format_connection(conn: ConnInfo) -> str:
    """Format `<nettype> <addrtype> <address>[/<ttl>[/<count>]]`."""
    addr = conn.addr
    if conn.ttl > 0 or conn.count > 0:
        addr += f"/{conn.ttl}"
    if conn.count > 0:
        addr += f"/{conn.count}"
    return f"{conn.net_type} {conn.addr_type} {addr}"


def format_origin(session: Session) -> str:
    user = session.user or "-"
    return f"{user} {session.id} {session.version} {format_connection(session.origin)}"


def format_bandwidth(bandwidth: Bandwidth) -> str:
    return f"{bandwidth.type}:{bandwidth.value}"


def format_attribute(attr: Attribute) -> str:
    if not attr.value:
        return attr.name
    return f"{attr.name}:{attr.value}"


def format_interval(interval: Interval) -> str:
    return f"{datetime_to_ntp(interval.starts)} {datetime_to_ntp(interval.ends)}"


def format_media_line(media: MediaInfo) -> str:
    port = str(media.port)
    if media.count > 0:
        port += f"/{media.count}"
    return " ".join([media.media, port, media.proto, *media.formats])


def _write_network(
    lines: List[str], connection: ConnInfo, bandwidth: List[Bandwidth]
) -> None:
    # c= is only written when set
    if not connection.is_zero():
        lines.append(f"c={format_connection(connection)}")
    for bw in bandwidth:
        lines.append(f"b={format_bandwidth(bw)}")


def write_media(media: MediaInfo) -> List[str]:
    """Convert a media block to lines."""
    lines = [f"m={format_media_line(media)}"]
    if media.info:
        lines.append(f"i={media.info}")
    _write_network(lines, media.connection, media.bandwidth)
    for attr in media.attributes:
        lines.append(f"a={format_attribute(attr)}")
    return lines


def write_file(file: File) -> List[str]:
    """Convert a File to lines, without terminators."""
    lines = []

    # Version, origin and session name (required)
    lines.append(f"v={file.version}")
    lines.append(f"o={format_origin(file.session)}")
    lines.append(f"s={file.session.name}")

    # Session information and URI (optional)
    if file.session.info:
        lines.append(f"i={file.session.info}")
    if file.session.uri:
        lines.append(f"u={file.session.uri}")

    # Email and phone (repeated)
    for email in file.email:
        lines.append(f"e={email}")
    for phone in file.phone:
        lines.append(f"p={phone}")

    # Connection and bandwidth
    _write_network(lines, file.connection, file.bandwidth)

    # Timing
    for interval in file.intervals:
        lines.append(f"t={format_interval(interval)}")

    # Session-level attributes
    for attr in file.attributes:
        lines.append(f"a={format_attribute(attr)}")

    # Media descriptions
    for media in file.medias:
        lines.extend(write_media(media))

    return lines


def serialize(file: File) -> str:
    """Serialize a File to SDP text with CRLF line endings."""
    return EOL.join(write_file(file)) + EOL


def dump(file: File, stream: TextIO) -> None:
    """Write a serialized File to a text stream."""
    stream.write(serialize(file))


__all__ = [
    "format_connection",
    "format_origin",
    "format_bandwidth",
    "format_attribute",
    "format_interval",
    "format_media_line",
    "write_media",
    "write_file",
    "serialize",
    "dump",
]
