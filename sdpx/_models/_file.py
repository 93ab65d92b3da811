"""
SDP session description models.

`File` is the root of a parsed description; it owns every nested list and
re-serializes itself to canonical text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, TextIO

from .._utils import CONTENT_TYPE, VERSION
from ._fields import Attribute, AttributeMixin, Bandwidth, ConnInfo, Interval
from ._media import MediaInfo


@dataclass
class Session:
    """
    Origin and naming of a session (o=, s=, i= and u= lines).

    An empty `user` is written as the "-" sentinel.
    """

    user: str = ""
    id: int = 0
    version: int = 0
    origin: ConnInfo = field(default_factory=ConnInfo)

    name: str = ""
    info: str = ""
    uri: str = ""


@dataclass
class File(AttributeMixin):
    """
    Session Description Protocol document (RFC 4566).

    Example:
        sdp = parse(raw)
        sdp.media_categories()  # ["audio", "video"]
        sdp.medias[0].port_range()  # [49170]
        text = sdp.serialize()
    """

    version: int = VERSION
    session: Session = field(default_factory=Session)

    email: List[str] = field(default_factory=list)
    phone: List[str] = field(default_factory=list)

    connection: ConnInfo = field(default_factory=ConnInfo)
    bandwidth: List[Bandwidth] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)

    intervals: List[Interval] = field(default_factory=list)

    medias: List[MediaInfo] = field(default_factory=list)

    def media_categories(self) -> List[str]:
        """Media category of each media block, in document order."""
        return [media.media for media in self.medias]

    def media_connection(self, media: MediaInfo) -> ConnInfo:
        """Connection data in effect for `media`: its own, else the session's."""
        if media.connection.is_zero():
            return self.connection
        return media.connection

    def serialize(self) -> str:
        """Serialize to canonical SDP text with CRLF line endings."""
        from .._writer import serialize

        return serialize(self)

    def dump_to(self, stream: TextIO) -> None:
        """Write the serialized document to a text stream."""
        from .._writer import dump

        dump(self, stream)

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        """Serialize to bytes."""
        return self.serialize().encode(encoding)

    def __str__(self) -> str:
        """Return string representation (serialized SDP)."""
        return self.serialize()

    @property
    def content_type(self) -> str:
        """Return Content-Type for SDP."""
        return CONTENT_TYPE


__all__ = ["Session", "File"]
