"""SDP media description model (m= block)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ._fields import Attribute, AttributeMixin, Bandwidth, ConnInfo


@dataclass
class MediaInfo(AttributeMixin):
    """
    Media description: the m= line and the lines scoped to it.

    Example:
        m=video 49170/2 RTP/AVP 31
        -> MediaInfo("video", 49170, count=2, proto="RTP/AVP", formats=["31"])
    """

    media: str
    port: int
    proto: str
    count: int = 0
    formats: List[str] = field(default_factory=list)

    info: str = ""
    connection: ConnInfo = field(default_factory=ConnInfo)
    bandwidth: List[Bandwidth] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)

    def port_range(self) -> List[int]:
        """Ports used by this media: `count` contiguous ports from `port`."""
        if self.count == 0:
            return [self.port]
        return [self.port + i for i in range(self.count)]


__all__ = ["MediaInfo"]
