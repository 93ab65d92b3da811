"""
SDP field value models.

Value types shared by the session and media scopes: connection data,
bandwidth, attributes, timing windows and the RFC 4570 source filter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .._types import AttributeMissingError
from .._utils import MODE_INCL, SOURCE_FILTER


@dataclass
class ConnInfo:
    """
    Connection data (c= line, and the address part of the o= line).

    Example:
        c=IN IP4 224.2.1.1/127/3
        -> ConnInfo("IN", "IP4", "224.2.1.1", ttl=127, count=3)
    """

    net_type: str = ""
    addr_type: str = ""
    addr: str = ""
    ttl: int = 0
    count: int = 0  # number of addresses, RFC 4566 "/<number>" after the TTL

    def is_zero(self) -> bool:
        """True when no connection data is set."""
        return not (self.net_type or self.addr_type or self.addr)


@dataclass
class Bandwidth:
    """Bandwidth (b= line): `<type>:<value>`."""

    type: str
    value: int


@dataclass
class Attribute:
    """Attribute (a= line): `<name>[:<value>]`."""

    name: str
    value: str = ""


@dataclass
class Interval:
    """
    Timing window (t= line).

    None on either side stands for the NTP value 0: an unbounded end,
    or a permanent session when both sides are None.
    """

    starts: Optional[datetime] = None
    ends: Optional[datetime] = None

    def is_unbound(self) -> bool:
        return self.ends is None

    def is_permanent(self) -> bool:
        return self.starts is None and self.ends is None


@dataclass
class SourceInfo:
    """Source filter (RFC 4570) carried by an `a=source-filter` attribute."""

    mode: str
    net_type: str
    addr_type: str
    addr: str
    sources: List[str] = field(default_factory=list)

    @property
    def include(self) -> bool:
        """True for an inclusive (`incl`) filter."""
        return self.mode == MODE_INCL


class AttributeMixin:
    """Attribute lookups for containers holding an `attributes` list."""

    attributes: List[Attribute]

    def find_attribute(self, name: str) -> Optional[Attribute]:
        """Return the first attribute called `name`, if any."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def get_attributes(self, name: str) -> List[Attribute]:
        """Return every attribute called `name`, in order."""
        return [attr for attr in self.attributes if attr.name == name]

    def source_filter(self) -> SourceInfo:
        """
        Parse the `source-filter` attribute of this scope.

        Raises:
            AttributeMissingError: no source-filter attribute is set
            SDPSyntaxError, SDPInvalidError: the attribute value is malformed
        """
        from .._grammar import parse_source_filter

        attr = self.find_attribute(SOURCE_FILTER)
        if attr is None:
            raise AttributeMissingError(f"{SOURCE_FILTER} not set")
        return parse_source_filter(attr.value)


__all__ = [
    "ConnInfo",
    "Bandwidth",
    "Attribute",
    "Interval",
    "SourceInfo",
    "AttributeMixin",
]
