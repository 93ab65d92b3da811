"""
SDP Models Package.

This package contains the document tree produced by the parser and
consumed by the serializer.
"""

from ._fields import (
    Attribute,
    AttributeMixin,
    Bandwidth,
    ConnInfo,
    Interval,
    SourceInfo,
)
from ._file import File, Session
from ._media import MediaInfo

__all__ = [
    # Document root
    "File",
    "Session",
    # Media
    "MediaInfo",
    # Field values
    "ConnInfo",
    "Bandwidth",
    "Attribute",
    "Interval",
    "SourceInfo",
    # Helpers
    "AttributeMixin",
]
