"""sdpx - Session Description Protocol (RFC 4566) parser and serializer for Python."""

from __future__ import annotations

# Parser and serializer
from ._parser import parse
from ._writer import dump, serialize

# Line reader
from ._cursor import LineCursor

# Models
from ._models import (
    Attribute,
    Bandwidth,
    ConnInfo,
    File,
    Interval,
    MediaInfo,
    Session,
    SourceInfo,
)

# Field grammars
from ._grammar import (
    datetime_to_ntp,
    ntp_to_datetime,
    parse_attribute,
    parse_bandwidth,
    parse_connection,
    parse_interval,
    parse_media_line,
    parse_source_filter,
)

# Types
from ._types import (
    AttributeMissingError,
    ParserConfig,
    SDPError,
    SDPInvalidError,
    SDPSyntaxError,
)

# Utilities
from ._utils import (
    ADDR_TYPE_ANY,
    ADDR_TYPE_IP4,
    ADDR_TYPE_IP6,
    CONTENT_TYPE,
    EOL,
    MEDIA_APPLICATION,
    MEDIA_AUDIO,
    MEDIA_MESSAGE,
    MEDIA_TEXT,
    MEDIA_VIDEO,
    MODE_EXCL,
    MODE_INCL,
    NET_TYPE_IN,
    NTP_OFFSET,
    console,
    logger,
)

__version__ = "0.1.0"

__all__ = [
    # Parser / Serializer - Main API
    "parse",
    "serialize",
    "dump",
    "ParserConfig",
    # Line reader
    "LineCursor",
    # Models - Document
    "File",
    "Session",
    "MediaInfo",
    # Models - Field values
    "ConnInfo",
    "Bandwidth",
    "Attribute",
    "Interval",
    "SourceInfo",
    # Field grammars
    "parse_connection",
    "parse_bandwidth",
    "parse_attribute",
    "parse_interval",
    "parse_media_line",
    "parse_source_filter",
    "ntp_to_datetime",
    "datetime_to_ntp",
    # Exceptions
    "SDPError",
    "SDPSyntaxError",
    "SDPInvalidError",
    "AttributeMissingError",
    # Utilities - Console & Logging
    "console",
    "logger",
    # Constants
    "EOL",
    "CONTENT_TYPE",
    "NTP_OFFSET",
    "NET_TYPE_IN",
    "ADDR_TYPE_IP4",
    "ADDR_TYPE_IP6",
    "ADDR_TYPE_ANY",
    "MODE_INCL",
    "MODE_EXCL",
    "MEDIA_AUDIO",
    "MEDIA_VIDEO",
    "MEDIA_TEXT",
    "MEDIA_APPLICATION",
    "MEDIA_MESSAGE",
    # Metadata
    "__version__",
]
