"""Utilities and constants for SDP (RFC 4566)."""

import logging
from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console()

# Configure logging with RichHandler
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
)

# Get logger for the package
logger = logging.getLogger("sdpx")

EOL = "\r\n"
VERSION = 0
CONTENT_TYPE = "application/sdp"

# Seconds between the NTP epoch (1900-01-01) and the Unix epoch (1970-01-01)
NTP_OFFSET = 2208988800

NET_TYPE_IN = "IN"
ADDR_TYPE_IP4 = "IP4"
ADDR_TYPE_IP6 = "IP6"
ADDR_TYPE_ANY = "*"

MODE_INCL = "incl"
MODE_EXCL = "excl"

# Media categories registered by RFC 4566 (not enforced, the set is open)
MEDIA_AUDIO = "audio"
MEDIA_VIDEO = "video"
MEDIA_TEXT = "text"
MEDIA_APPLICATION = "application"
MEDIA_MESSAGE = "message"

SOURCE_FILTER = "source-filter"

# Field tags (RFC 4566 Section 5)
TAGS = {
    "v": "version",
    "o": "origin",
    "s": "session name",
    "i": "information",
    "u": "uri",
    "e": "email",
    "p": "phone",
    "c": "connection",
    "b": "bandwidth",
    "t": "timing",
    "r": "repeat times",
    "z": "time zones",
    "k": "encryption key",
    "a": "attribute",
    "m": "media",
}
