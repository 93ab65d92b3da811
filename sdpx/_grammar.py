"""
Micro-grammars for individual SDP field values.

Each parser takes the value of one line (the text after "<tag>=") and
returns the matching model, raising SDPSyntaxError for structural problems
and SDPInvalidError for well-formed values that SDP does not allow.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from ._models import Attribute, Bandwidth, ConnInfo, Interval, MediaInfo, Session, SourceInfo
from ._types import SDPInvalidError, SDPSyntaxError
from ._utils import (
    ADDR_TYPE_ANY,
    ADDR_TYPE_IP4,
    ADDR_TYPE_IP6,
    MODE_EXCL,
    MODE_INCL,
    NET_TYPE_IN,
    NTP_OFFSET,
)

_SIGNED = re.compile(r"^[+-]?[0-9]+$")
_UNSIGNED = re.compile(r"^[0-9]+$")

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ============================================================================
# Tokens and integers
# ============================================================================


def split(value: str) -> List[str]:
    """Split a field value on single spaces (SDP allows no other separator)."""
    return value.split(" ")


def parse_int(text: str, what: str, *, bits: int = 64, signed: bool = True) -> int:
    """
    Parse a decimal integer that must fit in `bits` bits.

    Raises:
        SDPSyntaxError: not a decimal integer, or out of range
    """
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.match(text):
        raise SDPSyntaxError(f"{what}: invalid integer {text!r}")
    value = int(text)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        raise SDPSyntaxError(f"{what}: {text} out of range")
    return value


# ============================================================================
# Validators
# ============================================================================


def valid_net_type(value: str) -> None:
    if value != NET_TYPE_IN:
        raise SDPInvalidError(f"unknown net type {value}")


def valid_addr_type(value: str, allow_star: bool = False) -> None:
    """
    Check an address type.

    "*" (any address family) is only meaningful in a source filter
    (RFC 4570), so it is rejected unless `allow_star` is set.
    """
    if value in (ADDR_TYPE_IP4, ADDR_TYPE_IP6):
        return
    if allow_star and value == ADDR_TYPE_ANY:
        return
    raise SDPInvalidError(f"unknown addr type {value}")


def valid_mode(value: str) -> None:
    if value not in (MODE_INCL, MODE_EXCL):
        raise SDPInvalidError(f"unknown mode type {value}")


# ============================================================================
# Connection data and origin
# ============================================================================


def parse_connection(tokens: Sequence[str]) -> ConnInfo:
    """
    Parse `<nettype> <addrtype> <address>[/<ttl>[/<count>]]`.

    Example:
        parse_connection(["IN", "IP4", "224.2.1.1/127"])
        -> ConnInfo("IN", "IP4", "224.2.1.1", ttl=127)
    """
    if len(tokens) != 3:
        raise SDPSyntaxError(f"connection: expected 3 elements, got {len(tokens)}")
    net_type, addr_type, addr = tokens
    valid_net_type(net_type)
    valid_addr_type(addr_type)

    conn = ConnInfo(net_type=net_type, addr_type=addr_type, addr=addr)
    if "/" in addr:
        addr, *suffix = addr.split("/")
        if not addr or len(suffix) > 2:
            raise SDPSyntaxError(f"connection: malformed address {tokens[2]!r}")
        conn.addr = addr
        conn.ttl = parse_int(suffix[0], "connection ttl", bits=16, signed=False)
        if len(suffix) == 2:
            conn.count = parse_int(suffix[1], "connection count", bits=16, signed=False)
    return conn


def parse_origin(value: str) -> Session:
    """
    Parse `<username> <sess-id> <sess-version> <nettype> <addrtype> <address>`.

    The "-" username stands for no user and maps to "".
    """
    parts = split(value)
    if len(parts) != 6:
        raise SDPSyntaxError(f"origin: expected 6 elements, got {len(parts)}")
    user, sess_id, sess_version = parts[:3]
    return Session(
        user="" if user == "-" else user,
        id=parse_int(sess_id, "session id", signed=False, bits=63),
        version=parse_int(sess_version, "session version", signed=False, bits=63),
        origin=parse_connection(parts[3:]),
    )


# ============================================================================
# Bandwidth and attributes
# ============================================================================


def parse_bandwidth(value: str) -> Bandwidth:
    """Parse `<bwtype>:<bandwidth>`."""
    name, sep, amount = value.partition(":")
    if not sep or not name or not amount:
        raise SDPSyntaxError(f"bandwidth: malformed value {value!r}")
    number = parse_int(amount, "bandwidth")
    if number < 0:
        raise SDPInvalidError(f"bandwidth: negative value {number}")
    return Bandwidth(type=name, value=number)


def parse_attribute(value: str) -> Attribute:
    """Parse `<name>[:<value>]`; a property attribute keeps an empty value."""
    name, _, attr_value = value.partition(":")
    return Attribute(name=name, value=attr_value)


# ============================================================================
# Timing
# ============================================================================


def ntp_to_datetime(seconds: int) -> Optional[datetime]:
    """Convert NTP seconds to a UTC datetime; 0 means unset and maps to None."""
    if seconds == 0:
        return None
    try:
        return UNIX_EPOCH + timedelta(seconds=seconds - NTP_OFFSET)
    except OverflowError as exc:
        raise SDPInvalidError(f"timing: {seconds} out of range") from exc


def datetime_to_ntp(moment: Optional[datetime]) -> int:
    """Convert a datetime to NTP seconds; None maps to 0. Naive values are UTC."""
    if moment is None:
        return 0
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - UNIX_EPOCH) // timedelta(seconds=1) + NTP_OFFSET


def parse_interval(value: str) -> Interval:
    """Parse `<start-time> <stop-time>` given in NTP seconds."""
    parts = split(value)
    if len(parts) != 2:
        raise SDPSyntaxError(f"timing: expected 2 elements, got {len(parts)}")
    starts, ends = (parse_int(part, "timing", signed=False) for part in parts)
    return Interval(starts=ntp_to_datetime(starts), ends=ntp_to_datetime(ends))


# ============================================================================
# Media and source filters
# ============================================================================


def parse_media_line(value: str) -> MediaInfo:
    """
    Parse `<media> <port>[/<count>] <proto> <fmt> ...`.

    Only the m= line itself is read; the lines scoped to the media block
    are filled in by the parser.
    """
    parts = split(value)
    if len(parts) < 4:
        raise SDPSyntaxError(f"media: expected at least 4 elements, got {len(parts)}")
    media, port_spec, proto = parts[:3]
    port_str, sep, count_str = port_spec.partition("/")
    port = parse_int(port_str, "media port", bits=16, signed=False)
    count = parse_int(count_str, "media port count", bits=16, signed=False) if sep else 0
    return MediaInfo(media=media, port=port, count=count, proto=proto, formats=parts[3:])


def parse_source_filter(value: str) -> SourceInfo:
    """
    Parse an RFC 4570 source filter:
    `<filter-mode> <nettype> <address-types> <dest-address> <src-list>`.
    """
    parts = split(value)
    if len(value) < 5 or len(parts) < 5:
        raise SDPSyntaxError(f"source-filter: malformed value {value!r}")
    mode, net_type, addr_type, addr = parts[:4]
    valid_mode(mode)
    valid_net_type(net_type)
    valid_addr_type(addr_type, allow_star=True)
    return SourceInfo(
        mode=mode,
        net_type=net_type,
        addr_type=addr_type,
        addr=addr,
        sources=parts[4:],
    )


__all__ = [
    "split",
    "parse_int",
    "valid_net_type",
    "valid_addr_type",
    "valid_mode",
    "parse_connection",
    "parse_origin",
    "parse_bandwidth",
    "parse_attribute",
    "ntp_to_datetime",
    "datetime_to_ntp",
    "parse_interval",
    "parse_media_line",
    "parse_source_filter",
]
