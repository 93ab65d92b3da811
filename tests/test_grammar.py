"""Tests for sdpx._grammar."""

from datetime import datetime, timezone

import pytest

from sdpx import (
    SDPInvalidError,
    SDPSyntaxError,
    datetime_to_ntp,
    ntp_to_datetime,
    parse_attribute,
    parse_bandwidth,
    parse_connection,
    parse_interval,
    parse_media_line,
    parse_source_filter,
)
from sdpx._grammar import parse_int, parse_origin, valid_addr_type


class TestParseInt:
    def test_signed(self) -> None:
        assert parse_int("-12", "n") == -12
        assert parse_int("+12", "n") == 12

    def test_unsigned_rejects_sign(self) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_int("-1", "n", signed=False)

    @pytest.mark.parametrize("text", ["", " 1", "1_000", "1.5", "0x10"])
    def test_rejects_lenient_forms(self, text: str) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_int(text, "n")

    def test_range(self) -> None:
        assert parse_int("65535", "port", bits=16, signed=False) == 65535
        with pytest.raises(SDPSyntaxError, match="out of range"):
            parse_int("65536", "port", bits=16, signed=False)


class TestConnection:
    def test_ttl_is_stripped(self) -> None:
        conn = parse_connection("IN IP4 224.2.1.1/127".split(" "))
        assert conn.net_type == "IN"
        assert conn.addr_type == "IP4"
        assert conn.addr == "224.2.1.1"
        assert conn.ttl == 127
        assert conn.count == 0

    def test_ttl_and_count(self) -> None:
        conn = parse_connection(["IN", "IP4", "224.2.1.1/127/3"])
        assert conn.addr == "224.2.1.1"
        assert conn.ttl == 127
        assert conn.count == 3

    def test_plain_address(self) -> None:
        conn = parse_connection(["IN", "IP6", "ff15::101"])
        assert conn.addr == "ff15::101"
        assert conn.ttl == 0

    def test_wrong_token_count(self) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_connection(["IN", "IP4"])

    def test_unknown_net_type(self) -> None:
        with pytest.raises(SDPInvalidError):
            parse_connection(["ATM", "IP4", "1.2.3.4"])

    @pytest.mark.parametrize("addr_type", ["IP5", "*"])
    def test_unknown_addr_type(self, addr_type: str) -> None:
        with pytest.raises(SDPInvalidError):
            parse_connection(["IN", addr_type, "1.2.3.4"])

    @pytest.mark.parametrize("addr", ["1.2.3.4/x", "1.2.3.4/-1", "1.2.3.4/1/2/3", "/127"])
    def test_malformed_suffix(self, addr: str) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_connection(["IN", "IP4", addr])

    def test_star_only_allowed_on_request(self) -> None:
        valid_addr_type("*", allow_star=True)
        with pytest.raises(SDPInvalidError):
            valid_addr_type("*")


class TestOrigin:
    def test_dash_user(self) -> None:
        session = parse_origin("- 1 2 IN IP4 127.0.0.1")
        assert session.user == ""
        assert session.id == 1
        assert session.version == 2
        assert session.origin.addr == "127.0.0.1"

    def test_named_user(self) -> None:
        session = parse_origin("jdoe 2890844526 2890842807 IN IP4 10.47.16.5")
        assert session.user == "jdoe"
        assert session.id == 2890844526

    def test_too_few_tokens(self) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_origin("- 1 1 IN IP4")

    def test_non_numeric_id(self) -> None:
        with pytest.raises(SDPSyntaxError, match="session id"):
            parse_origin("- abc 1 IN IP4 127.0.0.1")


class TestBandwidth:
    def test_valid(self) -> None:
        bw = parse_bandwidth("AS:64")
        assert bw.type == "AS"
        assert bw.value == 64

    @pytest.mark.parametrize("value", ["AS:", ":64", "AS", "AS:x", "AS:9223372036854775808"])
    def test_syntax_errors(self, value: str) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_bandwidth(value)

    def test_negative(self) -> None:
        with pytest.raises(SDPInvalidError):
            parse_bandwidth("AS:-1")


class TestAttribute:
    def test_property_attribute(self) -> None:
        attr = parse_attribute("sendrecv")
        assert attr.name == "sendrecv"
        assert attr.value == ""

    def test_value_attribute(self) -> None:
        attr = parse_attribute("rtpmap:0 PCMU/8000")
        assert attr.name == "rtpmap"
        assert attr.value == "0 PCMU/8000"

    def test_splits_on_first_colon(self) -> None:
        attr = parse_attribute("fingerprint:sha-1 4A:AD:B9")
        assert attr.name == "fingerprint"
        assert attr.value == "sha-1 4A:AD:B9"


class TestTiming:
    def test_permanent(self) -> None:
        interval = parse_interval("0 0")
        assert interval.is_unbound()
        assert interval.is_permanent()

    def test_unbound_start(self) -> None:
        interval = parse_interval("3034423619 0")
        assert interval.starts is not None
        assert interval.starts.timestamp() == 825434819
        assert interval.starts.tzinfo == timezone.utc
        assert interval.is_unbound()
        assert not interval.is_permanent()

    def test_bounded(self) -> None:
        interval = parse_interval("2873397496 2873404696")
        assert not interval.is_unbound()
        assert (interval.ends - interval.starts).total_seconds() == 7200

    @pytest.mark.parametrize("value", ["0", "0 0 0", "x 0", "-1 0", "0  0"])
    def test_syntax_errors(self, value: str) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_interval(value)

    def test_ntp_conversion(self) -> None:
        moment = datetime(1996, 2, 27, 15, 26, 59, tzinfo=timezone.utc)
        assert ntp_to_datetime(3034423619) == moment
        assert datetime_to_ntp(moment) == 3034423619
        assert ntp_to_datetime(0) is None
        assert datetime_to_ntp(None) == 0

    def test_naive_datetime_is_utc(self) -> None:
        assert datetime_to_ntp(datetime(1996, 2, 27, 15, 26, 59)) == 3034423619


class TestMediaLine:
    def test_single_port(self) -> None:
        media = parse_media_line("audio 49170 RTP/AVP 0")
        assert media.media == "audio"
        assert media.port == 49170
        assert media.count == 0
        assert media.proto == "RTP/AVP"
        assert media.formats == ["0"]

    def test_port_count(self) -> None:
        media = parse_media_line("video 5004/2 RTP/AVP 31 32")
        assert media.port == 5004
        assert media.count == 2
        assert media.formats == ["31", "32"]

    def test_open_category(self) -> None:
        assert parse_media_line("image 54111 udptl t38").media == "image"

    @pytest.mark.parametrize(
        "value",
        ["audio 49170 RTP/AVP", "audio 70000 RTP/AVP 0", "audio x/2 RTP/AVP 0", "audio 1/ RTP/AVP 0"],
    )
    def test_syntax_errors(self, value: str) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_media_line(value)


class TestSourceFilter:
    def test_include(self) -> None:
        info = parse_source_filter("incl IN IP4 232.3.4.5 192.0.2.10")
        assert info.include
        assert info.mode == "incl"
        assert info.net_type == "IN"
        assert info.addr_type == "IP4"
        assert info.addr == "232.3.4.5"
        assert info.sources == ["192.0.2.10"]

    def test_exclude_any_address_type(self) -> None:
        info = parse_source_filter("excl IN * 232.3.4.5 192.0.2.10 192.0.2.11")
        assert not info.include
        assert info.addr_type == "*"
        assert info.sources == ["192.0.2.10", "192.0.2.11"]

    @pytest.mark.parametrize("value", ["incl", "", "incl IN IP4 232.3.4.5"])
    def test_syntax_errors(self, value: str) -> None:
        with pytest.raises(SDPSyntaxError):
            parse_source_filter(value)

    @pytest.mark.parametrize(
        "value",
        ["both IN IP4 232.3.4.5 192.0.2.10", "incl ATM IP4 a b", "incl IN IP5 a b"],
    )
    def test_invalid_tokens(self, value: str) -> None:
        with pytest.raises(SDPInvalidError):
            parse_source_filter(value)
