"""Test proxy endpoint forms."""

import logging

import pytest

from proxyconf import MalformedInputError, Proxy, ProxyEncodingError
from proxyconf.proxy import parse_bytes, parse_string, to_bytes


def test_parse_string():
    """Test host and port are split on the colon."""
    proxy = Proxy.parse_string("proxy.example.com:8080")
    assert proxy == Proxy("proxy.example.com", "8080")
    assert proxy.host == "proxy.example.com"
    assert proxy.port == "8080"


def test_parse_string_without_port():
    """Test a missing colon leaves the port empty."""
    assert Proxy.parse_string("proxy.example.com") == Proxy("proxy.example.com", "")


def test_parse_string_splits_once():
    """Test only the first colon splits."""
    assert Proxy.parse_string("a:b:c") == Proxy("a", "b:c")


def test_parse_string_keeps_whitespace():
    """Test whitespace is not trimmed."""
    assert Proxy.parse_string(" host : 80 ") == Proxy(" host ", " 80 ")


def test_parse_empty_string():
    assert Proxy.parse_string("") == Proxy("", "")


def test_to_bytes():
    """Test byte form is host, colon and port."""
    proxy = Proxy.parse_string("proxy.example.com:8080")
    expected = list(b"proxy.example.com") + [0x3A] + list(b"8080")
    assert list(proxy.to_bytes()) == expected
    assert bytes(proxy) == proxy.to_bytes()
    assert to_bytes(proxy) == proxy.to_bytes()


def test_to_bytes_latin1():
    """Test character codes up to 255 are one byte each."""
    assert Proxy("h\xe9", "\xff").to_bytes() == b"h\xe9:\xff"


def test_to_bytes_out_of_range():
    """Test characters above 255 can not be emitted."""
    with pytest.raises(ProxyEncodingError):
        Proxy("münchen中.de", "80").to_bytes()

    with pytest.raises(ValueError):
        Proxy("host", "Ā").to_bytes()


def test_parse_bytes():
    """Test parsing bytes, bytearray and lists of ints."""
    expected = Proxy("proxy.example.com", "8080")
    assert Proxy.parse_bytes(b"proxy.example.com:8080") == expected
    assert Proxy.parse_bytes(bytearray(b"proxy.example.com:8080")) == expected
    assert Proxy.parse_bytes(list(b"proxy.example.com:8080")) == expected
    assert parse_bytes(b"proxy.example.com:8080") == expected


def test_parse_bytes_delimiter_only():
    """Test lone delimiter gives empty host and port."""
    assert Proxy.parse_bytes([0x3A]) == Proxy("", "")


def test_parse_bytes_port_keeps_colons():
    """Test bytes after the first delimiter all belong to the port."""
    assert Proxy.parse_bytes(b"host:80:81") == Proxy("host", "80:81")


def test_parse_bytes_without_delimiter():
    """Test missing delimiter is reported instead of reading past the end."""
    with pytest.raises(MalformedInputError):
        Proxy.parse_bytes([0x61, 0x62, 0x63])

    with pytest.raises(MalformedInputError):
        Proxy.parse_bytes(b"")


def test_parse_bytes_without_delimiter_logged(caplog):
    """Test rejected input is logged for debugging."""
    caplog.set_level(logging.DEBUG, logger="proxyconf")
    with pytest.raises(MalformedInputError):
        Proxy.parse_bytes(b"abc")
    assert "no delimiter in 3 proxy bytes" in caplog.text


def test_parse_bytes_out_of_range():
    """Test values that are not bytes are rejected."""
    with pytest.raises(MalformedInputError):
        Proxy.parse_bytes([0x61, 0x3A, 0x100])

    with pytest.raises(MalformedInputError):
        Proxy.parse_bytes([0x61, -1])


def test_parse_bytes_does_not_modify_input():
    data = [0x61, 0x3A, 0x62]
    Proxy.parse_bytes(data)
    assert data == [0x61, 0x3A, 0x62]


@pytest.mark.parametrize(
    "host, port",
    [
        ("proxy.example.com", "8080"),
        ("127.0.0.1", "3128"),
        ("", ""),
        ("host", ""),
        ("", "80"),
        ("caf\xe9", "80:81"),
    ],
)
def test_bytes_round_trip(host, port):
    """Test parsing the byte form gives back the proxy."""
    proxy = Proxy(host, port)
    assert Proxy.parse_bytes(proxy.to_bytes()) == proxy


def test_to_string():
    """Test text form."""
    proxy = Proxy("proxy.example.com", "8080")
    assert proxy.to_string() == "proxy.example.com:8080"
    assert str(proxy) == "proxy.example.com:8080"
    assert parse_string(str(proxy)) == proxy


def test_proxy_is_immutable():
    proxy = Proxy("host", "80")
    with pytest.raises(AttributeError):
        proxy.host = "other"  # type: ignore[misc]
