"""Utils."""

import logging

from onecache import CacheDecorator

from proxyconf.exceptions import MalformedInputError, ProxyEncodingError
from proxyconf.types import ByteInputType

#: Codec mapping every character code 0..255 to exactly one byte
SINGLE_BYTE_CODEC = "latin-1"


@CacheDecorator()
def get_debug_logger():
    """Get debug logger."""
    logger = logging.getLogger("proxyconf")
    # logger.setLevel(logging.DEBUG)
    logger.addHandler(logging.StreamHandler())
    return logger


def as_bytes(data: ByteInputType) -> bytes:
    """
    Copy a byte input into an immutable ``bytes`` object.

    Accepts ``bytes``, ``bytearray``, ``memoryview`` or any iterable of
    integers, so callers may hand over plain lists of byte values.

    Args:
        data: byte values, each in range 0..255

    Returns:
        A new ``bytes`` instance

    Raises:
        MalformedInputError: If a value is not an integer in range 0..255

    Examples:
        >>> as_bytes([0x61, 0x3a, 0x62])
        b'a:b'
        >>> as_bytes(bytearray(b"xy"))
        b'xy'
    """
    try:
        return bytes(data)
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"invalid byte values: {exc}") from exc


def encode_single_byte(text: str) -> bytes:
    """
    Encode text with one byte per character.

    Args:
        text: text whose character codes are all <= 255

    Returns:
        The character codes as bytes

    Raises:
        ProxyEncodingError: If a character code exceeds 255

    Examples:
        >>> encode_single_byte("proxy")
        b'proxy'
    """
    try:
        return text.encode(SINGLE_BYTE_CODEC)
    except UnicodeEncodeError as exc:
        bad = text[exc.start]
        raise ProxyEncodingError(
            f"character {bad!r} (code {ord(bad)}) at position {exc.start} "
            "does not fit in a single byte"
        ) from exc


def decode_single_byte(data: bytes) -> str:
    """Decode bytes with one character per byte."""
    return data.decode(SINGLE_BYTE_CODEC)
