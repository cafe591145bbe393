"""Proxy endpoint and its text and byte forms."""

from dataclasses import dataclass

from proxyconf.exceptions import MalformedInputError
from proxyconf.types import ByteInputType
from proxyconf.utils import (
    as_bytes,
    decode_single_byte,
    encode_single_byte,
    get_debug_logger,
)

#: Delimiter between host and port, ``:``
DELIMITER = 0x3A
_TEXT_DELIMITER = chr(DELIMITER)

dlogger = get_debug_logger()


@dataclass(frozen=True)
class Proxy:
    """Proxy class.

    Host and port are kept exactly as given, the port is not parsed into a
    number so every form round trips without loss.

    Args:
        * host (str): proxy server host
        * port (str): proxy server port, empty when not known

    Example:

        >>> proxy = Proxy.parse_string("proxy.example.com:8080")
        >>> proxy.host, proxy.port
        ('proxy.example.com', '8080')
        >>> proxy.to_bytes()
        b'proxy.example.com:8080'
    """

    host: str
    port: str = ""

    @classmethod
    def parse_string(cls, proxy: str) -> "Proxy":
        """Generate a proxy from a ``host:port`` string.

        Only the first ``:`` splits, a missing ``:`` leaves the port empty.
        Whitespace is kept.
        """
        parts = proxy.split(_TEXT_DELIMITER, 1)
        if len(parts) < 2:
            return cls(parts[0])
        return cls(parts[0], parts[1])

    @classmethod
    def parse_bytes(cls, data: ByteInputType) -> "Proxy":
        """Generate a proxy from its byte form.

        Every byte before the first ``0x3a`` is the host, every byte after it
        is the port. Each byte is one character.

        Raises:
            MalformedInputError: If no ``0x3a`` byte is present or a value is
                out of the byte range
        """
        raw = as_bytes(data)
        index = raw.find(DELIMITER)
        if index < 0:
            dlogger.debug("no delimiter in %d proxy bytes", len(raw))
            raise MalformedInputError(
                "missing ':' (0x3a) delimiter in proxy bytes"
            )
        return cls(
            decode_single_byte(raw[:index]),
            decode_single_byte(raw[index + 1:]),
        )

    def to_bytes(self) -> bytes:
        """Generate the byte form: host, ``0x3a``, port.

        Raises:
            ProxyEncodingError: If a character code exceeds 255
        """
        return (
            encode_single_byte(self.host)
            + bytes((DELIMITER,))
            + encode_single_byte(self.port)
        )

    def to_string(self) -> str:
        """Generate the ``host:port`` text form."""
        return f"{self.host}{_TEXT_DELIMITER}{self.port}"

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_string()


def parse_string(proxy: str) -> Proxy:
    """Shortcut for :meth:`Proxy.parse_string`."""
    return Proxy.parse_string(proxy)


def parse_bytes(data: ByteInputType) -> Proxy:
    """Shortcut for :meth:`Proxy.parse_bytes`."""
    return Proxy.parse_bytes(data)


def to_bytes(proxy: Proxy) -> bytes:
    """Shortcut for :meth:`Proxy.to_bytes`."""
    return proxy.to_bytes()
