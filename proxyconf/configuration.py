"""Proxy configuration blob with its bit packed settings."""

from typing import Optional

from proxyconf.exceptions import MalformedInputError, SettingNotImplementedError
from proxyconf.proxy import Proxy
from proxyconf.types import ByteInputType
from proxyconf.utils import as_bytes, get_debug_logger

#: Automatically detect settings bit mask
AUTO_DETECT = 0x08
#: Use automatic configuration script bit mask
AUTO_CONFIG = 0x04
#: Use a proxy server for your LAN bit mask
USE_PROXY = 0x02

#: Offset of the flags byte
FLAGS_OFFSET = 8
BUFFER_SIZE = 12
DEFAULT_BYTES = bytes(
    (
        0x46, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,
        0x01, 0x00, 0x00, 0x00,
    )
)

dlogger = get_debug_logger()


class ProxyConfiguration:
    """Proxy configuration as stored by the connection settings store.

    Holds a fixed 12 byte buffer. Byte 8 carries the flags, each one
    exposed through a setting view sharing this buffer.

    Properties:
      * **auto_detect** (:class:`AutoDetectSetting`)
      * **auto_configuration** (:class:`AutoConfigurationSetting`)
      * **use_proxy** (:class:`UseProxySetting`)

    Example:

        >>> config = ProxyConfiguration()
        >>> config.auto_detect.enable().flags
        9
        >>> config.auto_detect.disable().flags
        1
    """

    def __init__(self):
        self._bytes = bytearray(DEFAULT_BYTES)
        self.auto_detect = AutoDetectSetting(self)
        self.auto_configuration = AutoConfigurationSetting(self)
        self.use_proxy = UseProxySetting(self)

    @classmethod
    def from_bytes(cls, data: ByteInputType) -> "ProxyConfiguration":
        """Load a configuration from an existing blob.

        Raises:
            MalformedInputError: If the blob is not exactly 12 bytes
        """
        raw = as_bytes(data)
        if len(raw) != BUFFER_SIZE:
            raise MalformedInputError(
                f"proxy configuration must be {BUFFER_SIZE} bytes, "
                f"got {len(raw)}"
            )
        config = cls()
        config._bytes[:] = raw
        dlogger.debug("loaded proxy configuration, flags 0x%02x", config.flags)
        return config

    @property
    def flags(self) -> int:
        """Get the flags byte."""
        return self._bytes[FLAGS_OFFSET]

    def _set_bits(self, mask: int):
        self._bytes[FLAGS_OFFSET] |= mask

    def _clear_bits(self, mask: int):
        self._bytes[FLAGS_OFFSET] &= ~mask & 0xFF

    def get_bytes(self) -> bytearray:
        """Get a copy of the bytes."""
        return bytearray(self._bytes)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def __len__(self) -> int:
        return BUFFER_SIZE

    def __eq__(self, other) -> bool:
        if not isinstance(other, ProxyConfiguration):
            return NotImplemented
        return self._bytes == other._bytes

    def __repr__(self) -> str:
        return f"ProxyConfiguration({bytes(self._bytes).hex()})"


class _FlagSetting:
    """Setting backed by one mask of the flags byte."""

    mask = 0

    def __init__(self, proxy_configuration: ProxyConfiguration):
        self._proxy_configuration = proxy_configuration

    @property
    def proxy_configuration(self) -> ProxyConfiguration:
        """Get the owning proxy configuration."""
        return self._proxy_configuration

    def enable(self, enable: bool = True) -> ProxyConfiguration:
        """Enable the setting, or disable it when ``enable`` is false."""
        if not enable:
            return self.disable()
        self._proxy_configuration._set_bits(self.mask)
        dlogger.debug("%s enabled", type(self).__name__)
        return self._proxy_configuration

    def disable(self) -> ProxyConfiguration:
        """Disable the setting."""
        self._proxy_configuration._clear_bits(self.mask)
        dlogger.debug("%s disabled", type(self).__name__)
        return self._proxy_configuration

    def is_enabled(self) -> bool:
        """Determine if this setting is enabled."""
        return self._proxy_configuration.flags & self.mask == self.mask

    def __repr__(self) -> str:
        return f"{type(self).__name__}(enabled={self.is_enabled()})"


class AutoDetectSetting(_FlagSetting):
    """Automatically detect settings."""

    mask = AUTO_DETECT


class AutoConfigurationSetting(_FlagSetting):
    """Use automatic configuration script."""

    mask = AUTO_CONFIG

    def set_address(self, address: str) -> ProxyConfiguration:
        """Set the address of the configuration script."""
        # TODO: locate the script address field in the stored blob
        raise SettingNotImplementedError(
            "configuration script address is not implemented"
        )

    def get_address(self) -> Optional[str]:
        """Get the address of the configuration script."""
        raise SettingNotImplementedError(
            "configuration script address is not implemented"
        )


class UseProxySetting(_FlagSetting):
    """Use a proxy server for your LAN."""

    mask = USE_PROXY

    def set_proxy(self, proxy: Proxy) -> ProxyConfiguration:
        """Set the proxy server to use."""
        raise SettingNotImplementedError("proxy server is not implemented")

    def get_proxy(self) -> Optional[Proxy]:
        """Get the proxy server."""
        raise SettingNotImplementedError("proxy server is not implemented")
