"""Main module."""

from proxyconf.configuration import (
    AUTO_CONFIG,
    AUTO_DETECT,
    USE_PROXY,
    AutoConfigurationSetting,
    AutoDetectSetting,
    ProxyConfiguration,
    UseProxySetting,
)
from proxyconf.exceptions import (
    MalformedInputError,
    ProxyConfError,
    ProxyEncodingError,
    SettingNotImplementedError,
)
from proxyconf.proxy import Proxy
from proxyconf.version import VERSION

__all__ = [
    "AUTO_CONFIG",
    "AUTO_DETECT",
    "USE_PROXY",
    "AutoConfigurationSetting",
    "AutoDetectSetting",
    "MalformedInputError",
    "Proxy",
    "ProxyConfError",
    "ProxyConfiguration",
    "ProxyEncodingError",
    "SettingNotImplementedError",
    "UseProxySetting",
    "VERSION",
]
