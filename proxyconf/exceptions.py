# General
class ProxyConfError(Exception):
    pass


# parsing
class MalformedInputError(ProxyConfError, ValueError):
    pass


# encoding
class ProxyEncodingError(ProxyConfError, ValueError):
    pass


# Settings
class SettingNotImplementedError(ProxyConfError, NotImplementedError):
    pass
