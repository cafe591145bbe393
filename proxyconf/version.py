from importlib.metadata import PackageNotFoundError, version

__version__ = "0.1.0"

try:
    VERSION = version("proxyconf")
except PackageNotFoundError:
    # Package is not installed
    VERSION = __version__
