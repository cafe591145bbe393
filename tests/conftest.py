"""Fixtures and more."""

import pytest

from proxyconf import ProxyConfiguration
from proxyconf.configuration import AUTO_CONFIG, AUTO_DETECT, USE_PROXY

SETTINGS = {
    "auto_detect": AUTO_DETECT,
    "auto_configuration": AUTO_CONFIG,
    "use_proxy": USE_PROXY,
}


@pytest.fixture
def proxy_configuration():
    """Fresh configuration with the default bytes."""
    return ProxyConfiguration()


@pytest.fixture(params=sorted(SETTINGS))
def setting_name(request):
    """Name of every flag setting."""
    return request.param


@pytest.fixture
def setting_mask(setting_name):
    """Mask of the parametrized flag setting."""
    return SETTINGS[setting_name]


@pytest.fixture
def other_setting_names(setting_name):
    """Names of the settings other than the parametrized one."""
    return [name for name in SETTINGS if name != setting_name]
