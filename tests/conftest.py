import pytest
from hwaddr import config, parse


pytest_plugins = ['pytester', 'hwaddr.plugin']


@pytest.fixture(autouse=True)
def settings():
    """Start every test from the default settings and drop whatever the
    test installed afterwards.
    """
    yield config.reset_settings({})
    config.reset_settings()


@pytest.fixture
def mac():
    return parse('00:11:22:aa:bb:cc')
