#
# Copyright 2017 Sangoma Technologies Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""
pytest plugin wiring up ``hwaddr.log`` for a test session.

Not registered automatically; enable it with
``pytest_plugins = ['hwaddr.plugin']`` or ``-p hwaddr.plugin``.
"""
import logging
import pytest
from .config import LEVELS
from .log import configure_logging


def pytest_addoption(parser):
    group = parser.getgroup('logging')
    group.addoption('--loglevel', action='store', default=None,
                    choices=list(LEVELS),
                    help="root log level for the session; defaults to the "
                         "log.level setting in hwaddr.yaml")


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    configure_logging(config.getoption('--loglevel'))


@pytest.fixture
def log(request):
    'return a logging.logger instance for this test'
    return logging.getLogger('hwaddr').getChild(
        request.node.name.partition('[')[0])
