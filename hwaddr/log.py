#
# Copyright 2017 Sangoma Technologies Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""
Logging setup for applications and test sessions that want it
"""
import sys
import logging
import logging.config
import colorlog
from .config import get_settings


DATEFMT = '%b %d %H:%M:%S'
FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(filename)s:"\
    "%(lineno)d : %(message)s"


def configure_logging(level=None, color=None):
    """Install the stream handler and formatters on the root logger.

    ``level`` defaults to the ``log.level`` setting and ``color`` to
    whether stdout is a tty.
    """
    level = level or get_settings()['log']['level']
    if color is None:
        color = sys.stdout.isatty()

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'handlers': {
            'stream': {
                'class': 'logging.StreamHandler',
                'formatter': 'colored' if color else 'default'
            },
        },
        'formatters': {
            'default': {
                'format': FORMAT,
                'datefmt': DATEFMT
            },
            'colored': {
                '()': colorlog.ColoredFormatter,
                'format': "%(log_color)s" + FORMAT,
                'datefmt': DATEFMT,
                'log_colors': {
                    'CRITICAL': 'bold_red',
                    'ERROR': 'red',
                    'WARNING': 'purple',
                    'INFO': 'green',
                    'DEBUG': 'yellow'
                }
            }
        },
        'loggers': {
            '': {
                'handlers': ['stream'],
                'level': getattr(logging, level.upper()),
                'propagate': True
            },
        }
    })
