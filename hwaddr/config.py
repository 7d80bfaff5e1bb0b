#
# Copyright 2017 Sangoma Technologies Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""
Config file management
"""
import os
import copy
import logging
import yaml


FILENAME = 'hwaddr.yaml'
LEVELS = ('critical', 'error', 'warning', 'info', 'debug')
DEFAULTS = {
    'log': {
        'level': 'warning',
    },
}

logger = logging.getLogger(__name__)
_settings = None


class ConfigError(Exception):
    "The settings file could not be understood"


def find_config(start=None, filename=FILENAME):
    """Return the path of the first ``filename`` found by starting in
    ``start`` (default: the PWD) and taking successive upward steps in
    the file system, or ``None``.
    """
    path = os.path.abspath(start or os.getcwd())
    while True:
        configfile = os.path.join(path, filename)
        if os.path.isfile(configfile):
            return configfile
        parent = os.path.dirname(path)
        if parent == path:
            return None
        path = parent


def load_yaml_config(path=None):
    """Load data from the file hwaddr.yaml.

    If no ``path`` is given the file is searched for with ``find_config``.
    Returns an empty dict when there is no such file.
    """
    configfile = path or find_config()
    if not configfile:
        return {}

    logger.debug("Loading settings from {}".format(configfile))
    with open(configfile) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("{} does not contain a mapping".format(configfile))
    return data


def merge(defaults, overrides):
    result = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = value
    return result


def validate(settings):
    for section in DEFAULTS:
        if not isinstance(settings[section], dict):
            raise ConfigError("{} must be a mapping".format(section))

    level = str(settings['log']['level']).lower()
    if level not in LEVELS:
        raise ConfigError("log.level must be one of {}, not {!r}".format(
            ', '.join(LEVELS), settings['log']['level']))
    settings['log']['level'] = level
    return settings


def get_settings():
    """Return the process wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = validate(merge(DEFAULTS, load_yaml_config()))
    return _settings


def reset_settings(data=None):
    """Drop cached settings. With ``data`` install those (merged over the
    defaults) instead of reading the settings file again.
    """
    global _settings
    _settings = None if data is None else validate(merge(DEFAULTS, data))
    return _settings
