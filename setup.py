#
# Copyright 2017 Sangoma Technologies Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#
import setuptools


install_requires=[
    'cached-property',
    'colorlog',
    'pyyaml',
]


setuptools.setup(
    name='hwaddr',
    version='0.1.0',
    description='Parse, format and classify EUI-48 MAC addresses',
    packages=setuptools.find_packages(exclude=('tests',)),
    python_requires='>=3.6',
    install_requires=install_requires,
    extras_require={'test': ['pytest']}
)
