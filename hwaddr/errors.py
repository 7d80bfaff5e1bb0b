#
# Copyright 2017 Sangoma Technologies Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.


class MacAddressError(ValueError):
    """Failed to build a MAC address.

    The offending input is kept in ``address``.
    """
    template = "address: `{}` is not a MAC address"

    def __init__(self, address, template=None):
        self.address = address
        template = template or self.template
        super(MacAddressError, self).__init__(template.format(address))


class InvalidFormat(MacAddressError):
    """Input is not 12 hex digits in a recognized notation."""


class InvalidLength(InvalidFormat):
    template = "address: `{}` is not 12 characters long"


class InvalidMac(InvalidFormat):
    "Input contains something other than hex digits and separators"


class InvalidNotation(InvalidFormat):
    template = "address: `{}` does not use a recognized separator layout"
