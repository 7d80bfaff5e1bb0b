#
# Copyright 2017 Sangoma Technologies Inc.
#
from .errors import (
    MacAddressError, InvalidFormat, InvalidLength, InvalidMac, InvalidNotation
)
from .utils import Notation
from .address import MacAddress, BROADCAST, parse

__all__ = [
    'MacAddress', 'BROADCAST', 'parse', 'Notation', 'MacAddressError',
    'InvalidFormat', 'InvalidLength', 'InvalidMac', 'InvalidNotation',
]
