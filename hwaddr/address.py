#
# Copyright 2017 Sangoma Technologies Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""
EUI-48 hardware addresses.

Addresses are built by ``parse`` from any of the common notations:

- 00:11:22:aa:bb:cc
- 00-11-22-aa-bb-cc
- 0011.22aa.bbcc
- 001122aabbcc

and expose every other notation, the bit level classification flags
and the modified EUI-64 / IPv6 link-local derivations.
"""
import string
import logging
import operator
import functools
import ipaddress
from binascii import unhexlify
from cached_property import cached_property
from .errors import InvalidLength, InvalidMac, InvalidNotation
from .utils import Notation, format_mac


SEPARATORS = ':-.'
LENIENT_SEPARATORS = SEPARATORS + ' '
HEXDIGITS = frozenset(string.hexdigits)
MAX_INT = (1 << 48) - 1

IG_BIT = 0x01  # individual/group
UL_BIT = 0x02  # universal/local
IPV4_MULTICAST_PREFIX = b'\x01\x00\x5e'
IPV6_MULTICAST_PREFIX = b'\x33\x33'
LINK_LOCAL_PREFIX = b'\xfe\x80' + b'\x00' * 6

logger = logging.getLogger(__name__)


def _deletion_table(chars):
    return {ord(c): None for c in chars}


STRICT_TABLE = _deletion_table(SEPARATORS)
LENIENT_TABLE = _deletion_table(LENIENT_SEPARATORS)


def parse(text, lenient=False):
    """Parse ``text`` into a ``MacAddress``.

    Parameters
    ----------
    text : str
        The address in colon, hyphen, dot or bare hex notation. Hex digits
        may be of either case.
    lenient : bool, optional
        Trim surrounding whitespace, accept spaces as separators and skip
        the separator layout check. Off by default.

    Returns
    -------
    MacAddress

    Raises
    ------
    InvalidLength, InvalidMac, InvalidNotation
        All subclasses of ``InvalidFormat``.
    """
    if not isinstance(text, str):
        raise TypeError("expected a str, got {}".format(type(text).__name__))

    if lenient:
        digits = text.strip().translate(LENIENT_TABLE)
    else:
        digits = text.translate(STRICT_TABLE)

    if len(digits) != 12:
        logger.debug("Rejecting {!r}: {} digits after removing separators"
                     .format(text, len(digits)))
        raise InvalidLength(text)

    if not HEXDIGITS.issuperset(digits):
        logger.debug("Rejecting {!r}: not hexadecimal".format(text))
        raise InvalidMac(text)

    if not lenient and not any(n.matches(text) for n in Notation):
        logger.debug("Rejecting {!r}: misplaced separators".format(text))
        raise InvalidNotation(text)

    return MacAddress(unhexlify(digits))


@functools.total_ordering
class MacAddress(object):
    """Represent and inspect a MAC address.

    Instances are immutable values: they compare, hash and sort by the
    48 bit integer they hold.

    Args:
        packed: the 6 address bytes in network order
    """
    parse = staticmethod(parse)

    def __init__(self, packed):
        if isinstance(packed, MacAddress):
            packed = packed.packed
        if not isinstance(packed, (bytes, bytearray)):
            raise TypeError("expected 6 bytes, got {}".format(
                type(packed).__name__))
        if len(packed) != 6:
            raise InvalidLength(packed, "address: `{!r}` is not 6 bytes long")
        object.__setattr__(self, 'packed', bytes(packed))

    @classmethod
    def from_int(cls, value):
        """Build an address from its unsigned 48 bit integer value."""
        if isinstance(value, bool):
            raise TypeError("expected an int, got bool")
        value = operator.index(value)
        if not 0 <= value <= MAX_INT:
            raise InvalidLength(value, "address: `{}` does not fit in 48 bits")
        return cls(value.to_bytes(6, 'big'))

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __reduce__(self):
        return type(self), (self.packed,)

    # notations

    @cached_property
    def raw(self):
        """The address as ``001122aabbcc``"""
        return Notation.raw.format(self.packed)

    @property
    def eui(self):
        """The address as ``00-11-22-aa-bb-cc``"""
        return Notation.eui.format(self.packed)

    @property
    def hex(self):
        """The address as ``00:11:22:aa:bb:cc``"""
        return Notation.hex.format(self.packed)

    @property
    def dot(self):
        """The address as ``0011.22aa.bbcc``"""
        return Notation.dot.format(self.packed)

    def format(self, notation='hex'):
        """Render in ``notation``, a ``Notation`` or the name of one."""
        if not isinstance(notation, Notation):
            try:
                notation = Notation[notation]
            except KeyError:
                raise ValueError("Unknown notation {!r}".format(notation))
        return notation.format(self.packed)

    @property
    def octets(self):
        """``['00', '11', '22', 'aa', 'bb', 'cc']``"""
        return self.hex.split(':')

    @property
    def bits(self):
        """Each hex digit as four binary digits, 12 groups in all."""
        return [format(int(nibble, 16), '04b') for nibble in self.raw]

    @property
    def binary(self):
        """``000000000001000100100010101010101011101111001100``"""
        return format(self.int, '048b')

    @cached_property
    def int(self):
        """The address as an unsigned integer, e.g. ``73596058572``"""
        return int.from_bytes(self.packed, 'big')

    @property
    def oui(self):
        """Organizationally Unique Identifier, e.g. ``001122``"""
        return self.raw[:6]

    @property
    def nic(self):
        """Network Interface Controller portion, e.g. ``aabbcc``"""
        return self.raw[6:]

    # classification

    @property
    def is_multicast(self):
        return bool(self.packed[0] & IG_BIT)

    @property
    def is_unicast(self):
        return not self.is_multicast

    @property
    def is_broadcast(self):
        return self.int == MAX_INT

    @property
    def is_unspecified(self):
        return self.int == 0

    @property
    def is_local(self):
        """Locally administered: the U/L bit is set."""
        return bool(self.packed[0] & UL_BIT)

    @property
    def is_universal(self):
        return not self.is_local

    @property
    def is_ipv4_multicast(self):
        """Starts with 01:00:5e, the IANA block IPv4 multicast groups
        map onto (RFC 1112).
        """
        return self.packed[:3] == IPV4_MULTICAST_PREFIX

    @property
    def is_ipv6_multicast(self):
        return self.packed[:2] == IPV6_MULTICAST_PREFIX

    # derived addresses

    @cached_property
    def eui64_packed(self):
        """Modified EUI-64 identifier (RFC 4291 appendix A).

        The address is split between the OUI and NIC halves, ff:fe is
        inserted in the middle and the U/L bit of the first octet is
        inverted:

          00:15:2b:e4:9b:60 -> 02:15:2b:ff:fe:e4:9b:60
        """
        first = self.packed[0] ^ UL_BIT
        return bytes([first]) + self.packed[1:3] + b'\xff\xfe' + self.packed[3:]

    @property
    def eui64(self):
        """The modified EUI-64 identifier as ``02-11-22-ff-fe-aa-bb-cc``"""
        return format_mac(self.eui64_packed, '-', 2)

    @property
    def ipv6_link_local(self):
        """The link-local IPv6 address as ``fe80::0211:22ff:feaa:bbcc``

        Each group keeps its four digits; use ``ipv6_link_local_address``
        for the compressed form.
        """
        return 'fe80::' + format_mac(self.eui64_packed, ':', 4)

    @property
    def ipv6_link_local_address(self):
        return ipaddress.IPv6Address(LINK_LOCAL_PREFIX + self.eui64_packed)

    def describe(self):
        """``EUI-48: 00-11-22-aa-bb-cc`` and ``EUI-64: 02-11-22-ff-fe-aa-bb-cc``
        on two lines.
        """
        return "EUI-48: {}\nEUI-64: {}".format(self.eui, self.eui64)

    # value protocol

    def __eq__(self, other):
        if not isinstance(other, MacAddress):
            return NotImplemented
        return self.packed == other.packed

    def __lt__(self, other):
        if not isinstance(other, MacAddress):
            return NotImplemented
        return self.packed < other.packed

    def __hash__(self):
        return hash(self.packed)

    def __int__(self):
        return self.int

    def __bytes__(self):
        return self.packed

    def __format__(self, spec):
        if not spec:
            return str(self)
        return self.format(spec)

    def __str__(self):
        return self.hex

    def __repr__(self):
        return "{}('{}')".format(type(self).__name__, self)


BROADCAST = MacAddress(b'\xff' * 6)
