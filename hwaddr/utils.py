#
# Copyright 2017 Sangoma Technologies Inc.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""
Hex formatting helpers shared by the address types
"""
import re
import enum
from binascii import hexlify


def chunk(text, size):
    """Split ``text`` into consecutive pieces of ``size`` characters."""
    return [text[i:i+size] for i in range(0, len(text), size)]


def format_mac(packed, delimiter='', width=2):
    """Render ``packed`` as lowercase hex, joining groups of ``width``
    digits with ``delimiter``:

      format_mac(b'\\x00\\x11\\x22\\xaa\\xbb\\xcc', '-', 2)  # 00-11-22-aa-bb-cc
      format_mac(b'\\x00\\x11\\x22\\xaa\\xbb\\xcc', '.', 4)  # 0011.22aa.bbcc
    """
    digits = hexlify(packed).decode('ascii')
    if not delimiter:
        return digits
    return delimiter.join(chunk(digits, width))


class Notation(enum.Enum):
    """Textual MAC notations as (delimiter, digits per group)."""
    raw = ('', 12)
    eui = ('-', 2)
    hex = (':', 2)
    dot = ('.', 4)

    def __init__(self, delimiter, width):
        self.delimiter = delimiter
        self.width = width
        group = '[0-9a-fA-F]{{{}}}'.format(width)
        self.pattern = re.compile('{0}(?:{1}{0}){{{2}}}'.format(
            group, re.escape(delimiter), 12 // width - 1))

    def format(self, packed):
        return format_mac(packed, self.delimiter, self.width)

    def matches(self, text):
        return self.pattern.fullmatch(text) is not None
