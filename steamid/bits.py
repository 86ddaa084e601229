# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

import collections

Field = collections.namedtuple('Field', ('offset', 'width'))

# Fields of a packed SteamID, from least to most significant
ACCOUNT_ID = Field(0, 32)
INSTANCE = Field(32, 20)
ACCOUNT_TYPE = Field(52, 4)
UNIVERSE = Field(56, 8)

FIELDS = (ACCOUNT_ID, INSTANCE, ACCOUNT_TYPE, UNIVERSE)
WIDTH = 64

def mask(width):
    return (1 << width) - 1

def get_bits(value, offset, width):
    """Extract ``width`` bits of ``value``, starting at ``offset``"""
    return (value >> offset) & mask(width)

def set_bits(value, offset, width, field):
    """Replace ``width`` bits of ``value``, starting at ``offset``, with ``field``.

    Only the low ``width`` bits of ``field`` are used. Anything above them is discarded without
    complaint; callers rely on this truncation to pack out-of-range values.

    :param int value: Value to modify
    :param int offset: Offset of the least-significant bit to replace
    :param int width: Number of bits to replace
    :param int field: New contents of the bits
    :return: The modified value
    :rtype: int
    """
    m = mask(width)
    return (value & ~(m << offset)) | ((field & m) << offset)
