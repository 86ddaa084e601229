# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

"""Helpers for handling SteamIDs.

The implementation follows https://developer.valvesoftware.com/wiki/SteamID.
"""

from .errors import InvalidFormatError, NumericRangeError, SteamIDError, \
                    UnrepresentableError, UnsupportedAccountTypeError
from .parse import parse, parse_v2, parse_v3
from .steamid import INVALID, SteamID, from_community_id, from_values
from .types import AccountType, ChatFlag, Instance, TypeInfo, Universe

__all__ = (
    'AccountType',
    'ChatFlag',
    'INVALID',
    'Instance',
    'InvalidFormatError',
    'NumericRangeError',
    'SteamID',
    'SteamIDError',
    'TypeInfo',
    'Universe',
    'UnrepresentableError',
    'UnsupportedAccountTypeError',
    'from_community_id',
    'from_values',
    'parse',
    'parse_v2',
    'parse_v3',
)
