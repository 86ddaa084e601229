# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

import logging
import re

from . import bits
from .errors import InvalidFormatError, NumericRangeError
from .steamid import INVALID, from_values
from .types import AccountType, Instance, Universe, chat_chars, type_chars

_unsigned = re.compile(r'[0-9]+')
_signed = re.compile(r'[+-]?[0-9]+')

_char_types = { char: account_type for account_type, char in type_chars.items() }
_chat_flags = { char: flag for flag, char in chat_chars }
# Account types whose version 3 representation may carry an instance
_instance_types = (AccountType.INDIVIDUAL, AccountType.MULTISEAT, AccountType.ANON_GAMESERVER)

def _invalid(text):
    return InvalidFormatError(f"Invalid SteamID {text!r}", INVALID)

def _parse_field(text, name, width, signed=False):
    """Parse a decimal field of a SteamID.

    Signed fields may be written either as a signed or as an unsigned number of ``width`` bits.
    Negative numbers are stored in two's complement.

    :param str text: Text of the field
    :param str name: Name of the field, for error messages
    :param int width: Width of the field in bits
    :param bool signed: Whether to accept negative numbers
    :raises NumericRangeError: if the field is not a number or does not fit
    :rtype: int
    """
    if not (_signed if signed else _unsigned).fullmatch(text):
        raise NumericRangeError(f"Invalid {name} {text!r}: not a number", INVALID)

    value = int(text)
    lower = -(1 << (width - 1)) if signed else 0
    if not lower <= value <= bits.mask(width):
        raise NumericRangeError(f"Invalid {name} {text!r}: does not fit in {width} bits",
                                INVALID)
    return value & bits.mask(width)

def parse(text):
    """Parse a SteamID from text.

    Both the version 2 (``STEAM_0:0:1``) and version 3 (``[U:1:2]``) representations are
    understood, as are the special values ``UNKNOWN`` and ``STEAM_ID_PENDING``. The raw 64-bit
    representation is not.

    :param text: Text to parse; bytes are decoded as ASCII
    :type text: str or bytes
    :raises InvalidFormatError: if the text is not in a known format
    :raises NumericRangeError: if a field of the SteamID is out of range
    :rtype: SteamID
    """
    if isinstance(text, bytes):
        # Non-ASCII bytes become replacement characters, which no grammar accepts
        text = text.decode('ascii', 'replace')
    text = text.strip()
    upper = text.upper()
    if upper == "UNKNOWN":
        return from_values(Universe.UNSPECIFIED, Instance.ALL, AccountType.INVALID, 0)
    elif upper == "STEAM_ID_PENDING":
        return from_values(Universe.UNSPECIFIED, Instance.ALL, AccountType.PENDING, 0)
    elif upper.startswith("STEAM_"):
        return parse_v2(text)
    elif text.startswith('[') and text.endswith(']'):
        return parse_v3(text)

    logging.debug("Unknown SteamID format %r", text)
    raise _invalid(text)

def parse_v2(text):
    """Parse a SteamID from its version 2 representation, e.g. STEAM_0:0:1

    These are always individual accounts with the desktop instance.
    """
    text = text.strip()
    if text[:6].upper() != "STEAM_":
        raise _invalid(text)

    fields = text[6:].split(':')
    if len(fields) != 3:
        raise _invalid(text)

    universe = _parse_field(fields[0], "universe", 8, signed=True)
    auth_server = _parse_field(fields[1], "auth server", 1)
    account_number = _parse_field(fields[2], "account number", 31)
    return from_values(universe, Instance.DESKTOP, AccountType.INDIVIDUAL,
                       (account_number << 1) | auth_server)

def parse_v3(text):
    """Parse a SteamID from its version 3 representation, e.g. [U:1:2] or [M:1:2:3]"""
    text = text.strip()
    if not text.startswith('[') or not text.endswith(']'):
        raise _invalid(text)

    fields = text[1:-1].split(':')
    if len(fields) not in (3, 4):
        raise _invalid(text)

    char = fields[0]
    if char in _chat_flags:
        account_type = AccountType.CHAT
        instance = _chat_flags[char]
    elif char in _char_types:
        account_type = _char_types[char]
        instance = Instance.DESKTOP if account_type == AccountType.INDIVIDUAL else Instance.ALL
    else:
        raise _invalid(text)

    if len(fields) == 4 and account_type not in _instance_types:
        raise _invalid(text)

    universe = _parse_field(fields[1], "universe", 8, signed=True)
    account_id = _parse_field(fields[2], "account ID", 32, signed=True)
    if len(fields) == 4:
        instance = _parse_field(fields[3], "instance", 20)

    return from_values(universe, instance, account_type, account_id)
