# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

"""SteamIDs and their textual representations.

A SteamID packs four fields into one 64-bit integer. From least to most significant, they are the
account ID (32 bits), the account instance (20 bits), the account type (4 bits), and the universe
(8 bits). See https://developer.valvesoftware.com/wiki/SteamID for details.
"""

import operator

from . import bits
from .errors import NumericRangeError, UnrepresentableError, UnsupportedAccountTypeError
from .types import AccountType, Instance, Universe, chat_chars, type_chars

class SteamID:
    """A single SteamID

    SteamIDs are immutable values. Two SteamIDs are equal if their 64-bit representations are
    equal. Use :func:`from_values` or :func:`from_community_id` to create one from its parts, or
    :func:`steamid.parse` to create one from text.
    """
    __slots__ = ('_value',)

    def __init__(self, value=0):
        if isinstance(value, SteamID):
            value = int(value)
        value = operator.index(value)
        if not 0 <= value <= bits.mask(bits.WIDTH):
            raise ValueError(f"SteamID {value} does not fit in {bits.WIDTH} bits")
        self._value = value

    @classmethod
    def parse(cls, text):
        """Parse a SteamID from its version 2 or 3 textual representation"""
        from .parse import parse
        return parse(text)

    def _get(self, field):
        return bits.get_bits(self._value, *field)

    @property
    def universe(self):
        return self._get(bits.UNIVERSE)

    @property
    def account_id(self):
        """The unique identifier for the account within its universe"""
        return self._get(bits.ACCOUNT_ID)

    @property
    def instance(self):
        """The instance of the account. It is usually 1 for user accounts."""
        return self._get(bits.INSTANCE)

    @property
    def account_type(self):
        """The account type code and its name

        Unknown account types have an empty name.

        :rtype: TypeInfo
        """
        return AccountType.lookup(self._get(bits.ACCOUNT_TYPE))

    @property
    def community_id(self):
        """The community ID of this SteamID

        :raises UnsupportedAccountTypeError: if the account type has no community ID
        """
        modifier = _modifier(self.account_type.code)
        if not modifier:
            raise UnsupportedAccountTypeError("{} accounts have no community ID"
                                              .format(self.account_type.name or "Unknown"))
        return self.account_id + modifier

    def steam2(self):
        """Get the version 2 textual representation, e.g. STEAM_0:0:1

        Invalid SteamIDs are rendered as UNKNOWN and pending ones as STEAM_ID_PENDING. For other
        account types which cannot be rendered, an empty string is returned.
        """
        account_type = self.account_type.code
        if account_type == AccountType.INVALID:
            return "UNKNOWN"
        elif account_type == AccountType.PENDING:
            return "STEAM_ID_PENDING"
        elif account_type != AccountType.INDIVIDUAL:
            return ''

        # Older software always uses universe 0 for public IDs
        universe = self.universe
        if universe <= Universe.PUBLIC:
            universe = 0
        return f"STEAM_{universe}:{self.account_id & 1}:{self.account_id >> 1}"

    def steam3(self):
        """Get the version 3 textual representation, e.g. [U:1:2]

        If this SteamID cannot be rendered, an empty string is returned.
        """
        account_type = self.account_type.code
        instance = self.instance

        if account_type == AccountType.CHAT:
            for flag, char in chat_chars:
                if instance & flag:
                    break
            else:
                return ''
        elif account_type in type_chars:
            char = type_chars[account_type]
        else:
            return ''

        render_instance = account_type in (AccountType.MULTISEAT, AccountType.ANON_GAMESERVER) \
                          or (account_type == AccountType.INDIVIDUAL
                              and instance != Instance.DESKTOP)
        if render_instance:
            return f"[{char}:{self.universe}:{self.account_id}:{instance}]"
        return f"[{char}:{self.universe}:{self.account_id}]"

    def to_text(self):
        """Get a textual representation which can be parsed again

        :raises UnrepresentableError: if there is neither a version 2 nor a version 3 representation
        """
        if text := self.steam2() or self.steam3():
            return text
        raise UnrepresentableError("Cannot represent account of type {} as text"
                                   .format(self.account_type.code))

    def is_valid(self):
        """Check whether this SteamID could belong to a real account"""
        account_type = self.account_type.code
        if not AccountType.INVALID < account_type <= AccountType.ANON_USER:
            return False
        if not Universe.UNSPECIFIED < self.universe <= Universe.DEV:
            return False
        if account_type == AccountType.INDIVIDUAL and \
           (self.account_id == 0 or self.instance > Instance.WEB):
            return False
        if account_type == AccountType.CLAN and \
           (self.account_id == 0 or self.instance != Instance.ALL):
            return False
        if account_type == AccountType.GAMESERVER and self.account_id == 0:
            return False
        return True

    def __str__(self):
        # The raw value is a last resort; it cannot be parsed again
        return self.steam2() or self.steam3() or str(self._value)

    def __repr__(self):
        return f"SteamID({self._value})"

    def __int__(self):
        return self._value

    __index__ = __int__

    def __eq__(self, other):
        if isinstance(other, SteamID):
            return self._value == other._value
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

def _modifier(account_type):
    try:
        return AccountType(account_type).modifier
    except ValueError:
        return 0

def from_values(universe, instance, account_type, account_id):
    """Create a SteamID from its fields.

    Values too large for their fields are truncated to the low bits which fit.

    :param int universe: Universe (8 bits)
    :param int instance: Account instance (20 bits)
    :param int account_type: Account type (4 bits)
    :param int account_id: Account ID (32 bits)
    :rtype: SteamID
    """
    value = 0
    value = bits.set_bits(value, *bits.ACCOUNT_ID, account_id)
    value = bits.set_bits(value, *bits.INSTANCE, instance)
    value = bits.set_bits(value, *bits.ACCOUNT_TYPE, account_type)
    value = bits.set_bits(value, *bits.UNIVERSE, universe)
    return SteamID(value)

INVALID = from_values(Universe.UNSPECIFIED, Instance.ALL, AccountType.INVALID, 0)

def from_community_id(community_id, account_type=AccountType.INDIVIDUAL):
    """Create a SteamID from a community ID.

    Only individual and clan accounts have community IDs. The universe of the resulting SteamID is
    left unspecified.

    :param int community_id: Community ID, e.g. 76561197960265729
    :param int account_type: Type of the account the community ID belongs to
    :raises UnsupportedAccountTypeError: if the account type has no community ID
    :raises NumericRangeError: if the account ID part of the community ID does not fit in 32 bits
    :rtype: SteamID
    """
    modifier = _modifier(account_type)
    if not modifier:
        raise UnsupportedAccountTypeError(f"Account type {int(account_type)} has no community ID",
                                          INVALID)
    if not 0 <= community_id - modifier <= bits.mask(bits.ACCOUNT_ID.width):
        raise NumericRangeError(f"Community ID {community_id} is out of range", INVALID)

    auth_server = community_id % 2
    account_id = (community_id - modifier - auth_server) // 2
    return from_values(Universe.UNSPECIFIED, Instance.DESKTOP, account_type,
                       (account_id << 1) | auth_server)
