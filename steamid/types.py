# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

"""Enumerations for the fields of a SteamID.

See https://developer.valvesoftware.com/wiki/SteamID for the meaning of each value.
"""

import collections
import enum

TypeInfo = collections.namedtuple('TypeInfo', ('code', 'name'))

@enum.unique
class Universe(enum.IntEnum):
    UNSPECIFIED = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4
    RC = 5

@enum.unique
class AccountType(enum.IntEnum):
    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAMESERVER = 3
    ANON_GAMESERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7
    CHAT = 8
    P2P_SUPER_SEEDER = 9
    ANON_USER = 10

    @property
    def display_name(self):
        return _account_types[self][0]

    @property
    def modifier(self):
        """Offset between a community ID and the packed SteamID, or 0 if there is none"""
        return _account_types[self][1]

    @classmethod
    def lookup(cls, code):
        """Look up the name of an account type code.

        Codes outside the table have an empty name.

        :param int code: Account type code
        :rtype: TypeInfo
        """
        try:
            return TypeInfo(code, cls(code).display_name)
        except ValueError:
            return TypeInfo(code, '')

    def __str__(self):
        return self.display_name

# (name, community ID modifier)
_account_types = {
    AccountType.INVALID: ("Invalid", 0),
    AccountType.INDIVIDUAL: ("Individual", 0x0110000100000000),
    AccountType.MULTISEAT: ("Multiseat", 0),
    AccountType.GAMESERVER: ("GameServer", 0),
    AccountType.ANON_GAMESERVER: ("AnonGameServer", 0),
    AccountType.PENDING: ("Pending", 0),
    AccountType.CONTENT_SERVER: ("ContentServer", 0),
    AccountType.CLAN: ("Clan", 0x0170000000000000),
    AccountType.CHAT: ("Chat", 0),
    AccountType.P2P_SUPER_SEEDER: ("P2PSuperSeeder", 0),
    AccountType.ANON_USER: ("AnonUser", 0),
}

class Instance(enum.IntEnum):
    ALL = 0
    DESKTOP = 1
    CONSOLE = 2
    WEB = 4

INSTANCE_MASK = 0x000FFFFF

class ChatFlag(enum.IntFlag):
    CLAN = (INSTANCE_MASK + 1) >> 1
    LOBBY = (INSTANCE_MASK + 1) >> 2
    MMS_LOBBY = (INSTANCE_MASK + 1) >> 3

# Letters used by the version 3 textual representation
type_chars = {
    AccountType.INVALID: 'I',
    AccountType.INDIVIDUAL: 'U',
    AccountType.MULTISEAT: 'M',
    AccountType.GAMESERVER: 'G',
    AccountType.ANON_GAMESERVER: 'A',
    AccountType.PENDING: 'P',
    AccountType.CONTENT_SERVER: 'C',
    AccountType.CLAN: 'g',
}

# Chat IDs use a different letter for each kind of chat; the first matching flag wins
chat_chars = (
    (ChatFlag.CLAN, 'c'),
    (ChatFlag.LOBBY, 'L'),
    (ChatFlag.MMS_LOBBY, 'T'),
)
