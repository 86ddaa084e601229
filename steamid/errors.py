# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

class SteamIDError(ValueError):
    """A SteamID could not be created or converted

    For parsing and construction errors, :attr:`steamid` holds the invalid SteamID which stands in
    for the result. It is a perfectly good SteamID in its own right, so check for this exception
    instead of comparing against it.
    """
    def __init__(self, msg, steamid=None):
        super().__init__(msg)
        self.steamid = steamid

class InvalidFormatError(SteamIDError):
    """The text is not in any known SteamID format"""

class NumericRangeError(SteamIDError):
    """A numeric field is not a number, or does not fit in its field"""

class UnsupportedAccountTypeError(SteamIDError):
    """The account type has no community ID"""

class UnrepresentableError(SteamIDError):
    """The SteamID has no textual representation"""
