# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

import werkzeug.routing

from .parse import parse
from .steamid import SteamID

class SteamIDConverter(werkzeug.routing.BaseConverter):
    """Accept SteamIDs in URLs

    SteamIDs may be given in any textual representation or as a 64-bit integer. URLs are always
    built using the 64-bit integer, since it does not need escaping.

    Register with ``app.url_map.converters['steamid'] = SteamIDConverter``.
    """
    regex = r'[^/]+'

    def to_python(self, value):
        try:
            if value.isdecimal():
                return SteamID(int(value))
            return parse(value)
        except ValueError as error:
            raise werkzeug.routing.ValidationError() from error

    def to_url(self, value):
        return str(int(value))

def json_default(obj):
    if isinstance(obj, SteamID):
        return str(int(obj))
    raise TypeError("Object of type '{}' is not JSON serializable" \
                    .format(type(obj).__name__))
