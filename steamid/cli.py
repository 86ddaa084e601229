# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2026 Sean Anderson <seanga2@gmail.com>

import argparse
import logging
import sys

from .errors import UnsupportedAccountTypeError
from .parse import parse
from .steamid import SteamID
from .types import Universe

def create_parser():
    parser = argparse.ArgumentParser(description="Convert between SteamID representations")
    parser.add_argument("steamids", nargs='+', metavar="STEAMID",
                        help=("SteamID to convert. May be a version 2 (STEAM_0:0:1) or version 3 "
                              "([U:1:2]) SteamID, or a 64-bit integer."))
    parser.add_argument("-v", "--verbose", action='count', default=0, dest='verbosity',
                        help=("Print additional debug information. May be specified multiple "
                              "times for increased verbosity."))
    return parser

def init_logging(verbosity):
    log_level = logging.WARNING
    if verbosity == 1:
        log_level = logging.INFO
    elif verbosity > 1:
        log_level = logging.DEBUG
    if sys.stdout.isatty():
        fmt = '[%(asctime)s] %(module)s: %(message)s'
    else:
        fmt = '%(module)s: %(message)s'
    logging.basicConfig(level=log_level, format=fmt)

def convert(text):
    """Convert a SteamID given on the command line

    :param str text: SteamID in any textual representation, or a 64-bit integer
    :rtype: SteamID
    """
    text = text.strip()
    if text.isdecimal():
        logging.debug("Treating %s as a 64-bit SteamID", text)
        return SteamID(int(text))
    return parse(text)

def describe(steamid):
    try:
        universe = Universe(steamid.universe).name.lower()
    except ValueError:
        universe = "unknown"

    lines = [
        f"SteamID: {int(steamid)}",
        f"Account ID: {steamid.account_id}",
        f"Type: {steamid.account_type.code} ({steamid.account_type.name or 'unknown'})",
        f"Universe: {steamid.universe} ({universe})",
        f"Instance: {steamid.instance}",
        f"Steam2: {steamid.steam2()}",
        f"Steam3: {steamid.steam3()}",
    ]

    try:
        lines.append(f"Community ID: {steamid.community_id}")
    except UnsupportedAccountTypeError:
        pass

    lines.append(f"Valid: {steamid.is_valid()}")
    return "\n".join(lines)

def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    init_logging(args.verbosity)

    ret = 0
    descriptions = []
    for text in args.steamids:
        try:
            steamid = convert(text)
        except ValueError as e:
            logging.warning("Could not convert %s: %s", text, e)
            ret = 1
            continue

        logging.info("Converted %s to %r", text, steamid)
        descriptions.append(describe(steamid))

    if descriptions:
        print("\n\n".join(descriptions))
    return ret

if __name__ == '__main__':
    sys.exit(main())
