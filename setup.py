#!/bin/env python3
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (C) 2020-21, 26 Sean Anderson <seanga2@gmail.com>

import setuptools

setuptools.setup(
    name = 'steamid',
    use_scm_version = {
        'local_scheme': lambda version: \
            version.format_choice("+{node}", "+{node}.d{time:%Y%m%d.h%H%M%S}"),
        'fallback_version': '0.1.0',
    },
    description = "Parse and format SteamIDs",
    author = 'Sean Anderson',
    author_email = 'seanga2@gmail.com',
    url = 'https://trends.tf/',
    packages = ['steamid'],
    license = 'AGPL-3.0-only',
    python_requires = '>= 3.8',
    install_requires = [],
    extras_require = {
        'web': [
            'flask >= 2.0',
        ],
        'tests': [
            'flask >= 2.0',
            'hypothesis',
            'pytest',
        ],
    },
    entry_points = {
        'console_scripts': [
            "steamid=steamid.cli:main",
        ],
    },
)
