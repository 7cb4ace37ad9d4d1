#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="telex",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Incremental Telex input for typing Vietnamese with Latin keys",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Natural Language :: Vietnamese",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Text Processing :: Linguistic",
    ],
    keywords=["vietnamese", "telex", "input method"],
    python_requires=">=3.11",
    install_requires=[
        "cattrs>=22.2.0",
        "msgspec",
        "pygtrie>=2.4.2",
        "trio>=0.23.0",
    ],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "telex-type = telex.scripts:type_cli",
            "telex-rules = telex.scripts:rules_cli",
            "telex-guide = telex.scripts:guide_cli",
        ],
    },
)
