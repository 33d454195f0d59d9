#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2019-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

import re

from setuptools import find_packages, setup  # type: ignore

with open("requirements.txt") as req_file:
    requirements = req_file.read().splitlines()

with open("requirements-develop.txt") as req_file:
    develop_requirements = [
        line for line in req_file.read().splitlines() if line and not line.startswith("-r")
    ]

with open("README.md", "r") as f:
    long_description = f.read()

with open("cryptolite/__version__.py") as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)  # type: ignore

extras_require = {
    "tests": develop_requirements,
}

setup(
    name="cryptolite",
    version=version,
    description="Cryptographically secure random tokens, salts and passwords",
    license="BSD-3-Clause",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms="Windows, Linux, Mac OSX",
    python_requires=">=3.9",
    install_requires=requirements,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS :: MacOS X",
        "License :: OSI Approved :: BSD License",
        "Topic :: Security :: Cryptography",
        "Topic :: Utilities",
    ],
    packages=find_packages(exclude=["tests.*", "tests"]),
    entry_points={
        "console_scripts": [
            "randgen=cryptolite.apps.randgen:safe_main",
        ],
    },
    extras_require=extras_require,
)
