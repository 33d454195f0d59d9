#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2019-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite - secure random tokens, salts and passwords.

Cryptolite wraps the operating system CSPRNG behind a single lazily created
generator and derives from it the values applications need most often:

    - 256-bit hexadecimal session and reference tokens
    - 128-bit base64 salt values for key derivation
    - alphanumeric passwords without modulo bias

The library is usable directly from Python, and the ``randgen`` command-line
tool exposes the same generators for scripting.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_cryptolite_version() -> Version:
    """Get Cryptolite version information.

    Retrieves the version from the pre-generated __version__ module or, in a
    development checkout without it, dynamically using setuptools_scm.

    :raises ImportError: When both __version__ module and setuptools_scm are unavailable.
    :return: Parsed version object.
    """
    try:
        from .__version__ import __version__ as cryptolite_version
    except ImportError:
        from setuptools_scm import get_version

        cryptolite_version = get_version()
    return parse(cryptolite_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_cryptolite_version()

__author__ = "Cryptolite developers"
__license__ = "BSD-3-Clause"
__version__ = str(version)

CRYPTOLITE_VERSION_BASE = version.base_version
CRYPTOLITE_PLATFORM_DIRS = PlatformDirs(
    appauthor="cryptolite",
    appname="cryptolite",
    version=CRYPTOLITE_VERSION_BASE,
)

# Name of the CSPRNG backing every generator, see cryptolite.crypto.rng.EnumRngAlgorithm
CRYPTOLITE_RNG_ALGORITHM = os.environ.get("CRYPTOLITE_RNG_ALGORITHM", "urandom")

CRYPTOLITE_DEBUG_LOGGING_DISABLED = value_to_bool(
    os.environ.get("CRYPTOLITE_DEBUG_LOGGING_DISABLED")
)
CRYPTOLITE_DEBUG_LOG_FILE = os.environ.get(
    "CRYPTOLITE_DEBUG_LOG_FILE",
    os.path.join(CRYPTOLITE_PLATFORM_DIRS.user_log_dir, "debug.log"),
)
CRYPTOLITE_CONFIG_DIR = os.path.expanduser("~/.cryptolite")
