#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2019-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite exception classes.

This module defines the exception hierarchy used throughout the Cryptolite
library, so that callers can catch every library error through one base class
while still getting the matching built-in exception semantics.
"""

from typing import Optional

#######################################################################
# # Cryptolite Exceptions
#######################################################################


class CryptoliteError(Exception):
    """Cryptolite Base Exception.

    Base exception class for all Cryptolite errors. It provides consistent
    error formatting across the library.

    :cvar fmt: Default error message format template.
    """

    fmt = "cryptolite: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base Cryptolite Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message, "Unknown Error" if no description is set.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class CryptoliteKeyError(CryptoliteError, KeyError):
    """Cryptolite Key Error exception for missing or invalid keys."""


class CryptoliteValueError(CryptoliteError, ValueError):
    """Cryptolite standard value error exception.

    Raised when an invalid value is provided to a Cryptolite operation, such as
    a negative length or a malformed encoded string.
    """


class CryptoliteTypeError(CryptoliteError, TypeError):
    """Cryptolite standard type error exception."""
