#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2023,2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite cryptographic exceptions module."""

from cryptolite.exceptions import CryptoliteError


class CryptoliteCryptoError(CryptoliteError):
    """General Cryptolite Crypto Error.

    Base exception class for all cryptographic operations within Cryptolite.
    """


class CryptoliteRngUnavailableError(CryptoliteCryptoError):
    """Secure random generator cannot be provided on this host.

    This is a configuration error, not a recoverable one: the requested CSPRNG
    algorithm is unknown or not supported by the platform, so no value with
    cryptographic guarantees can be generated. It is raised the first time any
    generator is used and must never be answered by switching to a weaker source.
    """
