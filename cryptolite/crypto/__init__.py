#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2019-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite cryptographic random value generators."""

from cryptolite.crypto.exceptions import CryptoliteCryptoError, CryptoliteRngUnavailableError
from cryptolite.crypto.rng import (
    PASSWORD_CHARACTERS,
    SALT_BYTES,
    TOKEN_BITS,
    EnumRngAlgorithm,
    RandomSource,
    password,
    random_bytes,
    salt,
    token,
)

__all__ = [
    "CryptoliteCryptoError",
    "CryptoliteRngUnavailableError",
    "EnumRngAlgorithm",
    "PASSWORD_CHARACTERS",
    "RandomSource",
    "SALT_BYTES",
    "TOKEN_BITS",
    "password",
    "random_bytes",
    "salt",
    "token",
]
