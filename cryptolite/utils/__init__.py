#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2020-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite utilities package.

Byte codecs, file and configuration helpers and the labelled enumeration used
across the library.
"""

from cryptolite.utils.misc import base64_decode, base64_encode, hex_decode, hex_encode

__all__ = [
    "base64_decode",
    "base64_encode",
    "hex_decode",
    "hex_encode",
]
