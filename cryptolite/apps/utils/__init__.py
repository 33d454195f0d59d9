#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2022-2023,2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite application utilities and helper functions.

Common helpers for the Cryptolite command-line applications: logging
installation, shared click options and error handling.
"""
