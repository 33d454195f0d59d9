#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2020-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite application utilities test module.

Covers data formatting, the integer parameter type and the error boundary of
the command-line tools.
"""

from typing import Optional

import click
import pytest

from cryptolite.apps.utils import utils
from cryptolite.apps.utils.utils import INT, CryptoliteAppError, catch_cryptolite_error
from cryptolite.crypto.exceptions import CryptoliteRngUnavailableError
from cryptolite.exceptions import CryptoliteError


def test_split_string() -> None:
    assert ["12", "34", "5"] == utils._split_string("12345", length=2)
    assert ["123", "123"] == utils._split_string("123123", length=3)


def test_format_data() -> None:
    """Test format_raw_data utility function with different line lengths."""
    data = bytes(range(20))
    expect_8 = "00 01 02 03 04 05 06 07\n08 09 0a 0b 0c 0d 0e 0f\n10 11 12 13"
    assert expect_8 == utils.format_raw_data(data, use_hexdump=False, line_length=8)
    expect_16 = "00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f\n10 11 12 13"
    assert expect_16 == utils.format_raw_data(data, use_hexdump=False, line_length=16)


def test_format_data_hexdump() -> None:
    result = utils.format_raw_data(b"AB", use_hexdump=True)
    assert result.startswith("00000000: 41 42")
    assert result.endswith("AB")


@pytest.mark.parametrize(
    "value,expected",
    [("10", 10), ("0x20", 32), ("0b101", 5), ("1_000", 1000), (7, 7)],
)
def test_int_param(value: str, expected: int) -> None:
    assert INT().convert(value) == expected


@pytest.mark.parametrize("value", ["abc", "1.5", "-1"])
def test_int_param_invalid(value: str) -> None:
    with pytest.raises(click.BadParameter):
        INT(min_value=0).convert(value)


@pytest.mark.parametrize(
    "exception,exit_code",
    [
        (CryptoliteAppError("app failure", error_code=4), 4),
        (CryptoliteAppError("app failure", error_code=300), 1),
        (CryptoliteError("library failure"), 2),
        (CryptoliteRngUnavailableError("Algorithm unavailable: x"), 2),
        (AssertionError("assertion"), 2),
        (RuntimeError("unexpected"), 3),
        (KeyboardInterrupt(), 3),
    ],
)
def test_catch_cryptolite_error(exception: BaseException, exit_code: int) -> None:
    """Test exit codes of the error boundary."""

    @catch_cryptolite_error
    def failing() -> None:
        raise exception

    with pytest.raises(SystemExit) as exc:
        failing()
    assert exc.value.code == exit_code


def test_catch_cryptolite_error_passes_result() -> None:
    @catch_cryptolite_error
    def passing(value: Optional[int] = None) -> Optional[int]:
        return value

    assert passing(5) == 5


def test_app_error_message() -> None:
    """Application errors print just the description."""
    assert str(CryptoliteAppError("Nothing to do")) == "Nothing to do"
    assert str(CryptoliteError("Broken")) == "cryptolite: Broken"
    assert str(CryptoliteError()) == "cryptolite: Unknown Error"
