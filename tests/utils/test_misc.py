#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2020-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test module for Cryptolite miscellaneous utilities.

Covers the hexadecimal and base64 byte codecs, file search and writing, and
configuration loading.
"""

import os

import pytest

from cryptolite.exceptions import CryptoliteError, CryptoliteValueError
from cryptolite.utils.misc import (
    base64_decode,
    base64_encode,
    find_file,
    get_abs_path,
    hex_decode,
    hex_encode,
    load_configuration,
    load_text,
    write_file,
)


@pytest.mark.parametrize(
    "data,hex_string",
    [
        (b"", ""),
        (b"\x00", "00"),
        (b"\x01\xab\xff", "01abff"),
        (bytearray(b"\xde\xad\xbe\xef"), "deadbeef"),
    ],
)
def test_hex_encode(data: bytes, hex_string: str) -> None:
    """Test lowercase hexadecimal encoding without separators."""
    assert hex_encode(data) == hex_string
    assert hex_decode(hex_string) == bytes(data)


def test_hex_decode_upper_case() -> None:
    """Test that upper case digits are accepted when decoding."""
    assert hex_decode("DEADbeef") == b"\xde\xad\xbe\xef"


@pytest.mark.parametrize("value", ["abc", "0x00", "00 11", "zz", "12-34", None])
def test_hex_decode_invalid(value: str) -> None:
    """Test that malformed hexadecimal strings are rejected."""
    with pytest.raises(CryptoliteValueError):
        hex_decode(value)


@pytest.mark.parametrize(
    "data,b64_string",
    [
        (b"", ""),
        (b"f", "Zg=="),
        (b"fo", "Zm8="),
        (b"foo", "Zm9v"),
        (b"\xfb\xff", "+/8="),
    ],
)
def test_base64(data: bytes, b64_string: str) -> None:
    """Test standard alphabet base64 with padding."""
    assert base64_encode(data) == b64_string
    assert base64_decode(b64_string) == data


def test_base64_no_line_wrapping() -> None:
    """Test that long inputs are encoded on a single line."""
    encoded = base64_encode(bytes(range(256)) * 4)
    assert "\n" not in encoded
    assert base64_decode(encoded) == bytes(range(256)) * 4


@pytest.mark.parametrize("value", ["Zg", "Zm9v!", "-_8=", "Zm 9v"])
def test_base64_decode_invalid(value: str) -> None:
    """Test that malformed or url-safe base64 strings are rejected."""
    with pytest.raises(CryptoliteValueError):
        base64_decode(value)


def test_write_and_load_text(tmpdir: str) -> None:
    """Test writing into a new directory and reading the text back."""
    path = os.path.join(str(tmpdir), "nested", "dir", "file.txt")
    assert write_file("random", path) == 6
    assert load_text(path) == "random"


def test_write_binary(tmpdir: str) -> None:
    """Test writing binary data."""
    path = os.path.join(str(tmpdir), "data.bin")
    write_file(b"\x00\x01\x02", path, mode="wb")
    with open(path, "rb") as f:
        assert f.read() == b"\x00\x01\x02"


def test_find_file(tmpdir: str) -> None:
    """Test file search in search paths and failures."""
    write_file("x", os.path.join(str(tmpdir), "found.txt"))
    assert find_file("found.txt", search_paths=[str(tmpdir)]) == get_abs_path(
        "found.txt", str(tmpdir)
    )
    assert find_file("missing.txt", search_paths=[str(tmpdir)], raise_exc=False) == ""
    with pytest.raises(CryptoliteError):
        find_file("missing.txt", search_paths=[str(tmpdir)])
    with pytest.raises(CryptoliteError):
        find_file(os.path.join(str(tmpdir), "missing.txt"))


def test_get_abs_path() -> None:
    """Test conversion of relative paths."""
    assert get_abs_path("file.txt", "/base") == "/base/file.txt"
    assert get_abs_path("/abs/file.txt") == "/abs/file.txt"


def test_load_configuration(tmpdir: str) -> None:
    """Test loading of JSON and YAML configuration files."""
    json_file = os.path.join(str(tmpdir), "config.json")
    yaml_file = os.path.join(str(tmpdir), "config.yaml")
    write_file('{"version": 1, "root": {"level": "DEBUG"}}', json_file)
    write_file("version: 1\nroot:\n  level: DEBUG\n", yaml_file)

    expected = {"version": 1, "root": {"level": "DEBUG"}}
    assert load_configuration(json_file) == expected
    assert load_configuration(yaml_file) == expected


@pytest.mark.parametrize("content", ["", "- a\n- b\n", "key: [unclosed"])
def test_load_configuration_invalid(tmpdir: str, content: str) -> None:
    """Test that empty, non-dictionary and broken files are rejected."""
    path = os.path.join(str(tmpdir), "invalid.yaml")
    write_file(content, path)
    with pytest.raises(CryptoliteError):
        load_configuration(path)


def test_load_configuration_missing(tmpdir: str) -> None:
    """Test loading of a missing configuration file."""
    with pytest.raises(CryptoliteError, match="Can't load configuration file"):
        load_configuration(os.path.join(str(tmpdir), "missing.yaml"))
