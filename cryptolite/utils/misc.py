#!/usr/bin/env python
# -*- coding: UTF-8 -*-
# Copyright 2020-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite miscellaneous utilities and helper functions.

This module provides the byte codecs used to turn raw random bytes into text
(hexadecimal and base64), together with the file and configuration loading
helpers used by the command-line tools.
"""

import base64
import binascii
import json
import logging
import os
import re
from typing import Callable, Optional, Union

import yaml

from cryptolite.exceptions import CryptoliteError, CryptoliteValueError

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"(?:[0-9a-fA-F]{2})*")


def hex_encode(data: bytes) -> str:
    """Encode bytes into a lowercase hexadecimal string.

    Two hex digits are produced per byte, without any separators.

    :param data: Bytes to encode.
    :return: Hexadecimal string, twice as long as the input.
    """
    return bytes(data).hex()


def hex_decode(hex_string: str) -> bytes:
    """Decode a hexadecimal string into bytes.

    Upper and lower case digits are accepted; separators and prefixes are not.

    :param hex_string: Hexadecimal string with an even number of digits.
    :raises CryptoliteValueError: The string is not a valid hexadecimal encoding.
    :return: Decoded bytes.
    """
    if not isinstance(hex_string, str) or not HEX_PATTERN.fullmatch(hex_string):
        raise CryptoliteValueError(f"Invalid hexadecimal string: {hex_string!r}")
    return bytes.fromhex(hex_string)


def base64_encode(data: bytes) -> str:
    """Encode bytes into a base64 string.

    The standard alphabet with padding is used and the output is never wrapped.

    :param data: Bytes to encode.
    :return: Base64 string.
    """
    return base64.b64encode(data).decode("ascii")


def base64_decode(b64_string: str) -> bytes:
    """Decode a standard-alphabet base64 string into bytes.

    :param b64_string: Base64 string, padding included.
    :raises CryptoliteValueError: The string is not a valid base64 encoding.
    :return: Decoded bytes.
    """
    try:
        return base64.b64decode(b64_string, validate=True)
    except (binascii.Error, TypeError, ValueError) as exc:
        raise CryptoliteValueError(f"Invalid base64 string: {b64_string!r}") from exc


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_file(
    data: Union[str, bytes],
    path: str,
    mode: str = "w",
    encoding: str = "utf-8",
) -> int:
    """Write data to a file, creating parent directories when needed.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param mode: File writing mode ('w' for text, 'wb' for binary), defaults to 'w'.
    :param encoding: Text encoding ('ascii', 'utf-8'), defaults to 'utf-8'.
    :return: Number of characters or bytes written to the file.
    """
    path = path.replace("\\", "/")
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    logger.debug(f"Storing {'binary' if 'b' in mode else 'text'} file at {path}")
    with open(path, mode, encoding=None if "b" in mode else encoding) as f:
        return f.write(data)


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Convert relative or absolute file path to normalized absolute path.

    :param file_path: File path to be converted to absolute path.
    :param base_dir: Base directory to create absolute path, if not specified the system CWD is used.
    :return: Absolute file path with normalized separators.
    """
    if os.path.isabs(file_path):
        return file_path.replace("\\", "/")

    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path)).replace("\\", "/")


def _find_path(
    path: str,
    check_func: Callable[[str], bool],
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find and return the full path to a file or directory.

    Search paths take precedence over current working directory when both are specified.

    :param path: File name, part of file path or full path to search for.
    :param check_func: Function to validate if the found path exists and meets criteria.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file or empty string if not found and raise_exc is False.
    :raises CryptoliteError: File not found in any of the searched locations.
    """
    path = path.replace("\\", "/")

    if os.path.isabs(path):
        if not check_func(path):
            if raise_exc:
                raise CryptoliteError(f"Path '{path}' not found")
            return ""
        return path
    if search_paths:
        for dir_candidate in search_paths:
            if not dir_candidate:
                continue
            dir_candidate = dir_candidate.replace("\\", "/")
            path_candidate = get_abs_path(path, base_dir=dir_candidate)
            if check_func(path_candidate):
                return path_candidate
    if use_cwd and check_func(path):
        return get_abs_path(path)
    # list all directories in error message
    searched_in: list[str] = []
    if use_cwd:
        searched_in.append(os.path.abspath(os.curdir))
    if search_paths:
        searched_in.extend(filter(None, search_paths))
    searched_in = [s.replace("\\", "/") for s in searched_in]
    err_str = f"Path '{path}' not found, Searched in: {', '.join(searched_in)}"
    if not raise_exc:
        logger.debug(err_str)
        return ""
    raise CryptoliteError(err_str)


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file in filesystem using multiple search strategies.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file.
    :raises CryptoliteError: File not found in any of the search locations.
    """
    return _find_path(
        path=file_path,
        check_func=os.path.isfile,
        use_cwd=use_cwd,
        search_paths=search_paths,
        raise_exc=raise_exc,
    )


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    The file content is parsed as JSON first, then as YAML.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises CryptoliteError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise CryptoliteError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except yaml.YAMLError:
            pass

    if not config_data:
        raise CryptoliteError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise CryptoliteError(f"Invalid configuration file: {path}")

    return config_data
