#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2022-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite random value generator tool."""

import json
import logging
import sys
from typing import Callable, Optional

import click
from click_option_group import MutuallyExclusiveOptionGroup, optgroup

from cryptolite.apps.utils import logger as cryptolite_logger
from cryptolite.apps.utils.common_cli_options import (
    CommandsTreeGroup,
    cryptolite_apps_common_options,
    cryptolite_count_option,
    cryptolite_output_option,
    cryptolite_use_json_option,
)
from cryptolite.apps.utils.utils import INT, catch_cryptolite_error, format_raw_data
from cryptolite.crypto.rng import password, random_bytes, salt, token
from cryptolite.utils.misc import base64_encode, write_file

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_LENGTH = 16


def _echo_values(generator: Callable[[], str], count: int, use_json: bool) -> None:
    """Generate values and print them one per line or as a JSON list.

    :param generator: Callable producing a single value.
    :param count: Number of values to generate.
    :param use_json: Print a JSON list instead of plain lines.
    """
    values = [generator() for _ in range(count)]
    logger.info(f"Generated {count} value(s)")
    if use_json:
        click.echo(json.dumps(values, indent=2))
        return
    for value in values:
        click.echo(value)


@click.group(name="randgen", cls=CommandsTreeGroup)
@cryptolite_apps_common_options
def main(log_level: int) -> None:
    """Cryptolite random value generator.

    Generate secure random bytes, tokens, salts and passwords.
    """
    cryptolite_logger.install(level=log_level)


@main.command(name="bytes", no_args_is_help=True)
@click.argument("length", type=INT(min_value=0))
@optgroup.group("Text encoding of the printed bytes", cls=MutuallyExclusiveOptionGroup)
@optgroup.option(
    "-x",
    "--hex",
    "encoding",
    flag_value="hex",
    help="Hexadecimal string (default)",
)
@optgroup.option(
    "-b",
    "--base64",
    "encoding",
    flag_value="base64",
    help="Base64 string",
)
@optgroup.option(
    "-d",
    "--hexdump",
    "encoding",
    flag_value="hexdump",
    help="Hexdump with offsets and ASCII column",
)
@cryptolite_output_option(
    required=False, help="Store the raw bytes into this file instead of printing them."
)
def bytes_command(length: int, encoding: Optional[str], output: Optional[str]) -> None:
    """Generate LENGTH random bytes."""
    data = random_bytes(length)
    if output:
        write_file(data, output, mode="wb")
        click.echo(f"{length} random bytes stored into {output}")
        return
    if encoding == "base64":
        click.echo(base64_encode(data))
    elif encoding == "hexdump":
        click.echo(format_raw_data(data, use_hexdump=True))
    else:
        click.echo(data.hex())


@main.command(name="token", no_args_is_help=False)
@cryptolite_count_option
@cryptolite_use_json_option
def token_command(count: int, use_json: bool) -> None:
    """Generate 256-bit hexadecimal tokens."""
    _echo_values(token, count, use_json)


@main.command(name="salt", no_args_is_help=False)
@cryptolite_count_option
@cryptolite_use_json_option
def salt_command(count: int, use_json: bool) -> None:
    """Generate 128-bit base64 salt values."""
    _echo_values(salt, count, use_json)


@main.command(name="password", no_args_is_help=False)
@click.option(
    "-l",
    "--length",
    type=INT(min_value=0),
    default=str(DEFAULT_PASSWORD_LENGTH),
    show_default=True,
    help="Number of characters of each password.",
)
@cryptolite_count_option
@cryptolite_use_json_option
def password_command(length: int, count: int, use_json: bool) -> None:
    """Generate alphanumeric passwords."""
    _echo_values(lambda: password(length), count, use_json)


@catch_cryptolite_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
