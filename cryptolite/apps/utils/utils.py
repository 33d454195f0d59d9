#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2020-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite application utilities and helper functions.

Parameter types, output formatting and the error boundary shared by the
Cryptolite command-line tools.
"""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click
import hexdump

from cryptolite import CRYPTOLITE_DEBUG_LOG_FILE, CRYPTOLITE_DEBUG_LOGGING_DISABLED
from cryptolite.exceptions import CryptoliteError

logger = logging.getLogger(__name__)


class CryptoliteAppError(CryptoliteError):
    """Cryptolite application error exception for CLI tools.

    Non-fatal error of a command-line tool, carrying the exit code passed to the OS.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


class INT(click.ParamType):
    """Click parameter type for parsing integers with flexible format support.

    Accepts binary (0b), hexadecimal (0x) and octal (0o) prefixes as well as
    underscore separators (e.g., 0x20, 1_000).

    :cvar name: Parameter type name used by Click framework.
    """

    name = "integer"

    def __init__(self, base: int = 0, min_value: Optional[int] = None) -> None:
        """Initialize custom INT param class.

        :param base: requested base for the number, defaults to 0
        :param min_value: smallest accepted value, defaults to None (no limit)
        """
        super().__init__()
        self.base = base
        self.min_value = min_value

    # pylint: disable=inconsistent-return-statements
    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Perform the conversion str -> int.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: value as integer
        """
        if isinstance(value, int):
            result = value
        else:
            try:
                result = int(value, self.base)
            except TypeError:
                self.fail(
                    "expected string for int() conversion, got "
                    f"{value!r} of type {type(value).__name__}",
                    param,
                    ctx,
                )
            except ValueError:
                self.fail(f"{value!r} is not a valid integer", param, ctx)
        if self.min_value is not None and result < self.min_value:
            self.fail(f"{value!r} is smaller than the minimum {self.min_value}", param, ctx)
        return result


def _split_string(string: str, length: int) -> list:
    """Split the string into chunks of same length."""
    return [string[i : i + length] for i in range(0, len(string), length)]


def format_raw_data(data: bytes, use_hexdump: bool = False, line_length: int = 16) -> str:
    """Format bytes data into human-readable form.

    :param data: Data to format
    :param use_hexdump: Use hexdump with addresses and ASCII, defaults to False
    :param line_length: bytes per line, defaults to 16
    :return: formatted string (multilined if necessary)
    """
    if use_hexdump:
        return hexdump.hexdump(data, result="return")
    data_string = data.hex()
    parts = [_split_string(line, 2) for line in _split_string(data_string, line_length * 2)]
    result = "\n".join(" ".join(line) for line in parts)
    return result


def catch_cryptolite_error(function: Callable) -> Callable:
    """Catch and handle CryptoliteError and other exceptions.

    Decorator for the entry points of command-line tools. CryptoliteAppError
    exits with its own error code (default 1). CryptoliteError, including the
    fatal unavailable-generator error, and AssertionError exit with code 2.
    Any other exception, KeyboardInterrupt included, exits with code 3. All but
    application errors are written to the debug log with their traceback.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except CryptoliteAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, CryptoliteError) as lib_exc:
            click.echo(f"{lib_exc.__class__.__name__}: {lib_exc}", err=True)
            logger.debug(str(lib_exc), exc_info=True)
            if not CRYPTOLITE_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {CRYPTOLITE_DEBUG_LOG_FILE} for more info",
                    fg="yellow",
                    err=True,
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not CRYPTOLITE_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {CRYPTOLITE_DEBUG_LOG_FILE} for more info.",
                    fg="yellow",
                    err=True,
                )
            sys.exit(3)

    return wrapper
