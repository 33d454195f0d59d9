#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2020-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite pytest configuration and shared test fixtures."""

import os

os.environ["CRYPTOLITE_DEBUG_LOGGING_DISABLED"] = "True"

# pylint: disable=wrong-import-position
import logging
from typing import Any, Iterator

import pytest

from cryptolite.crypto.rng import RandomGenerator, RandomSource
from tests.cli_runner import CliRunner


class ScriptedGenerator(RandomGenerator):
    """Generator returning predefined bytes, for deterministic tests.

    Every request is answered from the front of the script. When the script
    runs out, zero bytes are returned.
    """

    def __init__(self, script: bytes) -> None:
        self.script = bytearray(script)
        self.requests: list[int] = []

    def next_bytes(self, length: int) -> bytes:
        self.requests.append(length)
        chunk = bytes(self.script[:length])
        del self.script[:length]
        return chunk + bytes(length - len(chunk))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def fresh_random_source(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop the shared generator so the next draw creates a new one.

    The original generator is restored after the test.
    """
    monkeypatch.setattr(RandomSource, "_generator", None)
    yield


@pytest.fixture
def scripted_generator(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Get factory installing a ScriptedGenerator as the shared generator.

    :return: Function taking the scripted bytes and returning the installed generator.
    """

    def install(script: bytes) -> ScriptedGenerator:
        generator = ScriptedGenerator(script)
        monkeypatch.setattr(RandomSource, "_generator", generator)
        return generator

    return install


@pytest.fixture
def tests_root_dir() -> str:
    """Get the root directory of tests.

    :return: Absolute path to the tests root directory.
    """
    return os.path.dirname(os.path.abspath(__file__))


@pytest.fixture(autouse=True)
def _reset_cryptolite_logger() -> Iterator[None]:
    """Remove handlers installed by command-line tools during a test."""
    cryptolite_logger = logging.getLogger("cryptolite")
    original_handlers = list(cryptolite_logger.handlers)
    yield
    for handler in cryptolite_logger.handlers[:]:
        if handler not in original_handlers:
            cryptolite_logger.removeHandler(handler)
