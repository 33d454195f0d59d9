#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2019-2023,2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite cryptographic random value generation.

This module owns the single process-wide CSPRNG used by the library and derives
from it raw random bytes, hexadecimal tokens, base64 salt values and
alphanumeric passwords. The generator is created lazily on first use for the
algorithm named by ``CRYPTOLITE_RNG_ALGORITHM`` and is shared by all threads.
"""

# Used security modules

import logging
import os
import threading
from abc import ABC, abstractmethod
from typing import Optional, Type

from cryptolite import CRYPTOLITE_RNG_ALGORITHM
from cryptolite.crypto.exceptions import CryptoliteRngUnavailableError
from cryptolite.exceptions import CryptoliteKeyError, CryptoliteValueError
from cryptolite.utils.cryptolite_enum import CryptoliteEnum
from cryptolite.utils.misc import base64_encode, hex_encode

logger = logging.getLogger(__name__)

TOKEN_BITS = 256
SALT_BYTES = 16
PASSWORD_CHARACTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

BITS_IN_A_BYTE = 8
TOKEN_BYTES = TOKEN_BITS // BITS_IN_A_BYTE
# 62 characters fit into 6 bits, masked values 62 and 63 are rejected
PASSWORD_INDEX_MASK = 0x3F


class EnumRngAlgorithm(CryptoliteEnum):
    """Named CSPRNG algorithms the random source can be built on."""

    URANDOM = (0, "urandom", "Operating system CSPRNG via os.urandom")
    GETRANDOM = (1, "getrandom", "Linux getrandom(2) system call")


class RandomGenerator(ABC):
    """Base class for secure byte generators.

    Implementations are seeded by the operating system and must be safe to use
    from several threads at once.
    """

    algorithm: EnumRngAlgorithm

    @abstractmethod
    def next_bytes(self, length: int) -> bytes:
        """Generate random bytes.

        :param length: Number of bytes to generate, non-negative.
        :return: Exactly ``length`` random bytes.
        """


class UrandomGenerator(RandomGenerator):
    """Generator backed by the OS randomness source behind ``os.urandom``."""

    algorithm = EnumRngAlgorithm.URANDOM

    def next_bytes(self, length: int) -> bytes:
        """Generate random bytes from ``os.urandom``.

        :param length: Number of bytes to generate.
        :raises CryptoliteRngUnavailableError: The OS provides no randomness source.
        :return: Exactly ``length`` random bytes.
        """
        try:
            return os.urandom(length)
        except NotImplementedError as exc:
            raise CryptoliteRngUnavailableError(
                f"Algorithm unavailable: {self.algorithm.label}"
            ) from exc


class GetrandomGenerator(RandomGenerator):
    """Generator backed by the Linux ``getrandom(2)`` system call."""

    algorithm = EnumRngAlgorithm.GETRANDOM

    def __init__(self) -> None:
        """Check that the interpreter exposes ``os.getrandom``.

        :raises CryptoliteRngUnavailableError: Not supported on this platform.
        """
        if not hasattr(os, "getrandom"):
            raise CryptoliteRngUnavailableError(
                f"Algorithm unavailable: {self.algorithm.label} is not supported on this platform"
            )

    def next_bytes(self, length: int) -> bytes:
        """Generate random bytes with ``os.getrandom``.

        Large requests may be answered partially by the kernel, so the call is
        repeated until the buffer is full.

        :param length: Number of bytes to generate.
        :raises CryptoliteRngUnavailableError: The running kernel lacks the system call.
        :return: Exactly ``length`` random bytes.
        """
        buffer = bytearray()
        try:
            while len(buffer) < length:
                buffer += os.getrandom(length - len(buffer))
        except OSError as exc:
            raise CryptoliteRngUnavailableError(
                f"Algorithm unavailable: {self.algorithm.label}"
            ) from exc
        return bytes(buffer)


_GENERATORS: dict[EnumRngAlgorithm, Type[RandomGenerator]] = {
    EnumRngAlgorithm.URANDOM: UrandomGenerator,
    EnumRngAlgorithm.GETRANDOM: GetrandomGenerator,
}


class RandomSource:
    """Holder of the shared, lazily created secure generator.

    The generator is built on the first call of :meth:`instance` and kept for
    the life of the process. Creation is guarded by a lock so concurrent first
    callers all receive the same generator. Library callers should use the
    module level functions instead of the handle itself.
    """

    _generator: Optional[RandomGenerator] = None
    _lock = threading.Lock()

    @classmethod
    def instance(cls) -> RandomGenerator:
        """Get the shared secure generator, creating it on first use.

        :raises CryptoliteRngUnavailableError: The configured algorithm is unknown or unavailable.
        :return: The process-wide generator.
        """
        generator = cls._generator
        if generator is None:
            with cls._lock:
                if cls._generator is None:
                    cls._generator = cls._create_generator(CRYPTOLITE_RNG_ALGORITHM)
                generator = cls._generator
        return generator

    @staticmethod
    def _create_generator(algorithm_label: str) -> RandomGenerator:
        """Create generator for the named algorithm.

        :param algorithm_label: Label of an :class:`EnumRngAlgorithm` member.
        :raises CryptoliteRngUnavailableError: Unknown algorithm or not available on this host.
        :return: New generator instance.
        """
        try:
            algorithm = EnumRngAlgorithm.from_label(algorithm_label)
        except CryptoliteKeyError as exc:
            raise CryptoliteRngUnavailableError(
                f"Algorithm unavailable: {algorithm_label}. "
                f"Supported algorithms: {', '.join(EnumRngAlgorithm.labels())}"
            ) from exc
        generator = _GENERATORS[algorithm]()
        logger.debug(f"Secure random generator created: {algorithm.description}")
        return generator


def _check_length(length: int, name: str = "Length") -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise CryptoliteValueError(f"{name} must be an integer, got {type(length).__name__}")
    if length < 0:
        raise CryptoliteValueError(f"{name} must not be negative, got {length}")


def random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes.

    :param length: The number of random bytes to generate, zero gives empty bytes.
    :raises CryptoliteValueError: If length is negative.
    :raises CryptoliteRngUnavailableError: If the secure generator cannot be created.
    :return: Cryptographically secure random bytes of specified length.
    """
    _check_length(length)
    return RandomSource.instance().next_bytes(length)


def token() -> str:
    """Generate a random token.

    :return: A 256-bit (32 byte) random token as a 64 character lowercase hexadecimal string.
    """
    return hex_encode(random_bytes(TOKEN_BYTES))


def salt() -> str:
    """Generate a random salt value.

    :return: A random salt of SALT_BYTES length, as a base64-encoded string for easy storage.
    """
    return base64_encode(random_bytes(SALT_BYTES))


def password(length: int) -> str:
    """Generate a random alphanumeric password.

    Each random byte is masked to its low 6 bits, giving an index between 0 and
    63. Indices below 62 select a character from PASSWORD_CHARACTERS, the two
    remaining values are discarded, so every character is equally likely.
    Rejected bytes are replaced by drawing only the missing number of bytes on
    the next pass.

    :param length: The length of the password to be returned.
    :raises CryptoliteValueError: If length is negative.
    :return: A password of the specified length, selected from PASSWORD_CHARACTERS.
    """
    _check_length(length, "Password length")
    result: list[str] = []

    while len(result) < length:
        for byte in random_bytes(length - len(result)):
            index = byte & PASSWORD_INDEX_MASK
            if index < len(PASSWORD_CHARACTERS):
                result.append(PASSWORD_CHARACTERS[index])

    return "".join(result)
