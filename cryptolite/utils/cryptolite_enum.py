#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2023-2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Cryptolite enumeration with tag, label and description per member.

Members are looked up by their numeric tag or, case-insensitively, by their
label, which is how configuration values (environment variables, CLI options)
are turned into enum members.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from typing_extensions import Self

from cryptolite.exceptions import CryptoliteKeyError, CryptoliteTypeError


@dataclass(frozen=True)
class CryptoliteEnumMember:
    """Cryptolite Enum member representation."""

    tag: int
    label: str
    description: Optional[str] = None


class CryptoliteEnum(CryptoliteEnumMember, Enum):
    """Cryptolite enumeration with tag and label based lookup.

    Members compare equal to their own tag or label, so an enum member can be
    matched directly against a raw configuration value.
    """

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum value with another object.

        :param __value: Object to compare with this enum value.
        :return: True if the object equals tag or label, False otherwise.
        """
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

    @classmethod
    def contains(cls, obj: Union[int, str]) -> bool:
        """Check if given member with given tag/label exists in enum.

        :param obj: Label or tag of enum member to check for existence.
        :raises CryptoliteTypeError: Object must be either string or integer.
        :return: True if member exists, False otherwise.
        """
        if not isinstance(obj, (int, str)):
            raise CryptoliteTypeError("Object must be either string or integer")
        try:
            cls.from_attr(obj)
            return True
        except CryptoliteKeyError:
            return False

    @classmethod
    def from_attr(cls, attribute: Union[int, str]) -> Self:
        """Get enum member with given tag/label attribute.

        :param attribute: Tag value (int) or label value (str) of the enum member to find.
        :return: Found enum member matching the given attribute.
        """
        # Let's make MyPy happy, see https://github.com/python/mypy/issues/10740
        from_tag: Callable = cls.from_tag
        from_label: Callable = cls.from_label
        from_method: Callable = from_tag if isinstance(attribute, int) else from_label
        return from_method(attribute)

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get enum member with given tag.

        :param tag: Tag to be used for searching
        :raises CryptoliteKeyError: If enum with given tag is not found
        :return: Found enum member
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        raise CryptoliteKeyError(f"There is no {cls.__name__} item in with tag {tag} defined")

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label, ignoring case.

        :param label: Label to be used for searching
        :raises CryptoliteKeyError: If enum with given label is not found or label is not string
        :return: Found enum member
        """
        if not isinstance(label, str):
            raise CryptoliteKeyError("Label must be string")
        for item in cls.__members__.values():
            if item.label.upper() == label.upper():
                return item
        raise CryptoliteKeyError(f"There is no {cls.__name__} item with label {label} defined")
