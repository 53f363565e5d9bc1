#!/usr/bin/env python3
# Copyright (C) 2021 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Format rules of the fields

The rules raise a FormatError which carries the key and the arguments of the
message the field reports. The label of the field is added by the field.
"""

from typing import override

from marshmallow import ValidationError
from marshmallow.validate import Validator

from formcontrols import messages


class FormatError(ValidationError):
    def __init__(self, message_key: str, *message_args: object) -> None:
        super().__init__(message_key)
        self.message_key = message_key
        self.message_args = message_args


class ValidateLength(Validator):
    """

    Examples:

        >>> validator = ValidateLength(min_length=2, max_length=4)
        >>> validator("abc")
        'abc'
        >>> validator("a")
        Traceback (most recent call last):
        ...
        formcontrols.validators.FormatError: field-minlength-error

    """

    def __init__(self, min_length: int = 0, max_length: int = 0) -> None:
        self.min_length = min_length
        self.max_length = max_length

    def __call__(self, value: str) -> str:
        if self.min_length > 0 and len(value) < self.min_length:
            raise FormatError(messages.FIELD_MINLENGTH_ERROR, self.min_length)
        if self.max_length > 0 and len(value) > self.max_length:
            raise FormatError(messages.FIELD_MAXLENGTH_ERROR, self.max_length)
        return value

    @override
    def _repr_args(self) -> str:
        return "min_length={!r}, max_length={!r}".format(self.min_length, self.max_length)


class ValidateEmail(Validator):
    """An address needs exactly one '@' which is surrounded by letters or digits

    Examples:

        >>> validator = ValidateEmail()
        >>> validator("a@b")
        'a@b'
        >>> validator("@b")
        Traceback (most recent call last):
        ...
        formcontrols.validators.FormatError: email-format-error

    """

    def __call__(self, value: str) -> str:
        index = value.find("@")
        if (
            index < 1
            or index == len(value) - 1
            or value.count("@") != 1
            or not value[index - 1].isalnum()
            or not value[index + 1].isalnum()
        ):
            raise FormatError(messages.EMAIL_FORMAT_ERROR)
        return value


class ValidateNumberRange(Validator):
    """

    Examples:

        >>> validator = ValidateNumberRange(min_value=0, max_value=100)
        >>> validator(50)
        50
        >>> validator(150)
        Traceback (most recent call last):
        ...
        formcontrols.validators.FormatError: number-maxvalue-error

    """

    def __init__(
        self, min_value: int | float | None = None, max_value: int | float | None = None
    ) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def __call__(self, value: int | float) -> int | float:
        if self.min_value is not None and value < self.min_value:
            raise FormatError(messages.NUMBER_MINVALUE_ERROR, self.min_value)
        if self.max_value is not None and value > self.max_value:
            raise FormatError(messages.NUMBER_MAXVALUE_ERROR, self.max_value)
        return value

    @override
    def _repr_args(self) -> str:
        return "min_value={!r}, max_value={!r}".format(self.min_value, self.max_value)
