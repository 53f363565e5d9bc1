#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Text inputs for numbers

A value which can not be parsed is reported as format error of the field,
never raised. The range rules run after the value has been parsed."""

import abc
import math
import re
from typing import override

from formcontrols import messages
from formcontrols.controls.text import TextField
from formcontrols.validators import FormatError, ValidateNumberRange

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DOUBLE_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class NumberField(TextField):
    format_error: str

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        min_value: int | float | None = None,
        max_value: int | float | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(name, label, **kwargs)  # type: ignore[arg-type]
        self.min_value = min_value
        self.max_value = max_value

    @abc.abstractmethod
    def parse(self, value: str) -> int | float:
        """Raises ValueError when the value is not a number of this kind"""
        raise NotImplementedError()

    def parsed_value(self) -> int | float | None:
        try:
            return self.parse(self.value)
        except ValueError:
            return None

    @override
    def validate_format(self, value: str) -> None:
        try:
            number = self.parse(value)
        except ValueError:
            raise FormatError(self.format_error)
        ValidateNumberRange(self.min_value, self.max_value)(number)

    @property
    @override
    def value_object(self) -> object:
        return self.parsed_value()

    @value_object.setter
    def value_object(self, value: object) -> None:
        self.value = None if value is None else str(value)


class IntegerField(NumberField):
    format_error = messages.INTEGER_FORMAT_ERROR

    @override
    def parse(self, value: str) -> int:
        # int() also takes blanks and digit separators
        if not _INTEGER_RE.fullmatch(value):
            raise ValueError(value)
        return int(value)

    @property
    def integer(self) -> int | None:
        return self.parsed_value()  # type: ignore[return-value]


class DoubleField(NumberField):
    format_error = messages.NUMBER_FORMAT_ERROR

    @override
    def parse(self, value: str) -> float:
        if not _DOUBLE_RE.fullmatch(value):
            raise ValueError(value)
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(value)
        return number

    @property
    def number(self) -> float | None:
        return self.parsed_value()
