#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from typing import override

from formcontrols.controls.text import TextField
from formcontrols.validators import ValidateEmail


class EmailField(TextField):
    _validate_email = ValidateEmail()

    @property
    @override
    def size(self) -> int:
        if self._size is not None:
            return self._size
        return self.config.email_field_size

    @size.setter
    def size(self, size: int | None) -> None:
        self._size = size

    @override
    def validate_format(self, value: str) -> None:
        self._validate_email(value)
