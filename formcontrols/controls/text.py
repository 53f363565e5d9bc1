#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import re
from typing import override

from marshmallow import ValidationError
from marshmallow.validate import Regexp

from formcontrols import messages
from formcontrols.controls.field import Field
from formcontrols.htmllib import HTMLGenerator, HTMLTagAttributeValue
from formcontrols.listener import AnyListener
from formcontrols.validators import FormatError, ValidateLength


class TextField(Field):
    """Single line text input

    After the required rule the length rules are checked, first the minimum
    then the maximum length. Subclasses add format rules with
    validate_format(), which only runs when the length rules passed."""

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        value: str = "",
        required: bool = False,
        min_length: int = 0,
        max_length: int = 0,
        size: int | None = None,
        title: str | None = None,
        listener: AnyListener | None = None,
        disabled: bool = False,
        readonly: bool = False,
        **attributes: str,
    ) -> None:
        super().__init__(
            name,
            label,
            value=value,
            required=required,
            title=title,
            listener=listener,
            disabled=disabled,
            readonly=readonly,
            **attributes,
        )
        self.min_length = min_length
        self.max_length = max_length
        self._size = size

    @property
    def size(self) -> int:
        if self._size is not None:
            return self._size
        return self.config.text_field_size

    @size.setter
    def size(self, size: int | None) -> None:
        self._size = size

    @override
    def validate(self) -> None:
        super().validate()
        if not self.is_valid or not self.value:
            return

        try:
            ValidateLength(self.min_length, self.max_length)(self.value)
            self.validate_format(self.value)
        except FormatError as e:
            self.set_error_message(e.message_key, *e.message_args)

    def validate_format(self, value: str) -> None:
        """Raise a FormatError when the value is not acceptable"""

    @override
    def intrinsic_attributes(self) -> dict[str, HTMLTagAttributeValue]:
        return {
            "size": self.size,
            "maxlength": self.max_length if self.max_length > 0 else None,
        }


class PasswordField(TextField):
    input_type = "password"

    @override
    def render_value(self) -> str | None:
        return None


class HiddenField(Field):
    """Transports a value through the client, is never activated"""

    input_type = "hidden"

    @override
    def is_activated(self) -> bool:
        return False

    @override
    def css_classes(self) -> list[str]:
        return []


class TextArea(TextField):
    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        cols: int = 20,
        rows: int = 3,
        **kwargs: object,
    ) -> None:
        super().__init__(name, label, **kwargs)  # type: ignore[arg-type]
        self.cols = cols
        self.rows = rows

    @override
    def render(self, html: HTMLGenerator) -> None:
        attrs = self.input_attributes(
            None,
            cols=self.cols,
            rows=self.rows,
            maxlength=self.max_length if self.max_length > 0 else None,
        )
        html.write_html(html.render_textarea(self.value, self.name, **attrs))


class RegexField(TextField):
    """Text input whose value has to match a regular expression as a whole"""

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        pattern: str,
        **kwargs: object,
    ) -> None:
        super().__init__(name, label, **kwargs)  # type: ignore[arg-type]
        self.pattern = pattern
        self._regexp = Regexp(re.compile(r"(?:%s)\Z" % pattern))

    @override
    def validate_format(self, value: str) -> None:
        try:
            self._regexp(value)
        except ValidationError:
            raise FormatError(messages.REGEX_PATTERN_ERROR)
