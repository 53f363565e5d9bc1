#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from typing import override

from formcontrols import messages
from formcontrols.controls.field import Field
from formcontrols.htmllib import HTMLGenerator
from formcontrols.listener import AnyListener


def parse_bool(value: object) -> bool:
    """Only the literal "true" is true, everything else is false

    >>> parse_bool("TRUE"), parse_bool("false"), parse_bool("yes"), parse_bool(True)
    (True, False, False, True)
    """
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


class Checkbox(Field):
    input_type = "checkbox"

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        checked: bool = False,
        required: bool = False,
        title: str | None = None,
        listener: AnyListener | None = None,
        disabled: bool = False,
        readonly: bool = False,
        **attributes: str,
    ) -> None:
        super().__init__(
            name,
            label,
            required=required,
            title=title,
            listener=listener,
            disabled=disabled,
            readonly=readonly,
            **attributes,
        )
        self.checked = checked

    @override
    def bind_request_value(self) -> None:
        if self.name is None:
            self.checked = False
            return
        self.checked = self.require_context().has_request_parameter(self.name)

    @property
    @override
    def value(self) -> str:
        return "true" if self.checked else "false"

    @value.setter
    def value(self, value: str | None) -> None:
        self.checked = parse_bool(value)

    @property
    @override
    def value_object(self) -> object:
        return self.checked

    @value_object.setter
    def value_object(self, value: object) -> None:
        self.checked = parse_bool(value)

    @override
    def validate(self) -> None:
        if self.required and not self.checked:
            self.set_error_message(messages.NOT_CHECKED_ERROR)

    @override
    def is_activated(self) -> bool:
        return True

    @override
    def render(self, html: HTMLGenerator) -> None:
        # A checkbox has no readonly state, the disabled box does not send its value
        html.input(
            self.name,
            self.input_type,
            **self.input_attributes(None, checked=self.checked)
            | {"disabled": self.disabled or self.readonly},
        )
        if self.readonly and self.checked:
            html.input(self.name, "hidden", value="true")
