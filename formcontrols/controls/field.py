#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Base of all controls which take their value from a request parameter

Processing a field runs through these steps:

1. bind the value of the request parameter which is named like the field
2. validate the value, the first failing rule sets the error message
3. invoke the listener, but only when the value is valid and the field was
   activated (e.g. the button was clicked or a text was entered)

Validation errors never stop the processing of the page. They are stored on
the field and rendered with it.
"""

from __future__ import annotations

from typing import override, TYPE_CHECKING

from formcontrols import messages
from formcontrols.controls.base import AbstractControl
from formcontrols.htmllib import HTMLGenerator, HTMLTagAttributeValue
from formcontrols.listener import AnyListener
from formcontrols.utils import to_label

if TYPE_CHECKING:
    from formcontrols.controls.form import Form


class Field(AbstractControl):
    input_type = "text"

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        value: str = "",
        required: bool = False,
        title: str | None = None,
        listener: AnyListener | None = None,
        disabled: bool = False,
        readonly: bool = False,
        **attributes: str,
    ) -> None:
        super().__init__(
            name, listener=listener, disabled=disabled, readonly=readonly, **attributes
        )
        self._label = label
        self._value = value
        self._error: str | None = None
        self.required = required
        self.title = title

    #
    # Value
    #

    def get_request_value(self) -> str:
        """The trimmed value of the request parameter, an empty string if it is missing"""
        if self.name is None:
            return ""
        context = self.require_context()
        value = context.request_parameter(self.name)
        if value is None:
            return ""
        return value.strip() if context.config.trim_request_values else value

    def bind_request_value(self) -> None:
        self._value = self.get_request_value()

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str | None) -> None:
        self._value = "" if value is None else value

    @property
    def value_object(self) -> object:
        return self._value or None

    @value_object.setter
    def value_object(self, value: object) -> None:
        self.value = None if value is None else str(value)

    #
    # Error handling
    #

    @property
    def error(self) -> str | None:
        return self._error

    def set_error(self, error: str | None) -> None:
        self._error = error

    def set_error_message(self, key: str, *args: object) -> None:
        """Set the error message unless an earlier rule already failed"""
        if self._error is not None:
            return
        self._error = self.message(key, self.error_label, *args)

    @property
    def is_valid(self) -> bool:
        return self._error is None

    def validate(self) -> None:
        if self.required and not self.value:
            self.set_error_message(messages.FIELD_REQUIRED_ERROR)

    def is_activated(self) -> bool:
        return bool(self.value)

    #
    # Labels
    #

    @property
    def label(self) -> str:
        if self._label is not None:
            return self._label
        return to_label(self.name or "")

    @label.setter
    def label(self, label: str | None) -> None:
        self._label = label

    @property
    def error_label(self) -> str:
        return self.label.rstrip().removesuffix(":").rstrip()

    #
    # Tree
    #

    @property
    def form(self) -> Form | None:
        from formcontrols.controls.form import find_form  # pylint: disable=cyclic-import

        return find_form(self)

    @property
    @override
    def id(self) -> str | None:
        if (explicit_id := self.get_attribute("id")) is not None:
            return explicit_id
        if self.name is None:
            return None
        if (form := self.form) is not None and form.id:
            return "%s_%s" % (form.id, self.name)
        return self.name

    #
    # Processing
    #

    @override
    def on_process(self) -> bool:
        self.require_context()
        self.bind_request_value()
        self.set_error(None)
        self.validate()
        if self.is_valid and self.is_activated():
            return self.invoke_listener()
        return True

    #
    # Rendering
    #

    def css_classes(self) -> list[str]:
        config = self.config
        css = []
        if not self.is_valid:
            css.append(config.error_css_class)
        if self.disabled:
            css.append(config.disabled_css_class)
        return css

    def input_attributes(
        self,
        value: str | None,
        *,
        checked: bool | None = None,
        **intrinsic: HTMLTagAttributeValue,
    ) -> dict[str, HTMLTagAttributeValue]:
        """The attributes of the rendered element after type and name"""
        attrs: dict[str, HTMLTagAttributeValue] = {
            "id": self.id,
            "value": value,
            "title": self.title,
        }
        attrs.update(intrinsic)
        attrs.update(self.caller_attributes())
        attrs["checked"] = checked
        attrs["disabled"] = self.disabled
        attrs["readonly"] = self.readonly
        attrs["class_"] = self.css_classes()
        return attrs

    def render_value(self) -> str | None:
        return self.value

    def intrinsic_attributes(self) -> dict[str, HTMLTagAttributeValue]:
        return {}

    @override
    def render(self, html: HTMLGenerator) -> None:
        html.input(
            self.name,
            self.input_type,
            **self.input_attributes(self.render_value(), **self.intrinsic_attributes()),
        )
