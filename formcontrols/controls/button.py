#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from enum import StrEnum
from typing import override

from formcontrols.controls.field import Field
from formcontrols.exceptions import MKConfigError
from formcontrols.htmllib import HTMLTagAttributeValue
from formcontrols.i18n import _
from formcontrols.listener import AnyListener


class ButtonKind(StrEnum):
    """The kind of a button, the value is the type of the rendered input element"""

    BUTTON = "button"
    SUBMIT = "submit"
    IMAGE = "image"
    RESET = "reset"


class Button(Field):
    """A button, its value is the label

    Only submit and image buttons send a value to the server. A submit button
    is activated when the request carries its label, which means it is the
    button that was clicked. An image button is activated when the request
    carries the click coordinates."""

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        kind: ButtonKind = ButtonKind.SUBMIT,
        src: str | None = None,
        title: str | None = None,
        listener: AnyListener | None = None,
        disabled: bool = False,
        **attributes: str,
    ) -> None:
        super().__init__(
            name, label, title=title, listener=listener, disabled=disabled, **attributes
        )
        if kind is ButtonKind.IMAGE and not src:
            raise MKConfigError(_("The image button %r needs an image source") % name)
        self.kind = kind
        self.src = src
        self._clicked = False
        self.x: int | None = None
        self.y: int | None = None

    @property
    @override
    def value(self) -> str:
        return self.label

    @value.setter
    def value(self, value: str | None) -> None:
        self.label = value

    @property
    def input_type(self) -> str:  # type: ignore[override]
        return str(self.kind)

    @override
    def bind_request_value(self) -> None:
        self._clicked = False
        self.x = self.y = None
        if self.name is None or self.kind in (ButtonKind.BUTTON, ButtonKind.RESET):
            return

        context = self.require_context()
        if self.kind is ButtonKind.SUBMIT:
            self._clicked = context.request_parameter(self.name) == self.label
            return

        self._clicked = context.has_request_parameter(self.name + ".x")
        self.x = self._coordinate(context.request_parameter(self.name + ".x"))
        self.y = self._coordinate(context.request_parameter(self.name + ".y"))

    @staticmethod
    def _coordinate(value: str | None) -> int | None:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def clicked(self) -> bool:
        return self._clicked

    @override
    def is_activated(self) -> bool:
        return self._clicked

    @override
    def validate(self) -> None:
        pass

    @override
    def intrinsic_attributes(self) -> dict[str, HTMLTagAttributeValue]:
        if self.kind is ButtonKind.IMAGE:
            return {"src": self.src}
        return {}

    @override
    def css_classes(self) -> list[str]:
        return [self.config.disabled_css_class] if self.disabled else []
