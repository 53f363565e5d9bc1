#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from typing import override

from formcontrols.controls.base import AbstractControl
from formcontrols.decorator import Decorator
from formcontrols.htmllib import HTMLGenerator
from formcontrols.utils import to_label


class Label(AbstractControl):
    """Displays a text, never reads the request"""

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        value: object = None,
        decorator: Decorator | None = None,
        **attributes: str,
    ) -> None:
        super().__init__(name, **attributes)
        self._label = label
        self.value = value
        self.decorator = decorator

    @property
    def label(self) -> str:
        if self._label is not None:
            return self._label
        return to_label(self.name or "")

    @override
    def render(self, html: HTMLGenerator) -> None:
        if self.decorator is not None:
            html.write_html(self.decorator.render(self.value, self.context))
            return
        if self.has_attributes():
            html.span(self.label, id=self.get_attribute("id"), **self.caller_attributes())
            return
        html.write_text(self.label)
