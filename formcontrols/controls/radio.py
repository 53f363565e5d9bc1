#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Radio buttons and groups of them

All radios of a group share the name of the group, the browser submits the
value of the checked one. The group owns this value, a radio in a group is
checked when its value equals the value of the group. The checked state is
derived from the group whenever it is needed and never stored on the radio.
"""

from __future__ import annotations

from typing import override

from formcontrols import messages
from formcontrols.controls.base import Control
from formcontrols.controls.container import Container, ContainerMixin
from formcontrols.controls.field import Field
from formcontrols.exceptions import MKConfigError
from formcontrols.htmllib import HTMLGenerator
from formcontrols.i18n import _
from formcontrols.listener import AnyListener
from formcontrols.log import logger
from formcontrols.utils import sanitize_id

_logger = logger.getChild("radio")


class Radio(Field):
    input_type = "radio"

    def __init__(
        self,
        value: str,
        label: str | None = None,
        name: str | None = None,
        *,
        checked: bool = False,
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
            title=title,
            listener=listener,
            disabled=disabled,
            readonly=readonly,
            **attributes,
        )
        self._checked = checked

    @property
    def group(self) -> RadioGroup | None:
        parent = self.parent
        return parent if isinstance(parent, RadioGroup) else None

    @property
    @override
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str | None) -> None:
        self._value = "" if value is None else value
        if self.parent is not None:
            self.parent.control_renamed(self)

    @property
    def checked(self) -> bool:
        if (group := self.group) is not None:
            return group.value == self.value
        return self._checked

    @checked.setter
    def checked(self, checked: bool) -> None:
        if (group := self.group) is None:
            self._checked = checked
        elif checked:
            group.value = self.value
        elif group.value == self.value:
            group.value = ""

    @property
    @override
    def label(self) -> str:
        return self._label if self._label is not None else self.value

    @label.setter
    def label(self, label: str | None) -> None:
        self._label = label

    @property
    @override
    def id(self) -> str | None:
        if (explicit_id := self.get_attribute("id")) is not None:
            return explicit_id
        form = self.form
        prefix = "%s_" % form.id if form is not None and form.id else ""
        return prefix + sanitize_id("%s_%s" % (self.name or "", self.value))

    @override
    def bind_request_value(self) -> None:
        if self.group is not None or self.name is None:
            return
        self._checked = self.require_context().request_parameter(self.name) == self.value

    @override
    def validate(self) -> None:
        pass

    @override
    def is_activated(self) -> bool:
        return self.checked

    @override
    def css_classes(self) -> list[str]:
        if (group := self.group) is not None and not group.is_valid:
            return [self.config.error_css_class]
        return super().css_classes()

    @override
    def render(self, html: HTMLGenerator) -> None:
        radio_id = self.id
        checked = self.checked
        # A radio has no readonly state, the disabled radio does not send its value
        html.input(
            self.name,
            self.input_type,
            **self.input_attributes(self.value, checked=checked)
            | {"disabled": self.disabled or self.readonly},
        )
        html.label(self.label, for_=radio_id or "")
        if self.readonly and checked:
            html.input(self.name, "hidden", value=self.value)


class RadioGroup(ContainerMixin, Field, Container):
    """A field which owns radios, their name is always the name of the group"""

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        vertical: bool = False,
        value: str = "",
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
            value=value,
            required=required,
            title=title,
            listener=listener,
            disabled=disabled,
            readonly=readonly,
            **attributes,
        )
        self.vertical = vertical

    @override
    def index_key(self, control: Control) -> str | None:
        return control.value if isinstance(control, Radio) else None

    @override
    def insert_control(self, control: Control, index: int) -> Control:
        if not isinstance(control, Radio):
            raise MKConfigError(_("A radio group can only contain radios, got %r") % (control,))
        previous_parent = control.parent
        if previous_parent is not None and previous_parent is not self:
            previous_parent.remove_control(control)
        control.name = self.name
        control.context = None  # follows the context of the group
        return super().insert_control(control, index)

    @property
    def radios(self) -> list[Radio]:
        return [c for c in self.controls if isinstance(c, Radio)]

    @override
    def set_name(self, name: str | None) -> None:
        super().set_name(name)
        for radio in self.radios:
            radio.name = name

    @property
    def checked_radio(self) -> Radio | None:
        radio = self.get_control(self.value)
        return radio if isinstance(radio, Radio) else None

    @override
    def validate(self) -> None:
        if self.required and not self.value:
            self.set_error_message(messages.SELECT_ERROR)

    @override
    def on_process(self) -> bool:
        self.require_context()
        self.bind_request_value()
        self.set_error(None)
        self.validate()

        for radio in self.controls:
            if not radio.on_process():
                _logger.debug("Processing of %r stopped at %r", self, radio)
                return False

        if self.is_valid and self.is_activated():
            return self.invoke_listener()
        return True

    @override
    def render(self, html: HTMLGenerator) -> None:
        for position, radio in enumerate(self.controls):
            if position and self.vertical:
                html.br()
            elif position:
                html.write("\n")
            radio.render(html)
