#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterator
from typing import override

from formcontrols.controls.base import Control
from formcontrols.controls.container import AbstractContainer, Container
from formcontrols.controls.field import Field
from formcontrols.controls.text import HiddenField
from formcontrols.htmllib import HTMLGenerator
from formcontrols.listener import AnyListener
from formcontrols.log import logger

_logger = logger.getChild("form")

FORM_NAME = "form_name"


def iter_fields(container: Container) -> Iterator[Field]:
    """The fields below the container in rendering order"""
    for control in container.controls:
        if isinstance(control, Field):
            yield control
        elif isinstance(control, Container):
            yield from iter_fields(control)


class Form(AbstractContainer):
    """A HTML form which processes its fields only when it was submitted

    Every form contains a hidden field which carries the name of the form.
    This is how a form recognizes its own submission when a page contains
    multiple forms."""

    tag = "form"

    def __init__(
        self,
        name: str,
        *,
        method: str = "post",
        action: str = "",
        listener: AnyListener | None = None,
        disabled: bool = False,
        readonly: bool = False,
        **attributes: str,
    ) -> None:
        super().__init__(
            name, listener=listener, disabled=disabled, readonly=readonly, **attributes
        )
        self.method = method
        self.action = action
        self.error: str | None = None
        self.form_name_field = HiddenField(FORM_NAME, value=name)
        self.add_control(self.form_name_field)

    @override
    def set_name(self, name: str | None) -> None:
        super().set_name(name)
        self.form_name_field.value = name

    def is_form_submission(self) -> bool:
        context = self.require_context()
        return (
            context.request_parameter(FORM_NAME) == self.name
            and context.request.method.lower() == self.method.lower()
        )

    @override
    def on_process(self) -> bool:
        if not self.is_form_submission():
            return True
        _logger.debug("Processing submission of %r", self)
        return super().on_process()

    #
    # Fields and their errors
    #

    @property
    def fields(self) -> list[Field]:
        """All fields of the form, also the ones in nested containers"""
        return [f for f in iter_fields(self) if f is not self.form_name_field]

    def get_field(self, name: str) -> Field | None:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    @property
    def errors(self) -> list[tuple[str, str]]:
        """The label and message of every invalid field"""
        errors = []
        if self.error is not None:
            errors.append(("", self.error))
        for field in self.fields:
            if field.error is not None:
                errors.append((field.error_label, field.error))
        return errors

    @property
    def is_valid(self) -> bool:
        return self.error is None and all(field.is_valid for field in self.fields)

    def clear_errors(self) -> None:
        self.error = None
        for field in self.fields:
            field.set_error(None)

    #
    # Rendering
    #

    @override
    def render(self, html: HTMLGenerator) -> None:
        html.open_form(
            method=self.method,
            action=self.action,
            id=self.id,
            name=self.name,
            **self.caller_attributes(),
        )
        html.write("\n")
        if not self.is_valid:
            self.render_errors(html)
        self.render_children(html)
        html.write("\n")
        html.close_form()

    def render_errors(self, html: HTMLGenerator) -> None:
        html.open_ul(class_=self.config.error_css_class)
        for _label, message in self.errors:
            html.li(message)
        html.close_ul()
        html.write("\n")


def find_form(control: Control) -> Form | None:
    parent = control.parent
    while parent is not None:
        if isinstance(parent, Form):
            return parent
        parent = parent.parent
    return None
