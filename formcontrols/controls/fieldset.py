#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Group of fields inside a form, rendered with a border and a legend

Disabling or setting a fieldset to read only does the same to all the fields
it contains, since the state flags of a control follow its parents.
"""

from collections.abc import Mapping
from typing import override

from formcontrols.controls.container import AbstractContainer
from formcontrols.controls.field import Field
from formcontrols.controls.form import find_form, iter_fields
from formcontrols.htmllib import HTMLGenerator, HTMLTagAttributeValue
from formcontrols.listener import AnyListener
from formcontrols.utils import to_label


class FieldSet(AbstractContainer):
    tag = "fieldset"

    def __init__(
        self,
        name: str,
        legend: str | None = None,
        *,
        show_border: bool = True,
        listener: AnyListener | None = None,
        disabled: bool = False,
        readonly: bool = False,
        **attributes: str,
    ) -> None:
        super().__init__(
            name, listener=listener, disabled=disabled, readonly=readonly, **attributes
        )
        self._legend = legend
        self.show_border = show_border
        self._legend_attributes: dict[str, str] = {}

    @property
    def legend(self) -> str:
        """The caption of the fieldset, an empty legend is not rendered"""
        if self._legend is not None:
            return self._legend
        return to_label(self.name or "")

    @legend.setter
    def legend(self, legend: str | None) -> None:
        self._legend = legend

    def set_legend_attribute(self, name: str, value: str | None) -> None:
        if value is None:
            self._legend_attributes.pop(name, None)
        else:
            self._legend_attributes[name] = value

    @property
    def legend_attributes(self) -> Mapping[str, str]:
        return self._legend_attributes

    @property
    @override
    def id(self) -> str | None:
        if (explicit_id := self.get_attribute("id")) is not None:
            return explicit_id
        if self.name is None:
            return None
        if (form := find_form(self)) is not None and form.id:
            return "%s_%s" % (form.id, self.name)
        return self.name

    #
    # Fields
    #

    @property
    def fields(self) -> list[Field]:
        return list(iter_fields(self))

    def get_field(self, name: str) -> Field | None:
        for field in iter_fields(self):
            if field.name == name:
                return field
        return None

    #
    # Rendering
    #

    @override
    def render(self, html: HTMLGenerator) -> None:
        if not self.show_border:
            self.render_children(html)
            return

        html.write_html(
            html.render_start_tag(
                self.tag, id=self.id, **self.caller_attributes(), disabled=self.disabled
            )
        )
        html.write("\n")
        if self.legend:
            self.render_legend(html)
            html.write("\n")
        if self.controls:
            self.render_children(html)
            html.write("\n")
        html.write_html(html.render_end_tag(self.tag))

    def render_legend(self, html: HTMLGenerator) -> None:
        attrs: dict[str, HTMLTagAttributeValue] = {
            "id": self._legend_attributes.get("id", "%s_legend" % self.id),
        }
        attrs.update((k, v) for k, v in self._legend_attributes.items() if k != "id")
        html.write_html(html.render_element("legend", self.legend, **attrs))
