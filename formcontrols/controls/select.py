#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Select boxes and their option trees

Options and option groups are immutable. They can be shared between
selects and between requests, e.g. through the option_list_registry. They
do not know whether they are selected. This is decided by the select while
it renders them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import override

from formcontrols import messages
from formcontrols.controls.field import Field
from formcontrols.exceptions import MKConfigError
from formcontrols.htmllib import HTMLGenerator
from formcontrols.i18n import _
from formcontrols.listener import AnyListener
from formcontrols.utils.plugin_registry import Registry


@dataclass(frozen=True)
class Option:
    value: str
    label: str | None = None

    def __post_init__(self) -> None:
        if self.label is None:
            object.__setattr__(self, "label", self.value)


@dataclass(frozen=True, init=False)
class OptionGroup:
    label: str
    children: tuple[OptionNode, ...]

    def __init__(self, label: str, *children: OptionNode) -> None:
        for child in children:
            if not isinstance(child, Option | OptionGroup):
                raise MKConfigError(
                    _("Option groups can only contain options and option groups, got %r")
                    % (child,)
                )
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "children", children)

    def iter_options(self) -> Iterator[Option]:
        for child in self.children:
            if isinstance(child, OptionGroup):
                yield from child.iter_options()
            else:
                yield child


OptionNode = Option | OptionGroup

EMPTY_OPTION = Option("", "")


def iter_options(nodes: Iterable[OptionNode]) -> Iterator[Option]:
    """All options of the tree in rendering order"""
    for node in nodes:
        if isinstance(node, OptionGroup):
            yield from node.iter_options()
        else:
            yield node


def to_option_node(option: object) -> OptionNode:
    match option:
        case Option() | OptionGroup():
            return option
        case bool():
            return Option("true" if option else "false")
        case str() | int() | float():
            return Option(str(option))
    raise MKConfigError(_("Can not use %r as option") % (option,))


@dataclass(frozen=True)
class OptionList:
    """A named list of options which is shared by the whole process"""

    name: str
    options: tuple[OptionNode, ...]


class OptionListRegistry(Registry[OptionList]):
    @override
    def plugin_name(self, instance: OptionList) -> str:
        return instance.name

    @override
    def registration_hook(self, instance: OptionList) -> None:
        for option in instance.options:
            if not isinstance(option, Option | OptionGroup):
                raise MKConfigError(
                    _("The option list %s contains %r") % (instance.name, option)
                )


option_list_registry = OptionListRegistry()


class Select(Field):
    """A select box, optionally allowing multiple selected options

    A single select submits one value. A multi select submits the values of
    all selected options as repeated request parameter."""

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        options: Iterable[object] | Mapping[object, object] = (),
        multiple: bool = False,
        size: int | None = None,
        default_option: Option | None = None,
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
        self.multiple = multiple
        self.size = size
        self.default_option = default_option
        self.selected_values: list[str] = [value] if multiple and value else []
        self._options: list[OptionNode] = []
        self.add_all(options)

    #
    # Options
    #

    def add(self, option: object) -> OptionNode:
        node = to_option_node(option)
        self._options.append(node)
        return node

    def add_all(self, options: Iterable[object] | Mapping[object, object]) -> None:
        if isinstance(options, Mapping):
            for value, label in options.items():
                self.add(Option(str(value), str(label)))
            return
        for option in options:
            self.add(option)

    @property
    def options(self) -> tuple[OptionNode, ...]:
        if self.default_option is not None:
            return (self.default_option, *self._options)
        return tuple(self._options)

    def first_option(self) -> Option | None:
        return next(iter_options(self.options), None)

    def is_selected(self, value: str) -> bool:
        if self.multiple:
            return value in self.selected_values
        return value == self.value

    #
    # Value
    #

    @override
    def bind_request_value(self) -> None:
        if not self.multiple:
            super().bind_request_value()
            return

        if self.name is None:
            self.selected_values = []
        else:
            context = self.require_context()
            self.selected_values = [
                v.strip() if context.config.trim_request_values else v
                for v in context.request_parameter_values(self.name)
            ]
        self._value = self.selected_values[0] if self.selected_values else ""

    @property
    @override
    def value_object(self) -> object:
        if self.multiple:
            return list(self.selected_values)
        return self.value or None

    @value_object.setter
    def value_object(self, value: object) -> None:
        if self.multiple and isinstance(value, Iterable) and not isinstance(value, str):
            self.selected_values = [str(v) for v in value]
            self.value = self.selected_values[0] if self.selected_values else ""
            return
        self.value = None if value is None else str(value)

    @override
    def validate(self) -> None:
        if not self.required:
            return

        if self.multiple:
            if not self.selected_values:
                self.set_error_message(messages.SELECT_ERROR)
            return

        first = self.first_option()
        if not self.value or (first is not None and self.value == first.value):
            self.set_error_message(messages.SELECT_ERROR)

    @override
    def is_activated(self) -> bool:
        if self.multiple:
            return bool(self.selected_values)
        return bool(self.value)

    #
    # Rendering
    #

    @override
    def render(self, html: HTMLGenerator) -> None:
        attrs = self.input_attributes(None, size=self.size, multiple=self.multiple)
        # A select has no readonly state, the disabled select does not send its value
        attrs["disabled"] = self.disabled or self.readonly
        attrs["readonly"] = None
        html.open_select(name=self.name, **attrs)
        for node in self.options:
            self._render_node(node, html)
        html.close_select()

        if self.readonly:
            for option in iter_options(self.options):
                if self.is_selected(option.value):
                    html.input(self.name, "hidden", value=option.value)

    def _render_node(self, node: object, html: HTMLGenerator) -> None:
        match node:
            case Option():
                html.option(node.label, value=node.value, selected=self.is_selected(node.value))
            case OptionGroup():
                html.open_optgroup(label=node.label)
                for child in node.children:
                    self._render_node(child, html)
                html.close_optgroup()
            case _:
                raise MKConfigError(_("Can not render %r as option") % (node,))
