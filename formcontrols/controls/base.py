#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import override, TYPE_CHECKING

from formcontrols.config import Config
from formcontrols.context import Context
from formcontrols.exceptions import MKConfigError, MKContextError
from formcontrols.htmllib import HTMLGenerator, HTMLTagAttributeValue
from formcontrols.i18n import _
from formcontrols.listener import AnyListener, invoke_listener, validate_listener
from formcontrols.messages import DefaultMessageCatalog
from formcontrols.utils.html import HTML

if TYPE_CHECKING:
    from formcontrols.controls.container import Container

# Attributes which are rendered from the state of a control and can not be
# overridden by the attributes given by the page.
RESERVED_ATTRIBUTES = frozenset(
    ["type", "name", "id", "value", "title", "checked", "selected", "disabled", "readonly"]
)


class Control(abc.ABC):
    """A part of a page which is processed with the request and rendered as HTML"""

    @property
    @abc.abstractmethod
    def name(self) -> str | None:
        raise NotImplementedError()

    @property
    @abc.abstractmethod
    def parent(self) -> Container | None:
        raise NotImplementedError()

    @parent.setter
    @abc.abstractmethod
    def parent(self, parent: Container | None) -> None:
        raise NotImplementedError()

    @property
    @abc.abstractmethod
    def context(self) -> Context | None:
        raise NotImplementedError()

    @property
    @abc.abstractmethod
    def id(self) -> str | None:
        raise NotImplementedError()

    @abc.abstractmethod
    def on_process(self) -> bool:
        """Process the request

        Returns False when the processing of the page has to stop."""
        raise NotImplementedError()

    @abc.abstractmethod
    def render(self, html: HTMLGenerator) -> None:
        raise NotImplementedError()

    def render_html(self) -> HTML:
        html = HTMLGenerator()
        with html.plugged():
            self.render(html)
            return HTML(html.drain())

    @override
    def __str__(self) -> str:
        return str(self.render_html())


class AbstractControl(Control):
    tag: str | None = None

    def __init__(
        self,
        name: str | None = None,
        *,
        listener: AnyListener | None = None,
        disabled: bool = False,
        readonly: bool = False,
        **attributes: str,
    ) -> None:
        super().__init__()
        self._name = name
        self._parent: Container | None = None
        self._context: Context | None = None
        self._attributes: dict[str, str] = {}
        self._listener = validate_listener(listener)
        self._disabled = disabled
        self._readonly = readonly
        for key, value in attributes.items():
            self.set_attribute(key.rstrip("_"), value)

    @override
    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self._name)

    @property
    @override
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, name: str | None) -> None:
        self.set_name(name)

    def set_name(self, name: str | None) -> None:
        old_name = self._name
        self._name = name
        if self._parent is not None and old_name != name:
            self._parent.control_renamed(self)

    @property
    @override
    def parent(self) -> Container | None:
        return self._parent

    @parent.setter
    @override
    def parent(self, parent: Container | None) -> None:
        if parent is self:
            raise MKConfigError(_("%r can not be its own parent") % self)
        self._parent = parent

    @property
    @override
    def context(self) -> Context | None:
        control: Control | None = self
        while control is not None:
            if isinstance(control, AbstractControl) and control._context is not None:
                return control._context
            control = control.parent
        return None

    @context.setter
    def context(self, context: Context | None) -> None:
        self._context = context

    def require_context(self) -> Context:
        context = self.context
        if context is None:
            raise MKContextError(_("%r has no request context") % self)
        return context

    @property
    def config(self) -> Config:
        context = self.context
        return context.config if context is not None else Config()

    def message(self, key: str, *args: object) -> str:
        context = self.context
        if context is not None:
            return context.message(key, *args)
        return DefaultMessageCatalog(self.config.messages).format(key, *args)

    #
    # Attributes
    #

    def set_attribute(self, name: str | None, value: str | None) -> None:
        if name is None:
            raise MKConfigError(_("Attribute names must not be None"))
        if value is None:
            self._attributes.pop(name, None)
        else:
            self._attributes[name] = value

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    @property
    def attributes(self) -> Mapping[str, str]:
        return self._attributes

    def has_attributes(self) -> bool:
        return bool(self._attributes)

    def caller_attributes(self) -> dict[str, HTMLTagAttributeValue]:
        """The attributes set by the page which do not clash with the rendered state"""
        return {k: v for k, v in self._attributes.items() if k not in RESERVED_ATTRIBUTES}

    @property
    @override
    def id(self) -> str | None:
        if (explicit_id := self._attributes.get("id")) is not None:
            return explicit_id
        return self._name

    #
    # State flags
    #

    @property
    def disabled(self) -> bool:
        """Also true when one of the enclosing controls is disabled"""
        if self._disabled:
            return True
        parent = self._parent
        return isinstance(parent, AbstractControl) and parent.disabled

    @disabled.setter
    def disabled(self, disabled: bool) -> None:
        self._disabled = disabled

    @property
    def readonly(self) -> bool:
        """Also true when one of the enclosing controls is read only"""
        if self._readonly:
            return True
        parent = self._parent
        return isinstance(parent, AbstractControl) and parent.readonly

    @readonly.setter
    def readonly(self, readonly: bool) -> None:
        self._readonly = readonly

    #
    # Listener
    #

    @property
    def listener(self) -> AnyListener | None:
        return self._listener

    def set_listener(self, listener: AnyListener | None) -> None:
        self._listener = validate_listener(listener)

    def invoke_listener(self) -> bool:
        return invoke_listener(self)

    #
    # Processing and rendering
    #

    @override
    def on_process(self) -> bool:
        return True

    @override
    def render(self, html: HTMLGenerator) -> None:
        if self.tag is None:
            return
        html.write_html(
            html.render_start_tag(self.tag, close_tag=True, id=self.id, **self.caller_attributes())
        )
