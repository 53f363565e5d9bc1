#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Controls which own other controls

A container keeps its children in insertion order, which is also the order
in which they are processed and rendered, and indexes them by name for
lookups. Children without a name are only kept in the sequence.

A control has at most one parent. Adding it to a container detaches it from
its previous parent first. Adding a control under a name that is already
taken replaces the previous child at its position.
"""

import abc
from collections.abc import Iterator, Sequence
from typing import Any, override

from formcontrols.controls.base import AbstractControl, Control
from formcontrols.exceptions import MKConfigError
from formcontrols.htmllib import HTMLGenerator
from formcontrols.i18n import _
from formcontrols.log import logger

_logger = logger.getChild("container")


class Container(Control):
    @abc.abstractmethod
    def add_control(self, control: Control) -> Control:
        """Add the control to the end of the children

        Returns the control that is actually stored."""
        raise NotImplementedError()

    @abc.abstractmethod
    def insert_control(self, control: Control, index: int) -> Control:
        """Insert the control before the child currently at index

        Moving a child within the same container keeps this meaning."""
        raise NotImplementedError()

    @abc.abstractmethod
    def remove_control(self, control: Control) -> bool:
        raise NotImplementedError()

    @abc.abstractmethod
    def get_control(self, name: str) -> Control | None:
        raise NotImplementedError()

    @abc.abstractmethod
    def contains(self, control: Control) -> bool:
        raise NotImplementedError()

    @property
    @abc.abstractmethod
    def controls(self) -> Sequence[Control]:
        raise NotImplementedError()

    @abc.abstractmethod
    def control_renamed(self, control: Control) -> None:
        """Called by a child after its name has been changed"""
        raise NotImplementedError()

    def has_controls(self) -> bool:
        return bool(self.controls)


class ContainerMixin:
    """Implements the child management of a Container"""

    def __init__(self, *args: Any, **kw: Any) -> None:
        super().__init__(*args, **kw)
        self._controls: list[Control] = []
        self._index: dict[str, Control] = {}

    def index_key(self, control: Control) -> str | None:
        return control.name

    def add_control(self, control: Control) -> Control:
        return self.insert_control(control, len(self._controls))

    def insert_control(self, control: Control, index: int) -> Control:
        self._check_insertable(control)
        if not 0 <= index <= len(self._controls):
            raise MKConfigError(
                _("Index %d is out of range, %r has %d controls")
                % (index, self, len(self._controls))
            )

        previous_parent = control.parent
        if previous_parent is self and self._position(control) < index:
            # The index refers to the children before the control is moved
            index -= 1
        if previous_parent is not None:
            previous_parent.remove_control(control)
        index = min(index, len(self._controls))

        key = self.index_key(control)
        replaced = self._index.get(key) if key else None
        if replaced is not None:
            position = self._position(replaced)
            self._controls[position] = control
            replaced.parent = None
            _logger.debug("%r replaced %r in %r", control, replaced, self)
        else:
            self._controls.insert(index, control)

        if key:
            self._index[key] = control
        control.parent = self  # type: ignore[assignment]
        return control

    def _check_insertable(self, control: Control | None) -> None:
        if control is None:
            raise MKConfigError(_("Can not add None to %r") % self)
        ancestor: Control | None = self  # type: ignore[assignment]
        while ancestor is not None:
            if ancestor is control:
                raise MKConfigError(_("Can not add %r to itself") % control)
            ancestor = ancestor.parent

    def _position(self, control: Control) -> int:
        for position, child in enumerate(self._controls):
            if child is control:
                return position
        raise ValueError(control)

    def remove_control(self, control: Control) -> bool:
        try:
            position = self._position(control)
        except ValueError:
            return False

        del self._controls[position]
        self._drop_from_index(control)
        control.parent = None
        return True

    def _drop_from_index(self, control: Control) -> None:
        for key in [k for k, c in self._index.items() if c is control]:
            del self._index[key]

    def control_renamed(self, control: Control) -> None:
        self._drop_from_index(control)
        key = self.index_key(control)
        if not key:
            return
        replaced = self._index.get(key)
        if replaced is not None:
            self.remove_control(replaced)
        self._index[key] = control

    def get_control(self, name: str) -> Control | None:
        return self._index.get(name)

    def contains(self, control: Control) -> bool:
        return any(child is control for child in self._controls)

    @property
    def controls(self) -> Sequence[Control]:
        return tuple(self._controls)

    def __iter__(self) -> Iterator[Control]:
        return iter(tuple(self._controls))


class AbstractContainer(ContainerMixin, AbstractControl, Container):
    """Container which processes its children in order

    The processing stops at the first child which returns False. The own
    listener of the container is invoked after all children have been
    processed."""

    @override
    def on_process(self) -> bool:
        for control in self.controls:
            if not control.on_process():
                _logger.debug("Processing of %r stopped at %r", self, control)
                return False
        return self.invoke_listener()

    @override
    def render(self, html: HTMLGenerator) -> None:
        if self.tag is None:
            self.render_children(html)
            return

        html.write_html(html.render_start_tag(self.tag, id=self.id, **self.caller_attributes()))
        if self.controls:
            html.write("\n")
            self.render_children(html)
            html.write("\n")
        html.write_html(html.render_end_tag(self.tag))

    def render_children(self, html: HTMLGenerator) -> None:
        for position, control in enumerate(self.controls):
            if position:
                html.write("\n")
            control.render(html)
