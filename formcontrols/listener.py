#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Dispatching of the listeners registered on controls

A listener is called with the control that was activated. It returns True to
continue processing the page, False to stop it, or a Partial that is sent to
the client instead of the rendered page. Returning a Partial also stops the
processing of the page.
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from typing import TYPE_CHECKING

from formcontrols.exceptions import MKConfigError
from formcontrols.i18n import _
from formcontrols.log import logger
from formcontrols.partial import Partial

if TYPE_CHECKING:
    from formcontrols.controls.base import AbstractControl, Control

_logger = logger.getChild("listener")

ListenerResult = bool | Partial
Listener = Callable[["Control"], ListenerResult]


class AjaxListener(abc.ABC):
    """Listener which answers ajax requests differently from normal ones"""

    @abc.abstractmethod
    def on_ajax_action(self, source: Control) -> Partial | None:
        """Called for ajax requests. Returning None continues the page processing."""
        raise NotImplementedError()

    def on_action(self, source: Control) -> bool:
        return True

    def __call__(self, source: Control) -> ListenerResult:
        context = source.context
        if context is not None and context.is_ajax_request:
            partial = self.on_ajax_action(source)
            return True if partial is None else partial
        return self.on_action(source)


AnyListener = Listener | AjaxListener


def validate_listener(listener: object) -> AnyListener | None:
    if listener is None or isinstance(listener, AjaxListener) or callable(listener):
        return listener  # type: ignore[return-value]
    raise MKConfigError(_("Invalid listener: %r is not callable") % (listener,))


def invoke_listener(control: AbstractControl) -> bool:
    listener = control.listener
    if listener is None:
        return True

    _logger.debug("Invoking listener of %r", control)
    result = listener(control)

    if isinstance(result, Partial):
        _logger.debug("Listener of %r produced a partial response (%s)", control, result.content_type)
        control.require_context().set_partial(result)
        return False

    if isinstance(result, bool):
        if not result:
            _logger.debug("Listener of %r stopped the processing", control)
        return result

    raise MKConfigError(
        _("The listener of %r returned %r, expected a boolean or a partial response")
        % (control, result)
    )
