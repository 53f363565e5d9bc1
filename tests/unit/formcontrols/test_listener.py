#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable

import pytest

from formcontrols.context import Context
from formcontrols.controls import Button, TextField
from formcontrols.controls.base import Control
from formcontrols.exceptions import MKConfigError, MKContextError
from formcontrols.listener import AjaxListener, invoke_listener, validate_listener
from formcontrols.partial import Partial

ContextFactory = Callable[..., Context]


class CountingAjaxListener(AjaxListener):
    def __init__(self, partial: Partial | None) -> None:
        self.partial = partial
        self.ajax_calls = 0
        self.calls = 0

    def on_ajax_action(self, source: Control) -> Partial | None:
        self.ajax_calls += 1
        return self.partial

    def on_action(self, source: Control) -> bool:
        self.calls += 1
        return True


def _noop(source: Control) -> bool:
    return True


@pytest.mark.parametrize("listener", [None, _noop, CountingAjaxListener(None)])
def test_validate_listener(listener: object) -> None:
    assert validate_listener(listener) is listener


@pytest.mark.parametrize("listener", ["method", 42, ["a"]])
def test_validate_invalid_listener(listener: object) -> None:
    with pytest.raises(MKConfigError):
        validate_listener(listener)


def test_set_invalid_listener() -> None:
    field = TextField("a")
    with pytest.raises(MKConfigError):
        field.set_listener("on_change")  # type: ignore[arg-type]
    assert field.listener is None


def test_control_without_listener_continues() -> None:
    assert invoke_listener(TextField("a")) is True


@pytest.mark.parametrize("result", [True, False])
def test_boolean_result(result: bool) -> None:
    assert invoke_listener(TextField("a", listener=lambda source: result)) is result


def test_partial_result_is_stored_on_context(make_context: ContextFactory) -> None:
    partial = Partial.html("<p>done</p>")
    field = TextField("a", listener=lambda source: partial)
    field.context = context = make_context()

    assert invoke_listener(field) is False
    assert context.partial is partial


def test_partial_result_needs_context() -> None:
    field = TextField("a", listener=lambda source: Partial("x"))
    with pytest.raises(MKContextError):
        invoke_listener(field)


@pytest.mark.parametrize("result", [None, "yes", 1])
def test_invalid_result(make_context: ContextFactory, result: object) -> None:
    field = TextField("a", listener=lambda source: result)  # type: ignore[arg-type,return-value]
    field.context = make_context()
    with pytest.raises(MKConfigError):
        invoke_listener(field)


def test_ajax_listener_on_ajax_request(make_context: ContextFactory) -> None:
    partial = Partial.json({"saved": True})
    listener = CountingAjaxListener(partial)
    button = Button("save", "Save", listener=listener)
    button.context = context = make_context({"save": "Save"}, ajax=True)

    assert button.on_process() is False

    assert (listener.ajax_calls, listener.calls) == (1, 0)
    assert context.partial is partial


def test_ajax_listener_without_partial_continues(make_context: ContextFactory) -> None:
    listener = CountingAjaxListener(None)
    button = Button("save", "Save", listener=listener)
    button.context = context = make_context({"save": "Save"}, ajax=True)

    assert button.on_process() is True
    assert listener.ajax_calls == 1
    assert context.partial is None


def test_ajax_listener_on_normal_request(make_context: ContextFactory) -> None:
    listener = CountingAjaxListener(Partial("unused"))
    button = Button("save", "Save", listener=listener)
    button.context = context = make_context({"save": "Save"})

    assert button.on_process() is True
    assert (listener.ajax_calls, listener.calls) == (0, 1)
    assert context.partial is None


def test_later_partial_replaces_earlier_one(make_context: ContextFactory) -> None:
    context = make_context()
    first, second = Partial("first"), Partial("second")
    context.set_partial(first)
    context.set_partial(second)
    assert context.partial is second
