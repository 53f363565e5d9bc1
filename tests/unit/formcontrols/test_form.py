#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable

import pytest

from formcontrols.context import Context
from formcontrols.controls import (
    AbstractContainer,
    Button,
    Checkbox,
    Form,
    IntegerField,
    Label,
    RadioGroup,
    TextField,
)
from formcontrols.controls.base import Control
from formcontrols.controls.form import find_form, FORM_NAME

ContextFactory = Callable[..., Context]


def _signup_form() -> Form:
    form = Form("signup")
    form.add_control(TextField("name", required=True))
    form.add_control(IntegerField("age", min_value=0, max_value=150))
    form.add_control(Button("submit", "Sign up"))
    return form


@pytest.mark.parametrize(
    "data, method, submitted",
    [
        ({FORM_NAME: "signup"}, "POST", True),
        ({FORM_NAME: "other"}, "POST", False),
        ({}, "POST", False),
    ],
)
def test_is_form_submission(
    make_context: ContextFactory, data: dict[str, str], method: str, submitted: bool
) -> None:
    form = _signup_form()
    form.context = make_context(data, method=method)
    assert form.is_form_submission() is submitted


def test_get_request_is_no_post_submission(make_context: ContextFactory) -> None:
    form = _signup_form()
    form.context = make_context(method="GET", query_string={FORM_NAME: "signup"})
    assert not form.is_form_submission()


def test_get_form(make_context: ContextFactory) -> None:
    form = Form("search", method="get")
    form.context = make_context(method="GET", query_string={FORM_NAME: "search"})
    assert form.is_form_submission()


def test_fields_are_not_processed_without_submission(make_context: ContextFactory) -> None:
    form = _signup_form()
    form.context = make_context({"name": "", "age": "x"})
    assert form.on_process() is True
    assert form.is_valid
    assert form.errors == []


def test_submission_validates_fields(make_context: ContextFactory) -> None:
    form = _signup_form()
    form.context = make_context({FORM_NAME: "signup", "name": "", "age": "200"})
    assert form.on_process() is True
    assert not form.is_valid
    assert form.errors == [
        ("Name", "Name is required."),
        ("Age", "Age must be less than or equal to 150."),
    ]


def test_form_listener_after_fields(make_context: ContextFactory) -> None:
    log: list[str] = []

    def on_submit(source: Control) -> bool:
        assert isinstance(source, Form)
        log.append("form valid=%s" % source.is_valid)
        return True

    form = Form("f", listener=on_submit)
    form.add_control(Button("ok", "OK", listener=lambda source: log.append("button") is None))
    form.context = make_context({FORM_NAME: "f", "ok": "OK"})
    form.on_process()
    assert log == ["button", "form valid=True"]


def test_fields_in_nested_containers() -> None:
    form = Form("f")
    box = form.add_control(AbstractContainer("box"))
    assert isinstance(box, AbstractContainer)
    inner = box.add_control(TextField("inner"))
    group = form.add_control(RadioGroup("mode"))
    form.add_control(Label("hint", "Some text"))

    assert form.fields == [inner, group]
    assert form.get_field("inner") is inner
    assert form.get_field(FORM_NAME) is None
    assert find_form(inner) is form


def test_form_level_error() -> None:
    form = _signup_form()
    form.error = "The name is already taken."
    assert not form.is_valid
    assert form.errors == [("", "The name is already taken.")]
    form.clear_errors()
    assert form.is_valid


def test_rename_updates_form_name_field() -> None:
    form = Form("old")
    form.name = "new"
    assert form.form_name_field.value == "new"
    assert form.get_control(FORM_NAME) is form.form_name_field


def test_disabled_form_disables_fields() -> None:
    form = Form("f", disabled=True)
    field = form.add_control(TextField("a"))
    checkbox = form.add_control(Checkbox("b"))
    assert isinstance(field, TextField) and isinstance(checkbox, Checkbox)
    assert field.disabled and checkbox.disabled
    assert 'disabled class="disabled"' in str(field.render_html())


def test_render() -> None:
    form = Form("login", action="/login.py", class_="narrow")
    form.add_control(TextField("user"))
    assert str(form.render_html()) == (
        '<form method="post" action="/login.py" id="login" name="login" class="narrow">\n'
        '<input type="hidden" name="form_name" id="login_form_name" value="login" />\n'
        '<input type="text" name="user" id="login_user" value="" size="20" />\n'
        "</form>"
    )


def test_render_error_list(make_context: ContextFactory) -> None:
    form = Form("f")
    form.add_control(TextField("user", required=True))
    form.context = make_context({FORM_NAME: "f"})
    form.on_process()
    assert str(form.render_html()) == (
        '<form method="post" action="" id="f" name="f">\n'
        '<ul class="error"><li>User is required.</li></ul>\n'
        '<input type="hidden" name="form_name" id="f_form_name" value="f" />\n'
        '<input type="text" name="user" id="f_user" value="" size="20" class="error" />\n'
        "</form>"
    )
