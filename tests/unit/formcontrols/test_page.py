#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable

import pytest

from formcontrols.config import Config
from formcontrols.controls import Button, Form, TextField
from formcontrols.controls.base import Control
from formcontrols.controls.form import FORM_NAME
from formcontrols.exceptions import FinalizeRequest, MKGeneralException, MKUserError
from formcontrols.http import Request
from formcontrols.messages import DefaultMessageCatalog, FIELD_REQUIRED_ERROR
from formcontrols.page import handle_request, Page, ProcessResult
from formcontrols.partial import Partial

RequestFactory = Callable[..., Request]


def _page(listener: Callable[[Control], object] | None = None) -> tuple[Page, Form]:
    page = Page("settings", title="Settings")
    form = Form("f")
    form.add_control(TextField("name", required=True))
    form.add_control(Button("save", "Save", listener=listener))  # type: ignore[arg-type]
    page.add_control(form)
    return page, form


def test_process_without_partial(make_request: RequestFactory) -> None:
    page, form = _page()
    result = page.process(make_request({FORM_NAME: "f", "name": ""}))
    assert result == ProcessResult(True, None)
    assert page.context is not None
    assert form.errors == [("Name", "Name is required.")]


def test_process_with_partial(make_request: RequestFactory) -> None:
    partial = Partial.json({"ok": True})
    page, _form = _page(listener=lambda source: partial)
    result = page.process(
        make_request(
            {FORM_NAME: "f", "name": "x", "save": "Save"},
            headers={"X-Requested-With": "XMLHttpRequest"},
        )
    )
    assert result == ProcessResult(False, partial)


def test_process_uses_config_and_messages(make_request: RequestFactory) -> None:
    page, form = _page()
    page.process(
        make_request({FORM_NAME: "f"}),
        config=Config(error_css_class="invalid"),
        messages=DefaultMessageCatalog({FIELD_REQUIRED_ERROR: "Please fill in %s"}),
    )
    assert form.errors == [("Name", "Please fill in Name")]
    assert 'class="invalid"' in str(page.render_html())


def test_make_response_renders_page(make_request: RequestFactory) -> None:
    page, _form = _page()
    response = page.make_response(page.process(make_request({})))
    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert response.headers["Cache-Control"] == "no-store"
    body = response.get_data(as_text=True)
    assert body.startswith("<h1>Settings</h1>\n<form ")
    assert 'name="name"' in body


def test_make_response_sends_partial(make_request: RequestFactory) -> None:
    page, _form = _page(listener=lambda source: Partial("saved", headers={"X-Saved": "1"}))
    response = page.make_response(
        page.process(make_request({FORM_NAME: "f", "name": "x", "save": "Save"}))
    )
    assert response.get_data(as_text=True) == "saved"
    assert response.mimetype == "text/plain"
    assert response.headers["X-Saved"] == "1"


def test_handle_request(make_request: RequestFactory) -> None:
    page, _form = _page()
    response = handle_request(page, make_request({}))
    assert response.status_code == 200


def test_handle_request_user_error(make_request: RequestFactory) -> None:
    def listener(source: Control) -> bool:
        raise MKUserError("save", "<script>bad</script>")

    page, _form = _page(listener=listener)
    response = handle_request(page, make_request({FORM_NAME: "f", "name": "x", "save": "Save"}))
    assert response.status_code == 400
    assert response.get_data(as_text=True) == "&lt;script&gt;bad&lt;/script&gt;"


def test_handle_request_finalize(make_request: RequestFactory) -> None:
    def listener(source: Control) -> bool:
        raise FinalizeRequest(204)

    page, _form = _page(listener=listener)
    response = handle_request(page, make_request({FORM_NAME: "f", "name": "x", "save": "Save"}))
    assert response.status_code == 204


def test_handle_request_propagates_other_errors(make_request: RequestFactory) -> None:
    def listener(source: Control) -> bool:
        raise MKGeneralException("broken")

    page, _form = _page(listener=listener)
    with pytest.raises(MKGeneralException):
        handle_request(page, make_request({FORM_NAME: "f", "name": "x", "save": "Save"}))


def test_render_without_title() -> None:
    page = Page()
    page.add_control(TextField("q"))
    assert str(page.render_html()) == (
        '<input type="text" name="q" id="q" value="" size="20" />'
    )
