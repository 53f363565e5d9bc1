#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable

import pytest

from formcontrols import messages
from formcontrols.config import Config
from formcontrols.context import Context
from formcontrols.controls import TextField
from formcontrols.exceptions import MKConfigError
from formcontrols.messages import DefaultMessageCatalog

ContextFactory = Callable[..., Context]

ALL_KEYS = [
    messages.FIELD_REQUIRED_ERROR,
    messages.FIELD_MINLENGTH_ERROR,
    messages.FIELD_MAXLENGTH_ERROR,
    messages.EMAIL_FORMAT_ERROR,
    messages.INTEGER_FORMAT_ERROR,
    messages.NUMBER_FORMAT_ERROR,
    messages.NUMBER_MINVALUE_ERROR,
    messages.NUMBER_MAXVALUE_ERROR,
    messages.NOT_CHECKED_ERROR,
    messages.SELECT_ERROR,
    messages.REGEX_PATTERN_ERROR,
]


@pytest.mark.parametrize("key", ALL_KEYS)
def test_every_key_has_a_template(key: str) -> None:
    template = DefaultMessageCatalog().template(key)
    # The label of the field is always the first argument
    assert template.count("%s") in (1, 2)
    assert "Label" in template % (("Label",) + ("x",) * (template.count("%s") - 1))


@pytest.mark.parametrize(
    "key, args, expected",
    [
        (messages.FIELD_REQUIRED_ERROR, ("Name",), "Name is required."),
        (messages.FIELD_MINLENGTH_ERROR, ("Name", 3), "Name must be at least 3 characters."),
        (messages.NUMBER_MINVALUE_ERROR, ("Age", 0), "Age must be greater than or equal to 0."),
        (messages.NOT_CHECKED_ERROR, ("Terms",), "You must select Terms."),
    ],
)
def test_format(key: str, args: tuple[object, ...], expected: str) -> None:
    assert DefaultMessageCatalog().format(key, *args) == expected


def test_override() -> None:
    catalog = DefaultMessageCatalog({messages.FIELD_REQUIRED_ERROR: "Bitte %s angeben."})
    assert catalog.format(messages.FIELD_REQUIRED_ERROR, "Name") == "Bitte Name angeben."
    assert catalog.format(messages.SELECT_ERROR, "Land") == "You must choose a value for Land."


def test_unknown_key() -> None:
    with pytest.raises(MKConfigError):
        DefaultMessageCatalog().format("no-such-error", "x")


def test_configured_messages_reach_the_fields(make_context: ContextFactory) -> None:
    field = TextField("name", required=True)
    field.context = make_context(
        {}, config=Config(messages={messages.FIELD_REQUIRED_ERROR: "%s fehlt."})
    )
    field.on_process()
    assert field.error == "Name fehlt."


def test_messages_without_context() -> None:
    field = TextField("name")
    assert field.message(messages.FIELD_REQUIRED_ERROR, "Name") == "Name is required."
