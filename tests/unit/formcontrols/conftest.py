#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from formcontrols import i18n
from formcontrols.config import Config
from formcontrols.context import Context
from formcontrols.http import Request

RequestFactory = Callable[..., Request]
ContextFactory = Callable[..., Context]


@pytest.fixture(name="make_request")
def fixture_make_request() -> RequestFactory:
    def _make_request(
        data: Any = None,
        *,
        method: str = "POST",
        query_string: Any = None,
        headers: Any = None,
    ) -> Request:
        return Request.from_values(
            method=method,
            data=data,
            query_string=query_string,
            headers=headers,
        )

    return _make_request


@pytest.fixture(name="make_context")
def fixture_make_context(make_request: RequestFactory) -> ContextFactory:
    def _make_context(
        data: Any = None,
        *,
        config: Config | None = None,
        ajax: bool = False,
        **kwargs: Any,
    ) -> Context:
        if ajax:
            kwargs["headers"] = {"X-Requested-With": "XMLHttpRequest"}
        return Context(make_request(data, **kwargs), config=config)

    return _make_context


@pytest.fixture(autouse=True)
def fixture_unlocalize() -> Iterator[None]:
    yield
    i18n.unlocalize()
