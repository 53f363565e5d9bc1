#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
# ruff: noqa: A005

from typing import Any, override


class HTML:
    """HTML code wrapper to prevent escaping

    The HTML class is implemented as an immutable type. Every instance of
    the class is a string which has already been escaped and is written as
    it is.

    >>> HTML("<b>foo</b>") + "bar"
    HTML("<b>foo</b>bar")
    """

    __slots__ = ("_value",)

    def __init__(self, value: "str | HTML" = "") -> None:
        self._value = str(value)

    def __html__(self) -> str:
        return self._value

    @override
    def __str__(self) -> str:
        return self._value

    @override
    def __repr__(self) -> str:
        return 'HTML("%s")' % self._value

    def __add__(self, other: "str | HTML") -> "HTML":
        return HTML(self._value + str(other))

    def __radd__(self, other: "str | HTML") -> "HTML":
        return HTML(str(other) + self._value)

    @override
    def __eq__(self, other: Any) -> bool:
        return self._value == str(other)

    @override
    def __hash__(self) -> int:
        return hash(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __contains__(self, item: "str | HTML") -> bool:
        return str(item) in self._value
