#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import abc
import urllib.parse
from typing import override

from formcontrols.context import Context
from formcontrols.htmllib import HTMLGenerator
from formcontrols.utils.html import HTML


class Decorator(abc.ABC):
    """Renders a value in a custom way, e.g. as link or with an icon"""

    @abc.abstractmethod
    def render(self, value: object, context: Context | None) -> HTML:
        raise NotImplementedError()


class LinkDecorator(Decorator):
    def __init__(self, href: str, label: str, parameter: str = "value") -> None:
        self.href = href
        self.label = label
        self.parameter = parameter

    def url(self, value: object) -> str:
        query = urllib.parse.urlencode([(self.parameter, "" if value is None else str(value))])
        separator = "&" if "?" in self.href else "?"
        return self.href + separator + query

    @override
    def render(self, value: object, context: Context | None) -> HTML:
        return HTMLGenerator().render_a(self.label, href=self.url(value))
