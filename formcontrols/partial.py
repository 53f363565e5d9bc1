#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from formcontrols.http import Response

CONTENT_TYPE_TEXT: Final = "text/plain"
CONTENT_TYPE_HTML: Final = "text/html"
CONTENT_TYPE_JSON: Final = "application/json"
CONTENT_TYPE_JAVASCRIPT: Final = "text/javascript"
CONTENT_TYPE_XML: Final = "text/xml"


@dataclass(frozen=True)
class Partial:
    """A response fragment produced by a listener instead of the whole page

    Ajax requests usually only need a small part of a page. When a listener
    returns a Partial, processing of the page stops and the partial is sent
    to the client instead of the rendered page."""

    content: str | bytes = ""
    content_type: str = CONTENT_TYPE_TEXT
    headers: Mapping[str, str] = field(default_factory=dict)
    charset: str = "utf-8"
    status: int = 200

    @classmethod
    def html(cls, content: str) -> "Partial":
        return cls(content=content, content_type=CONTENT_TYPE_HTML)

    @classmethod
    def json(cls, obj: object) -> "Partial":
        return cls(content=json.dumps(obj), content_type=CONTENT_TYPE_JSON)

    def to_response(self) -> Response:
        response = Response(
            self.content,
            status=self.status,
            content_type="%s; charset=%s" % (self.content_type, self.charset),
        )
        for key, value in self.headers.items():
            response.headers[key] = value
        response.set_caching_headers()
        return response
