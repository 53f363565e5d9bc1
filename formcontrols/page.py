#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import http.client as http_client
from typing import NamedTuple, override

from formcontrols.config import Config
from formcontrols.context import Context
from formcontrols.controls.container import AbstractContainer
from formcontrols.exceptions import FinalizeRequest, MKUserError
from formcontrols.htmllib import HTMLGenerator
from formcontrols.http import Request, Response
from formcontrols.log import logger
from formcontrols.messages import MessageCatalog
from formcontrols.partial import Partial
from formcontrols.utils.escaping import escape_text

_logger = logger.getChild("page")


class ProcessResult(NamedTuple):
    continue_processing: bool
    partial: Partial | None


class Page(AbstractContainer):
    """The top level container of a request

    The page creates the request context, processes all controls and then
    either renders itself or hands out the partial response a listener
    produced."""

    def __init__(self, name: str | None = None, *, title: str = "", **attributes: str) -> None:
        super().__init__(name, **attributes)
        self.title = title

    def process(
        self,
        request: Request,
        *,
        config: Config | None = None,
        messages: MessageCatalog | None = None,
    ) -> ProcessResult:
        context = Context(request, config=config, messages=messages)
        self.context = context
        continue_processing = self.on_process()
        _logger.debug(
            "Processed %r: continue=%s partial=%s",
            self,
            continue_processing,
            context.partial is not None,
        )
        return ProcessResult(continue_processing, context.partial)

    def make_response(self, result: ProcessResult) -> Response:
        if result.partial is not None:
            return result.partial.to_response()
        response = Response(str(self.render_html()))
        response.set_caching_headers()
        return response

    @override
    def render(self, html: HTMLGenerator) -> None:
        if self.title:
            html.write_html(html.render_element("h1", self.title))
            html.write("\n")
        super().render(html)


def handle_request(
    page: Page,
    request: Request,
    *,
    config: Config | None = None,
    messages: MessageCatalog | None = None,
) -> Response:
    """Process the page and create the response for the client

    Bad request parameters are answered with an error message, everything
    else is raised."""
    try:
        return page.make_response(page.process(request, config=config, messages=messages))
    except MKUserError as e:
        _logger.debug("Bad request for %r: %s", page, e)
        response = Response(escape_text(str(e)), status=e.status or http_client.BAD_REQUEST)
        response.set_caching_headers()
        return response
    except FinalizeRequest as e:
        return Response(status=e.status)
