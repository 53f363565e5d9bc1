#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from __future__ import annotations

from typing import override, TYPE_CHECKING

from formcontrols.config import Config
from formcontrols.http import Request, UploadedFile
from formcontrols.log import logger
from formcontrols.messages import DefaultMessageCatalog, MessageCatalog

if TYPE_CHECKING:
    from formcontrols.partial import Partial

_logger = logger.getChild("context")


class Context:
    """Everything the controls need to know about the current request

    One context is created per request and attached to the top level control.
    The children find it through their parents."""

    def __init__(
        self,
        request: Request,
        *,
        config: Config | None = None,
        messages: MessageCatalog | None = None,
    ) -> None:
        self.request = request
        self.config = config if config is not None else Config()
        self.messages: MessageCatalog = (
            messages if messages is not None else DefaultMessageCatalog(self.config.messages)
        )
        self._partial: Partial | None = None

    @override
    def __repr__(self) -> str:
        return "%s(%s %s)" % (self.__class__.__name__, self.request.method, self.request.path)

    def request_parameter(self, name: str) -> str | None:
        return self.request.var(name)

    def request_parameter_values(self, name: str) -> list[str]:
        return self.request.getlist(name)

    def has_request_parameter(self, name: str) -> bool:
        return self.request.has_var(name)

    def file_part(self, name: str) -> UploadedFile | None:
        if not self.request.has_uploaded_file(name):
            return None
        return self.request.uploaded_file(name)

    @property
    def is_ajax_request(self) -> bool:
        return self.request.is_ajax

    @property
    def is_post(self) -> bool:
        return self.request.method == "POST"

    def message(self, key: str, *args: object) -> str:
        return self.messages.format(key, *args)

    @property
    def partial(self) -> Partial | None:
        return self._partial

    def set_partial(self, partial: Partial) -> None:
        if self._partial is not None:
            _logger.debug("Replacing partial response %r with %r", self._partial, partial)
        self._partial = partial
