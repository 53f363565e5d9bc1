#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Exceptions of the form control framework

Validation errors caused by user input are never raised. They are stored on
the field that detected them and rendered with it. Everything raised from here
is either a programming mistake of the page author (MKConfigError and its
subclasses) or a request that can not be handled at all (MKUserError,
FinalizeRequest)."""

import http
from typing import override

from werkzeug.http import HTTP_STATUS_CODES

__all__ = [
    "FinalizeRequest",
    "MKConfigError",
    "MKContextError",
    "MKException",
    "MKGeneralException",
    "MKHTTPException",
    "MKUserError",
]


# never used directly in the code. Just some wrapper to make all of our
# exceptions handleable with one call
class MKException(Exception):
    pass


class MKGeneralException(MKException):
    pass


class MKHTTPException(MKException):
    status: int = http.HTTPStatus.BAD_REQUEST


class FinalizeRequest(MKException):
    """Is used to end the HTTP request processing from deeper code levels"""

    def __init__(self, code: int) -> None:
        super().__init__("%d %s" % (code, HTTP_STATUS_CODES[code]))
        self.status = code


class MKConfigError(MKHTTPException):
    """A control tree was set up in a way that can never work

    Raised for mistakes of the page author, e.g. option trees containing
    unknown node kinds or listeners that are not callable. These errors
    can not be caused by request data."""

    status = http.HTTPStatus.INTERNAL_SERVER_ERROR


class MKContextError(MKConfigError):
    """A control needs the request context but none is attached"""


class MKUserError(MKHTTPException):
    def __init__(
        self,
        varname: str | None,
        message: str,
        status: int = http.HTTPStatus.BAD_REQUEST,
    ) -> None:
        self.varname: str | None = varname
        self.message: str = message
        self.status: int = status
        super().__init__(varname, message)

    @override
    def __str__(self) -> str:
        return self.message
