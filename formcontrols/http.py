#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
# ruff: noqa: A005
# mypy: disable-error-code="no-any-return"

"""Wrapper layer between WSGI and the form controls"""

from collections.abc import Iterator
from typing import Any, overload, TypeVar

import flask
from werkzeug.utils import get_content_type

from formcontrols.exceptions import MKUserError
from formcontrols.i18n import _

UploadedFile = tuple[str, str, bytes]
T = TypeVar("T")

AJAX_HEADER = "X-Requested-With"
AJAX_HEADER_VALUE = "XMLHttpRequest"


class UploadMixin:
    def __init__(self, *args: Any, **kw: Any) -> None:
        super().__init__(*args, **kw)
        self.upload_cache: dict[str, UploadedFile] = {}

    def has_uploaded_file(self, name: str) -> bool:
        return name in self.upload_cache or bool(self.files.get(name))  # type: ignore[attr-defined]

    def uploaded_file(self, name: str) -> UploadedFile:
        # NOTE: There could be multiple entries with the same key, we ignore that for now...
        f = self.files.get(name)  # type: ignore[attr-defined]
        if name not in self.upload_cache and f:
            self.upload_cache[name] = (f.filename or "", f.mimetype, f.read())
            f.close()

        try:
            upload = self.upload_cache[name]
        except KeyError:
            raise MKUserError(name, _("Please choose a file to upload."))

        return upload


class VarsMixin:
    """Access to the request parameters (query string and form data)

    A parameter may be given multiple times. The single value accessors return
    the last value, getlist() returns all of them in request order."""

    def itervars(self, prefix: str = "") -> Iterator[tuple[str, str | None]]:
        for name, values in self.values.lists():  # type: ignore[attr-defined]
            if name.startswith(prefix):
                # Preserve previous behaviour
                yield (name, (values[-1] if values else None))

    @overload
    def var(self, name: str) -> str | None: ...

    @overload
    def var(self, name: str, default: str) -> str: ...

    @overload
    def var(self, name: str, default: str | None) -> str | None: ...

    def var(self, name: str, default: str | None = None) -> str | None:
        values = self.values.getlist(name)  # type: ignore[attr-defined]
        if not values:
            return default

        # Preserve previous behaviour
        return str(values[-1])

    def getlist(self, name: str) -> list[str]:
        return [str(v) for v in self.values.getlist(name)]  # type: ignore[attr-defined]

    def has_var(self, varname: str) -> bool:
        return varname in self.values  # type: ignore[attr-defined]


def mandatory_parameter(varname: str, value: T | None) -> T:
    if value is None:
        raise MKUserError(varname, _('The parameter "%s" is missing.') % varname)
    return value


class Request(
    VarsMixin,
    UploadMixin,
    flask.Request,
):
    """Provides information about the users HTTP-request to the controls

    This class essentially wraps the information provided with the WSGI environment
    and provides some low-level functions for accessing this information.
    These should be basic HTTP request handling things and no control specific mechanisms.
    """

    max_form_memory_size = 20 * 1024 * 1024

    @property
    def is_ajax(self) -> bool:
        return self.headers.get(AJAX_HEADER) == AJAX_HEADER_VALUE

    def get_str_input(self, varname: str, deflt: str | None = None) -> str | None:
        return self.var(varname, deflt)

    def get_str_input_mandatory(self, varname: str, deflt: str | None = None) -> str:
        return mandatory_parameter(varname, self.get_str_input(varname, deflt))

    def get_integer_input(self, varname: str, deflt: int | None = None) -> int | None:
        value = self.var(varname, "%d" % deflt if deflt is not None else None)
        if value is None:
            return None

        try:
            return int(value)
        except ValueError:
            raise MKUserError(varname, _('The parameter "%s" is not an integer.') % varname)

    def get_integer_input_mandatory(self, varname: str, deflt: int | None = None) -> int:
        return mandatory_parameter(varname, self.get_integer_input(varname, deflt))

    def get_float_input(self, varname: str, deflt: float | None = None) -> float | None:
        value = self.var(varname, "%s" % deflt if deflt is not None else None)
        if value is None:
            return None

        try:
            return float(value)
        except ValueError:
            raise MKUserError(varname, _('The parameter "%s" is not a float.') % varname)

    def get_float_input_mandatory(self, varname: str, deflt: float | None = None) -> float:
        return mandatory_parameter(varname, self.get_float_input(varname, deflt))


class Response(flask.Response):
    default_mimetype = "text/html"

    def set_content_type(self, mime_type: str) -> None:
        self.headers["Content-type"] = get_content_type(mime_type, "utf-8")

    def set_caching_headers(self) -> None:
        if "Cache-Control" in self.headers:
            # Do not override previous set settings
            return
        self.headers["Cache-Control"] = "no-store"
