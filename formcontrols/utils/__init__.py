#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import re

_ID_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")
_CAMEL_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_label(name: str) -> str:
    """Derive a human readable label from a control name

    >>> to_label("first_name")
    'First name'
    >>> to_label("firstName")
    'First Name'
    >>> to_label("")
    ''
    """
    if not name:
        return ""
    text = _CAMEL_CASE_BOUNDARY.sub(" ", name.replace("_", " "))
    return text[0].upper() + text[1:]


def sanitize_id(value: str) -> str:
    """Replace all characters which are not allowed in element ids

    >>> sanitize_id("a/b c<d>e")
    'a_b_c_d_e'
    """
    return _ID_UNSAFE.sub("_", value)
