#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import re
from html import escape as html_escape

from formcontrols.utils.html import HTML

#   .--Escaper-------------------------------------------------------------.
#   |                 _____                                                |
#   |                | ____|___  ___ __ _ _ __   ___ _ __                  |
#   |                |  _| / __|/ __/ _` | '_ \ / _ \ '__|                 |
#   |                | |___\__ \ (_| (_| | |_) |  __/ |                    |
#   |                |_____|___/\___\__,_| .__/ \___|_|                    |
#   |                                    |_|                               |
#   +----------------------------------------------------------------------+
#   |                                                                      |
#   '----------------------------------------------------------------------

EscapableEntity = None | int | float | HTML | str

ALLOWED_TAGS = r"h1|h2|b|tt|i|u|br(?: /)?|nobr(?: /)?|pre|sup|p|li|ul|ol"
_UNESCAPER_TEXT = re.compile(rf"&lt;(/?)({ALLOWED_TAGS})&gt;")


def escape_attribute(value: EscapableEntity) -> str:
    """Escape HTML attributes.

    For example: replace '"' with '&quot;', '<' with '&lt;'.
    Also works on things that can be converted with '%s'.

    Examples:

        >>> escape_attribute("Hello this is <b>dog</b>!")
        'Hello this is &lt;b&gt;dog&lt;/b&gt;!'

        >>> escape_attribute(None)
        ''

        >>> escape_attribute(42)
        '42'
    """
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, HTML):
        return value.__html__()  # This is HTML code which must not be escaped
    return html_escape("%s" % value, quote=True)


def escape_text(text: EscapableEntity) -> str:
    """Escape HTML text

    We only strip some tags and allow some simple tags
    such as <h1>, <b> or <i> to be part of the string.
    This is useful for messages where we want to keep formatting
    options.

    Examples:

        >>> escape_text("Hello this is dog!")
        'Hello this is dog!'

        >>> escape_text("Hello <b>this</b> is <script>dog</script>!")
        'Hello <b>this</b> is &lt;script&gt;dog&lt;/script&gt;!'
    """
    if isinstance(text, HTML):
        return text.__html__()

    text = escape_attribute(text)
    text = _UNESCAPER_TEXT.sub(r"<\1\2>", text)
    return text.replace("&amp;nbsp;", "&nbsp;")


def strip_tags(ht: EscapableEntity) -> str:
    """Strip all HTML tags from a text.

    Examples:
        >>> strip_tags("<b>foobar</b> blah")
        'foobar blah'

        Edge cases.

        >>> strip_tags("<p<b<>re>foobar</</b>b> blah")
        're>foobarb> blah'
    """
    if isinstance(ht, HTML):
        ht = ht.__html__()

    if not isinstance(ht, str):
        return "%s" % ht

    while True:
        x = ht.find("<")
        if x == -1:
            break
        y = ht.find(">", x)
        if y == -1:
            break
        ht = ht[0:x] + ht[y + 1 :]
    return ht.replace("&nbsp;", " ")
