#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import re
from collections.abc import Iterator
from typing import cast

from formcontrols.utils import escaping
from formcontrols.utils.html import HTML
from formcontrols.utils.output_funnel import OutputFunnel

CSSSpec = None | str | list[str] | list[str | None]
HTMLTagName = str
HTMLTagValue = None | bool | int | float | str | HTML
HTMLContent = None | int | float | HTML | str
HTMLTagAttributeValue = CSSSpec | HTMLTagValue
HTMLTagAttributes = dict[str, HTMLTagAttributeValue]

# .
#   .--HTML Generator------------------------------------------------------.
#   |                      _   _ _____ __  __ _                            |
#   |                     | | | |_   _|  \/  | |                           |
#   |                     | |_| | | | | |\/| | |                           |
#   |                     |  _  | | | | |  | | |___                        |
#   |                     |_| |_| |_| |_|  |_|_____|                       |
#   |                                                                      |
#   |             ____                           _                         |
#   |            / ___| ___ _ __   ___ _ __ __ _| |_ ___  _ __             |
#   |           | |  _ / _ \ '_ \ / _ \ '__/ _` | __/ _ \| '__|            |
#   |           | |_| |  __/ | | |  __/ | | (_| | || (_) | |               |
#   |            \____|\___|_| |_|\___|_|  \__,_|\__\___/|_|               |
#   |                                                                      |
#   +----------------------------------------------------------------------+
#   |  Generator which provides the HTML writing functionality used by the |
#   |  controls.                                                           |
#   '----------------------------------------------------------------------'


class HTMLGenerator(OutputFunnel):
    """Usage Notes:

      - Tags can be opened using the open_[tag]() calls, e.g. open_div(class_="example").
        Python specific key words need to be escaped using a trailing underscore.
        One can also provide a dictionary as attributes: open_div(**{"class": "example"}).

      - All tags can be closed again using the close_[tag]() calls.

      - The render_[tag]() calls return the markup as HTML object instead of writing it.

    HOWTO HTML Attributes:

      - Attributes are rendered in the order they are given. The only exception is
        the 'class' attribute which is always rendered last.

      - None and False values are skipped, True renders the attribute without a value
        (e.g. 'checked', 'disabled').

      - Some attributes can also be lists of values:

            'class' attributes will be concatenated using one whitespace
            'style' attributes will be concatenated using the semicolon and one whitespace
            Behaviorial attributes such as 'onclick', 'onmouseover' will be concatenated
            using a semicolon and one whitespace.

      - All attributes will be escaped, i.e. the characters '&', '<', '>', '"' will be
        replaced by '&amp;', '&lt;', '&gt;' and '&quot;'."""

    #
    # Rendering
    #

    def _render_attributes(self, **attrs: HTMLTagAttributeValue) -> Iterator[str]:
        css = self._get_normalized_css_classes(attrs)
        if css:
            attrs["class"] = css

        for key_unescaped, v in attrs.items():
            if v is None or v is False:
                continue

            key = escaping.escape_attribute(key_unescaped.rstrip("_"))

            if key.startswith("data_"):
                key = key.replace("_", "-", 1)  # HTML data attribute: 'data-name'

            if v is True:
                yield " %s" % key
                continue

            if not isinstance(v, list):
                v = escaping.escape_attribute(v)
            else:
                if key == "class":
                    sep = " "
                elif key == "style" or key.startswith("on"):
                    sep = "; "
                else:
                    sep = "_"

                joined_value = sep.join(
                    [a for a in (escaping.escape_attribute(vi) for vi in v) if a]
                )

                if sep.startswith(";"):
                    joined_value = re.sub(";+", ";", joined_value)

                v = joined_value

            yield ' %s="%s"' % (key, v)

    def _get_normalized_css_classes(self, attrs: HTMLTagAttributes) -> list[str]:
        # make class attribute foolproof
        css: list[str] = []
        for k in ["class_", "css", "cssclass", "class"]:
            if k in attrs:
                cls_spec = cast(CSSSpec, attrs.pop(k))
                css += self.normalize_css_spec(cls_spec)
        return css

    def normalize_css_spec(self, css_classes: CSSSpec) -> list[str]:
        if isinstance(css_classes, list):
            return [c for c in css_classes if c]

        if css_classes:
            return [css_classes]

        return []

    # applies attribute encoding to prevent code injections.
    def render_start_tag(
        self,
        tag_name: HTMLTagName,
        close_tag: bool = False,
        **attrs: HTMLTagAttributeValue,
    ) -> HTML:
        """You have to replace attributes which are also python elements such as
        'class', 'id', 'for' or 'type' using a trailing underscore (e.g. 'class_' or 'id_')."""
        return HTML(
            "<%s%s%s>"
            % (
                tag_name,
                "" if not attrs else "".join(self._render_attributes(**attrs)),
                "" if not close_tag else " /",
            )
        )

    def render_end_tag(self, tag_name: HTMLTagName) -> HTML:
        return HTML("</%s>" % (tag_name))

    def render_element(
        self, tag_name: HTMLTagName, tag_content: HTMLContent, **attrs: HTMLTagAttributeValue
    ) -> HTML:
        open_tag = self.render_start_tag(tag_name, close_tag=False, **attrs)

        if tag_content is None or tag_content == "":
            tag_content = ""
        elif not isinstance(tag_content, HTML):
            tag_content = escaping.escape_text(tag_content)

        return HTML("%s%s</%s>" % (open_tag, tag_content, tag_name))

    #
    # Showing / rendering
    #

    def render_text(self, text: HTMLContent) -> HTML:
        return HTML(escaping.escape_text(text))

    def write_text(self, text: HTMLContent) -> None:
        """Write text. Highlighting tags such as h2|b|tt|i|br|pre|sup|p|li|ul|ol are not escaped."""
        self.write(self.render_text(text))

    def write_html(self, content: HTML) -> None:
        """Write HTML code directly, without escaping."""
        self.write(content)

    #
    # basic elements
    #

    def render_a(self, content: HTMLContent, href: str | None, **attrs: HTMLTagAttributeValue) -> HTML:
        return self.render_element("a", content, href=href, **attrs)

    #
    # form elements
    #

    def open_form(self, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_start_tag("form", **attrs))

    def close_form(self) -> None:
        self.write_html(self.render_end_tag("form"))

    def render_label(self, content: HTMLContent, for_: str, **attrs: HTMLTagAttributeValue) -> HTML:
        return self.render_element("label", content, for_=for_, **attrs)

    def label(self, content: HTMLContent, for_: str, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_label(content, for_, **attrs))

    def render_input(self, name: str | None, type_: str, **attrs: HTMLTagAttributeValue) -> HTML:
        return self.render_start_tag("input", close_tag=True, type_=type_, name=name, **attrs)

    def input(self, name: str | None, type_: str, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_input(name, type_, **attrs))

    def render_textarea(
        self, content: HTMLContent, name: str | None, **attrs: HTMLTagAttributeValue
    ) -> HTML:
        # The content is the value of the field, no markup is kept
        return self.render_element(
            "textarea", HTML(escaping.escape_attribute(content)), name=name, **attrs
        )

    def open_select(self, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_start_tag("select", **attrs))

    def close_select(self) -> None:
        self.write_html(self.render_end_tag("select"))

    def open_optgroup(self, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_start_tag("optgroup", **attrs))

    def close_optgroup(self) -> None:
        self.write_html(self.render_end_tag("optgroup"))

    def option(self, content: HTMLContent, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_element("option", content, **attrs))

    #
    # structural text elements
    #

    def render_br(self) -> HTML:
        return HTML("<br/>")

    def br(self) -> None:
        self.write_html(self.render_br())

    def open_div(self, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_start_tag("div", **attrs))

    def close_div(self) -> None:
        self.write_html(self.render_end_tag("div"))

    def span(self, content: HTMLContent, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_element("span", content, **attrs))

    def open_ul(self, **attrs: HTMLTagAttributeValue) -> None:
        self.write_html(self.render_start_tag("ul", **attrs))

    def close_ul(self) -> None:
        self.write_html(self.render_end_tag("ul"))

    def li(self, content: HTMLContent, **attrs: HTMLTagAttributeValue) -> None:
        """Only for text content. You can't put HTML structure here."""
        self.write_html(self.render_element("li", content, **attrs))
