#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import pytest

from formcontrols.exceptions import MKGeneralException
from formcontrols.htmllib import HTMLGenerator, HTMLTagAttributeValue
from formcontrols.utils.html import HTML


@pytest.mark.parametrize(
    "attrs, expected",
    [
        pytest.param({}, "<div>", id="no attributes"),
        pytest.param({"id": "a", "title": "b"}, '<div id="a" title="b">', id="given order"),
        pytest.param({"class_": "x", "id": "a"}, '<div id="a" class="x">', id="class last"),
        pytest.param(
            {"css": ["a", None, "b"], "class_": "c"},
            '<div class="c a b">',
            id="class merged",
        ),
        pytest.param({"class_": []}, "<div>", id="empty class"),
        pytest.param({"id": None, "hidden": False}, "<div>", id="skipped"),
        pytest.param({"hidden": True}, "<div hidden>", id="bare"),
        pytest.param({"title": ""}, '<div title="">', id="empty value"),
        pytest.param({"tabindex": 0}, '<div tabindex="0">', id="number"),
        pytest.param({"data_role": "x"}, '<div data-role="x">', id="data attribute"),
        pytest.param({"for_": "x"}, '<div for="x">', id="keyword"),
        pytest.param(
            {"style": ["color: red;", "margin: 0"]},
            '<div style="color: red; margin: 0">',
            id="style list",
        ),
        pytest.param(
            {"onclick": ["a();", "b()"]},
            '<div onclick="a(); b()">',
            id="handler list",
        ),
        pytest.param(
            {"title": '"><script>'},
            '<div title="&quot;&gt;&lt;script&gt;">',
            id="escaped",
        ),
    ],
)
def test_render_start_tag(attrs: dict[str, HTMLTagAttributeValue], expected: str) -> None:
    assert HTMLGenerator().render_start_tag("div", **attrs) == HTML(expected)


def test_render_self_closing_tag() -> None:
    assert str(HTMLGenerator().render_start_tag("img", close_tag=True, src="a.png")) == (
        '<img src="a.png" />'
    )


@pytest.mark.parametrize(
    "content, expected",
    [
        (None, "<p></p>"),
        ("", "<p></p>"),
        (42, "<p>42</p>"),
        ("a < b", "<p>a &lt; b</p>"),
        ("<b>bold</b>", "<p><b>bold</b></p>"),
        ("<script>x</script>", "<p>&lt;script&gt;x&lt;/script&gt;</p>"),
        (HTML("<script>x</script>"), "<p><script>x</script></p>"),
    ],
)
def test_render_element_content(content: object, expected: str) -> None:
    assert str(HTMLGenerator().render_element("p", content)) == expected  # type: ignore[arg-type]


def test_render_input_puts_type_and_name_first() -> None:
    html = HTMLGenerator()
    assert str(html.render_input("n", "text", id="i", value="v")) == (
        '<input type="text" name="n" id="i" value="v" />'
    )


def test_render_label_and_link() -> None:
    html = HTMLGenerator()
    assert str(html.render_label("Name", for_="n")) == '<label for="n">Name</label>'
    assert str(html.render_a("Go", href="/x?a=1&b=2")) == '<a href="/x?a=1&amp;b=2">Go</a>'


def test_write_goes_to_output_when_not_plugged() -> None:
    html = HTMLGenerator()
    html.write_text("<x>")
    html.br()
    assert html.getvalue() == "&lt;x&gt;<br/>"


def test_plugged_drain() -> None:
    html = HTMLGenerator()
    with html.plugged():
        html.open_div(id="a")
        html.close_div()
        assert html.drain() == '<div id="a"></div>'
        assert html.drain() == ""
    assert html.getvalue() == ""


def test_unplug_flushes_to_outer_plug() -> None:
    html = HTMLGenerator()
    html.plug()
    html.write("outer ")
    html.plug()
    html.write("inner")
    html.unplug()
    assert html.drain() == "outer inner"
    html.unplug_all()
    assert not html.is_plugged()


def test_plugged_drops_content_on_error() -> None:
    html = HTMLGenerator()
    with pytest.raises(ValueError):
        with html.plugged():
            html.write("partial")
            raise ValueError()
    assert html.getvalue() == ""
    assert not html.is_plugged()


def test_write_rejects_other_types() -> None:
    with pytest.raises(MKGeneralException):
        HTMLGenerator().write(42)  # type: ignore[arg-type]


def test_select_helpers() -> None:
    html = HTMLGenerator()
    with html.plugged():
        html.open_select(name="s")
        html.open_optgroup(label="G")
        html.option("A & B", value="a", selected=True)
        html.close_optgroup()
        html.close_select()
        assert html.drain() == (
            '<select name="s"><optgroup label="G">'
            '<option value="a" selected>A &amp; B</option>'
            "</optgroup></select>"
        )
