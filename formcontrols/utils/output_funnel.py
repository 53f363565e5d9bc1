#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterator
from contextlib import contextmanager

from formcontrols.exceptions import MKGeneralException
from formcontrols.i18n import _
from formcontrols.utils.html import HTML

OutputFunnelInput = str | HTML

#   .--OutputFunnel--------------------------------------------------------.
#   |     ___        _               _   _____                       _     |
#   |    / _ \ _   _| |_ _ __  _   _| |_|  ___|   _ _ __  _ __   ___| |    |
#   |   | | | | | | | __| '_ \| | | | __| |_ | | | | '_ \| '_ \ / _ \ |    |
#   |   | |_| | |_| | |_| |_) | |_| | |_|  _|| |_| | | | | | | |  __/ |    |
#   |    \___/ \__,_|\__| .__/ \__,_|\__|_|   \__,_|_| |_|_| |_|\___|_|    |
#   |                   |_|                                                |
#   +----------------------------------------------------------------------+
#   | Provides the write functionality. Text that is written while not     |
#   | plugged ends up in the output buffer.                                |
#   |                                                                      |
#   |  Usage of plugged context:                                           |
#   |          with html.plugged():                                        |
#   |             html.write_html(HTML("something"))                       |
#   |             html_code = html.drain()                                 |
#   |          print(html_code)                                            |
#   '----------------------------------------------------------------------'


class OutputFunnel:
    def __init__(self) -> None:
        super().__init__()
        self.output: list[str] = []
        self.plug_text: list[list[str]] = []

    def write(self, text: OutputFunnelInput) -> None:
        if not text:
            return

        if isinstance(text, HTML):
            text = str(text)

        if not isinstance(text, str):
            raise MKGeneralException(
                _("Type Error: html.write accepts str and HTML input objects only!")
            )

        if self.is_plugged():
            self.plug_text[-1].append(text)
        else:
            self.output.append(text)

    @contextmanager
    def plugged(self) -> Iterator[None]:
        self.plug()
        try:
            yield
        except Exception:
            self.drain()
            raise
        finally:
            self.unplug()

    # Put in a plug which stops the text stream and redirects it to a sink.
    def plug(self) -> None:
        self.plug_text.append([])

    def is_plugged(self) -> bool:
        return bool(self.plug_text)

    # Pull the plug for a moment to allow the sink content to pass through.
    def flush(self) -> None:
        if not self.is_plugged():
            return

        # Must be written to the parent plug or the output
        text = self.drain()
        plug = self.plug_text.pop()
        self.write(text)
        self.plug_text.append(plug)

    # Get the sink content in order to do something with it.
    def drain(self) -> str:
        if not self.is_plugged():
            return ""

        text = "".join(self.plug_text[-1])
        self.plug_text[-1] = []
        return text

    def unplug(self) -> None:
        if not self.is_plugged():
            return

        self.flush()
        self.plug_text.pop()

    def unplug_all(self) -> None:
        while self.is_plugged():
            self.unplug()

    def getvalue(self) -> str:
        """The text which has been written while no plug was in place"""
        return "".join(self.output)
