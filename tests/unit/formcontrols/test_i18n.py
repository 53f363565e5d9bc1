#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import gettext
from pathlib import Path
from typing import override

from formcontrols import i18n, messages
from formcontrols.controls import TextField
from formcontrols.i18n import _


class GermanTranslations(gettext.NullTranslations):
    catalog = {
        "English": "Englisch",
        "%s is required.": "%s ist erforderlich.",
    }

    @override
    def gettext(self, message: str) -> str:
        return self.catalog.get(message, message)

    @override
    def ngettext(self, msgid1: str, msgid2: str, n: int) -> str:
        return "%d Fehler" % n


def _activate_german() -> None:
    i18n._set_translation(i18n.Translation(GermanTranslations(), "de"))


def test_untranslated() -> None:
    assert i18n.get_current_language() == "en"
    assert _("English") == "English"
    assert _("") == ""
    assert i18n.ungettext("error", "errors", 1) == "error"
    assert i18n.ungettext("error", "errors", 2) == "errors"


def test_translated() -> None:
    _activate_german()
    assert i18n.get_current_language() == "de"
    assert _("English") == "Englisch"
    assert _("Unknown") == "Unknown"
    assert i18n.ungettext("error", "errors", 3) == "3 Fehler"


def test_messages_follow_current_language() -> None:
    field = TextField("name")
    assert field.message(messages.FIELD_REQUIRED_ERROR, "Name") == "Name is required."
    _activate_german()
    assert field.message(messages.FIELD_REQUIRED_ERROR, "Name") == "Name ist erforderlich."
    i18n.unlocalize()
    assert field.message(messages.FIELD_REQUIRED_ERROR, "Name") == "Name is required."


def test_localize_without_catalogs_falls_back_to_english(tmp_path: Path) -> None:
    _activate_german()
    i18n.localize("de", [tmp_path])
    assert i18n.get_current_language() == "en"


def test_get_languages(tmp_path: Path) -> None:
    (tmp_path / "de").mkdir()
    (tmp_path / "de" / "alias").write_text("Deutsch\n")
    (tmp_path / "fr").mkdir()
    assert i18n.get_languages([tmp_path, tmp_path / "missing"]) == [
        ("en", "English"),
        ("de", "Deutsch"),
        ("fr", "fr"),
    ]
    assert i18n.get_language_alias("en", [tmp_path]) == "English"
