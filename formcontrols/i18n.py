#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from __future__ import annotations

import functools
import gettext as gettext_module
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

DOMAIN = "formcontrols"

# .
#   .--Gettext i18n--------------------------------------------------------.
#   |           ____      _   _            _     _ _  ___                  |
#   |          / ___| ___| |_| |_ _____  _| |_  (_) |( _ ) _ __            |
#   |         | |  _ / _ \ __| __/ _ \ \/ / __| | | |/ _ \| '_ \           |
#   |         | |_| |  __/ |_| ||  __/>  <| |_  | | | (_) | | | |          |
#   |          \____|\___|\__|\__\___/_/\_\\__| |_|_|\___/|_| |_|          |
#   |                                                                      |
#   +----------------------------------------------------------------------+
#   | Localization of the texts the controls render themselves             |
#   '----------------------------------------------------------------------'


# NullTranslations is the base class used by all translation classes in gettext
class Translation(NamedTuple):
    translation: gettext_module.NullTranslations
    name: str


_translation: Translation | None = None


@functools.lru_cache(maxsize=1024)
def translate_to_current_language(message: str) -> str:
    # Avoid localizing the empty string. The empty string is reserved for header data in PO files:
    # https://www.gnu.org/software/gettext/manual/html_node/PO-Files.html
    if not message:
        return ""
    if _translation:
        return _translation.translation.gettext(message)
    return str(message)


def _(message: str, /) -> str:
    """
    Positional-only argument to simplify additional linting of localized strings.
    """
    return translate_to_current_language(message)


def ungettext(singular: str, plural: str, n: int, /) -> str:
    """
    Positional-only argument to simplify additional linting of localized strings
    """
    if _translation:
        return _translation.translation.ngettext(singular, plural, n)
    if n == 1:
        return str(singular)
    return str(plural)


def get_current_language() -> str:
    if _translation:
        return _translation.name
    return "en"


def get_language_alias(lang: str, locale_dirs: Sequence[Path]) -> str:
    if lang == "en":
        return _("English")

    alias = lang
    for lang_dir in locale_dirs:
        try:
            with (lang_dir / lang / "alias").open(encoding="utf-8") as f:
                alias = f.read().strip()
        except OSError:
            pass
    return alias


def get_languages(locale_dirs: Sequence[Path]) -> list[tuple[str, str]]:
    # Add the hard coded english language to the language list
    languages = {("en", _("English"))}

    for lang_dir in locale_dirs:
        try:
            languages.update(
                [
                    (val.name, get_language_alias(val.name, locale_dirs))
                    for val in lang_dir.iterdir()
                    if val.is_dir()
                ]
            )
        except OSError:
            # Catch "OSError: [Errno 2] No such file or
            # directory:" when directory not exists
            pass

    return sorted(languages, key=lambda x: (x[0] != "en", x[1]))


def _set_translation(translation: Translation | None) -> None:
    global _translation
    _translation = translation
    translate_to_current_language.cache_clear()


def unlocalize() -> None:
    _set_translation(None)


def localize(lang: str, locale_dirs: Sequence[Path] = ()) -> None:
    if lang == "en":
        unlocalize()
        return

    gettext_translation = _init_language(lang, locale_dirs)
    if not gettext_translation:
        unlocalize()
        return

    _set_translation(Translation(translation=gettext_translation, name=lang))


def _init_language(
    lang: str, locale_dirs: Sequence[Path]
) -> gettext_module.NullTranslations | None:
    """Load all available translation files of the given language

    The files of the directories listed first are used as fallback for the
    later ones, which means that the texts of the last directory have precedence.
    """
    translations: list[gettext_module.NullTranslations] = []
    for locale_base_dir in locale_dirs:
        try:
            translation = gettext_module.translation(
                DOMAIN, str(locale_base_dir), languages=[lang]
            )
        except OSError:
            continue

        # Create a chain of fallback translations
        if translations:
            translation.add_fallback(translations[-1])
        translations.append(translation)

    if not translations:
        return None

    return translations[-1]
