#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Texts of the validation errors reported by the fields

Every message is addressed by a key. The first argument of every message is
the error label of the field that reports it. The remaining arguments depend
on the rule, e.g. the configured minimum length."""

from collections.abc import Mapping
from typing import Final, override, Protocol

from formcontrols.exceptions import MKConfigError
from formcontrols.i18n import _

FIELD_REQUIRED_ERROR: Final = "field-required-error"
FIELD_MINLENGTH_ERROR: Final = "field-minlength-error"
FIELD_MAXLENGTH_ERROR: Final = "field-maxlength-error"
EMAIL_FORMAT_ERROR: Final = "email-format-error"
INTEGER_FORMAT_ERROR: Final = "integer-format-error"
NUMBER_FORMAT_ERROR: Final = "number-format-error"
NUMBER_MINVALUE_ERROR: Final = "number-minvalue-error"
NUMBER_MAXVALUE_ERROR: Final = "number-maxvalue-error"
NOT_CHECKED_ERROR: Final = "not-checked-error"
SELECT_ERROR: Final = "select-error"
REGEX_PATTERN_ERROR: Final = "regex-pattern-error"


class MessageCatalog(Protocol):
    def format(self, key: str, *args: object) -> str: ...


def _default_templates() -> dict[str, str]:
    return {
        FIELD_REQUIRED_ERROR: _("%s is required."),
        FIELD_MINLENGTH_ERROR: _("%s must be at least %s characters."),
        FIELD_MAXLENGTH_ERROR: _("%s must be no longer than %s characters."),
        EMAIL_FORMAT_ERROR: _("%s is not a valid email address."),
        INTEGER_FORMAT_ERROR: _("%s must be a whole number."),
        NUMBER_FORMAT_ERROR: _("%s must be a number."),
        NUMBER_MINVALUE_ERROR: _("%s must be greater than or equal to %s."),
        NUMBER_MAXVALUE_ERROR: _("%s must be less than or equal to %s."),
        NOT_CHECKED_ERROR: _("You must select %s."),
        SELECT_ERROR: _("You must choose a value for %s."),
        REGEX_PATTERN_ERROR: _("%s does not match the required pattern."),
    }


class DefaultMessageCatalog:
    """Message lookup based on the built-in templates

    The built-in templates are translated to the current language on every
    lookup. Overrides are taken as they are."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._overrides = dict(overrides or {})

    def template(self, key: str) -> str:
        if key in self._overrides:
            return self._overrides[key]
        try:
            return _default_templates()[key]
        except KeyError:
            raise MKConfigError(_("Unknown message key: %s") % key)

    def format(self, key: str, *args: object) -> str:
        return self.template(key) % args

    @override
    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self._overrides)
