#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from abc import abstractmethod
from collections.abc import Iterator, Mapping
from typing import TypeVar

from formcontrols.exceptions import MKConfigError
from formcontrols.i18n import _

_VT = TypeVar("_VT")


class Registry(Mapping[str, _VT]):
    """Process wide lookup of named objects

    Entries are registered once while the application starts and are only
    read afterwards. Registering a second entry under a taken name is a
    configuration error.

    Examples:

        >>> from formcontrols.utils.plugin_registry import Registry
        >>> class Country:
        ...     def __init__(self, code: str):
        ...         self.code = code
        >>> class CountryRegistry(Registry[Country]):
        ...     def plugin_name(self, instance: Country) -> str:
        ...         return instance.code
        >>> countries = CountryRegistry()
        >>> germany = countries.register(Country("de"))
        >>> countries["de"] is germany
        True
        >>> list(countries)
        ['de']

    """

    def __init__(self) -> None:
        super().__init__()
        self._entries: dict[str, _VT] = {}

    @abstractmethod
    def plugin_name(self, instance: _VT) -> str:
        raise NotImplementedError()

    def registration_hook(self, instance: _VT) -> None:
        """Validate the instance before it is stored"""

    def register(self, instance: _VT) -> _VT:
        self.registration_hook(instance)
        name = self.plugin_name(instance)
        if name in self._entries:
            raise MKConfigError(_("%s is already registered") % name)
        self._entries[name] = instance
        return instance

    def unregister(self, name: str) -> None:
        try:
            del self._entries[name]
        except KeyError:
            raise MKConfigError(_("%s is not registered") % name)

    def __getitem__(self, key: str) -> _VT:
        return self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
